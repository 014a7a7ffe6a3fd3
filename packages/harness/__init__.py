from .core import run_query, run_batch, ENGINES
from .io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown

__all__ = ["run_query", "run_batch", "ENGINES", "write_csv", "write_manifest",
           "timestamp_id", "git_commit_or_unknown"]
