import csv
import json
import pytest
from packages.harness import run_query, run_batch, write_csv, write_manifest

DICTIONARY = ["ate", "eat", "tea", "dog", "do", "god", "goo", "go", "good"]


def test_run_query_smoke():
    r = run_query("ate", DICTIONARY)
    assert r["matches"] == ["ate", "eat", "tea"]
    assert r["num_matches"] == 3 and r["time_ms"] >= 0


@pytest.mark.parametrize("engine", ["scan", "index"])
def test_run_batch_engines_agree(engine):
    out = run_batch(["ate", "dog", "", "good"], DICTIONARY, engine=engine)
    assert [r["matches"] for r in out] == [
        ["ate", "eat", "tea"],
        ["dog", "do", "god", "go"],
        [],
        ["dog", "do", "god", "goo", "go", "good"],
    ]


def test_run_batch_sample_and_unknown_engine():
    assert len(run_batch(["ate", "dog", "go"], DICTIONARY, sample=2)) == 2
    with pytest.raises(ValueError, match="Unknown engine"):
        run_batch(["ate"], DICTIONARY, engine="gpu")


def test_write_outputs(tmp_path):
    results = run_batch(["ate", "xyz"], DICTIONARY)
    p = write_csv(results, str(tmp_path / "out" / "run.csv"))
    with open(p, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["letters"] == "ate" and rows[0]["matches"] == "ate eat tea"
    assert rows[1]["num_matches"] == "0" and rows[1]["matches"] == ""

    m = write_manifest({"num_queries": 2}, str(tmp_path / "m.json"))
    assert json.loads(open(m, encoding="utf-8").read()) == {"num_queries": 2}
