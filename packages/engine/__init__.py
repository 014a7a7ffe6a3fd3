from .frequency import FrequencyMap, build_frequency_map
from .formable import can_form, missing_letters
from .finder import find_words
from .index import DictionaryIndex
from .validation import (
    ALPHABETS,
    InvalidInputError,
    get_alphabet,
    get_alphabet_names,
    normalize,
    validate_alphabet,
)

__all__ = [
    "FrequencyMap", "build_frequency_map", "can_form", "missing_letters",
    "find_words", "DictionaryIndex", "ALPHABETS", "InvalidInputError",
    "get_alphabet", "get_alphabet_names", "normalize", "validate_alphabet",
]
