# Test fixtures
from .sample_texts import (
    SAMPLE_PLAIN_TEXT,
    SAMPLE_TRANSLITERATED,
    SAMPLE_ENCRYPTED_KEY_3,
    ALL_LETTERS,
    NON_ALPHANUMERIC_ASCII,
    DIGIT_CASES,
)

__all__ = [
    "SAMPLE_PLAIN_TEXT",
    "SAMPLE_TRANSLITERATED",
    "SAMPLE_ENCRYPTED_KEY_3",
    "ALL_LETTERS",
    "NON_ALPHANUMERIC_ASCII",
    "DIGIT_CASES",
]
