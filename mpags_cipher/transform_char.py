"""
Character transliteration for the cipher pipeline.

Every input character maps to zero or more uppercase ASCII letters:
letters are uppercased, digits are spelled out as English words, and
everything else is dropped.
"""

import string


# Spelled-out form of each decimal digit
DIGIT_WORDS = {
    "0": "ZERO",
    "1": "ONE",
    "2": "TWO",
    "3": "THREE",
    "4": "FOUR",
    "5": "FIVE",
    "6": "SIX",
    "7": "SEVEN",
    "8": "EIGHT",
    "9": "NINE",
}


def transform_char(char: str) -> str:
    """
    Transliterate a single character into uppercase letters.

    Args:
        char: A single input character.

    Returns:
        The uppercase letter, the digit's English word, or an empty
        string if the character is neither an ASCII letter nor a digit.

    Raises:
        ValueError: If more than one character is supplied.
    """
    if len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")

    if char in string.ascii_letters:
        return char.upper()

    return DIGIT_WORDS.get(char, "")


def transliterate(text: str) -> str:
    """Transliterate a whole string, keeping the original character order."""
    return "".join(transform_char(char) for char in text)
