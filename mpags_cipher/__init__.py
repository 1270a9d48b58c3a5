"""
MPAGS Cipher - Classical Cipher Text Processor

Normalizes alphanumeric text (uppercase letters, digits spelled out as
words, everything else dropped) and optionally applies a Caesar shift
cipher to the result.
"""

__version__ = "0.1.0"

from .transform_char import DIGIT_WORDS, transform_char, transliterate
from .caesar_cipher import CaesarCipher, CipherMode, normalise_key, transform
from .config import RunConfig
from .core import CipherError, CipherPipeline, InputFileError, OutputFileError

__all__ = [
    "DIGIT_WORDS",
    "transform_char",
    "transliterate",
    "CaesarCipher",
    "CipherMode",
    "normalise_key",
    "transform",
    "RunConfig",
    "CipherError",
    "CipherPipeline",
    "InputFileError",
    "OutputFileError",
]
