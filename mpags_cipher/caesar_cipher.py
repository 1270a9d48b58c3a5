"""
Caesar shift cipher over the uppercase Latin alphabet.
"""

from dataclasses import dataclass
from enum import Enum


ALPHABET_SIZE = 26


class CipherMode(Enum):
    """Direction in which the cipher is applied."""
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


def normalise_key(key: int) -> int:
    """Reduce any integer key into the range [0, 25]."""
    if isinstance(key, bool) or not isinstance(key, int):
        raise ValueError(f"Cipher key must be an integer, got {key!r}")
    # Python's % already floors, so negative keys land in range too
    return key % ALPHABET_SIZE


@dataclass
class CaesarCipher:
    """
    A Caesar cipher with a fixed key.

    The key is reduced modulo 26 on construction, so any integer is
    accepted and ``CaesarCipher(-1).key == 25``.
    """
    key: int = 0

    def __post_init__(self):
        self.key = normalise_key(self.key)

    def encrypt(self, text: str) -> str:
        """Shift each letter forward by the key."""
        return self._shift(text, self.key)

    def decrypt(self, text: str) -> str:
        """Shift each letter backward by the key."""
        return self._shift(text, -self.key)

    def apply(self, text: str, mode: CipherMode) -> str:
        """Encrypt or decrypt depending on ``mode``."""
        if mode is CipherMode.ENCRYPT:
            return self.encrypt(text)
        if mode is CipherMode.DECRYPT:
            return self.decrypt(text)
        raise ValueError(f"Unknown cipher mode: {mode!r}")

    @staticmethod
    def _shift(text: str, offset: int) -> str:
        result = []
        for char in text:
            if "A" <= char <= "Z":
                position = ord(char) - ord("A")
                wrapped = (position + offset) % ALPHABET_SIZE
                result.append(chr(ord("A") + wrapped))
            else:
                # Only A-Z is shifted; anything else is left as it is
                result.append(char)
        return "".join(result)


def transform(text: str, key: int, encrypt: bool) -> str:
    """
    Apply the Caesar cipher to already-transliterated text.

    Args:
        text: Uppercase letters to transform.
        key: Shift size; re-normalised into [0, 25].
        encrypt: True to encrypt, False to decrypt.

    Returns:
        The shifted text.
    """
    mode = CipherMode.ENCRYPT if encrypt else CipherMode.DECRYPT
    return CaesarCipher(key).apply(text, mode)
