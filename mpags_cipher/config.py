"""
Validated run configuration handed from the command line to the pipeline.
"""

from dataclasses import dataclass
from typing import Optional

from .caesar_cipher import CipherMode, normalise_key


DEFAULT_KEY = 0


@dataclass
class RunConfig:
    """
    Settings for a single pipeline run.

    ``mode`` is None when no cipher was requested; the text is then only
    transliterated.
    """
    input_file: Optional[str] = None
    output_file: Optional[str] = None
    overwrite: bool = False
    mode: Optional[CipherMode] = None
    key: int = DEFAULT_KEY
    verbose: bool = False

    def __post_init__(self):
        if self.mode is not None and not isinstance(self.mode, CipherMode):
            raise ValueError(f"Mode must be a CipherMode or None, got {self.mode!r}")
        self.key = normalise_key(self.key)

    @property
    def cipher_requested(self) -> bool:
        return self.mode is not None
