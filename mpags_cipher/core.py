"""
MPAGS Cipher Core Engine

Reads the input text, transliterates it, optionally applies the Caesar
cipher and writes the result. The transformations themselves are pure;
all file and stream handling lives here.
"""

import os
import sys
from typing import Optional

from .caesar_cipher import CaesarCipher, CipherMode
from .config import RunConfig
from .transform_char import transliterate


INPUT_ENCODING = "ascii"


class CipherError(Exception):
    """Base class for errors raised while running the pipeline."""
    pass


class InputFileError(CipherError):
    """Raised when the input file cannot be read."""
    pass


class OutputFileError(CipherError):
    """Raised when the output file cannot be opened for writing."""
    pass


class CipherPipeline:
    """
    Transliterate-then-cipher pipeline.

    Built from a mode and key; with no mode the pipeline only
    transliterates.
    """

    def __init__(self, mode: Optional[CipherMode] = None, key: int = 0, verbose: bool = False):
        self.mode = mode
        self.cipher = CaesarCipher(key)
        self.verbose = verbose

    @classmethod
    def from_config(cls, config: RunConfig) -> "CipherPipeline":
        return cls(mode=config.mode, key=config.key, verbose=config.verbose)

    def process(self, raw_text: str) -> str:
        """
        Transform raw input text.

        Args:
            raw_text: The complete input.

        Returns:
            Uppercase letters, enciphered if a mode was set.
        """
        text = transliterate(raw_text)
        _log_info(f"Transliterated {len(raw_text)} characters to {len(text)} letters", self.verbose)

        if self.mode is None:
            return text

        _log_info(f"Applying Caesar cipher ({self.mode.value}, key {self.cipher.key})", self.verbose)
        return self.cipher.apply(text, self.mode)


def read_input(input_file: Optional[str] = None) -> str:
    """
    Read the whole input, from a file if given or standard input otherwise.

    Raises:
        InputFileError: If the file cannot be read.
    """
    if input_file is None:
        return sys.stdin.buffer.read().decode(INPUT_ENCODING, errors="replace")

    if not os.path.isfile(input_file):
        raise InputFileError(f"problem reading file '{input_file}', please confirm the path")

    try:
        with open(input_file, "r", encoding=INPUT_ENCODING, errors="replace") as f:
            return f.read()
    except OSError as e:
        raise InputFileError(f"problem reading file '{input_file}': {e}") from e


def write_output(text: str, output_file: Optional[str] = None, overwrite: bool = False) -> None:
    """
    Write the text as a single line.

    With no output file the text goes to standard output. An existing
    output file is appended to unless ``overwrite`` is set.

    Raises:
        OutputFileError: If the file cannot be opened.
    """
    if output_file is None:
        sys.stdout.write(text + "\n")
        return

    file_mode = "w" if overwrite else "a"
    try:
        with open(output_file, file_mode, encoding=INPUT_ENCODING) as f:
            f.write(text + "\n")
    except OSError as e:
        raise OutputFileError(f"problem opening output file '{output_file}': {e}") from e


def run(config: RunConfig) -> str:
    """Run the full read, transform and write sequence and return the output text."""
    raw_text = read_input(config.input_file)
    output = CipherPipeline.from_config(config).process(raw_text)
    write_output(output, config.output_file, overwrite=config.overwrite)

    if config.output_file is not None:
        action = "Overwrote" if config.overwrite else "Appended to"
        _log_info(f"{action} {config.output_file}", config.verbose)

    return output


def log_warning(message: str) -> None:
    """Print a warning to stderr."""
    print(f"[WARNING] {message}", file=sys.stderr)


def log_error(message: str) -> None:
    """Print an error to stderr."""
    print(f"[ERROR] {message}", file=sys.stderr)


def _log_info(message: str, verbose: bool) -> None:
    if verbose:
        print(f"[INFO] {message}", file=sys.stderr)
