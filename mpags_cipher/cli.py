#!/usr/bin/env python3
"""
MPAGS Cipher CLI

Command-line interface for transliterating and enciphering text.

Usage:
    mpags-cipher [-i FILE] [-o FILE] [--overwrite] [-k KEY] [-e | -d]
    mpags-cipher -i message.txt
    echo "Hello 123!" | mpags-cipher -e -k 3
    mpags-cipher -i secret.txt -d -k 3 -o plain.txt --overwrite

Options:
    -i FILE          Read text from FILE (default: stdin)
    -o FILE          Write text to FILE (default: stdout)
    --overwrite      Replace the output file instead of appending to it
    -k, --key KEY    Caesar cipher key
    -e, --encrypt    Encrypt the transliterated text
    -d, --decrypt    Decrypt the transliterated text
"""

import argparse
import sys

from . import __version__
from .caesar_cipher import CipherMode
from .config import DEFAULT_KEY, RunConfig
from .core import CipherError, log_error, log_warning, run


EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mpags-cipher",
        description=(
            "Encrypts/Decrypts input alphanumeric text using classical ciphers\n\n"
            "Letters are uppercased, digits are spelled out as words and all\n"
            "other characters are dropped before the cipher is applied."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  mpags-cipher -i message.txt                   # transliterate only\n"
            "  echo 'Hello 123!' | mpags-cipher -e -k 3      # encrypt stdin\n"
            "  mpags-cipher -i secret.txt -d -k 3 -o out.txt # decrypt to a file\n"
        ),
    )

    parser.add_argument(
        "--version",
        action="version",
        version=__version__,
        help="Print version information and exit",
    )
    parser.add_argument(
        "-i",
        dest="input_file",
        metavar="FILE",
        default=None,
        help="Read text to be processed from FILE (stdin if not supplied)",
    )
    parser.add_argument(
        "-o",
        dest="output_file",
        metavar="FILE",
        default=None,
        help="Write processed text to FILE (stdout if not supplied)",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Overwrite FILE given with -o instead of appending to it",
    )
    parser.add_argument(
        "-k", "--key",
        type=int,
        default=None,
        help=f"Caesar cipher key, reduced modulo 26 (default: {DEFAULT_KEY})",
    )

    direction = parser.add_mutually_exclusive_group()
    direction.add_argument(
        "-e", "--encrypt",
        action="store_true",
        help="Encrypt the input text",
    )
    direction.add_argument(
        "-d", "--decrypt",
        action="store_true",
        help="Decrypt the input text",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print progress messages to stderr",
    )
    return parser


def parse_config(argv=None) -> RunConfig:
    """Parse command-line arguments into a validated RunConfig."""
    args = build_parser().parse_args(argv)

    mode = None
    if args.encrypt:
        mode = CipherMode.ENCRYPT
    elif args.decrypt:
        mode = CipherMode.DECRYPT

    if mode is None and args.key is not None:
        log_warning("key supplied without -e/-d, no cipher will be applied")

    return RunConfig(
        input_file=args.input_file,
        output_file=args.output_file,
        overwrite=args.overwrite,
        mode=mode,
        key=DEFAULT_KEY if args.key is None else args.key,
        verbose=args.verbose,
    )


def main(argv=None) -> int:
    config = parse_config(argv)

    try:
        run(config)
    except CipherError as e:
        log_error(str(e))
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
