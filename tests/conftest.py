"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from mpags_cipher.caesar_cipher import CaesarCipher
from mpags_cipher.core import CipherPipeline
from tests.fixtures import SAMPLE_PLAIN_TEXT


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture
def cipher():
    """Create a Caesar cipher with key 3."""
    return CaesarCipher(3)


@pytest.fixture
def pipeline():
    """Create a transliterate-only pipeline."""
    return CipherPipeline()


# ============================================================================
# File Fixtures
# ============================================================================


@pytest.fixture
def input_file(tmp_path):
    """Write the sample plain text to a temporary input file."""
    path = tmp_path / "input.txt"
    path.write_text(SAMPLE_PLAIN_TEXT, encoding="ascii")
    return path


@pytest.fixture
def output_file(tmp_path):
    """Path to a not-yet-existing output file."""
    return tmp_path / "output.txt"
