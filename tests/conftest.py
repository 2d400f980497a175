"""
Pytest fixtures for KeyScore tests.
"""

import pytest
from click.testing import CliRunner

from keyscore.strength import PasswordAnalyzer
from keyscore.wordlist import build_common_passwords


@pytest.fixture
def common_passwords():
    """Small denylist as the wordlist loader would build it"""
    return build_common_passwords(["letmein", "Password123", "  dragon  ", "", "LETMEIN"])


@pytest.fixture
def analyzer(common_passwords):
    return PasswordAnalyzer(common_passwords)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def wordlist_file(tmp_path):
    """Wordlist on disk with CRLF endings, padding and blank lines"""
    path = tmp_path / "common.txt"
    path.write_bytes(b"letmein\r\n  Dragon \n\nmonkey\n")
    return path
