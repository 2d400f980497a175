"""
wordlist.py - Loads the common-password denylist

A missing or unreadable wordlist is not an error: the analyzer simply runs
without the common-password check.
"""
from typing import FrozenSet, Iterable, Optional

import click

from .classifier import ascii_lower

# Whitespace as the C locale defines it
_WHITESPACE = ' \t\n\r\x0b\x0c'


def normalize_entry(line: str) -> str:
    """Trim surrounding whitespace and lowercase A-Z"""
    return ascii_lower(line.strip(_WHITESPACE))


def build_common_passwords(lines: Iterable[str]) -> FrozenSet[str]:
    """Build the denylist from raw lines, dropping blanks and duplicates"""
    entries = (normalize_entry(line) for line in lines)
    return frozenset(entry for entry in entries if entry)


def load_common_passwords(filename: Optional[str]) -> FrozenSet[str]:
    """
    Load common passwords from a file, one per line.

    You can download lists from: https://github.com/danielmiessler/SecLists

    Args:
        filename: Path to the wordlist; empty or None skips loading

    Returns:
        Immutable set of lowercased passwords (empty when unavailable)
    """
    if not filename:
        return frozenset()

    try:
        with open(filename, 'r', encoding='utf-8', errors='surrogateescape') as f:
            return build_common_passwords(f)
    except OSError:
        click.echo(f"⚠️  Warning: could not open common-passwords file: {filename}", err=True)
        return frozenset()
