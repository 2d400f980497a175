"""
patterns.py - Weak pattern detection (sequences, repeats, common substrings)
"""
from typing import Optional, Sequence, Union

from .classifier import to_bytes

DEFAULT_SEQUENCE_LENGTH = 4
DEFAULT_REPEAT_LENGTH = 4
MIN_WINDOW_LENGTH = 2

# Checked in this order; the first hit wins
COMMON_SUBSTRINGS = (
    'password', 'qwerty', 'admin', 'welcome', '12345', 'iloveyou', '123456789',
)


def check_window(length: int) -> int:
    """Reject window lengths too small to describe a run"""
    if length < MIN_WINDOW_LENGTH:
        raise ValueError(f"Window length must be at least {MIN_WINDOW_LENGTH}, got {length}")
    return length


def has_sequence(password: Union[str, bytes], length: int = DEFAULT_SEQUENCE_LENGTH) -> bool:
    """
    Check for a run of consecutive byte values such as 'abcd' or '4321'.

    Each byte must be exactly one above (ascending) or one below (descending)
    the previous byte. Arithmetic wraps modulo 256, so 0xff followed by 0x00
    counts as ascending.

    Args:
        password: Password to scan
        length: Number of bytes the run must span

    Returns:
        True on the first matching window, scanning left to right

    Raises:
        ValueError: If length is below 2
    """
    check_window(length)
    data = to_bytes(password)
    if len(data) < length:
        return False

    for i in range(len(data) - length + 1):
        ascending = descending = True
        for j in range(i + 1, i + length):
            if data[j] != (data[j - 1] + 1) % 256:
                ascending = False
            if data[j] != (data[j - 1] - 1) % 256:
                descending = False
        if ascending or descending:
            return True
    return False


def has_repeated_chars(password: Union[str, bytes], length: int = DEFAULT_REPEAT_LENGTH) -> bool:
    """Check whether any window of `length` bytes is one byte repeated"""
    check_window(length)
    data = to_bytes(password)
    if len(data) < length:
        return False

    for i in range(len(data) - length + 1):
        window = data[i:i + length]
        if window.count(window[0]) == length:
            return True
    return False


def find_common_substring(password: Union[str, bytes],
                          substrings: Sequence[str] = COMMON_SUBSTRINGS) -> Optional[str]:
    """
    Find the first well-known weak substring contained in a password.

    Matching is case-insensitive for ASCII letters only.

    Returns:
        The matched substring as listed, or None
    """
    # bytes.lower() only folds A-Z
    haystack = to_bytes(password).lower()
    for sub in substrings:
        if to_bytes(sub).lower() in haystack:
            return sub
    return None
