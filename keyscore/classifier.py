"""
classifier.py - Character class detection for password analysis

All analysis works on the UTF-8 bytes of a password. A byte is a "symbol"
when it is not an ASCII letter or digit, so punctuation, whitespace and
every non-ASCII byte count as symbols.
"""
from typing import NamedTuple, Union

LOWER = frozenset(b'abcdefghijklmnopqrstuvwxyz')
UPPER = frozenset(b'ABCDEFGHIJKLMNOPQRSTUVWXYZ')
DIGITS = frozenset(b'0123456789')

_ASCII_LOWER = str.maketrans('ABCDEFGHIJKLMNOPQRSTUVWXYZ',
                             'abcdefghijklmnopqrstuvwxyz')


class CharacterClasses(NamedTuple):
    """Which character classes appear in a password"""
    has_lower: bool
    has_upper: bool
    has_digit: bool
    has_symbol: bool
    symbol_count: int

    @property
    def count(self) -> int:
        """Number of distinct classes present (0-4)"""
        return sum([self.has_lower, self.has_upper, self.has_digit, self.has_symbol])


def to_bytes(password: Union[str, bytes]) -> bytes:
    """Return the raw bytes of a password"""
    if isinstance(password, bytes):
        return password
    try:
        # surrogateescape keeps undecodable terminal input byte-for-byte
        return password.encode('utf-8', 'surrogateescape')
    except UnicodeEncodeError:
        # Lone surrogates outside the escape range
        return password.encode('utf-8', 'surrogatepass')


def ascii_lower(text: str) -> str:
    """Lowercase A-Z only, leaving every other character untouched"""
    return text.translate(_ASCII_LOWER)


def classify(password: Union[str, bytes]) -> CharacterClasses:
    """
    Classify every byte of a password.

    Args:
        password: Password text (or its raw bytes)

    Returns:
        CharacterClasses with one flag per class and the number of symbol bytes
    """
    lower = upper = digit = symbol = False
    symbol_count = 0

    for byte in to_bytes(password):
        if byte in LOWER:
            lower = True
        elif byte in UPPER:
            upper = True
        elif byte in DIGITS:
            digit = True
        else:
            symbol = True
            symbol_count += 1

    return CharacterClasses(lower, upper, digit, symbol, symbol_count)
