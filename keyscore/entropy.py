"""
entropy.py - Entropy estimators for password strength

Two independent measures are provided:

- Pool-based entropy credits the full alphabet of every character class
  that appears (26 lowercase, 26 uppercase, 10 digits, 32 symbols) no matter
  how many characters of that class are actually used. This overestimates
  the strength of structured passwords such as "Password1!"; that is a
  known limitation of the estimate and is kept as-is.
- Shannon entropy is measured from the password's own byte distribution
  and scaled by its length (entropy rate x length).
"""
import math
from collections import Counter
from typing import Union

from .classifier import classify, to_bytes

# Alphabet sizes credited per character class
LOWER_POOL = 26
UPPER_POOL = 26
DIGIT_POOL = 10
SYMBOL_POOL = 32

# Assuming 1 trillion guesses per second (modern GPU cluster)
GUESSES_PER_SECOND = 1e12


def pool_size(password: Union[str, bytes]) -> int:
    """Size of the brute-force alphabet implied by the classes present"""
    classes = classify(password)
    pool = 0

    if classes.has_lower:
        pool += LOWER_POOL
    if classes.has_upper:
        pool += UPPER_POOL
    if classes.has_digit:
        pool += DIGIT_POOL
    if classes.has_symbol:
        pool += SYMBOL_POOL

    # Only an empty password has no class; keep log2 defined
    return pool if pool > 0 else 1


def pool_entropy_bits(password: Union[str, bytes]) -> float:
    """
    Estimate brute-force search space in bits.

    Returns:
        log2(pool size) * length in bytes; 0.0 for an empty password
    """
    data = to_bytes(password)
    return math.log2(pool_size(data)) * len(data)


def shannon_entropy_bits(password: Union[str, bytes]) -> float:
    """
    Empirical entropy of the password's byte distribution, scaled by length.

    Returns:
        Sum of -p*log2(p) over distinct bytes, multiplied by the length
    """
    data = to_bytes(password)
    if not data:
        return 0.0

    length = len(data)
    entropy = 0.0
    for count in Counter(data).values():
        p = count / length
        entropy -= p * math.log2(p)

    return entropy * length


def get_time_to_crack(entropy: float) -> str:
    """Estimate time to crack based on entropy"""
    try:
        total_combinations = 2.0 ** entropy
    except OverflowError:
        return "centuries"
    seconds = total_combinations / (2 * GUESSES_PER_SECOND)  # Average case

    if seconds < 1:
        return "instantly"
    elif seconds < 60:
        return f"{seconds:.0f} seconds"
    elif seconds < 3600:
        return f"{seconds/60:.0f} minutes"
    elif seconds < 86400:
        return f"{seconds/3600:.0f} hours"
    elif seconds < 2592000:
        return f"{seconds/86400:.0f} days"
    elif seconds < 31536000:
        return f"{seconds/2592000:.0f} months"
    elif seconds < 315360000:
        return f"{seconds/31536000:.0f} years"
    else:
        return "centuries"
