"""
strength.py - Password strength analysis and scoring

The score combines pool-based entropy with a length bonus, then subtracts
penalties for weak patterns. Reasons are recorded in the order the checks
run, which is also the order they are shown to the user.
"""
import math
from dataclasses import dataclass, field
from typing import AbstractSet, Dict, Tuple, Union

from .classifier import classify, to_bytes
from .entropy import pool_entropy_bits, shannon_entropy_bits
from .patterns import (
    DEFAULT_REPEAT_LENGTH,
    DEFAULT_SEQUENCE_LENGTH,
    check_window,
    find_common_substring,
    has_repeated_chars,
    has_sequence,
)

# Scoring constants
MAX_BASE_SCORE = 80.0
FULL_CREDIT_BITS = 60.0
BONUS_START_LENGTH = 8
BONUS_PER_CHAR = 1.5
MAX_LENGTH_BONUS = 15.0
PRE_PENALTY_CAP = 95.0
COMMON_PASSWORD_SCORE = 5

SEQUENCE_PENALTY = 15
REPEAT_PENALTY = 15
SUBSTRING_PENALTY = 20
SHORT_PENALTY_PER_CHAR = 6
SINGLE_CLASS_PENALTY = 25

MIN_LENGTH = 8
RECOMMENDED_LENGTH = 12

REASON_EMPTY = "empty password"
REASON_COMMON = "password is in a common-password list"
REASON_SEQUENCE = "contains ascending/descending sequence (e.g. 'abcd' or '4321')"
REASON_REPEATS = "contains repeated characters (e.g. 'aaaa')"
REASON_SUBSTRING = "contains a common substring: '{}'"
REASON_SHORT = "short password (less than 8 characters)"
REASON_LONGER = "consider a longer passphrase (12+ characters recommended)"
REASON_ONE_CLASS = "uses only one character class (add uppercase, digits, or symbols)"
REASON_NONE = "no obvious weaknesses detected"


def strength_level(score: int) -> str:
    """Map a 0-100 score onto a strength band"""
    if score >= 80:
        return 'very_strong'
    elif score >= 60:
        return 'strong'
    elif score >= 40:
        return 'fair'
    elif score >= 20:
        return 'weak'
    return 'very_weak'


def pre_penalty_score(pool_bits: float, length: int) -> float:
    """Entropy score plus length bonus, before any penalty is applied"""
    # Entropy scoring (up to 80 points at 60 bits)
    score = min(MAX_BASE_SCORE, (pool_bits / FULL_CREDIT_BITS) * MAX_BASE_SCORE)

    # Length bonus (up to 15 points)
    if length > BONUS_START_LENGTH:
        score += min(MAX_LENGTH_BONUS, (length - BONUS_START_LENGTH) * BONUS_PER_CHAR)

    return min(score, PRE_PENALTY_CAP)


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of analysing one password"""
    score: int
    pool_entropy_bits: float
    shannon_entropy_bits: float
    reasons: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def strength(self) -> str:
        return strength_level(self.score)

    def to_dict(self) -> Dict:
        return {
            'score': self.score,
            'strength': self.strength,
            'pool_entropy_bits': round(self.pool_entropy_bits, 2),
            'shannon_entropy_bits': round(self.shannon_entropy_bits, 2),
            'reasons': list(self.reasons),
        }


class PasswordAnalyzer:
    """Analyze password strength and explain the score"""

    def __init__(self, common_passwords: AbstractSet[str] = frozenset(),
                 sequence_length: int = DEFAULT_SEQUENCE_LENGTH,
                 repeat_length: int = DEFAULT_REPEAT_LENGTH):
        """
        Args:
            common_passwords: Lowercased known-weak passwords; never modified
            sequence_length: Window used by the sequence check
            repeat_length: Run length used by the repeated-character check

        Raises:
            ValueError: If either length is below 2
        """
        self.common_passwords = common_passwords
        self.sequence_length = check_window(sequence_length)
        self.repeat_length = check_window(repeat_length)

    def is_common(self, password: Union[str, bytes]) -> bool:
        """Exact, case-insensitive lookup in the common-password set"""
        if not self.common_passwords:
            return False
        # bytes.lower() only folds A-Z, as the wordlist loader does
        folded = to_bytes(password).lower().decode('utf-8', 'surrogateescape')
        return folded in self.common_passwords

    def analyze(self, password: Union[str, bytes]) -> AnalysisResult:
        """
        Analyze a password and return its score with the reasons behind it.

        Never raises; every input yields a score in [0, 100] and at least
        one reason.
        """
        data = to_bytes(password)
        length = len(data)

        if not length:
            return AnalysisResult(0, 0.0, 0.0, (REASON_EMPTY,))

        pool_bits = pool_entropy_bits(data)
        shannon_bits = shannon_entropy_bits(data)

        if self.is_common(data):
            return AnalysisResult(COMMON_PASSWORD_SCORE, pool_bits, shannon_bits,
                                  (REASON_COMMON,))

        reasons = []
        score = pre_penalty_score(pool_bits, length)

        # Penalties
        if has_sequence(data, self.sequence_length):
            score -= SEQUENCE_PENALTY
            reasons.append(REASON_SEQUENCE)

        if has_repeated_chars(data, self.repeat_length):
            score -= REPEAT_PENALTY
            reasons.append(REASON_REPEATS)

        substring = find_common_substring(data)
        if substring is not None:
            score -= SUBSTRING_PENALTY
            reasons.append(REASON_SUBSTRING.format(substring))

        if length < MIN_LENGTH:
            score -= SHORT_PENALTY_PER_CHAR * (MIN_LENGTH - length)
            reasons.append(REASON_SHORT)
        elif length < RECOMMENDED_LENGTH:
            reasons.append(REASON_LONGER)

        if classify(data).count <= 1:
            score -= SINGLE_CLASS_PENALTY
            reasons.append(REASON_ONE_CLASS)

        score = max(0.0, min(100.0, score))

        if not reasons:
            reasons.append(REASON_NONE)

        # Round half away from zero; score is non-negative here
        return AnalysisResult(int(math.floor(score + 0.5)), pool_bits, shannon_bits,
                              tuple(reasons))


def analyze_password(password: Union[str, bytes], common_passwords: AbstractSet[str] = frozenset(),
                     sequence_length: int = DEFAULT_SEQUENCE_LENGTH,
                     repeat_length: int = DEFAULT_REPEAT_LENGTH) -> AnalysisResult:
    """Analyze a single password without keeping an analyzer around"""
    analyzer = PasswordAnalyzer(common_passwords, sequence_length, repeat_length)
    return analyzer.analyze(password)


def format_strength_bar(score: int, width: int = 20) -> str:
    """Create a visual strength bar"""
    filled = int((score / 100) * width)
    bar = '█' * filled + '░' * (width - filled)

    # Color codes (for terminal)
    if score >= 80:
        color = '\033[92m'  # Green
    elif score >= 60:
        color = '\033[93m'  # Yellow
    elif score >= 40:
        color = '\033[33m'  # Orange
    else:
        color = '\033[91m'  # Red

    reset = '\033[0m'
    return f"{color}{bar}{reset} {score}%"


# Example usage
if __name__ == "__main__":
    analyzer = PasswordAnalyzer()

    test_passwords = [
        "password",
        "Password1",
        "MyP@ssw0rd",
        "correcthorsebatterystaple",
        "gX9#mK2$pL5@nQ8!",
        "12345678",
    ]

    print("=== Password Strength Analyzer ===\n")

    for pwd in test_passwords:
        result = analyzer.analyze(pwd)
        print(f"Password: {pwd}")
        print(f"Strength: {format_strength_bar(result.score)}")
        print(f"Level: {result.strength.replace('_', ' ').title()}")
        for reason in result.reasons:
            print(f"  - {reason}")
        print("-" * 50)
