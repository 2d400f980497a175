"""
KeyScore - Offline password strength analyzer.

Features:
- Pool-based and Shannon entropy estimates
- Sequence, repeated-character and common-substring detection
- Optional common-password denylist
- Ordered, human-readable feedback for every score
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .strength import AnalysisResult, PasswordAnalyzer, analyze_password
from .wordlist import load_common_passwords
from .cli import cli

__all__ = ["AnalysisResult", "PasswordAnalyzer", "analyze_password",
           "load_common_passwords", "cli"]


def get_version():
    """Get the current version string."""
    return __version__
