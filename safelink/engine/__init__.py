"""Link classification engine for SafeLink."""

from .checks import is_blacklisted, is_http, is_typosquatted
from .classifier import SAFE, ClassificationResult, Settings, analyze_url, classify
from .levenshtein import levenshtein

__all__ = [
    "ClassificationResult",
    "SAFE",
    "Settings",
    "analyze_url",
    "classify",
    "is_blacklisted",
    "is_http",
    "is_typosquatted",
    "levenshtein",
]
