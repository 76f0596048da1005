"""prose-guard: find weasel words and passive voice in prose."""
from .checker import StyleChecker, check_text
from .detectors import find_passive_voice, find_weasel_words, validate_weasel_pattern
from .errors import ConfigurationError, ProseGuardError, WordListError
from .models import (
    DEFAULT_WEASEL_PATTERN,
    CheckResult,
    DetectorConfig,
    IssueType,
    Match,
    PassiveMatch,
)
from .wordlist import WeaselWordList

__all__ = [
    "CheckResult",
    "ConfigurationError",
    "DEFAULT_WEASEL_PATTERN",
    "DetectorConfig",
    "IssueType",
    "Match",
    "PassiveMatch",
    "ProseGuardError",
    "StyleChecker",
    "WeaselWordList",
    "WordListError",
    "check_text",
    "find_passive_voice",
    "find_weasel_words",
    "validate_weasel_pattern",
]
