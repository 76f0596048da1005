from .base import BaseDetector, context_window, split_lines
from .weasel import WeaselDetector, find_weasel_words, validate_weasel_pattern
from .passive import PassiveVoiceDetector, find_passive_voice

__all__ = [
    "BaseDetector",
    "context_window",
    "split_lines",
    "WeaselDetector",
    "find_weasel_words",
    "validate_weasel_pattern",
    "PassiveVoiceDetector",
    "find_passive_voice",
]
