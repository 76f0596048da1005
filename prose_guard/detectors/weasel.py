from __future__ import annotations
import re
from .base import BaseDetector, context_window
from ..errors import ConfigurationError
from ..models import DEFAULT_WEASEL_PATTERN, Match


def compile_weasel_pattern(pattern: str) -> re.Pattern[str] | None:
    """Compile a pipe-separated weasel fragment into a word-bounded pattern.

    The fragment is treated as regex source, so grouped alternatives such as
    ``((are|is) a number)`` work. Returns None for an empty fragment, which
    matches nothing.
    """
    # Whitespace-only counts as empty: \b(   )\b would flag the gaps between words.
    if not pattern.strip():
        return None
    try:
        # Unicode \w and \b: "very" inside "évery" is not a separate word.
        return re.compile(rf"\b({pattern})\b", re.IGNORECASE)
    except re.error as exc:
        raise ConfigurationError(
            f"Invalid weasel-word pattern {pattern!r}: {exc}"
        ) from exc


def validate_weasel_pattern(pattern: str) -> None:
    compile_weasel_pattern(pattern)


class WeaselDetector(BaseDetector):
    context_radius = 20

    def __init__(self, pattern: str = DEFAULT_WEASEL_PATTERN) -> None:
        self._regex = compile_weasel_pattern(pattern)

    def detect(self, text: str) -> list[Match]:
        if self._regex is None:
            return []

        matches: list[Match] = []
        for line_no, line, match in self._iter_line_matches(text, self._regex):
            context_start, context = context_window(
                line, match.start(), match.end(), self.context_radius
            )
            matches.append(Match(
                phrase=match.group(0),
                line=line_no,
                position=match.start(),
                context=context,
                context_start=context_start,
            ))
        return matches


def find_weasel_words(text: str, weasel_pattern: str = DEFAULT_WEASEL_PATTERN) -> list[Match]:
    """Find weasel words in text; the pattern is compiled fresh on every call."""
    return WeaselDetector(weasel_pattern).detect(text)
