from __future__ import annotations
import re
from abc import ABC, abstractmethod
from typing import Iterator
from ..models import Match


def split_lines(text: str) -> list[str]:
    """Split on newlines only; a trailing carriage return is dropped from each line."""
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def context_window(line: str, start: int, end: int, radius: int) -> tuple[int, str]:
    """Return (context_start, context) for the span [start, end) clipped to the line."""
    context_start = max(0, start - radius)
    context_end = min(len(line), end + radius)
    return context_start, line[context_start:context_end]


class BaseDetector(ABC):
    context_radius: int = 20

    @abstractmethod
    def detect(self, text: str) -> list[Match]:
        """Return all matches in text, in document order."""
        ...

    def _iter_line_matches(
        self, text: str, pattern: re.Pattern[str]
    ) -> Iterator[tuple[int, str, re.Match[str]]]:
        # finditer resumes at the end of the previous match, so matches never overlap
        for line_no, line in enumerate(split_lines(text), start=1):
            for match in pattern.finditer(line):
                if match.end() == match.start():
                    continue
                yield line_no, line, match
