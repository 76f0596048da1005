"""Detect passive-voice constructions: a to-be auxiliary followed by a past participle.

This is a heuristic. Any ``-ed`` word after an auxiliary counts as a
participle, so adjectives like "is excited" are reported too. Only literal
spaces may separate the two words; tabs or line breaks end the construction.
"""

from __future__ import annotations

import re

from .base import BaseDetector, context_window
from ..models import IRREGULAR_PARTICIPLES, PassiveMatch

BE_VERBS: tuple[str, ...] = ("am", "are", "were", "being", "is", "been", "was", "be")

# Unicode word semantics, as for the weasel pattern.
_PASSIVE_RE = re.compile(
    r"\b(" + "|".join(BE_VERBS) + r")\b[ ]*"
    r"(\w+ed|" + "|".join(IRREGULAR_PARTICIPLES) + r")\b",
    re.IGNORECASE,
)


class PassiveVoiceDetector(BaseDetector):
    context_radius = 25

    def detect(self, text: str) -> list[PassiveMatch]:
        matches: list[PassiveMatch] = []
        for line_no, line, match in self._iter_line_matches(text, _PASSIVE_RE):
            context_start, context = context_window(
                line, match.start(), match.end(), self.context_radius
            )
            matches.append(PassiveMatch(
                phrase=match.group(0),
                line=line_no,
                position=match.start(),
                context=context,
                context_start=context_start,
                be_verb=match.group(1),
                past_participle=match.group(2),
            ))
        return matches


def find_passive_voice(text: str, enabled: bool = True) -> list[PassiveMatch]:
    if not enabled:
        return []
    return PassiveVoiceDetector().detect(text)
