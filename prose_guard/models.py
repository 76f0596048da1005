from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from .wordlist import WeaselWordList

_DATA_DIR = Path(__file__).parent / "data"

DEFAULT_WEASEL_PATTERN = (
    "many|various|very|fairly|several|extremely|exceedingly|quite|remarkably|"
    "few|surprisingly|mostly|largely|huge|tiny|((are|is) a number)|excellent|"
    "interestingly|significantly|substantially|clearly|vast|relatively|completely"
)


def _load_participles(path: Path) -> tuple[str, ...]:
    words: list[str] = []
    with path.open(encoding="utf-8") as fh:
        for line in fh:
            word = line.strip()
            if word and not word.startswith("#"):
                words.append(word)
    return tuple(words)


IRREGULAR_PARTICIPLES: tuple[str, ...] = _load_participles(
    _DATA_DIR / "irregular_participles.txt"
)


class IssueType(str, Enum):
    WEASEL = "WEASEL"
    PASSIVE = "PASSIVE"


@dataclass(frozen=True)
class Match:
    phrase: str
    line: int  # 1-based
    position: int  # 0-based offset within the line
    context: str
    context_start: int  # offset of context within the line

    @property
    def word(self) -> str:
        return self.phrase

    @property
    def end(self) -> int:
        return self.position + len(self.phrase)

    def highlight(self) -> tuple[str, str, str]:
        """Split the context into (before, phrase, after)."""
        offset = self.position - self.context_start
        return (
            self.context[:offset],
            self.context[offset : offset + len(self.phrase)],
            self.context[offset + len(self.phrase) :],
        )


@dataclass(frozen=True)
class PassiveMatch(Match):
    be_verb: str
    past_participle: str


@dataclass(frozen=True)
class DetectorConfig:
    weasel_pattern: str = DEFAULT_WEASEL_PATTERN
    check_passive_voice: bool = True
    extra_weasel_words: tuple[str, ...] = ()

    @property
    def effective_weasel_pattern(self) -> str:
        """The weasel pattern with the extra words appended as literal alternatives.

        Raises WordListError for an extra word that cannot match as a whole word.
        """
        return WeaselWordList(extra_words=self.extra_weasel_words).pattern(self.weasel_pattern)


@dataclass
class CheckResult:
    weasel_matches: list[Match]
    passive_matches: list[PassiveMatch]

    @property
    def total(self) -> int:
        return len(self.weasel_matches) + len(self.passive_matches)

    @property
    def is_clean(self) -> bool:
        return self.total == 0
