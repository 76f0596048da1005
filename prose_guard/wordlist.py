from __future__ import annotations
import re
from pathlib import Path
from .errors import WordListError

# The weasel pattern is wrapped in \b(...)\b, so a literal entry only ever
# matches if it begins and ends with a word character.
_WORD_EDGES = re.compile(r"\w(.*\w)?", re.DOTALL)


class WeaselWordList:
    """Extra weasel words or phrases kept alongside the configured pattern.

    Entries are literal text: they are escaped before being joined into the
    alternation, so a word like ``a.k.a`` does not act as a regex. Entries
    must start and end with a letter or digit; ``e.g.`` is rejected.
    """

    def __init__(
        self,
        path: str | Path | None = None,
        extra_words: list[str] | tuple[str, ...] | None = None,
    ) -> None:
        self._words: dict[str, None] = {}  # insertion-ordered set
        if path is not None:
            self._load_file(Path(path))
        for word in (extra_words or []):
            self.add(word)

    def _load_file(self, path: Path) -> None:
        try:
            with path.open(encoding="utf-8") as fh:
                lines = fh.readlines()
        except (OSError, UnicodeDecodeError) as exc:
            raise WordListError(f"Cannot read word list {str(path)!r}: {exc}") from exc
        for line in lines:
            word = line.strip()
            if word and not word.startswith("#"):
                self.add(word)

    @property
    def words(self) -> tuple[str, ...]:
        return tuple(self._words)

    def add(self, word: str) -> None:
        word = word.strip().lower()
        if not word:
            return
        if not _WORD_EDGES.fullmatch(word):
            raise WordListError(
                f"Weasel word {word!r} must start and end with a letter or digit"
            )
        self._words[word] = None

    def remove(self, word: str) -> None:
        self._words.pop(word.strip().lower(), None)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.strip().lower() in self._words

    def __len__(self) -> int:
        return len(self._words)

    def pattern(self, base: str = "") -> str:
        """Return base extended with every word as an escaped alternative."""
        parts = [base] if base.strip() else []
        parts.extend(re.escape(w) for w in self._words)
        return "|".join(parts)
