"""Build a DetectorConfig from environment variables.

    PROSE_GUARD_WEASEL_PATTERN   replaces the default weasel pattern
    PROSE_GUARD_CHECK_PASSIVE    1/true/yes/on or 0/false/no/off
    PROSE_GUARD_WORDS_FILE       file with extra weasel words, one per line
"""

from __future__ import annotations

import os
from typing import Mapping

from .detectors.weasel import validate_weasel_pattern
from .errors import ConfigurationError
from .models import DEFAULT_WEASEL_PATTERN, DetectorConfig
from .wordlist import WeaselWordList

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def parse_bool(value: str, name: str) -> bool:
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")


def build_config(
    weasel_pattern: str | None = None,
    check_passive_voice: bool = True,
    words_file: str | None = None,
    extra_words: list[str] | None = None,
) -> DetectorConfig:
    """Assemble and validate a DetectorConfig; raises ConfigurationError on a bad pattern."""
    words = WeaselWordList(path=words_file, extra_words=extra_words)
    config = DetectorConfig(
        weasel_pattern=DEFAULT_WEASEL_PATTERN if weasel_pattern is None else weasel_pattern,
        check_passive_voice=check_passive_voice,
        extra_weasel_words=words.words,
    )
    validate_weasel_pattern(config.effective_weasel_pattern)
    return config


def load_config(environ: Mapping[str, str] | None = None) -> DetectorConfig:
    env = os.environ if environ is None else environ
    passive = env.get("PROSE_GUARD_CHECK_PASSIVE")
    return build_config(
        weasel_pattern=env.get("PROSE_GUARD_WEASEL_PATTERN"),
        check_passive_voice=(
            True if passive is None else parse_bool(passive, "PROSE_GUARD_CHECK_PASSIVE")
        ),
        words_file=env.get("PROSE_GUARD_WORDS_FILE") or None,
    )
