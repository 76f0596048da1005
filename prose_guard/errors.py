from __future__ import annotations


class ProseGuardError(Exception):
    """Base class for all prose-guard errors."""


class ConfigurationError(ProseGuardError, ValueError):
    """The weasel-word pattern (or another setting) is invalid."""


class WordListError(ProseGuardError):
    """A custom word list could not be loaded."""
