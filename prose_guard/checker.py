from __future__ import annotations
import logging
from .detectors.base import BaseDetector
from .detectors.passive import PassiveVoiceDetector
from .detectors.weasel import WeaselDetector
from .models import CheckResult, DetectorConfig, IssueType

logger = logging.getLogger(__name__)


class StyleChecker:
    """Runs the weasel-word and passive-voice detectors over a document.

    The weasel pattern is compiled at construction, so an invalid pattern
    raises ConfigurationError here rather than on the first check.
    """

    def __init__(self, config: DetectorConfig | None = None) -> None:
        self._config = config or DetectorConfig()
        self._detectors: dict[IssueType, BaseDetector] = {
            IssueType.WEASEL: WeaselDetector(self._config.effective_weasel_pattern),
            IssueType.PASSIVE: PassiveVoiceDetector(),
        }
        self._disabled: set[IssueType] = set()
        if not self._config.check_passive_voice:
            self._disabled.add(IssueType.PASSIVE)

    @property
    def config(self) -> DetectorConfig:
        return self._config

    def disable_detector(self, issue_type: IssueType) -> None:
        self._disabled.add(issue_type)

    def enable_detector(self, issue_type: IssueType) -> None:
        self._disabled.discard(issue_type)

    def _run(self, issue_type: IssueType, text: str) -> list:
        if issue_type in self._disabled:
            return []
        return self._detectors[issue_type].detect(text)

    def check(self, text: str) -> CheckResult:
        result = CheckResult(
            weasel_matches=self._run(IssueType.WEASEL, text),
            passive_matches=self._run(IssueType.PASSIVE, text),
        )
        logger.debug(
            f"checked {len(text)} chars: {len(result.weasel_matches)} weasel, "
            f"{len(result.passive_matches)} passive"
        )
        return result


def check_text(text: str, config: DetectorConfig | None = None) -> CheckResult:
    """Run both detectors; the passive check only when the config enables it."""
    return StyleChecker(config).check(text)
