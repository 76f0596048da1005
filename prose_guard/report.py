from __future__ import annotations
from .models import CheckResult, Match

CLEAN_MESSAGE = "No writing issues found! Your writing looks clean."


def _plural(n: int, word: str) -> str:
    return f"{n} {word}{'' if n == 1 else 's'}"


def summarize(result: CheckResult) -> str:
    if result.is_clean:
        return CLEAN_MESSAGE

    n_weasel = len(result.weasel_matches)
    n_passive = len(result.passive_matches)
    text = f"Found {_plural(result.total, 'writing issue')}"
    if n_weasel and n_passive:
        text += (
            f": {_plural(n_weasel, 'weasel word')} and "
            f"{_plural(n_passive, 'passive voice instance')}"
        )
    elif n_weasel:
        text += f": {_plural(n_weasel, 'weasel word')}"
    else:
        text += f": {_plural(n_passive, 'passive voice instance')}"
    return text + " that could weaken your writing."


def format_match(match: Match, show_line_numbers: bool = True, marker: str = "**") -> str:
    before, phrase, after = match.highlight()
    body = f"{before}{marker}{phrase}{marker}{after}"
    if show_line_numbers:
        return f"Line {match.line}: {body}"
    return body


def render_report(result: CheckResult, show_line_numbers: bool = True) -> str:
    lines = [summarize(result)]
    sections: list[tuple[str, list[Match]]] = [
        ("Weasel Words", list(result.weasel_matches)),
        ("Passive Voice", list(result.passive_matches)),
    ]
    for title, matches in sections:
        if not matches:
            continue
        lines.append("")
        lines.append(title)
        lines.append("-" * len(title))
        lines.extend(format_match(m, show_line_numbers) for m in matches)
    return "\n".join(lines)
