"""
prose-guard command line.

Usage:
    python main.py check draft.md notes.txt
    python main.py check - --no-passive < draft.md
    python main.py serve --host 0.0.0.0 --port 8080 --reload
"""

from __future__ import annotations

import argparse
import logging
import sys

from prose_guard import ProseGuardError, StyleChecker
from prose_guard.config import build_config
from prose_guard.report import render_report

logger = logging.getLogger("prose_guard.cli")


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as fh:
        return fh.read()


def cmd_check(args: argparse.Namespace) -> int:
    try:
        checker = StyleChecker(build_config(
            weasel_pattern=args.pattern,
            check_passive_voice=not args.no_passive,
            words_file=args.words_file,
        ))
    except ProseGuardError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    found = False
    for path in args.files:
        try:
            text = _read(path)
        except (OSError, UnicodeDecodeError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2
        result = checker.check(text)
        logger.debug(f"{path}: {result.total} issues")
        if len(args.files) > 1:
            print(f"== {path}")
        print(render_report(result, show_line_numbers=not args.no_line_numbers))
        found = found or not result.is_clean
    return 1 if found else 0


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=args.workers if not args.reload else 1,
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Find weasel words and passive voice")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Check one or more files ('-' for stdin)")
    check.add_argument("files", nargs="+")
    check.add_argument("--pattern", default=None, help="Weasel-word regex alternation")
    check.add_argument("--words-file", default=None, help="Extra weasel words, one per line")
    check.add_argument("--no-passive", action="store_true", help="Skip the passive-voice check")
    check.add_argument("--no-line-numbers", action="store_true", help="Omit line numbers")
    check.set_defaults(func=cmd_check)

    serve = sub.add_parser("serve", help="Start the HTTP API")
    serve.add_argument(
        "--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)"
    )
    serve.add_argument(
        "--port", type=int, default=8000, help="Bind port (default: 8000)"
    )
    serve.add_argument(
        "--reload", action="store_true", help="Enable auto-reload on code changes"
    )
    serve.add_argument(
        "--workers", type=int, default=1, help="Number of worker processes (default: 1)"
    )
    serve.set_defaults(func=cmd_serve)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
