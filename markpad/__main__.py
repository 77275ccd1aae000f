"""Markpad CLI entry point.

Allows running via `python -m markpad` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .version import get_version_string


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="markpad", description="Markdown editor with live preview.")
    parser.add_argument("file", nargs="?", help="markdown file to open")
    parser.add_argument("-V", "--version", action="store_true", help="print version and exit")
    parser.add_argument("--html", action="store_true", help="print FILE rendered as an HTML page")
    parser.add_argument("--pdf", metavar="OUT", nargs="?", const="",
                        help="export FILE as PDF (default: FILE with .pdf extension)")
    parser.add_argument("--debug", action="store_true", help="log debug messages to stderr")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.version:
        print(get_version_string())
        return 0
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    # Lazy imports to avoid importing UI deps for --version
    from .editor import EditSession
    from .settings import get_persistence

    if args.html or args.pdf is not None:
        if not args.file:
            print("A FILE is required for --html and --pdf", file=sys.stderr)
            return 2
        session = EditSession(get_persistence())
        if not session.open(args.file):
            print(session.status_message, file=sys.stderr)
            return 1
        if args.html:
            print(session.render_html())
            return 0
        if not session.export_pdf(args.pdf or None):
            print(session.status_message, file=sys.stderr)
            return 1
        print(session.status_message)
        return 0

    from .textual_app import MarkpadApp
    MarkpadApp(filename=args.file, settings=get_persistence()).run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
