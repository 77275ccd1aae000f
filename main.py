#!/usr/bin/env python3
"""Markpad - a markdown editor with live preview.

Usage:
    python main.py [filename]

Controls:
    Ctrl-S: Save file
    Ctrl-N: New document
    Ctrl-Z / Ctrl-Y: Undo / redo
    Ctrl-E: Export PDF
    Ctrl-B: Bold
    F2-F6: Italic, code, header, bullet list, link
    Ctrl-Q: Quit
"""

import sys
from markpad.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
