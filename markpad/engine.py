"""Cursor-aware insertion of markdown formatting."""

from .formatting import FormattingCommand
from .model import DocumentModel


def line_start(text: str, position: int) -> int:
    """Return the offset of the start of the line containing ``position``."""
    return text.rfind("\n", 0, position) + 1


def compute_insertion(text: str, position: int, command: FormattingCommand) -> tuple[str, int]:
    """Compute the text and cursor offset after applying ``command``.

    Line-start commands are anchored at column 0 of the current line and
    insert only their prefix. Inline commands insert prefix and suffix at
    ``position`` and leave the cursor between them.
    """
    position = max(0, min(position, len(text)))
    spec = command.spec

    if spec.is_line_start:
        start = line_start(text, position)
        before_line = text[:start]
        after_line = text[start:]
        return before_line + spec.prefix + after_line, len(before_line) + len(spec.prefix)

    before_cursor = text[:position]
    after_cursor = text[position:]
    new_text = before_cursor + spec.prefix + spec.suffix + after_cursor
    return new_text, position + len(spec.prefix)


def apply_command(doc: DocumentModel, command: FormattingCommand) -> DocumentModel:
    """Apply a formatting command to ``doc`` in place and return it."""
    new_text, new_cursor = compute_insertion(doc.text, doc.cursor_offset, command)
    doc.replace(new_text, new_cursor)
    return doc
