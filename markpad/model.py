from typing import Optional

from .constants import EditorConstants


class DocumentModel:
    """In-memory markdown document: text, cursor and modification state.

    Offsets count characters (code points), not bytes. The cursor is clamped
    on every assignment so that ``0 <= cursor_offset <= len(text)`` always
    holds.
    """

    text: str
    source_path: Optional[str]
    is_modified: bool

    def __init__(self, text: Optional[str] = None, cursor_offset: Optional[int] = None):
        self.text = EditorConstants.WELCOME_TEXT if text is None else text
        self._cursor_offset = 0
        self.cursor_offset = len(self.text) if cursor_offset is None else cursor_offset
        self.is_modified = False
        self.source_path = None

    @property
    def cursor_offset(self) -> int:
        return self._cursor_offset

    @cursor_offset.setter
    def cursor_offset(self, offset: int):
        self._cursor_offset = max(0, min(offset, len(self.text)))

    # --- Lifecycle ---

    def reset(self):
        """Replace the document with the welcome text ("new document")."""
        self.text = EditorConstants.WELCOME_TEXT
        self.cursor_offset = len(self.text)
        self.is_modified = False
        self.source_path = None

    def load(self, text: str, path: Optional[str] = None):
        """Replace the document with freshly loaded content."""
        self.text = text
        self.cursor_offset = 0
        self.is_modified = False
        self.source_path = path

    def mark_saved(self, path: str):
        self.source_path = path
        self.is_modified = False

    # --- Mutation ---

    def replace(self, text: str, cursor_offset: int):
        """Set new text and cursor in one mutation."""
        self.text = text
        self.cursor_offset = cursor_offset
        self.is_modified = True

    def insert_text(self, text: str):
        """Insert raw text at the cursor and move the cursor past it."""
        if not text:
            return
        pos = self.cursor_offset
        self.replace(self.text[:pos] + text + self.text[pos:], pos + len(text))

    def append_text(self, text: str):
        """Append dictated text at the end of the document.

        A single space separates it from existing content; an empty
        document gets no separator.
        """
        if not text:
            return
        separator = EditorConstants.DICTATION_SEPARATOR if self.text else ""
        new_text = self.text + separator + text
        self.replace(new_text, len(new_text))

    def sync_from_editor(self, text: str, caret: Optional[int] = None, track_caret: bool = True):
        """Take the content reported by an editor widget.

        With ``track_caret`` the widget's caret offset is kept; otherwise
        the cursor is approximated as the end of the text.
        """
        if text != self.text:
            self.text = text
            self.is_modified = True
        if track_caret and caret is not None:
            self.cursor_offset = caret
        else:
            self.cursor_offset = len(self.text)

    # --- Queries ---

    @property
    def char_count(self) -> int:
        return len(self.text)

    @property
    def word_count(self) -> int:
        return len(self.text.split())

    def line_and_column(self) -> tuple[int, int]:
        """Return the zero-based (line, column) of the cursor."""
        before = self.text[:self.cursor_offset]
        line = before.count("\n")
        column = len(before) - (before.rfind("\n") + 1)
        return line, column

    def __repr__(self):
        return (f"DocumentModel(len={len(self.text)}, cursor={self.cursor_offset}, "
                f"modified={self.is_modified}, path={self.source_path!r})")
