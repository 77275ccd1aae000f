from dataclasses import dataclass

from .constants import EditorConstants


@dataclass(frozen=True)
class DocumentSnapshot:
    text: str
    cursor_offset: int = 0
    is_modified: bool = False


@dataclass
class UndoEntry:
    before: DocumentSnapshot
    after: DocumentSnapshot


class UndoManager:
    def __init__(self, max_entries: int = EditorConstants.UNDO_LIMIT):
        self._undo_stack: list[UndoEntry] = []
        self._redo_stack: list[UndoEntry] = []
        self._max_entries = max_entries

    def clear(self):
        self._undo_stack.clear()
        self._redo_stack.clear()

    def push(self, entry: UndoEntry):
        # Skip no-op edits
        if entry.before == entry.after:
            return
        self._undo_stack.append(entry)
        if len(self._undo_stack) > self._max_entries:
            self._undo_stack.pop(0)
        # Any new edit invalidates redo history
        self._redo_stack.clear()

    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def undo(self, session) -> bool:
        if not self._undo_stack:
            return False
        entry = self._undo_stack.pop()
        session._apply_snapshot(entry.before)
        self._redo_stack.append(entry)
        return True

    def redo(self, session) -> bool:
        if not self._redo_stack:
            return False
        entry = self._redo_stack.pop()
        session._apply_snapshot(entry.after)
        self._undo_stack.append(entry)
        return True
