"""Tests for undo/redo of session edits."""

from markpad.editor import EditSession
from markpad.formatting import FormattingCommand
from markpad.undo import DocumentSnapshot, UndoEntry, UndoManager


def make_session(text, cursor):
    session = EditSession()
    session.model.load(text)
    session.model.cursor_offset = cursor
    return session


def test_undo_restores_text_cursor_and_modified():
    session = make_session("hello", 5)
    session.run_command(FormattingCommand.HEADER1)
    assert session.model.text == "# hello"

    assert session.undo_edit() is True
    assert session.model.text == "hello"
    assert session.model.cursor_offset == 5
    assert session.model.is_modified is False
    assert session.status_message == "Undone"


def test_redo_reapplies():
    session = make_session("", 0)
    session.run_command(FormattingCommand.BOLD)
    session.undo_edit()
    assert session.redo_edit() is True
    assert session.model.text == "****"
    assert session.model.cursor_offset == 2
    assert session.model.is_modified


def test_nothing_to_undo_or_redo():
    session = make_session("a", 0)
    assert session.undo_edit() is False
    assert session.status_message == "Nothing to undo"
    assert session.redo_edit() is False
    assert session.status_message == "Nothing to redo"


def test_new_edit_clears_redo():
    session = make_session("", 0)
    session.run_command(FormattingCommand.BOLD)
    session.undo_edit()
    session.run_command(FormattingCommand.ITALIC)
    assert not session.undo.can_redo()


def test_new_paragraph_undoes_in_one_step():
    session = make_session("end", 3)
    session.run_voice("new paragraph")
    assert session.model.text == "end\n\n"
    session.undo_edit()
    assert session.model.text == "end"


def test_history_is_capped():
    manager = UndoManager(max_entries=3)
    for i in range(5):
        manager.push(UndoEntry(DocumentSnapshot(str(i)), DocumentSnapshot(str(i + 1))))
    assert len(manager._undo_stack) == 3
    assert manager._undo_stack[0].before.text == "2"


def test_unchanged_entries_are_skipped():
    manager = UndoManager()
    snap = DocumentSnapshot("same", 1, False)
    manager.push(UndoEntry(snap, snap))
    assert not manager.can_undo()


def test_clear():
    manager = UndoManager()
    manager.push(UndoEntry(DocumentSnapshot("a"), DocumentSnapshot("b")))
    manager.clear()
    assert not manager.can_undo()
    assert not manager.can_redo()
