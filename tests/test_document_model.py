"""Tests for the document model."""

from markpad.constants import EditorConstants
from markpad.model import DocumentModel


def test_new_model_holds_welcome_document():
    doc = DocumentModel()
    assert doc.text == EditorConstants.WELCOME_TEXT
    assert doc.cursor_offset == len(doc.text)
    assert doc.is_modified is False
    assert doc.source_path is None


def test_cursor_is_clamped_on_assignment():
    doc = DocumentModel("abc")
    doc.cursor_offset = 10
    assert doc.cursor_offset == 3
    doc.cursor_offset = -2
    assert doc.cursor_offset == 0


def test_cursor_clamped_when_text_shrinks():
    doc = DocumentModel("hello world")
    doc.replace("hi", 11)
    assert doc.cursor_offset == 2


def test_replace_sets_modified():
    doc = DocumentModel("abc", cursor_offset=0)
    doc.replace("xyz", 1)
    assert doc.text == "xyz"
    assert doc.cursor_offset == 1
    assert doc.is_modified


def test_reset_restores_welcome_text():
    doc = DocumentModel("scratch")
    doc.replace("changed", 3)
    doc.source_path = "/tmp/notes.md"
    doc.reset()
    assert doc.text == EditorConstants.WELCOME_TEXT
    assert doc.is_modified is False
    assert doc.source_path is None


def test_load_replaces_everything():
    doc = DocumentModel()
    doc.replace("dirty", 5)
    doc.load("# Loaded\n", "/docs/a.md")
    assert doc.text == "# Loaded\n"
    assert doc.cursor_offset == 0
    assert doc.is_modified is False
    assert doc.source_path == "/docs/a.md"


def test_mark_saved_clears_modified_only():
    doc = DocumentModel("text")
    doc.insert_text("more ")
    doc.mark_saved("/docs/b.md")
    assert doc.is_modified is False
    assert doc.source_path == "/docs/b.md"
    assert doc.text == "textmore "


def test_insert_text_moves_cursor():
    doc = DocumentModel("ac", cursor_offset=1)
    doc.insert_text("b")
    assert doc.text == "abc"
    assert doc.cursor_offset == 2


def test_insert_empty_text_is_not_a_mutation():
    doc = DocumentModel("abc")
    doc.insert_text("")
    assert doc.is_modified is False


def test_append_text_separated_by_single_space():
    doc = DocumentModel("Hello", cursor_offset=0)
    doc.append_text("world")
    assert doc.text == "Hello world"
    assert doc.cursor_offset == len(doc.text)
    assert doc.is_modified


def test_append_text_to_empty_document():
    doc = DocumentModel("")
    doc.append_text("First words")
    assert doc.text == "First words"


def test_append_text_after_whitespace_still_separates():
    doc = DocumentModel("- ")
    doc.append_text("item")
    assert doc.text == "-  item"


def test_append_text_after_newline():
    doc = DocumentModel("Notes\n")
    doc.append_text("first item")
    assert doc.text == "Notes\n first item"
    assert doc.cursor_offset == len(doc.text)


def test_append_empty_text_is_noop():
    doc = DocumentModel("Notes\n")
    doc.append_text("")
    assert doc.text == "Notes\n"
    assert not doc.is_modified


def test_sync_from_editor_tracks_caret():
    doc = DocumentModel("abc")
    doc.sync_from_editor("abcdef", caret=2)
    assert doc.text == "abcdef"
    assert doc.cursor_offset == 2
    assert doc.is_modified


def test_sync_from_editor_end_of_text_approximation():
    doc = DocumentModel("abc")
    doc.sync_from_editor("abcdef", caret=2, track_caret=False)
    assert doc.cursor_offset == 6


def test_sync_with_same_text_keeps_modified_flag():
    doc = DocumentModel("abc")
    doc.sync_from_editor("abc", caret=1)
    assert doc.is_modified is False
    assert doc.cursor_offset == 1


def test_counts_and_position():
    doc = DocumentModel("one two\nthree", cursor_offset=10)
    assert doc.word_count == 3
    assert doc.char_count == 13
    assert doc.line_and_column() == (1, 2)
