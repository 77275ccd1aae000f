"""Tests for applying formatting commands at the cursor."""

import pytest

from markpad.engine import apply_command, compute_insertion, line_start
from markpad.formatting import FormattingCommand
from markpad.model import DocumentModel


def make_doc(text, cursor):
    return DocumentModel(text, cursor_offset=cursor)


def test_bold_on_empty_document():
    doc = apply_command(make_doc("", 0), FormattingCommand.BOLD)
    assert doc.text == "****"
    assert doc.cursor_offset == 2
    assert doc.is_modified


def test_header_on_single_line():
    doc = apply_command(make_doc("hello", 5), FormattingCommand.HEADER1)
    assert doc.text == "# hello"
    assert doc.cursor_offset == 2


def test_line_start_command_uses_current_line():
    doc = apply_command(make_doc("first\nsecond line", 10), FormattingCommand.BULLET_LIST)
    assert doc.text == "first\n- second line"
    assert doc.cursor_offset == len("first\n- ")


def test_line_start_at_start_of_line():
    # Cursor right after the newline belongs to the second line
    doc = apply_command(make_doc("one\ntwo", 4), FormattingCommand.BLOCKQUOTE)
    assert doc.text == "one\n> two"


def test_line_start_on_empty_trailing_line():
    doc = apply_command(make_doc("one\n", 4), FormattingCommand.HEADER2)
    assert doc.text == "one\n## "
    assert doc.cursor_offset == len(doc.text)


def test_horizontal_rule_inserted_before_line():
    doc = apply_command(make_doc("text", 2), FormattingCommand.HORIZONTAL_RULE)
    assert doc.text == "---\ntext"
    assert doc.cursor_offset == 4


def test_inline_command_in_middle():
    doc = apply_command(make_doc("hello world", 6), FormattingCommand.LINK)
    assert doc.text == "hello [](url)world"
    assert doc.cursor_offset == 7


def test_table_inserted_at_cursor():
    doc = apply_command(make_doc("", 0), FormattingCommand.TABLE)
    assert doc.text == (
        "| Column 1 | Column 2 |\n|----------|----------|\n|  |\n| Cell 1   | Cell 2   |"
    )
    assert doc.cursor_offset == len(FormattingCommand.TABLE.prefix)


def test_cursor_beyond_text_is_clamped():
    new_text, cursor = compute_insertion("abc", 99, FormattingCommand.BOLD)
    assert new_text == "abc****"
    assert cursor == 5


def test_negative_cursor_is_clamped():
    new_text, cursor = compute_insertion("abc", -4, FormattingCommand.ITALIC)
    assert new_text == "**abc"
    assert cursor == 1


def test_multibyte_characters_count_as_one_offset():
    doc = apply_command(make_doc("héllo wörld", 6), FormattingCommand.BOLD)
    assert doc.text == "héllo ****wörld"
    assert doc.cursor_offset == 8


def test_emoji_line_start():
    doc = apply_command(make_doc("🎉 party\n日本語", 9), FormattingCommand.NUMBERED_LIST)
    assert doc.text == "🎉 party\n1. 日本語"
    assert doc.cursor_offset == len("🎉 party\n1. ")


@pytest.mark.parametrize("command", list(FormattingCommand))
@pytest.mark.parametrize("text,cursor", [("", 0), ("abc", 1), ("a\nbc\n", 3), ("x\ny", 3)])
def test_cursor_within_bounds(command, text, cursor):
    doc = apply_command(make_doc(text, cursor), command)
    assert 0 <= doc.cursor_offset <= len(doc.text)


@pytest.mark.parametrize("command", [c for c in FormattingCommand if not c.is_line_start])
def test_inline_length_and_placement(command):
    text, position = "some text\nhere", 5
    new_text, _ = compute_insertion(text, position, command)
    prefix, suffix = command.prefix, command.suffix
    assert len(new_text) == len(text) + len(prefix) + len(suffix)
    assert new_text[position:position + len(prefix)] == prefix
    after_prefix = position + len(prefix)
    assert new_text[after_prefix:after_prefix + len(suffix)] == suffix
    assert new_text[after_prefix + len(suffix):] == text[position:]


@pytest.mark.parametrize("command", [c for c in FormattingCommand if c.is_line_start])
def test_line_start_begins_line_with_prefix(command):
    text = "alpha\nbeta gamma\ndelta"
    new_text, cursor = compute_insertion(text, 12, command)
    assert new_text.split("\n")[1].startswith(command.prefix.split("\n")[0])
    assert new_text[6:6 + len(command.prefix)] == command.prefix
    assert cursor == 6 + len(command.prefix)


def test_repeated_bold_nests_markers():
    doc = make_doc("", 0)
    apply_command(doc, FormattingCommand.BOLD)
    first = doc.text
    apply_command(doc, FormattingCommand.BOLD)
    assert doc.text == "********"
    assert len(doc.text) > len(first)
    assert doc.cursor_offset == 4


def test_order_of_commands_matters():
    one = make_doc("word", 4)
    apply_command(one, FormattingCommand.BOLD)
    apply_command(one, FormattingCommand.INLINE_CODE)

    two = make_doc("word", 4)
    apply_command(two, FormattingCommand.INLINE_CODE)
    apply_command(two, FormattingCommand.BOLD)

    assert one.text == "word**``**"
    assert two.text == "word`****`"
    assert one.text != two.text


def test_order_matters_from_original_cursor():
    first = make_doc("ab", 1)
    apply_command(first, FormattingCommand.BOLD)
    first.cursor_offset = 1
    apply_command(first, FormattingCommand.STRIKETHROUGH)

    second = make_doc("ab", 1)
    apply_command(second, FormattingCommand.STRIKETHROUGH)
    second.cursor_offset = 1
    apply_command(second, FormattingCommand.BOLD)

    assert first.text == "a~~~~****b"
    assert second.text == "a****~~~~b"


def test_line_start_helper():
    assert line_start("abc", 2) == 0
    assert line_start("ab\ncd", 5) == 3
    assert line_start("ab\ncd", 2) == 0
    assert line_start("", 0) == 0
