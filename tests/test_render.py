"""Tests for markdown rendering."""

from markpad.render import render_error_page, render_markdown, render_page


def test_render_basic_markdown():
    html = render_markdown("# Title\n\nSome *emphasis*.")
    assert "<h1" in html and "Title</h1>" in html
    assert "<em>emphasis</em>" in html


def test_render_fenced_code_and_table():
    text = (
        "```\nprint('hi')\n```\n\n"
        "| Column 1 | Column 2 |\n|----------|----------|\n| a | b |\n"
    )
    html = render_markdown(text)
    assert "<pre" in html and "print" in html
    assert "<table>" in html


def test_render_page_wraps_fragment():
    page = render_page("**bold**", title="a <b> title")
    assert page.startswith("<!DOCTYPE html>")
    assert "<title>a &lt;b&gt; title</title>" in page
    assert "<strong>bold</strong>" in page
    assert "font-family" in page


def test_render_empty_document():
    page = render_page("")
    assert '<div id="content">' in page


def test_error_page_escapes_message():
    page = render_error_page("File not found: <x>.md")
    assert "<h1>Error reading file</h1>" in page
    assert "File not found: &lt;x&gt;.md" in page
