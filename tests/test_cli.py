"""Tests for the command line entry point."""

import os
import tempfile
from unittest.mock import patch

from markpad.__main__ import main


def test_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("markpad ")


def test_html_output(capsys):
    with tempfile.NamedTemporaryFile('w', suffix='.md', delete=False, encoding='utf-8') as f:
        f.write("# Hi")
        path = f.name
    try:
        with patch('markpad.settings.get_persistence') as get_persistence:
            get_persistence.return_value = None
            assert main(["--html", path]) == 0
        out = capsys.readouterr().out
        assert "Hi</h1>" in out
    finally:
        os.remove(path)


def test_pdf_requires_file(capsys):
    assert main(["--pdf"]) == 2
    assert "FILE is required" in capsys.readouterr().err


def test_missing_file_reports_error(capsys):
    with patch('markpad.settings.get_persistence', return_value=None):
        assert main(["--html", "/nonexistent/x.md"]) == 1
    assert "Error reading file" in capsys.readouterr().err


def test_no_options_launches_editor():
    with patch('markpad.settings.get_persistence', return_value=None), \
            patch('markpad.textual_app.MarkpadApp') as app_class:
        assert main(["notes.md"]) == 0
    app_class.assert_called_once_with(filename="notes.md", settings=None)
    app_class.return_value.run.assert_called_once_with()
