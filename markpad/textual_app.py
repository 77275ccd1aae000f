"""Textual front end: markdown editor with a live preview."""

from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Footer, Header, Markdown, TextArea

from .dictation import DictationSession
from .editor import EditSession
from .formatting import FormattingCommand
from .settings import SettingsPersistence
from .voice import Action


def location_to_offset(text: str, location: tuple[int, int]) -> int:
    """Convert a (row, column) widget location to a character offset."""
    lines = text.split("\n")
    row = max(0, min(location[0], len(lines) - 1))
    column = max(0, min(location[1], len(lines[row])))
    return sum(len(line) + 1 for line in lines[:row]) + column


def offset_to_location(text: str, offset: int) -> tuple[int, int]:
    """Convert a character offset to a (row, column) widget location."""
    before = text[:max(0, min(offset, len(text)))]
    return before.count("\n"), len(before) - (before.rfind("\n") + 1)


class MarkpadApp(App):
    """Editor pane on the left, rendered markdown on the right."""

    CSS = """
    #editor {
        width: 1fr;
        border: none;
    }
    #preview-pane {
        width: 1fr;
        padding: 0 1;
        background: $surface;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+s", "save", "Save", priority=True),
        Binding("ctrl+n", "new_document", "New", priority=True),
        Binding("ctrl+z", "undo", "Undo", priority=True),
        Binding("ctrl+y", "redo", "Redo", priority=True),
        Binding("ctrl+e", "export_pdf", "PDF", priority=True),
        Binding("ctrl+b", "format('bold')", "Bold", priority=True),
        Binding("f2", "format('italic')", "Italic", show=False),
        Binding("f3", "format('inline_code')", "Code", show=False),
        Binding("f4", "format('header1')", "Header", show=False),
        Binding("f5", "format('bullet_list')", "List", show=False),
        Binding("f6", "format('link')", "Link", show=False),
    ]

    def __init__(self, filename: Optional[str] = None,
                 settings: Optional[SettingsPersistence] = None,
                 dictation: Optional[DictationSession] = None):
        super().__init__()
        self.filename = filename
        self.session = EditSession(settings)
        self.dictation = dictation
        self.text_area: Optional[TextArea] = None
        if dictation is not None and dictation.on_partial is None:
            dictation.on_partial = self._on_partial_transcript

    def compose(self) -> ComposeResult:
        yield Header()
        self.text_area = TextArea(id="editor")
        self.text_area.show_line_numbers = False
        with Horizontal():
            yield self.text_area
            with VerticalScroll(id="preview-pane"):
                yield Markdown(id="preview")
        yield Footer()

    def on_mount(self) -> None:
        if self.filename and not self.session.open(self.filename):
            self._report()
        self._push_to_widget()
        if self.dictation is not None:
            self.set_interval(0.1, self._apply_dictation)
        self.text_area.focus()

    # --- Synchronisation ---

    def _caret_offset(self) -> int:
        return location_to_offset(self.text_area.text, self.text_area.cursor_location)

    def _pull_from_widget(self):
        self.session.sync_from_editor(self.text_area.text, self._caret_offset())

    def _push_to_widget(self):
        model = self.session.model
        if self.text_area.text != model.text:
            self.text_area.load_text(model.text)
        self.text_area.move_cursor(offset_to_location(model.text, model.cursor_offset))
        self._refresh_preview()

    def _refresh_preview(self):
        self.query_one("#preview", Markdown).update(self.session.model.text)
        self.title = f"Markpad - {self.session.title}"
        model = self.session.model
        self.sub_title = self.session.status_message or f"{model.word_count} words | {model.char_count} chars"

    def _report(self):
        error = self.session.last_error
        if error is not None:
            self.notify(error.message, title=error.title, severity="error")

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if event.text_area.text == self.session.model.text:
            return
        self._pull_from_widget()
        self._refresh_preview()

    # --- Actions ---

    def action_format(self, name: str) -> None:
        self._pull_from_widget()
        self.session.run_command(FormattingCommand(name))
        self._push_to_widget()

    def action_undo(self) -> None:
        self._pull_from_widget()
        self.session.undo_edit()
        self._push_to_widget()

    def action_redo(self) -> None:
        self.session.redo_edit()
        self._push_to_widget()

    def action_new_document(self) -> None:
        self.session.new_document()
        self._push_to_widget()

    def action_save(self) -> None:
        self._pull_from_widget()
        if not self.session.model.source_path:
            self.notify("No filename set", severity="warning")
            return
        if self.session.save():
            self.notify(self.session.status_message)
        else:
            self._report()
        self._refresh_preview()

    def action_export_pdf(self) -> None:
        self._pull_from_widget()
        if self.session.export_pdf():
            self.notify(self.session.status_message)
        else:
            self._report()

    def action_quit(self) -> None:
        if self.dictation is not None:
            self.dictation.cancel()
        self.exit()

    # --- Dictation ---

    def _on_partial_transcript(self, text: str, action: Action) -> None:
        # Called from the capture thread
        self.call_from_thread(setattr, self, "sub_title", f"Hearing: {text}")

    def _apply_dictation(self) -> None:
        if not self.dictation.pending():
            return
        self._pull_from_widget()
        self.dictation.apply_pending(self.session)
        self._push_to_widget()
