"""Edit session controller for one markdown document."""

import logging
import os
from pathlib import Path
from typing import Callable, Optional

from .constants import EditorConstants
from .engine import apply_command
from .formatting import FormattingCommand
from .model import DocumentModel
from .pdf_generator import FontLoadError, PDFGenerator, export_pdf
from .render import render_error_page, render_page
from .settings import SettingsPersistence
from .storage import DocumentError, ErrorKind, default_export_name, load_document, save_document
from .undo import DocumentSnapshot, UndoEntry, UndoManager
from .voice import Action, VoiceCommandInterpreter, apply_action

logger = logging.getLogger(__name__)


class EditSession:
    """Owns one document and every way of changing it.

    All mutations (toolbar commands, dictation, widget edits, undo/redo) go
    through this object so they apply one at a time, in order, on the
    caller's thread. Each window gets its own session; nothing is shared.
    """

    def __init__(self, settings: Optional[SettingsPersistence] = None):
        self.model = DocumentModel()
        self.undo = UndoManager()
        self.voice = VoiceCommandInterpreter()
        self.settings = settings
        self.status_message: Optional[str] = None
        self.last_error: Optional[DocumentError] = None
        self._error_page: Optional[str] = None

    # --- Undo plumbing ---

    def _snapshot_state(self) -> DocumentSnapshot:
        return DocumentSnapshot(
            text=self.model.text,
            cursor_offset=self.model.cursor_offset,
            is_modified=self.model.is_modified,
        )

    def _apply_snapshot(self, snapshot: DocumentSnapshot):
        self.model.text = snapshot.text
        self.model.cursor_offset = snapshot.cursor_offset
        self.model.is_modified = snapshot.is_modified

    def _mutate(self, edit: Callable[[DocumentModel], object]) -> bool:
        before = self._snapshot_state()
        edit(self.model)
        self.undo.push(UndoEntry(before=before, after=self._snapshot_state()))
        self._error_page = None
        return True

    # --- Editing ---

    @property
    def track_caret(self) -> bool:
        if self.settings is None:
            return True
        return self.settings.track_caret

    def run_command(self, command: FormattingCommand) -> bool:
        """Apply a formatting command at the cursor."""
        return self._mutate(lambda doc: apply_command(doc, command))

    def run_voice(self, utterance: str) -> Action:
        """Interpret a finalized utterance and apply it."""
        action = self.voice.interpret(utterance)
        self._mutate(lambda doc: apply_action(doc, action))
        return action

    def insert_text(self, text: str) -> bool:
        return self._mutate(lambda doc: doc.insert_text(text))

    def sync_from_editor(self, text: str, caret: Optional[int] = None):
        """Record content and caret reported by the editor widget."""
        if text == self.model.text:
            self.model.sync_from_editor(text, caret, self.track_caret)
            return
        self._mutate(lambda doc: doc.sync_from_editor(text, caret, self.track_caret))

    def undo_edit(self) -> bool:
        if self.undo.undo(self):
            self.status_message = "Undone"
            return True
        self.status_message = "Nothing to undo"
        return False

    def redo_edit(self) -> bool:
        if self.undo.redo(self):
            self.status_message = "Redone"
            return True
        self.status_message = "Nothing to redo"
        return False

    # --- Documents ---

    def new_document(self):
        self.model.reset()
        self.undo.clear()
        self._error_page = None
        self.last_error = None

    def open(self, path: str) -> bool:
        """Load a document from ``path``.

        On failure the current document is kept and the preview shows an
        error page.
        """
        result = load_document(path)
        if not result.ok:
            self._fail(result.error)
            self._error_page = render_error_page(result.error.message)
            return False
        self.model.load(result.text, path)
        self.undo.clear()
        self._error_page = None
        self.last_error = None
        self.status_message = None
        self._remember(path)
        return True

    def save(self, path: Optional[str] = None) -> bool:
        """Save to ``path``, or to the document's own path."""
        target = path or self.model.source_path
        if not target:
            self.status_message = "No file name given"
            return False
        result = save_document(target, self.model.text)
        if not result.ok:
            self._fail(result.error)
            return False
        self.model.mark_saved(target)
        self.last_error = None
        self.status_message = EditorConstants.SAVED_MESSAGE.format(target)
        self._remember(target)
        return True

    def export_pdf(self, path: Optional[str] = None) -> bool:
        """Export the document as PDF.

        Without ``path`` the file is named after the document and placed
        beside it (or in the working directory for unsaved documents).
        """
        if path is None:
            source = self.model.source_path
            directory = os.path.dirname(source) if source else os.getcwd()
            path = os.path.join(directory, default_export_name(source))
        try:
            generator = self._pdf_generator()
        except FontLoadError as e:
            self._fail(DocumentError(ErrorKind.EXPORT_FAILED, "Error", str(e)))
            return False
        result = export_pdf(self.model.text, path, generator)
        if not result.ok:
            self._fail(result.error)
            return False
        self.last_error = None
        self.status_message = (generator.get_unprintable_warning()
                               or EditorConstants.EXPORTED_MESSAGE.format(path))
        return True

    def render_html(self) -> str:
        """HTML page for the preview pane."""
        if self._error_page is not None:
            return self._error_page
        return render_page(self.model.text, title=self.display_name)

    # --- Display ---

    @property
    def display_name(self) -> str:
        if self.model.source_path:
            return Path(self.model.source_path).name
        return EditorConstants.UNTITLED_NAME

    @property
    def title(self) -> str:
        """Window title: file name, marked when there are unsaved changes."""
        marker = EditorConstants.MODIFIED_MARKER if self.model.is_modified else ""
        return self.display_name + marker

    # --- Helpers ---

    def _pdf_generator(self) -> PDFGenerator:
        if self.settings is None:
            return PDFGenerator()
        return PDFGenerator(self.settings.get('pdf_font_name'), self.settings.get('pdf_font_size'))

    def _fail(self, error: DocumentError):
        self.last_error = error
        self.status_message = f"{error.title}: {error.message}"
        logger.warning(self.status_message)

    def _remember(self, path: str):
        if self.settings is not None:
            self.settings.add_recent_file(path)
