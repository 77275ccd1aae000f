"""Generate PDF exports of markdown documents.

Text is laid out as wrapped monospaced lines on US Letter pages using the
built-in Courier faces, so no font files have to be embedded. Header
lines are set in the bold face.
"""

import io
import logging
import re
import textwrap
from typing import List, Optional

from reportlab.lib.pagesizes import letter
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from .constants import EditorConstants
from .storage import DocumentError, ErrorKind, SaveResult, write_atomic

logger = logging.getLogger(__name__)

HEADER_PATTERN = re.compile(r'^#{1,6}\s')

FONT_FACES = {
    "Courier": ("Courier", "Courier-Bold"),
    "Helvetica": ("Helvetica", "Helvetica-Bold"),
    "Times-Roman": ("Times-Roman", "Times-Bold"),
}


class FontLoadError(Exception):
    """Exception raised when a font cannot be used."""


class PDFGenerator:
    """Generate PDF files from document text."""

    def __init__(self, font_name: str = "Courier", font_size: int = EditorConstants.PDF_FONT_SIZE):
        """Initialize PDF generator.

        Args:
            font_name: One of the built-in PDF font families in FONT_FACES.
            font_size: Point size for body text.

        Raises:
            FontLoadError: If the font family is unknown.
        """
        if font_name not in FONT_FACES:
            raise FontLoadError(f"Unknown font: {font_name}")
        self.font_name, self.font_name_bold = FONT_FACES[font_name]
        self.font_size = font_size
        self.line_height = round(font_size * 1.2)

        self.page_width, self.page_height = letter
        self.margin = EditorConstants.PDF_MARGIN

        # Track unprintable characters for warning
        self.unprintable_chars = set()
        self.has_unprintable = False

    @property
    def columns(self) -> int:
        """Number of characters that fit on one line."""
        char_width = pdfmetrics.stringWidth("M", self.font_name, self.font_size)
        return max(1, int((self.page_width - 2 * self.margin) // char_width))

    @property
    def lines_per_page(self) -> int:
        return max(1, int((self.page_height - 2 * self.margin) // self.line_height))

    def layout(self, text: str) -> List[List[str]]:
        """Split text into pages of wrapped lines."""
        lines: List[str] = []
        for source_line in text.split('\n'):
            expanded = source_line.expandtabs(4)
            if not expanded.strip():
                lines.append("")
                continue
            lines.extend(textwrap.wrap(expanded, width=self.columns,
                                       replace_whitespace=False,
                                       drop_whitespace=False) or [""])
        per_page = self.lines_per_page
        pages = [lines[i:i + per_page] for i in range(0, len(lines), per_page)]
        return pages or [[]]

    def generate_pdf(self, text: str) -> bytes:
        """Generate a PDF document from markdown text.

        Returns:
            Complete PDF document as bytes.
        """
        self.unprintable_chars = set()
        self.has_unprintable = False
        pdf_buffer = io.BytesIO()

        c = canvas.Canvas(pdf_buffer, pagesize=letter)
        for page in self.layout(text):
            y_position = self.page_height - self.margin
            for line in page:
                font = self.font_name_bold if HEADER_PATTERN.match(line) else self.font_name
                c.setFont(font, self.font_size)
                c.drawString(self.margin, y_position, self._make_pdf_safe(line))
                y_position -= self.line_height
            c.showPage()
        c.save()

        return pdf_buffer.getvalue()

    def _make_pdf_safe(self, text: str) -> str:
        """Replace characters the built-in fonts cannot show with '?'.

        The standard PDF fonts cover Windows-1252; anything else is
        replaced and remembered for the warning message.
        """
        result = []
        for char in text:
            try:
                char.encode('cp1252')
                result.append(char)
            except UnicodeEncodeError:
                self.unprintable_chars.add(char)
                self.has_unprintable = True
                result.append('?')
        return ''.join(result)

    def get_unprintable_warning(self) -> Optional[str]:
        """Get warning message about unprintable characters, if any."""
        if not self.has_unprintable:
            return None

        char_list = sorted(self.unprintable_chars)
        formatted_chars = []
        for char in char_list[:10]:
            if ord(char) < 32 or ord(char) == 127:
                formatted_chars.append(f"U+{ord(char):04X}")
            else:
                formatted_chars.append(f"'{char}' (U+{ord(char):04X})")
        if len(char_list) > 10:
            formatted_chars.append(f"... and {len(char_list) - 10} more")

        return (f"Warning: {len(self.unprintable_chars)} unique unprintable character(s) "
                f"were replaced with '?' in the PDF output: {', '.join(formatted_chars)}")


def export_pdf(text: str, path: str, generator: Optional[PDFGenerator] = None) -> SaveResult:
    """Render ``text`` to a PDF file at ``path``."""
    generator = generator or PDFGenerator()
    try:
        data = generator.generate_pdf(text)
        write_atomic(path, data)
    except OSError as e:
        logger.warning(f"Could not write PDF to {path}: {e}")
        return SaveResult(ok=False, error=DocumentError(
            ErrorKind.EXPORT_FAILED, "Error", f"Failed to save the PDF file: {e}"))
    warning = generator.get_unprintable_warning()
    if warning:
        logger.warning(warning)
    return SaveResult(ok=True)
