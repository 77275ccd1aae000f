"""Loading and saving markdown documents.

Failures are returned as :class:`DocumentError` values rather than shown
to the user; the front end decides how to present them.
"""

import errno
import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from .constants import EditorConstants

logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    NO_SPACE = "no_space"
    DECODE_ERROR = "decode_error"
    IO_ERROR = "io_error"
    EXPORT_FAILED = "export_failed"


@dataclass(frozen=True)
class DocumentError:
    """A user-presentable failure: a kind plus a title/message pair."""
    kind: ErrorKind
    title: str
    message: str


@dataclass(frozen=True)
class LoadResult:
    ok: bool
    text: str = ""
    error: Optional[DocumentError] = None


@dataclass(frozen=True)
class SaveResult:
    ok: bool
    error: Optional[DocumentError] = None


def _error_from_os(exc: OSError, title: str, path: str) -> DocumentError:
    if isinstance(exc, FileNotFoundError):
        return DocumentError(ErrorKind.NOT_FOUND, title, f"File not found: {path}")
    if isinstance(exc, PermissionError):
        return DocumentError(ErrorKind.PERMISSION_DENIED, title, f"Permission denied: {path}")
    if exc.errno == errno.ENOSPC:
        return DocumentError(ErrorKind.NO_SPACE, title, "No space left on device")
    return DocumentError(ErrorKind.IO_ERROR, title, f"{path}: {exc.strerror or exc}")


def load_document(path: str) -> LoadResult:
    """Read a UTF-8 markdown file."""
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return LoadResult(ok=True, text=f.read())
    except UnicodeDecodeError as e:
        logger.warning(f"Could not decode {path} as UTF-8: {e}")
        return LoadResult(ok=False, error=DocumentError(
            ErrorKind.DECODE_ERROR, "Error reading file", f"{path} is not valid UTF-8 text"))
    except OSError as e:
        logger.warning(f"Could not read {path}: {e}")
        return LoadResult(ok=False, error=_error_from_os(e, "Error reading file", path))


def write_atomic(path: str, data: bytes) -> None:
    """Write ``data`` to ``path`` through a temp file and rename.

    The temp file lives in the target directory so the rename stays on one
    filesystem. On failure it is removed and the original file is intact.

    Raises:
        OSError: If the write or rename fails.
    """
    dir_name = os.path.dirname(path) or '.'
    base_name = os.path.basename(path)
    temp_filename = None
    try:
        with tempfile.NamedTemporaryFile(
            mode='wb',
            dir=dir_name,
            prefix=EditorConstants.ATOMIC_SAVE_PREFIX + base_name,
            suffix=EditorConstants.ATOMIC_SAVE_SUFFIX,
            delete=False,
        ) as temp_file:
            temp_filename = temp_file.name
            temp_file.write(data)
            temp_file.flush()
            os.fsync(temp_file.fileno())
        os.replace(temp_filename, path)
    except OSError:
        if temp_filename and os.path.exists(temp_filename):
            try:
                os.remove(temp_filename)
            except OSError:
                logger.warning(f"Could not remove temporary file {temp_filename}")
        raise


def save_document(path: str, text: str) -> SaveResult:
    """Save ``text`` to ``path`` as UTF-8, atomically."""
    try:
        write_atomic(path, text.encode('utf-8'))
        return SaveResult(ok=True)
    except OSError as e:
        logger.warning(f"Could not save {path}: {e}")
        return SaveResult(ok=False, error=_error_from_os(e, "Error saving file", path))


def default_export_name(source_path: Optional[str],
                        extension: str = EditorConstants.DEFAULT_EXPORT_EXTENSION) -> str:
    """Suggest a file name for exporting a document.

    For /path/to/notes.md returns notes.pdf; unsaved documents get
    Untitled.pdf.
    """
    if not source_path:
        return EditorConstants.UNTITLED_NAME + extension
    return Path(source_path).with_suffix(extension).name
