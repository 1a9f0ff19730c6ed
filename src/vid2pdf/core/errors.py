"""Error types raised by the conversion pipeline."""

from __future__ import annotations

from pathlib import Path


class Vid2PdfError(Exception):
    """Base class for every error the converter raises on purpose."""


class FilesystemError(Vid2PdfError):
    """Listing, creating or removing a path failed."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = path


class ExtractionError(Vid2PdfError):
    """ffmpeg exited non-zero or reported a fatal diagnostic."""

    def __init__(self, message: str, returncode: int | None = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class PdfAssemblyError(Vid2PdfError):
    """Reading a frame image or writing the PDF failed."""
