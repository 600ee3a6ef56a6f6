"""Exception hierarchy for wkdocument.

Every failure raised by the package derives from :class:`WkDocumentError`, so
callers can catch the whole family with a single ``except`` clause.
"""

from __future__ import annotations

from typing import Optional


class WkDocumentError(Exception):
    """Base exception for all wkdocument errors."""

    pass


# Render errors
class RenderError(WkDocumentError):
    """Base class for failures while producing the PDF bytes."""

    pass


class TempDirError(RenderError):
    """Raised when the temporary directory for page files cannot be created."""

    pass


class TempWriteError(RenderError):
    """Raised when a buffered page cannot be written to its temporary file."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Error writing temp file '{path}': {reason}")


class ProcessError(RenderError):
    """Raised when the renderer exits non-zero or cannot be launched."""

    def __init__(self, stderr: str, returncode: Optional[int] = None):
        self.stderr = stderr
        self.returncode = returncode
        super().__init__(f"Error running wkhtmltopdf: {stderr}")


# Output errors
class OutputError(WkDocumentError):
    """Base class for failures persisting already rendered bytes."""

    pass


class OutputFileError(OutputError):
    """Raised when the rendered document cannot be written to a path."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Error creating file '{path}': {reason}")


class OutputWriteError(OutputError):
    """Raised when the rendered document cannot be copied to a sink."""

    def __init__(self, reason: str):
        super().__init__(f"Error writing to writer: {reason}")


FileWriteError = OutputFileError
WriteError = OutputWriteError
