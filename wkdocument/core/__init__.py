"""
Core Package.

Data models and the exception hierarchy shared by the rendering layer.
"""

from wkdocument.core.errors import (
    FileWriteError,
    OutputError,
    OutputFileError,
    OutputWriteError,
    ProcessError,
    RenderError,
    TempDirError,
    TempWriteError,
    WkDocumentError,
    WriteError,
)
from wkdocument.core.models import (
    FilePage,
    Option,
    Page,
    ReaderPage,
    RenderConfig,
    flatten_options,
    page_from_file,
    page_from_reader,
)

__all__ = [
    # Models
    "RenderConfig",
    "Option",
    "Page",
    "FilePage",
    "ReaderPage",
    "flatten_options",
    "page_from_file",
    "page_from_reader",
    # Errors
    "WkDocumentError",
    "RenderError",
    "TempDirError",
    "TempWriteError",
    "ProcessError",
    "OutputError",
    "OutputFileError",
    "OutputWriteError",
    "FileWriteError",
    "WriteError",
]
