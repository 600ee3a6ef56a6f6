"""
wkdocument: compose multi-page PDF documents from HTML with wkhtmltopdf.

Pages can come from files or from in-memory content, with an optional cover
page, and the rendered PDF is returned as bytes or written to a file or sink.
"""

from wkdocument.core import (
    FilePage,
    FileWriteError,
    Option,
    OutputError,
    OutputFileError,
    OutputWriteError,
    Page,
    ProcessError,
    ReaderPage,
    RenderConfig,
    RenderError,
    TempDirError,
    TempWriteError,
    WkDocumentError,
    WriteError,
    page_from_file,
    page_from_reader,
)
from wkdocument.rendering import Document

__version__ = "0.1.0"

__all__ = [
    "Document",
    "RenderConfig",
    "Option",
    "Page",
    "FilePage",
    "ReaderPage",
    "page_from_file",
    "page_from_reader",
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
