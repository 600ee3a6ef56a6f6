"""
Rendering Package.

Turns a Document into PDF bytes by invoking the wkhtmltopdf binary.
"""

from wkdocument.rendering.document import Document
from wkdocument.rendering.process import run_renderer

__all__ = ["Document", "run_renderer"]
