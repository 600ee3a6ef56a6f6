"""
Document builder: collect pages and options, then render them with wkhtmltopdf.

Pages backed by files are passed to the renderer by path. In-memory pages are
delivered depending on how many there are: a single one is piped through the
renderer's stdin, while two or more are written to numbered files in a fresh
temporary directory that is removed once the render finishes.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import BinaryIO, List, Optional, Union

from wkdocument.core.errors import OutputFileError, OutputWriteError, TempDirError, TempWriteError
from wkdocument.core.models import FilePage, OptionLike, Page, ReaderPage, RenderConfig, flatten_options
from wkdocument.rendering.process import run_renderer

logger = logging.getLogger(__name__)

COVER_MARKER = "cover"
STDIN_SENTINEL = "-"
STDOUT_MARKER = "-"
TEMP_PAGE_FORMAT = "page{:08d}.html"


class Document:
    """A single PDF document assembled from HTML pages.

    The cover, if any, is always rendered first; body pages follow in the
    order they were added. Every call to :meth:`render` spawns one renderer
    process and nothing is cached between calls.

    A Document is not thread-safe. Separate instances may render concurrently
    since each render gets its own uniquely named temporary directory.
    """

    def __init__(self, *options: OptionLike, config: Optional[RenderConfig] = None) -> None:
        self.config = config or RenderConfig()
        self.cover: Optional[Page] = None
        self.pages: List[Page] = []
        self.options: List[str] = []
        self.add_options(*options)

    def add_pages(self, *pages: Page) -> None:
        """Append pages; they appear in the PDF in the order added."""
        self.pages.extend(pages)

    def add_cover(self, cover: Page) -> None:
        """Set or replace the cover page."""
        self.cover = cover

    def add_options(self, *options: OptionLike) -> None:
        """Append global options after any already present."""
        self.options.extend(flatten_options(options))

    def _entries(self) -> List[Page]:
        entries: List[Page] = []
        if self.cover is not None:
            entries.append(self.cover)
        entries.extend(self.pages)
        return entries

    def readers(self) -> int:
        """Count the pages, cover included, backed by in-memory content."""
        return sum(1 for pg in self._entries() if isinstance(pg, ReaderPage))

    def args(self, filenames: Optional[List[str]] = None) -> List[str]:
        """
        Build the renderer arguments, excluding the trailing output marker.

        Args:
            filenames: Resolved filename for each page, cover first. When
                omitted, file pages use their path and in-memory pages use
                the stdin sentinel.

        Returns:
            List[str]: Global options, then the cover, then the body pages.
        """
        entries = self._entries()
        if filenames is None:
            filenames = [_default_filename(pg) for pg in entries]

        args = list(self.options)
        names = iter(filenames)
        if self.cover is not None:
            args.extend([COVER_MARKER, next(names)])
            args.extend(self.cover.options)
        for pg in self.pages:
            args.append(next(names))
            args.extend(pg.options)
        return args

    def render(self) -> bytes:
        """
        Run wkhtmltopdf over the document and return the PDF bytes.

        Raises:
            TempDirError: If the temporary directory cannot be created.
            TempWriteError: If an in-memory page cannot be written out.
            ProcessError: If the renderer fails to start or exits non-zero.
        """
        entries = self._entries()
        filenames = [_default_filename(pg) for pg in entries]
        reader_indexes = [i for i, pg in enumerate(entries) if isinstance(pg, ReaderPage)]

        stdin: Optional[bytes] = None
        tmp_dir: Optional[str] = None
        try:
            if len(reader_indexes) == 1:
                logger.debug("Piping single in-memory page through stdin")
                stdin = entries[reader_indexes[0]].content
            elif len(reader_indexes) > 1:
                tmp_dir = self._make_temp_dir()
                logger.debug("Writing %d in-memory pages to %s", len(reader_indexes), tmp_dir)
                for n, idx in enumerate(reader_indexes, start=1):
                    filenames[idx] = _write_temp_page(tmp_dir, n, entries[idx])

            args = self.args(filenames) + [STDOUT_MARKER]
            return run_renderer(self.config.executable, args, stdin=stdin)
        finally:
            if tmp_dir is not None:
                _remove_temp_dir(tmp_dir)

    def write_to_file(self, filename: Union[str, os.PathLike]) -> None:
        """Render the document and write the PDF to ``filename``."""
        buf = self.render()
        try:
            Path(filename).write_bytes(buf)
        except OSError as exc:
            raise OutputFileError(os.fspath(filename), str(exc)) from exc

    def write(self, sink: BinaryIO) -> None:
        """Render the document and copy the PDF to a binary sink."""
        buf = self.render()
        try:
            sink.write(buf)
        except (OSError, ValueError) as exc:
            raise OutputWriteError(str(exc)) from exc

    def _make_temp_dir(self) -> str:
        try:
            return tempfile.mkdtemp(prefix="temp", dir=self.config.temp_root)
        except OSError as exc:
            raise TempDirError(f"Error creating temp directory: {exc}") from exc


def _default_filename(page: Page) -> str:
    if isinstance(page, FilePage):
        return page.path
    return STDIN_SENTINEL


def _write_temp_page(tmp_dir: str, n: int, page: ReaderPage) -> str:
    path = os.path.join(tmp_dir, TEMP_PAGE_FORMAT.format(n))
    try:
        Path(path).write_bytes(page.content)
    except OSError as exc:
        raise TempWriteError(path, str(exc)) from exc
    return path


def _remove_temp_dir(tmp_dir: str) -> None:
    try:
        shutil.rmtree(tmp_dir)
    except OSError as exc:
        logger.warning("Could not remove temp directory %s: %s", tmp_dir, exc)
