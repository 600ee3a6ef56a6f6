"""
Command-line interface: render HTML pages into a single PDF.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from wkdocument import __version__
from wkdocument.core.errors import WkDocumentError
from wkdocument.core.models import RenderConfig, page_from_file, page_from_reader
from wkdocument.rendering.document import Document

app = typer.Typer(add_completion=False, no_args_is_help=True)

STDIN_ARG = "-"


def _make_page(source: str):
    if source == STDIN_ARG:
        return page_from_reader(typer.get_binary_stream("stdin"))
    return page_from_file(source)


@app.command()
def render(
    pages: List[str] = typer.Argument(..., help="HTML files or URLs in page order; '-' reads stdin"),
    cover: Optional[str] = typer.Option(None, "--cover", "-c", help="Cover page placed before all others"),
    option: List[str] = typer.Option(
        [],
        "--option",
        "-O",
        help="Global wkhtmltopdf argument, passed verbatim (repeatable)",
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="PDF path (default: stdout)"),
    executable: Optional[str] = typer.Option(None, "--executable", help="wkhtmltopdf binary to run"),
    temp_root: Optional[str] = typer.Option(None, "--temp-root", help="Parent directory for temp files"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    sources = list(pages) + ([cover] if cover else [])
    if sources.count(STDIN_ARG) > 1:
        raise typer.BadParameter("stdin ('-') can only be used for one page")

    overrides = {}
    if executable:
        overrides["executable"] = executable
    if temp_root:
        overrides["temp_root"] = temp_root
    config = RenderConfig.from_env().model_copy(update=overrides)

    doc = Document(*option, config=config)
    if cover:
        doc.add_cover(_make_page(cover))
    doc.add_pages(*(_make_page(src) for src in pages))

    try:
        if output is None:
            doc.write(typer.get_binary_stream("stdout"))
        else:
            doc.write_to_file(output)
    except WkDocumentError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)


@app.command()
def version() -> None:
    typer.echo(__version__)


if __name__ == "__main__":
    app()
