"""
Tests for the typer command-line interface.
"""

import json

from typer.testing import CliRunner

from wkdocument import __version__
from wkdocument.cli.main import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_render_to_output_file(fake_renderer, tmp_path):
    page = tmp_path / "page.html"
    page.write_bytes(b"<p>page</p>")
    cover = tmp_path / "cover.html"
    cover.write_bytes(b"<p>cover</p>")
    out = tmp_path / "out.pdf"

    result = runner.invoke(
        app,
        ["render", str(page), "--cover", str(cover), "-o", str(out), "--executable", fake_renderer],
    )

    assert result.exit_code == 0, result.output
    assert out.read_bytes() == b"<p>cover</p>|<p>page</p>"


def test_render_stdin_page_to_stdout(fake_renderer, tmp_path):
    page = tmp_path / "page.html"
    page.write_bytes(b"<p>page</p>")

    result = runner.invoke(
        app,
        ["render", "-", str(page), "--executable", fake_renderer],
        input=b"<p>from stdin</p>",
    )

    assert result.exit_code == 0, result.output
    assert result.stdout_bytes == b"<p>from stdin</p>|<p>page</p>"


def test_global_options_passed_verbatim(fake_renderer, tmp_path):
    page = tmp_path / "page.html"
    page.write_bytes(b"<p>page</p>")
    args_log = tmp_path / "args.json"

    result = runner.invoke(
        app,
        ["render", str(page), "--option=--quiet", "--option=--grayscale", "-o", str(tmp_path / "out.pdf")],
        env={"WKHTMLTOPDF_PATH": fake_renderer, "FAKE_RENDERER_ARGS": str(args_log)},
    )

    assert result.exit_code == 0, result.output
    assert json.loads(args_log.read_text(encoding="utf-8")) == ["--quiet", "--grayscale", str(page), "-"]


def test_renderer_failure_exits_nonzero(fake_renderer, tmp_path):
    page = tmp_path / "page.html"
    page.write_bytes(b"<p>page</p>")
    out = tmp_path / "out.pdf"

    result = runner.invoke(
        app,
        ["render", str(page), "--option=--fail", "-o", str(out), "--executable", fake_renderer],
    )

    assert result.exit_code == 1
    assert "fake failure: bad page" in result.output
    assert not out.exists()


def test_stdin_used_twice_is_rejected(tmp_path):
    result = runner.invoke(app, ["render", "-", "--cover", "-"], input=b"x")
    assert result.exit_code == 2
