"""
Pytest configuration for test discovery, import path setup, and shared fixtures.

Ensures the project root is on sys.path so that `import wkdocument` works
regardless of how pytest is invoked, and provides a stand-in wkhtmltopdf
executable for tests that spawn a real process.
"""

import os
import stat
import sys
import textwrap
from typing import List

import pytest


def _ensure_project_root_on_sys_path(sys_path: List[str]) -> None:
    """
    Add the project root directory to sys.path if it is not already present.

    :param sys_path: The current Python sys.path list.
    :return: None
    """
    tests_dir = os.path.dirname(__file__)
    project_root = os.path.abspath(os.path.join(tests_dir, os.pardir))
    if project_root not in sys_path:
        sys_path.insert(0, project_root)


_ensure_project_root_on_sys_path(sys.path)


FAKE_RENDERER = textwrap.dedent(
    """
    import json
    import os
    import sys

    args = sys.argv[1:]
    log_path = os.environ.get("FAKE_RENDERER_ARGS")
    if log_path:
        with open(log_path, "w", encoding="utf-8") as f:
            json.dump(args, f)
    if "--fail" in args:
        sys.stderr.write("fake failure: bad page\\n")
        sys.exit(2)

    chunks = []
    for arg in args[:-1]:
        if arg == "-":
            chunks.append(sys.stdin.buffer.read())
        elif arg.endswith(".html"):
            with open(arg, "rb") as f:
                chunks.append(f.read())
    sys.stdout.buffer.write(b"|".join(chunks))
    """
)


@pytest.fixture
def fake_renderer(tmp_path):
    """Executable that concatenates its HTML inputs to stdout, joined by '|'."""
    if sys.platform.startswith("win"):
        pytest.skip("fake renderer relies on a POSIX shebang")
    script = tmp_path / "fake-wkhtmltopdf"
    script.write_text(f"#!{sys.executable}\n{FAKE_RENDERER}", encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(script)
