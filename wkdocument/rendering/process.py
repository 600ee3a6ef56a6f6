"""
Renderer invocation: run wkhtmltopdf and capture what it writes.
"""

from __future__ import annotations

import logging
import subprocess
from typing import List, Optional

from wkdocument.core.errors import ProcessError

logger = logging.getLogger(__name__)


def run_renderer(
    executable: str,
    args: List[str],
    stdin: Optional[bytes] = None,
) -> bytes:
    """
    Run the renderer once and return everything it wrote to stdout.

    :param executable: Name or path of the wkhtmltopdf binary.
    :param args: Arguments following the executable.
    :param stdin: Bytes to feed to the process, or None to leave stdin unconnected.
    :return: Captured standard output.
    :raises ProcessError: If the process cannot start or exits non-zero.
    """
    cmd = [executable, *args]
    logger.debug("Running %s", cmd)
    try:
        proc = subprocess.run(
            cmd,
            input=stdin,
            stdin=None if stdin is not None else subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            check=False,
        )
    except OSError as exc:
        logger.error("Could not start %s: %s", executable, exc)
        raise ProcessError(str(exc)) from exc

    if proc.returncode != 0:
        stderr = proc.stderr.decode("utf-8", errors="replace")
        logger.error("%s exited with status %d", executable, proc.returncode)
        raise ProcessError(stderr, returncode=proc.returncode)
    return proc.stdout
