"""Run the external frame extraction tool and map its failures to ExtractionError."""

from __future__ import annotations

import logging
import subprocess

from vid2pdf.core.errors import ExtractionError

logger = logging.getLogger(__name__)


def run_tool(cmd: list[str], timeout: float | None = None) -> subprocess.CompletedProcess:
    """Run ``cmd`` to completion and return it with its captured stderr.

    stdin is closed so a tool waiting for input cannot stall a whole chunk.
    ``timeout=None`` waits indefinitely. Missing binaries, timeouts and
    non-zero exits all raise ExtractionError; stderr of a successful run is
    left to the caller to classify.
    """
    tool = cmd[0]
    logger.debug(f"Running: {' '.join(cmd)}")
    try:
        result = subprocess.run(
            cmd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as exc:
        raise ExtractionError(f"{tool} not found on PATH") from exc
    except subprocess.TimeoutExpired as exc:
        stderr = exc.stderr.decode(errors="replace") if isinstance(exc.stderr, bytes) else exc.stderr
        raise ExtractionError(f"{tool} timed out after {timeout}s", stderr=stderr or "") from exc

    if result.stderr:
        logger.debug(f"{tool} stderr: {result.stderr[-500:]}")
    if result.returncode != 0:
        raise ExtractionError(
            f"{tool} exited with code {result.returncode}",
            returncode=result.returncode,
            stderr=result.stderr or "",
        )
    return result
