"""Tests for the external tool runner."""

import subprocess

import pytest

from vid2pdf.core.errors import ExtractionError
from vid2pdf.utils.subprocess_utils import run_tool


class TestRunTool:
    def test_success_returns_stderr(self, monkeypatch: pytest.MonkeyPatch):
        seen = {}

        def fake_run(cmd, **kwargs):
            seen.update(kwargs)
            return subprocess.CompletedProcess(cmd, 0, "", "muxing overhead: unknown\n")

        monkeypatch.setattr("vid2pdf.utils.subprocess_utils.subprocess.run", fake_run)
        result = run_tool(["ffmpeg", "-i", "v.mp4"])

        assert result.stderr == "muxing overhead: unknown\n"
        assert seen["stdin"] is subprocess.DEVNULL
        assert seen["timeout"] is None

    def test_nonzero_exit(self, monkeypatch: pytest.MonkeyPatch):
        def fake_run(cmd, **kwargs):
            return subprocess.CompletedProcess(cmd, 3, "", "Conversion failed!\n")

        monkeypatch.setattr("vid2pdf.utils.subprocess_utils.subprocess.run", fake_run)
        with pytest.raises(ExtractionError, match="ffmpeg exited with code 3") as excinfo:
            run_tool(["ffmpeg", "-i", "v.mp4"])
        assert excinfo.value.returncode == 3
        assert excinfo.value.stderr == "Conversion failed!\n"

    def test_missing_binary(self):
        with pytest.raises(ExtractionError, match="vid2pdf-no-such-tool not found on PATH"):
            run_tool(["vid2pdf-no-such-tool", "-version"])

    def test_timeout(self, monkeypatch: pytest.MonkeyPatch):
        def fake_run(cmd, **kwargs):
            raise subprocess.TimeoutExpired(cmd, kwargs["timeout"], stderr=b"frame=  12\n")

        monkeypatch.setattr("vid2pdf.utils.subprocess_utils.subprocess.run", fake_run)
        with pytest.raises(ExtractionError, match="ffmpeg timed out after 2.5s") as excinfo:
            run_tool(["ffmpeg", "-i", "v.mp4"], timeout=2.5)
        assert excinfo.value.stderr == "frame=  12\n"
        assert excinfo.value.returncode is None
