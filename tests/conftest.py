"""Shared pytest fixtures for vid2pdf tests."""

from __future__ import annotations

import subprocess
import threading
import time
from pathlib import Path

import cv2
import numpy as np
import pytest

from vid2pdf.core.contracts import ConverterConfig
from vid2pdf.core.errors import ExtractionError

BENIGN_STDERR = (
    "ffmpeg version 6.1 Copyright (c) 2000-2023 the FFmpeg developers\n"
    "frame=    3 fps=0.0 q=-0.0 Lsize=N/A time=00:03:00.00 bitrate=N/A speed= 900x\n"
    "video:12kB audio:0kB subtitle:0kB other streams:0kB global headers:0kB muxing overhead: unknown\n"
)

# What ffmpeg 7 prints (exit code 0) when the fps filter emits no frame at all.
ZERO_FRAME_STDERR = (
    "ffmpeg version 7.0.2 Copyright (c) 2000-2024 the FFmpeg developers\n"
    "[out#0/image2 @ 0x5581] video:0KiB audio:0KiB subtitle:0KiB other streams:0KiB "
    "global headers:0KiB muxing overhead: unknown\n"
    "[out#0/image2 @ 0x5581] Output file is empty, nothing was encoded"
    "(check -ss / -t / -frames parameters if used)\n"
    "frame=    0 fps=0.0 q=0.0 Lsize=N/A time=N/A bitrate=N/A speed=N/A\n"
)


def write_frame(path: Path, size: tuple[int, int] = (64, 48), value: int = 128) -> Path:
    """Write a solid-colour PNG of ``size`` (width, height)."""
    width, height = size
    img = np.full((height, width, 3), value, dtype=np.uint8)
    path.parent.mkdir(parents=True, exist_ok=True)
    cv2.imwrite(str(path), img)
    return path


def write_frames(directory: Path, count: int, size: tuple[int, int] = (64, 48)) -> list[Path]:
    return [write_frame(directory / f"{i:010d}.png", size, value=(i * 40) % 256)
            for i in range(1, count + 1)]


def make_video(path: Path) -> Path:
    """Placeholder video file; the fake ffmpeg never decodes it."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"\x00\x00\x00\x18ftypmp42")
    return path


class FakeFfmpeg:
    """Stand-in for ``run_tool`` that writes numbered frames like ffmpeg."""

    def __init__(self, frames: int = 3, size: tuple[int, int] = (64, 48), delay: float = 0.0):
        self.frames = frames
        self.size = size
        self.delay = delay
        self.fail: set[str] = set()
        self.stderr = BENIGN_STDERR
        self.calls: list[list[str]] = []
        self.events: list[tuple[str, str]] = []
        self.max_active = 0
        self._active = 0
        self._lock = threading.Lock()

    def __call__(self, cmd, timeout=None):
        video = Path(cmd[cmd.index("-i") + 1])
        pattern = Path(cmd[-1])
        with self._lock:
            self.calls.append(cmd)
            self.events.append(("start", video.name))
            self._active += 1
            self.max_active = max(self.max_active, self._active)
        try:
            if self.delay:
                time.sleep(self.delay)
            if video.name in self.fail:
                raise ExtractionError(
                    "ffmpeg exited with code 1",
                    returncode=1,
                    stderr=f"{video}: Invalid data found when processing input\n",
                )
            for i in range(1, self.frames + 1):
                write_frame(pattern.parent / (pattern.name % i), self.size)
            return subprocess.CompletedProcess(cmd, 0, "", self.stderr)
        finally:
            with self._lock:
                self._active -= 1
                self.events.append(("end", video.name))


@pytest.fixture
def fake_ffmpeg(monkeypatch: pytest.MonkeyPatch) -> FakeFfmpeg:
    fake = FakeFfmpeg()
    monkeypatch.setattr("vid2pdf.steps.s02_extract_frames.step.run_tool", fake)
    return fake


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory so relative roots (temp, images, pdfs) stay isolated."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def config(workspace: Path) -> ConverterConfig:
    return ConverterConfig(chunk_size=2)
