"""Fixtures for E2E conversion tests against a real ffmpeg."""

from __future__ import annotations

import shutil
from pathlib import Path

import cv2
import numpy as np
import pytest

needs_ffmpeg = pytest.mark.skipif(shutil.which("ffmpeg") is None, reason="ffmpeg not installed")


def create_synthetic_video(
    output_path: Path,
    seconds: int = 130,
    fps: float = 2.0,
    resolution: tuple[int, int] = (160, 120),
) -> Path:
    """
    Create a synthetic test video with a gradient and a frame counter.

    Args:
        output_path: Where to write the video
        seconds: Duration of the video
        fps: Frames per second
        resolution: Video resolution as (width, height)

    Returns:
        Path to the created video file
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    width, height = resolution
    fourcc = cv2.VideoWriter_fourcc(*"mp4v")
    writer = cv2.VideoWriter(str(output_path), fourcc, fps, (width, height))

    gradient = np.linspace(0, 255, width, dtype=np.uint8)
    for i in range(int(seconds * fps)):
        frame = np.zeros((height, width, 3), dtype=np.uint8)
        frame[:, :, 0] = gradient
        cv2.putText(frame, f"F:{i:03d}", (10, 30), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)
        writer.write(frame)

    writer.release()
    return output_path


@pytest.fixture
def video_tree(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """temp/a/v1.mp4 and temp/b/sub/v2.mp4, 130 s each, inside a fresh working directory."""
    monkeypatch.chdir(tmp_path)
    create_synthetic_video(tmp_path / "temp" / "a" / "v1.mp4")
    create_synthetic_video(tmp_path / "temp" / "b" / "sub" / "v2.mp4")
    return tmp_path
