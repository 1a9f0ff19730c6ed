"""Create a small tree of synthetic videos for trying out the converter.

    python scripts/create_sample_tree.py [ROOT] [SECONDS]

Writes ROOT/lectures/intro.mp4, ROOT/lectures/week1/part1.avi and
ROOT/lectures/week1/part2.mp4 with a visible counter on each frame.
"""

from pathlib import Path
import sys

import cv2
import numpy as np


def create_video(
    output_path: Path,
    seconds: int = 180,
    fps: float = 5.0,
    resolution: tuple[int, int] = (320, 240),
) -> int:
    """Write a synthetic video whose frames show the elapsed second.

    Returns number of frames written.
    """
    width, height = resolution
    output_path.parent.mkdir(parents=True, exist_ok=True)
    codec = "MJPG" if output_path.suffix.lower() == ".avi" else "mp4v"
    writer = cv2.VideoWriter(str(output_path), cv2.VideoWriter_fourcc(*codec), fps, (width, height))

    n_frames = int(seconds * fps)
    gradient = np.linspace(0, 255, width, dtype=np.uint8)
    for i in range(n_frames):
        frame = np.zeros((height, width, 3), dtype=np.uint8)
        frame[:, :, 0] = gradient
        frame[:, :, 2] = (i * 7) % 256
        cv2.putText(frame, f"t={i / fps:06.1f}s", (10, height // 2),
                    cv2.FONT_HERSHEY_SIMPLEX, 1.0, (255, 255, 255), 2)
        writer.write(frame)

    writer.release()
    print(f"Created {output_path}: {n_frames} frames, {width}x{height} @ {fps}fps")
    return n_frames


if __name__ == "__main__":
    root = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("temp")
    seconds = int(sys.argv[2]) if len(sys.argv) > 2 else 180
    create_video(root / "lectures" / "intro.mp4", seconds)
    create_video(root / "lectures" / "week1" / "part1.avi", seconds)
    create_video(root / "lectures" / "week1" / "part2.mp4", seconds)
