"""Step 01: Recursively discover video files grouped by directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import ClassVar

from vid2pdf.core.errors import FilesystemError
from vid2pdf.core.step_base import BaseStep
from .config import DiscoverVideosConfig
from .contracts import DiscoverVideosInput, DiscoverVideosOutput

logger = logging.getLogger(__name__)


class DiscoverVideosStep(BaseStep[DiscoverVideosInput, DiscoverVideosOutput, DiscoverVideosConfig]):
    name: ClassVar[str] = "discover_videos"
    input_type: ClassVar = DiscoverVideosInput
    output_type: ClassVar = DiscoverVideosOutput
    config_type: ClassVar = DiscoverVideosConfig
    error_type: ClassVar = FilesystemError

    def validate_inputs(self, inputs: DiscoverVideosInput) -> bool:
        if not inputs.root.is_dir():
            logger.error(f"Video root not found: {inputs.root}")
            return False
        return True

    def run(self, inputs: DiscoverVideosInput) -> DiscoverVideosOutput:
        videos = self.discover(inputs.root)
        count = sum(len(names) for names in videos.values())
        logger.info(f"Found {count} videos in {len(videos)} directories under {inputs.root}")
        return DiscoverVideosOutput(videos=videos, video_count=count)

    def is_video(self, path: Path) -> bool:
        return path.suffix.lower() in self.config.extensions

    def discover(self, directory: Path) -> dict[str, list[str]]:
        """Depth-first walk; files of a directory are keyed before its subdirectories."""
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            raise FilesystemError(f"Cannot list {directory}: {exc}", directory) from exc

        found: dict[str, list[str]] = {}
        subdirs: list[Path] = []
        for entry in entries:
            if entry.is_dir():
                subdirs.append(entry)
            elif self.is_video(entry):
                found.setdefault(str(directory), []).append(entry.name)

        for subdir in subdirs:
            found.update(self.discover(subdir))
        return found
