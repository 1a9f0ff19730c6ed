"""Step 02: Sample frames from a video with ffmpeg."""

from __future__ import annotations

import logging
from typing import ClassVar

from vid2pdf.core.errors import ExtractionError
from vid2pdf.core.step_base import BaseStep
from vid2pdf.utils.io import list_files
from vid2pdf.utils.subprocess_utils import run_tool
from ._diagnostics import Verdict, classify_diagnostics
from .config import ExtractFramesConfig
from .contracts import ExtractFramesInput, ExtractFramesOutput

logger = logging.getLogger(__name__)


class ExtractFramesStep(BaseStep[ExtractFramesInput, ExtractFramesOutput, ExtractFramesConfig]):
    name: ClassVar[str] = "extract_frames"
    input_type: ClassVar = ExtractFramesInput
    output_type: ClassVar = ExtractFramesOutput
    config_type: ClassVar = ExtractFramesConfig
    error_type: ClassVar = ExtractionError

    def validate_inputs(self, inputs: ExtractFramesInput) -> bool:
        if not inputs.video_path.is_file():
            logger.error(f"Video not found: {inputs.video_path}")
            return False
        if not inputs.output_dir.is_dir():
            logger.error(f"Frame directory not found: {inputs.output_dir}")
            return False
        return True

    def build_command(self, inputs: ExtractFramesInput) -> list[str]:
        pattern = inputs.output_dir / f"%0{self.config.frame_digits}d.{self.config.output_format}"
        return [
            self.config.ffmpeg_bin,
            "-nostdin",
            "-i", str(inputs.video_path),
            "-vf", f"fps={inputs.frame_rate}",
            str(pattern),
        ]

    def run(self, inputs: ExtractFramesInput) -> ExtractFramesOutput:
        cmd = self.build_command(inputs)
        result = run_tool(cmd, timeout=self.config.timeout)
        warnings = self._check_diagnostics(inputs, result.stderr or "")

        frames = list_files(inputs.output_dir, (f".{self.config.output_format}",))
        logger.info(f"Extracted {len(frames)} frames from {inputs.video_path}")
        return ExtractFramesOutput(
            frames_dir=inputs.output_dir,
            frame_count=len(frames),
            frame_list=[f.name for f in frames],
            warnings=warnings,
        )

    def _check_diagnostics(self, inputs: ExtractFramesInput, stderr: str) -> list[str]:
        verdict, line = classify_diagnostics(stderr)
        if verdict is Verdict.FATAL or (verdict is Verdict.UNKNOWN and self.config.strict_diagnostics):
            logger.error(f"ffmpeg reported on {inputs.video_path}: {line}")
            raise ExtractionError(
                f"ffmpeg reported an error on {inputs.video_path}: {line}",
                returncode=0,
                stderr=stderr,
            )
        if verdict is Verdict.UNKNOWN:
            logger.warning(f"Unrecognized ffmpeg output on {inputs.video_path}: {line}")
            return [line]
        return []
