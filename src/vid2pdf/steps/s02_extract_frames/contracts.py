"""I/O contracts for Step 02: Video to Frames extraction."""

from pathlib import Path
from pydantic import BaseModel, Field


class ExtractFramesInput(BaseModel):
    video_path: Path = Field(..., description="Path to input video file")
    output_dir: Path = Field(..., description="Staging directory for numbered frames")
    frame_rate: str = Field("1/60", description="Frames per second as a fraction, e.g. 1/60")


class ExtractFramesOutput(BaseModel):
    frames_dir: Path = Field(..., description="Directory containing extracted frames")
    frame_count: int = Field(..., description="Number of frames extracted")
    frame_list: list[str] = Field(default_factory=list, description="Frame filenames in order")
    warnings: list[str] = Field(default_factory=list, description="Tolerated ffmpeg diagnostics")
