"""Configuration for Step 02: Video to Frames."""

from pydantic import BaseModel, Field


class ExtractFramesConfig(BaseModel):
    ffmpeg_bin: str = Field("ffmpeg", description="ffmpeg executable name or path")
    frame_digits: int = Field(10, ge=1, description="Zero-padded width of frame numbers")
    output_format: str = Field("png", description="Frame image format")
    strict_diagnostics: bool = Field(
        True, description="Treat unrecognized ffmpeg stderr output as a failure"
    )
    timeout: float | None = Field(None, description="Seconds before ffmpeg is killed (None = wait)")
