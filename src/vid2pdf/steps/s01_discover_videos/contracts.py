"""I/O contracts for Step 01: Video discovery."""

from pathlib import Path
from pydantic import BaseModel, Field


class DiscoverVideosInput(BaseModel):
    root: Path = Field(..., description="Directory tree to search for videos")


class DiscoverVideosOutput(BaseModel):
    videos: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Directory path -> video filenames found directly in it, in traversal order",
    )
    video_count: int = Field(0, description="Total number of videos found")
