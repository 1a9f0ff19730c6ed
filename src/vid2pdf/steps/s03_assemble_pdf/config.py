"""Configuration for Step 03: Frames to PDF."""

from pydantic import BaseModel, Field


class AssemblePdfConfig(BaseModel):
    image_extensions: list[str] = Field(
        default_factory=lambda: [".png", ".jpg", ".jpeg"],
        description="Files in the staging directory that become pages",
    )
    title: str | None = Field(None, description="PDF title metadata (None = video name)")
