"""Configuration for Step 01: Video discovery."""

from pydantic import BaseModel, Field, field_validator


class DiscoverVideosConfig(BaseModel):
    extensions: list[str] = Field(
        default_factory=lambda: [".mp4", ".avi", ".mov", ".mkv"],
        description="Recognized video extensions (matched case-insensitively)",
    )

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: list[str]) -> list[str]:
        for ext in value:
            if not ext.startswith("."):
                raise ValueError(f"Extension must start with '.': {ext!r}")
        return [ext.lower() for ext in value]
