"""Common Pydantic models shared across the conversion pipeline."""

from __future__ import annotations

from fractions import Fraction
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from vid2pdf.steps.s01_discover_videos.config import DiscoverVideosConfig
from vid2pdf.steps.s02_extract_frames.config import ExtractFramesConfig
from vid2pdf.steps.s03_assemble_pdf.config import AssemblePdfConfig


class ConverterConfig(BaseModel):
    """Top-level configuration loaded from vid2pdf.yaml."""

    source_root: Path = Field(Path("temp"), description="Directory tree holding the videos")
    staging_root: Path = Field(Path("images"), description="Temporary frame images root")
    output_root: Path = Field(Path("pdfs"), description="Generated PDFs root")
    sample_rate: str = Field("1/60", description="Frames per second as a fraction")
    chunk_size: int = Field(20, ge=1, description="Videos converted concurrently per chunk")
    remove_source_dirs: bool = Field(
        True, description="Remove each source directory once all its videos converted"
    )
    discover: DiscoverVideosConfig = Field(default_factory=DiscoverVideosConfig)
    extract: ExtractFramesConfig = Field(default_factory=ExtractFramesConfig)
    assemble: AssemblePdfConfig = Field(default_factory=AssemblePdfConfig)

    @field_validator("sample_rate", mode="before")
    @classmethod
    def _check_sample_rate(cls, value: object) -> str:
        text = str(value).strip()
        try:
            rate = Fraction(text)
        except (ValueError, ZeroDivisionError) as exc:
            raise ValueError(f"sample_rate must be a fraction like 1/60, got {value!r}") from exc
        if rate <= 0:
            raise ValueError(f"sample_rate must be positive, got {value!r}")
        return text


class ConversionJob(BaseModel):
    """Paths for converting one video."""

    video_path: Path
    images_dir: Path
    pdf_path: Path
    frame_rate: str = "1/60"


class JobResult(BaseModel):
    video_path: Path
    pdf_path: Path | None = None
    success: bool = False
    page_count: int = 0
    error: str | None = None
    cleanup_errors: list[str] = Field(default_factory=list)
    elapsed_seconds: float = 0.0


class BatchReport(BaseModel):
    """Outcome of every video in one source directory."""

    directory: Path
    results: list[JobResult] = Field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.success)


class RunReport(BaseModel):
    batches: list[BatchReport] = Field(default_factory=list)
    removed_dirs: list[Path] = Field(default_factory=list)
    kept_dirs: list[Path] = Field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(b.succeeded for b in self.batches)

    @property
    def failed(self) -> int:
        return sum(b.failed for b in self.batches)
