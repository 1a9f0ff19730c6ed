"""I/O contracts for Step 03: Frames to PDF assembly."""

from pathlib import Path
from pydantic import BaseModel, Field


class PageGeometry(BaseModel):
    """Pixel size of the first frame, applied to every page."""

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)


class AssemblePdfInput(BaseModel):
    images_dir: Path = Field(..., description="Directory holding the ordered frame images")
    pdf_path: Path = Field(..., description="Destination PDF file")


class AssemblePdfOutput(BaseModel):
    pdf_path: Path | None = Field(None, description="Written PDF, None when there were no frames")
    page_count: int = Field(0, description="Number of pages written")
    geometry: PageGeometry | None = Field(None, description="Page size used for every page")
