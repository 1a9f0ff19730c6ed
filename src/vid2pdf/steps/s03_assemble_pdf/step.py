"""Step 03: Paginate extracted frames into a single PDF."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import ClassVar

import cv2
from reportlab.pdfgen import canvas

from vid2pdf.core.errors import PdfAssemblyError
from vid2pdf.core.step_base import BaseStep
from vid2pdf.utils.io import list_files
from .config import AssemblePdfConfig
from .contracts import AssemblePdfInput, AssemblePdfOutput, PageGeometry

logger = logging.getLogger(__name__)


def read_geometry(image_path: Path) -> PageGeometry:
    """Read the pixel size of one frame."""
    img = cv2.imread(str(image_path), cv2.IMREAD_UNCHANGED)
    if img is None:
        raise PdfAssemblyError(f"Cannot read image {image_path}")
    h, w = img.shape[:2]
    return PageGeometry(width=w, height=h)


class AssemblePdfStep(BaseStep[AssemblePdfInput, AssemblePdfOutput, AssemblePdfConfig]):
    name: ClassVar[str] = "assemble_pdf"
    input_type: ClassVar = AssemblePdfInput
    output_type: ClassVar = AssemblePdfOutput
    config_type: ClassVar = AssemblePdfConfig
    error_type: ClassVar = PdfAssemblyError

    def validate_inputs(self, inputs: AssemblePdfInput) -> bool:
        if not inputs.images_dir.is_dir():
            logger.error(f"Frame directory not found: {inputs.images_dir}")
            return False
        return True

    def run(self, inputs: AssemblePdfInput) -> AssemblePdfOutput:
        suffixes = tuple(ext.lower() for ext in self.config.image_extensions)
        images = list_files(inputs.images_dir, suffixes)
        if not images:
            logger.info(f"PDF not generated, no frames in {inputs.images_dir}")
            return AssemblePdfOutput()

        geometry = read_geometry(images[0])
        page_size = (geometry.width, geometry.height)

        # Pages are only emitted by showPage(), so no blank first page exists.
        c = canvas.Canvas(str(inputs.pdf_path), pagesize=page_size)
        c.setTitle(self.config.title or inputs.pdf_path.stem)
        try:
            for image in images:
                c.setPageSize(page_size)
                c.drawImage(str(image), 0, 0, width=geometry.width, height=geometry.height)
                c.showPage()
            c.save()
        except OSError as exc:
            raise PdfAssemblyError(f"Cannot write PDF {inputs.pdf_path}: {exc}") from exc

        logger.info(
            f"PDF generated: {inputs.pdf_path} "
            f"({len(images)} pages, {geometry.width}x{geometry.height})"
        )
        return AssemblePdfOutput(
            pdf_path=inputs.pdf_path,
            page_count=len(images),
            geometry=geometry,
        )
