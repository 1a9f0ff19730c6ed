"""vid2pdf core: base step, shared contracts, errors, logging."""

from .step_base import BaseStep
from .contracts import BatchReport, ConversionJob, ConverterConfig, JobResult, RunReport
from .errors import ExtractionError, FilesystemError, PdfAssemblyError, Vid2PdfError
from .logging import setup_logging

__all__ = [
    "BaseStep",
    "BatchReport",
    "ConversionJob",
    "ConverterConfig",
    "JobResult",
    "RunReport",
    "ExtractionError",
    "FilesystemError",
    "PdfAssemblyError",
    "Vid2PdfError",
    "setup_logging",
]
