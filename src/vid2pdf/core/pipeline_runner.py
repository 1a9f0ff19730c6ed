"""Conversion orchestrator: discovers videos and converts them directory by directory."""

from __future__ import annotations

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path

import yaml

from vid2pdf.steps.s01_discover_videos.contracts import DiscoverVideosInput
from vid2pdf.steps.s01_discover_videos.step import DiscoverVideosStep
from vid2pdf.steps.s02_extract_frames.contracts import ExtractFramesInput
from vid2pdf.steps.s02_extract_frames.step import ExtractFramesStep
from vid2pdf.steps.s03_assemble_pdf.contracts import AssemblePdfInput
from vid2pdf.steps.s03_assemble_pdf.step import AssemblePdfStep
from vid2pdf.utils.io import ensure_dir, prune_empty_parents, remove_tree
from .contracts import BatchReport, ConversionJob, ConverterConfig, JobResult, RunReport
from .errors import FilesystemError, Vid2PdfError

logger = logging.getLogger(__name__)

BANNER = "-" * 84


def load_config(config_path: Path | None) -> ConverterConfig:
    """Load and validate vid2pdf.yaml. A missing file yields the defaults."""
    if config_path is None or not config_path.exists():
        if config_path is not None:
            logger.info(f"Config {config_path} not found, using defaults")
        return ConverterConfig()
    with open(config_path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return ConverterConfig(**raw)


def relative_dir(directory: Path, source_root: Path) -> Path:
    """Path of ``directory`` below the source root, e.g. temp/b/sub -> b/sub."""
    return Path(directory).relative_to(source_root)


def build_job(directory: Path, video_name: str, config: ConverterConfig) -> ConversionJob:
    """Derive staging and output paths for one video, creating their directories.

    A staging directory left behind by an earlier run is cleared first so its
    frames never end up in the new PDF.
    """
    rel = relative_dir(directory, config.source_root)
    stem = Path(video_name).stem
    images_dir = config.staging_root / rel / stem
    if remove_tree(images_dir):
        logger.warning(f"Cleared stale staging directory {images_dir}")
    ensure_dir(images_dir)
    pdf_dir = ensure_dir(config.output_root / rel)
    return ConversionJob(
        video_path=Path(directory) / video_name,
        images_dir=images_dir,
        pdf_path=pdf_dir / f"{stem}.pdf",
        frame_rate=config.sample_rate,
    )


def cleanup_job(job: ConversionJob) -> list[str]:
    """Delete the source video and staging directory; report failures instead of raising."""
    errors = []
    for path in (job.video_path, job.images_dir):
        try:
            remove_tree(path)
        except FilesystemError as exc:
            logger.warning(f"Cleanup failed: {exc}")
            errors.append(str(exc))
    return errors


def convert_video(
    job: ConversionJob,
    extractor: ExtractFramesStep,
    assembler: AssemblePdfStep,
) -> JobResult:
    """Extract frames, assemble the PDF, then clean up.

    Extraction and assembly errors propagate to the caller.
    """
    t0 = time.time()
    extractor.execute(
        ExtractFramesInput(
            video_path=job.video_path,
            output_dir=job.images_dir,
            frame_rate=job.frame_rate,
        )
    )
    pdf = assembler.execute(AssemblePdfInput(images_dir=job.images_dir, pdf_path=job.pdf_path))
    cleanup_errors = cleanup_job(job)
    return JobResult(
        video_path=job.video_path,
        pdf_path=pdf.pdf_path,
        success=True,
        page_count=pdf.page_count,
        cleanup_errors=cleanup_errors,
        elapsed_seconds=time.time() - t0,
    )


def chunked(items: list[str], size: int) -> list[list[str]]:
    return [items[i:i + size] for i in range(0, len(items), size)]


def run_batch(
    directory: Path,
    video_names: list[str],
    config: ConverterConfig,
    extractor: ExtractFramesStep | None = None,
    assembler: AssemblePdfStep | None = None,
) -> BatchReport:
    """Convert one directory's videos, ``chunk_size`` at a time.

    Each chunk runs concurrently and the next chunk starts only after every
    job of the current one has settled. Never raises for a single video.
    """
    extractor = extractor or ExtractFramesStep(config.extract)
    assembler = assembler or AssemblePdfStep(config.assemble)
    report = BatchReport(directory=Path(directory))

    for chunk in chunked(video_names, config.chunk_size):
        # One entry per video in input order: a pending Future, or the setup error.
        outcomes: list[tuple[Path, Future | Exception]] = []
        with ThreadPoolExecutor(max_workers=len(chunk), thread_name_prefix="vid2pdf") as pool:
            for video_name in chunk:
                video_path = Path(directory) / video_name
                try:
                    job = build_job(Path(directory), video_name, config)
                except (Vid2PdfError, ValueError) as exc:
                    outcomes.append((video_path, exc))
                    continue
                logger.info(f"Started extracting images for video: {video_path}")
                outcomes.append((video_path, pool.submit(convert_video, job, extractor, assembler)))

        # Leaving the pool's context waits for the whole chunk.
        for video_path, outcome in outcomes:
            error = outcome if isinstance(outcome, Exception) else outcome.exception()
            if error is None:
                report.results.append(outcome.result())
            else:
                report.results.append(_failed(video_path, error))

    return report


def _failed(video_path: Path, error: BaseException) -> JobResult:
    logger.error(f"Error occurred while converting {video_path} to PDF: {error}")
    return JobResult(video_path=video_path, error=str(error))


def _has_pending_below(directory: Path, pending: list[Path]) -> bool:
    return any(directory in p.parents for p in pending)


def remove_source_dir(directory: Path, config: ConverterConfig) -> list[Path]:
    """Remove a converted source directory and any ancestors left empty.

    Leftover non-video files inside the directory are removed with it.
    """
    remove_tree(directory)
    logger.info(f"Removed source directory {directory}")
    return [directory] + prune_empty_parents(directory, config.source_root)


def _flush_removals(
    deferred: list[Path],
    pending: list[Path],
    report: RunReport,
    config: ConverterConfig,
) -> None:
    # Parents are converted before their subdirectories, so a directory is
    # only removed once nothing below it is still waiting for conversion.
    for candidate in list(reversed(deferred)):
        if _has_pending_below(candidate, pending):
            continue
        deferred.remove(candidate)
        if not candidate.exists():
            # Already pruned as an empty parent.
            continue
        if any(candidate in kept.parents for kept in report.kept_dirs):
            logger.warning(f"Keeping {candidate}: it contains failed conversions")
            report.kept_dirs.append(candidate)
        else:
            report.removed_dirs.extend(remove_source_dir(candidate, config))


def run_conversion(config: ConverterConfig) -> RunReport:
    """Convert every video under ``config.source_root`` into a PDF.

    The staging root is removed on every exit path.
    """
    report = RunReport()
    try:
        discovery = DiscoverVideosStep(config.discover).execute(
            DiscoverVideosInput(root=config.source_root)
        )
        if not discovery.videos:
            logger.info(f"No video files found in {config.source_root} folder")
            return report

        extractor = ExtractFramesStep(config.extract)
        assembler = AssemblePdfStep(config.assemble)
        pending = [Path(d) for d in discovery.videos]
        deferred: list[Path] = []

        for dir_key, video_names in discovery.videos.items():
            directory = Path(dir_key)
            logger.info(BANNER)
            logger.info(f"Started converting videos to PDFs for {directory}")
            logger.info(BANNER)

            batch = run_batch(directory, video_names, config, extractor, assembler)
            report.batches.append(batch)
            pending.remove(directory)

            if config.remove_source_dirs:
                if batch.failed:
                    logger.warning(
                        f"Keeping {directory}: {batch.failed} of {len(video_names)} videos failed"
                    )
                    report.kept_dirs.append(directory)
                else:
                    deferred.append(directory)
                _flush_removals(deferred, pending, report, config)

            logger.info(BANNER)
            logger.info(
                f"Completed converting videos to PDFs for {directory} "
                f"({batch.succeeded} succeeded, {batch.failed} failed)"
            )
            logger.info(BANNER)
    finally:
        # Must not replace an error already propagating out of the run.
        try:
            remove_tree(config.staging_root)
        except FilesystemError as exc:
            logger.error(f"Could not remove staging root: {exc}")

    return report
