"""Core service running image analysis over bytes, files and folders."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from threading import Lock

from ..analysis.engine import analyze_pixels
from ..analysis.result import AnalysisResult
from ..config import AppConfig
from ..imaging.base import AnalysisError, PixelSource
from ..imaging.pillow_source import PillowPixelSource
from ..io.report import ReportWriter, build_report
from ..utils.paths import resolve_image_paths

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, Path], None]
Clock = Callable[[], int]


def epoch_millis() -> int:
    return time.time_ns() // 1_000_000


@dataclass(slots=True)
class AnalyzerResult:
    """Outcome of processing a single image file."""

    image_path: Path
    analysis: AnalysisResult | None = None
    report_path: Path | None = None
    error_message: str | None = None


class ImageAnalyzer:
    """High-level entry point for analyzing images."""

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        pixel_source: PixelSource | None = None,
        clock: Clock = epoch_millis,
    ) -> None:
        self.config = config or AppConfig()
        self.clock = clock
        self._pixel_source = pixel_source
        self._source_lock = Lock()
        self.report_writer = ReportWriter(extension=self.config.report_extension)

    def analyze(self, data: bytes) -> AnalysisResult:
        """Analyze encoded image bytes.

        Raises
        ------
        DecodeError
            The bytes are not a decodable raster image.
        RenderError
            The image decoded but its pixels could not be extracted.
        """
        buffer = self._get_pixel_source().load(data, max_dimension=self.config.max_dimension)
        return analyze_pixels(buffer, timestamp=self.clock())

    def analyze_file(self, image_path: Path) -> AnalysisResult:
        logger.debug("Analyzing %s", image_path)
        return self.analyze(image_path.read_bytes())

    def analyze_target(
        self,
        target: Path,
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> list[AnalyzerResult]:
        """Process a single image or an entire directory tree."""
        image_paths = resolve_image_paths(
            start=target,
            recursive=self.config.recursive,
            include_hidden=self.config.include_hidden,
        )
        root = target.expanduser()
        return self.analyze_paths(
            image_paths,
            root=root if root.is_dir() else root.parent,
            progress_callback=progress_callback,
        )

    def analyze_paths(
        self,
        image_paths: Sequence[Path],
        *,
        root: Path | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> list[AnalyzerResult]:
        """Analyze ``image_paths`` on the worker pool, returning results sorted by path.

        ``root`` is the folder whose layout reports mirror inside
        ``output_directory``; it defaults to the deepest folder shared by
        every image.
        """
        if not image_paths:
            return []

        sorted_paths = sorted(set(image_paths))
        total = len(sorted_paths)
        results: list[AnalyzerResult] = []
        report_paths = self._plan_reports(sorted_paths, root)

        def _worker(path: Path) -> AnalyzerResult:
            try:
                return self._process_single(path, report_paths.get(path))
            except Exception as exc:
                logger.exception("Failed to analyze %s", path)
                return AnalyzerResult(image_path=path, error_message=str(exc))

        with ThreadPoolExecutor(max_workers=self.config.max_concurrency) as executor:
            futures = {executor.submit(_worker, path): path for path in sorted_paths}
            for index, future in enumerate(as_completed(futures), start=1):
                results.append(future.result())
                if progress_callback:
                    progress_callback(index, total, futures[future])

        results.sort(key=lambda item: item.image_path)
        return results

    def _plan_reports(self, image_paths: Sequence[Path], root: Path | None) -> dict[Path, Path]:
        if not self.config.write_reports:
            return {}
        if root is None:
            try:
                root = Path(os.path.commonpath([str(path.parent) for path in image_paths]))
            except ValueError:
                # Mixed absolute and relative paths share no common folder.
                root = None
        return self.report_writer.plan(
            image_paths,
            output_directory=self.config.output_directory,
            root=root,
        )

    def _process_single(self, image_path: Path, report_path: Path | None = None) -> AnalyzerResult:
        try:
            analysis = self.analyze_file(image_path)
        except (AnalysisError, OSError) as exc:
            logger.warning("Could not analyze %s: %s", image_path, exc)
            return AnalyzerResult(image_path=image_path, error_message=str(exc))

        if report_path is not None:
            report_path = self.report_writer.write(report_path, build_report(image_path, analysis))
        return AnalyzerResult(image_path=image_path, analysis=analysis, report_path=report_path)

    def _get_pixel_source(self) -> PixelSource:
        with self._source_lock:
            if self._pixel_source is None:
                self._pixel_source = PillowPixelSource(resample=self.config.resample)
                logger.info("Pixel source ready (resample=%s).", self.config.resample.value)
        return self._pixel_source


_default_analyzer: ImageAnalyzer | None = None
_default_lock = Lock()


def analyze_image(data: bytes) -> AnalysisResult:
    """Analyze ``data`` with a process-wide analyzer using default settings."""
    global _default_analyzer
    with _default_lock:
        if _default_analyzer is None:
            _default_analyzer = ImageAnalyzer()
    return _default_analyzer.analyze(data)
