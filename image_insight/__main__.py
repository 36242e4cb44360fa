"""Command line entry point for the Image Insight project."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from . import AppConfig, ImageAnalyzer, SettingsStore
from .imaging.pillow_source import ResampleFilter


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Image Insight")
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        required=True,
        help="Image file or directory to analyze.",
    )
    parser.add_argument(
        "--max-dimension",
        type=int,
        help="Override the longest side of the analysis buffer.",
    )
    parser.add_argument(
        "--resample",
        choices=[item.value for item in ResampleFilter],
        help="Override the filter used when downsampling.",
    )
    parser.add_argument(
        "--write-reports",
        action="store_true",
        help="Write a report file next to each analyzed image.",
    )
    parser.add_argument(
        "--report-format",
        choices=["yaml", "json"],
        help="Format of the written reports.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity written to stderr.",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = SettingsStore()
    config = store.load()

    overrides: dict[str, object] = {}
    if args.max_dimension is not None:
        overrides["max_dimension"] = args.max_dimension
    if args.resample:
        overrides["resample"] = args.resample
    if args.write_reports:
        overrides["write_reports"] = True
    if args.report_format:
        overrides["report_extension"] = args.report_format
    if overrides:
        try:
            config = AppConfig.model_validate({**config.model_dump(), **overrides})
        except ValueError as exc:
            parser.error(str(exc))

    analyzer = ImageAnalyzer(config)
    try:
        results = analyzer.analyze_target(args.input)
    except FileNotFoundError:
        parser.error(f"Input path does not exist: {args.input}")
    except ValueError as exc:
        parser.error(str(exc))

    output = [
        {
            "path": str(result.image_path),
            "analysis": result.analysis.as_dict() if result.analysis else None,
            "report_path": str(result.report_path) if result.report_path else None,
            "error": result.error_message,
        }
        for result in results
    ]

    json.dump(output, sys.stdout, indent=2)
    sys.stdout.write("\n")


if __name__ == "__main__":  # pragma: no cover
    main()
