"""Analysis reports written as YAML or JSON files beside (or mirroring) images."""

from __future__ import annotations

import json
import logging
from collections import Counter
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from ..analysis.result import AnalysisResult

logger = logging.getLogger(__name__)


def build_report(image_path: Path, result: AnalysisResult) -> dict[str, Any]:
    return {"image": str(image_path), "analysis": result.as_dict()}


class ReportWriter:
    """Place and serialize one report per analyzed image.

    Without an output directory a report sits next to its image. With one,
    the image's folder relative to ``root`` is recreated underneath it, so
    ``root/a/img.png`` and ``root/b/img.png`` report to ``out/a/img.yaml``
    and ``out/b/img.yaml``.
    """

    def __init__(self, *, extension: str = "yaml") -> None:
        self.extension = extension.lstrip(".") or "yaml"
        self._format = "json" if self.extension.lower() == "json" else "yaml"

    def target_path(
        self,
        image_path: Path,
        *,
        output_directory: Path | None = None,
        root: Path | None = None,
    ) -> Path:
        if output_directory is None:
            return image_path.with_name(f"{image_path.stem}.{self.extension}")

        target_dir = output_directory
        if root is not None and image_path.parent.is_relative_to(root):
            target_dir = output_directory / image_path.parent.relative_to(root)
        return target_dir / f"{image_path.stem}.{self.extension}"

    def plan(
        self,
        image_paths: Iterable[Path],
        *,
        output_directory: Path | None = None,
        root: Path | None = None,
    ) -> dict[Path, Path]:
        """Map each image to a report path that no other image in the batch shares.

        Images whose stems collide in one folder (``img.png`` and ``img.jpg``)
        keep their full file name in the report name instead.
        """
        targets = {
            path: self.target_path(path, output_directory=output_directory, root=root)
            for path in image_paths
        }
        usage = Counter(targets.values())
        for path, target in targets.items():
            if usage[target] > 1:
                targets[path] = target.with_name(f"{path.name}.{self.extension}")

        duplicates = [target for target, count in Counter(targets.values()).items() if count > 1]
        if duplicates:
            raise ValueError(
                "Reports would overwrite each other: "
                + ", ".join(str(target) for target in sorted(duplicates))
            )
        return targets

    def write(self, target_path: Path, report: dict[str, Any]) -> Path:
        target_path.parent.mkdir(parents=True, exist_ok=True)
        if self._format == "json":
            payload = json.dumps(report, indent=2, ensure_ascii=True) + "\n"
        else:
            payload = yaml.safe_dump(report, sort_keys=False, allow_unicode=False)
        target_path.write_text(payload, encoding="utf-8")
        logger.debug("Wrote report for %s to %s", report.get("image"), target_path)
        return target_path
