"""Discovery of image files Pillow is able to open."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator

from PIL import Image


@lru_cache(maxsize=1)
def decodable_extensions() -> frozenset[str]:
    """Extensions registered by the installed Pillow plugins that can be opened."""
    Image.init()
    return frozenset(
        ext.lower() for ext, fmt in Image.registered_extensions().items() if fmt in Image.OPEN
    )


def is_image_file(path: Path, *, extensions: Iterable[str] | None = None) -> bool:
    allowed = {ext.lower() for ext in extensions} if extensions else decodable_extensions()
    return path.suffix.lower() in allowed


def resolve_image_paths(
    start: Path,
    *,
    recursive: bool = True,
    include_hidden: bool = False,
    extensions: Iterable[str] | None = None,
) -> list[Path]:
    """Collect analyzable images from a file or directory, sorted by path.

    Parameters
    ----------
    start:
        File or directory to inspect.
    recursive:
        Descend into sub-directories.
    include_hidden:
        Keep dot-files, files inside dot-directories below ``start`` and
        entries flagged hidden by the OS.
    extensions:
        Optional whitelist overriding the Pillow-derived defaults.
    """
    start = start.expanduser()
    if not start.exists():
        raise FileNotFoundError(start)

    allowed = list(extensions) if extensions is not None else None
    root = start if start.is_dir() else start.parent

    def accept(path: Path) -> bool:
        if not is_image_file(path, extensions=allowed):
            return False
        if include_hidden:
            return True
        return not _is_hidden(path) and not _in_hidden_directory(path, root)

    if start.is_file():
        return [start] if accept(start) else []

    candidates: Iterator[Path] = start.rglob("*") if recursive else start.iterdir()
    return sorted(path for path in candidates if path.is_file() and accept(path))


def _is_hidden(path: Path) -> bool:
    if path.name.startswith("."):
        return True
    try:
        import ctypes

        attrs = ctypes.windll.kernel32.GetFileAttributesW(str(path))
    except (AttributeError, ImportError, OSError):
        return False
    return attrs != -1 and bool(attrs & 2)  # FILE_ATTRIBUTE_HIDDEN


def _in_hidden_directory(path: Path, root: Path) -> bool:
    """True when any directory between ``root`` and ``path`` is hidden."""
    ancestor = root
    for part in path.parent.relative_to(root).parts:
        ancestor = ancestor / part
        if _is_hidden(ancestor):
            return True
    return False
