"""Directory scanner - collects every eligible file under a root directory."""

import os
import stat
from collections import deque
from pathlib import Path, PurePosixPath
from typing import Deque, Iterable, List, Set, Tuple

from loguru import logger

from .errors import ScanError
from .models import Bundle, BundleEntry

# Not a whitelist, so new asset types (e.g. `.woff2`) are picked up automatically.
IGNORED_EXTENSIONS = frozenset({".txt", ".md", ".eot"})


def normalize_extension(ext: str) -> str:
    """Lowercase an extension and make sure it starts with a dot."""
    ext = ext.strip().lower()
    if ext and not ext.startswith("."):
        ext = "." + ext
    return ext


def is_eligible(name: str, ignored_extensions: Iterable[str] = IGNORED_EXTENSIONS) -> bool:
    """Return True if a file with this name belongs in the bundle.

    Hidden files (leading dot) are always skipped. Files without an
    extension are kept.
    """
    if name.startswith("."):
        return False
    return PurePosixPath(name).suffix.lower() not in ignored_extensions


def _list_dir(directory: Path) -> List[Path]:
    try:
        return sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise ScanError(directory, e.strerror or str(e)) from e


def _stat(path: Path) -> os.stat_result:
    try:
        return path.stat()
    except OSError as e:
        raise ScanError(path, e.strerror or str(e)) from e


def _read_file(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise ScanError(path, e.strerror or str(e)) from e


def build_bundle(root_dir: Path, ignored_extensions: Iterable[str] = IGNORED_EXTENSIONS) -> Bundle:
    """Scan ``root_dir`` and return a Bundle of all eligible files.

    Directories are visited breadth-first; entries inside one directory are
    handled in name order. Symlinked directories are followed, but each
    directory is scanned at most once. The first filesystem error aborts the scan.

    Args:
        root_dir: Directory to scan
        ignored_extensions: Extensions to leave out, compared case-insensitively

    Returns:
        Bundle with one entry per eligible file

    Raises:
        ScanError: If anything under root_dir cannot be listed, stat-ed or read
    """
    root_dir = Path(root_dir)
    ignored = frozenset(normalize_extension(ext) for ext in ignored_extensions)

    root_stat = _stat(root_dir)
    if not stat.S_ISDIR(root_stat.st_mode):
        raise ScanError(root_dir, "Not a directory")

    queue: Deque[Tuple[Path, PurePosixPath]] = deque([(root_dir, PurePosixPath())])
    visited: Set[Tuple[int, int]] = {(root_stat.st_dev, root_stat.st_ino)}
    entries: List[BundleEntry] = []

    while queue:
        directory, prefix = queue.popleft()
        logger.debug(f"Scanning directory {directory}")

        for child in _list_dir(directory):
            relative = prefix / child.name
            child_stat = _stat(child)

            if stat.S_ISDIR(child_stat.st_mode):
                key = (child_stat.st_dev, child_stat.st_ino)
                if key in visited:
                    logger.debug(f"Skipping already scanned directory {relative.as_posix()}")
                    continue
                visited.add(key)
                queue.append((child, relative))
                continue

            if not is_eligible(child.name, ignored):
                logger.debug(f"Skipping {relative.as_posix()}")
                continue

            entries.append(BundleEntry(path=relative.as_posix(), content=_read_file(child)))
            logger.debug(f"Captured {relative.as_posix()}")

    bundle = Bundle(files=entries)
    logger.info(f"Bundled {len(bundle.files)} files ({bundle.total_bytes} bytes) from {root_dir}")
    return bundle
