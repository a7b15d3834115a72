"""Collect the regular files under a source directory."""

import logging
from pathlib import Path
from typing import Iterable

from fitlink.bucket import FileEntry
from fitlink.errors import DiscoveryFailed

logger = logging.getLogger(__name__)


def collect_files(
    root: Path,
    recursive: bool = False,
    exclude: Iterable[Path] = (),
) -> list[FileEntry]:
    """
    Return every regular file directly under root, or under all of its
    subdirectories when recursive is set.

    Entries are visited in name order so repeated runs see the same list.
    Symbolic links are skipped, as is anything that is neither a regular
    file nor a directory. Directories listed in exclude (typically the
    link destination) are never descended into. Sizes are read once, here.
    """
    excluded = {path.resolve() for path in exclude}
    files: list[FileEntry] = []
    _collect(root, recursive, excluded, files)
    logger.debug("discovered %d files under %s", len(files), root)
    return files


def _collect(
    directory: Path,
    recursive: bool,
    excluded: set[Path],
    files: list[FileEntry],
) -> None:
    try:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError as e:
        raise DiscoveryFailed(directory, e) from e

    for entry in entries:
        try:
            if entry.is_symlink():
                continue
            if entry.is_dir():
                if recursive and entry.resolve() not in excluded:
                    _collect(entry, recursive, excluded, files)
                elif recursive:
                    logger.info("skipping %s", entry)
                continue
            if entry.is_file():
                files.append(FileEntry(path=entry, size=entry.stat().st_size))
        except OSError as e:
            raise DiscoveryFailed(entry, e) from e
