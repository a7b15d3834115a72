"""
Hard-link packed buckets into numbered directories.

Each member keeps its path relative to the source root, so
``src/a/b.txt`` in bucket 2 becomes ``<destination>/002/a/b.txt``.
Nothing is ever removed or overwritten: a target that already exists is
reported as a failed link and left alone.
"""

import logging
import os
from pathlib import Path

from fitlink.bucket import Bucket, FileEntry
from fitlink.errors import LinkFailed
from fitlink.packer import PackingPlan

logger = logging.getLogger(__name__)


def target_path(entry: FileEntry, bucket: Bucket, destination: Path, source_root: Path) -> Path:
    """Where entry ends up inside bucket's directory."""
    try:
        relative = entry.path.relative_to(source_root)
    except ValueError:
        relative = Path(entry.path.name)
    return destination / bucket.name / relative


def link_file(source: Path, target: Path) -> None:
    """Hard-link source to target, creating the target's parents first."""
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        os.link(source, target)
    except OSError as e:
        raise LinkFailed(source, target, e) from e


def materialize(
    bucket: Bucket,
    destination: Path,
    source_root: Path,
    verbose: bool = False,
) -> list[LinkFailed]:
    """Link every member of bucket. Failures are logged and returned, not raised."""
    failures: list[LinkFailed] = []

    for entry in bucket.members:
        target = target_path(entry, bucket, destination, source_root)

        if verbose:
            print(f"{entry.path} -> {target}")

        try:
            link_file(entry.path, target)
        except LinkFailed as e:
            logger.warning("%s", e)
            failures.append(e)

    return failures


def materialize_plan(
    plan: PackingPlan,
    destination: Path,
    source_root: Path,
    verbose: bool = False,
) -> list[LinkFailed]:
    failures: list[LinkFailed] = []
    for bucket in plan:
        failures.extend(materialize(bucket, destination, source_root, verbose))
    return failures
