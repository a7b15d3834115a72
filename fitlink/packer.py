"""
First-fit-decreasing bin packing of files into buckets.

Files are sorted largest first, then each one goes into the first bucket
that still has room. A new bucket is opened only when none does. This is
not guaranteed optimal, but it is deterministic and fast enough for the
thousands of files a single run deals with.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from fitlink.bucket import Bucket, FileEntry
from fitlink.errors import EmptyInput, Unpackable
from fitlink.sizes import format_size

logger = logging.getLogger(__name__)


@dataclass
class PackingPlan:
    """Buckets of one run, in creation order."""

    capacity: int
    buckets: list[Bucket] = field(default_factory=list)
    last_identifier: int = 0

    def __iter__(self) -> Iterator[Bucket]:
        return iter(self.buckets)

    def __len__(self) -> int:
        return len(self.buckets)

    @property
    def total_size(self) -> int:
        return sum(bucket.size for bucket in self.buckets)

    @property
    def file_count(self) -> int:
        return sum(len(bucket.members) for bucket in self.buckets)

    def open_bucket(self) -> Bucket:
        self.last_identifier += 1
        bucket = Bucket(identifier=self.last_identifier, capacity=self.capacity)
        self.buckets.append(bucket)
        return bucket

    def place(self, entry: FileEntry) -> Bucket:
        """Admit entry into the first bucket with room, opening one if needed."""
        for bucket in self.buckets:
            if bucket.try_admit(entry):
                return bucket

        bucket = self.open_bucket()
        if not bucket.try_admit(entry):
            raise Unpackable(entry, self.capacity)
        return bucket


def pack(files: Sequence[FileEntry], capacity: int) -> PackingPlan:
    """Assign every file to exactly one bucket of at most capacity bytes."""
    if capacity <= 0:
        raise ValueError(f"bucket capacity must be positive, got: {capacity}")

    if not files:
        raise EmptyInput()

    # sorted() is stable, so equal sizes keep their discovery order
    ordered = sorted(files, key=lambda entry: entry.size, reverse=True)

    largest = ordered[0]
    if largest.size > capacity:
        raise Unpackable(largest, capacity)

    plan = PackingPlan(capacity=capacity)
    for entry in ordered:
        plan.place(entry)

    logger.info(
        "packed %d files (%s) into %d buckets of %s",
        plan.file_count,
        format_size(plan.total_size),
        len(plan),
        format_size(capacity),
    )
    return plan
