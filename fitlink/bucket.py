"""Files and the capacity-bounded buckets they are packed into."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class FileEntry:
    path: Path
    size: int


@dataclass
class Bucket:
    """
    A group of files destined for one numbered output directory.

    The running size never exceeds the capacity: try_admit() is the only
    way in, and it refuses files that would overflow.
    """

    identifier: int
    capacity: int
    size: int = 0
    members: list[FileEntry] = field(default_factory=list)

    @property
    def name(self) -> str:
        """Directory name for this bucket (001, 002, ...)."""
        return f"{self.identifier:03d}"

    @property
    def free(self) -> int:
        return self.capacity - self.size

    @property
    def percent(self) -> int:
        return self.size * 100 // self.capacity

    def try_admit(self, entry: FileEntry) -> bool:
        if self.size + entry.size > self.capacity:
            return False
        self.members.append(entry)
        self.size += entry.size
        return True
