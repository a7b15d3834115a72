"""Run configuration, built and validated in one pass."""

from dataclasses import dataclass
from pathlib import Path

from fitlink.errors import InvalidFormat
from fitlink.sizes import parse_size

DEFAULTS = {
    "source_directory": ".",
    "link_destination": "part",
    "bucket_capacity": "15M",
    "recursive": False,
    "dry_run": False,
    "verbose": False,
}


def _path_or_default(value: str | Path | None, key: str) -> Path:
    if value is None or str(value) == "":
        return Path(DEFAULTS[key])
    return Path(value)


@dataclass(frozen=True)
class Config:
    source_directory: Path
    link_destination: Path
    bucket_capacity: int
    recursive: bool = False
    dry_run: bool = False
    verbose: bool = False

    @classmethod
    def build(
        cls,
        source_directory: str | Path | None = None,
        link_destination: str | Path | None = None,
        bucket_capacity: str | None = None,
        recursive: bool = DEFAULTS["recursive"],
        dry_run: bool = DEFAULTS["dry_run"],
        verbose: bool = DEFAULTS["verbose"],
    ) -> "Config":
        """
        Turn raw option values into a Config.

        Missing or empty paths and capacity fall back to DEFAULTS. The
        capacity is parsed with parse_size() and must be positive.
        """
        capacity_text = bucket_capacity or DEFAULTS["bucket_capacity"]
        capacity = parse_size(capacity_text)
        if capacity <= 0:
            raise InvalidFormat(capacity_text, "bucket capacity must be positive")

        return cls(
            source_directory=_path_or_default(source_directory, "source_directory"),
            link_destination=_path_or_default(link_destination, "link_destination"),
            bucket_capacity=capacity,
            recursive=recursive,
            dry_run=dry_run,
            verbose=verbose,
        )
