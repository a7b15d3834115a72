"""Dry-run rendering of a packing plan."""

from pathlib import Path

from fitlink.bucket import Bucket, FileEntry
from fitlink.packer import PackingPlan
from fitlink.sizes import format_size


def format_entry(entry: FileEntry) -> str:
    return f"{format_size(entry.size):>8} {entry.path}"


def format_bucket(bucket: Bucket, destination: Path) -> str:
    """Render a bucket as a dash-bordered header followed by its files."""
    header = (
        f'Bucket "{destination / bucket.name}": '
        f"{format_size(bucket.size)}/{format_size(bucket.capacity)} "
        f"({bucket.percent}%)."
    )
    rule = "-" * len(header)
    lines = [rule, header, rule]
    lines.extend(format_entry(entry) for entry in bucket.members)
    return "\n".join(lines) + "\n"


def format_plan(plan: PackingPlan, destination: Path) -> str:
    return "\n".join(format_bucket(bucket, destination) for bucket in plan)
