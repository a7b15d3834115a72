"""
Typed errors for fitlink.

Each error carries the exit code the CLI uses when it ends a run.
"""

from pathlib import Path

EXIT_FAILURE = 1
EXIT_USAGE = 2


class FitError(Exception):
    """Base error for fitlink."""

    exit_code: int = EXIT_FAILURE


class InvalidFormat(FitError, ValueError):
    """A size string could not be parsed."""

    exit_code = EXIT_USAGE

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"invalid size '{text}': {reason}")


class EmptyInput(FitError):
    def __init__(self, root: Path | None = None) -> None:
        self.root = root
        if root is None:
            super().__init__("No files to pack.")
        else:
            super().__init__(f"No files found in {root}.")


class Unpackable(FitError):
    """A single file is larger than the bucket capacity."""

    def __init__(self, entry, capacity: int) -> None:
        from fitlink.sizes import format_size

        self.entry = entry
        self.capacity = capacity
        super().__init__(
            f"Can never fit {entry.path} ({format_size(entry.size)}) "
            f"into a {format_size(capacity)} bucket."
        )


class DiscoveryFailed(FitError):
    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"unable to read {path}: {cause}")


class LinkFailed(FitError):
    """Hard-linking one file failed. Reported, never fatal to the run."""

    def __init__(self, source: Path, target: Path, cause: OSError) -> None:
        self.source = source
        self.target = target
        self.cause = cause
        super().__init__(f"unable to link {source} -> {target}: {cause}")
