"""
Split files into numbered bucket directories of hard links.

Uses first-fit-decreasing bin packing so that no bucket grows larger than
the configured capacity. The original files are never moved or modified.
"""

import logging
import sys

import typer

from fitlink.config import DEFAULTS, Config
from fitlink.discovery import collect_files
from fitlink.errors import EmptyInput, FitError, InvalidFormat
from fitlink.materialize import materialize_plan
from fitlink.packer import pack
from fitlink.report import format_plan

app = typer.Typer(
    help="Split files into hard-linked bucket directories by size.",
    add_completion=False,
)


def _plural(count: int, word: str, plural: str | None = None) -> str:
    return f"{count} {word if count == 1 else (plural or word + 's')}"


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def main(
    source_directory: str = typer.Option(
        DEFAULTS["source_directory"],
        "--source-directory",
        help="Directory to collect files from",
    ),
    link_destination: str = typer.Option(
        DEFAULTS["link_destination"],
        "--link-destination",
        help="Directory under which numbered bucket directories are created",
    ),
    bucket_capacity: str = typer.Option(
        DEFAULTS["bucket_capacity"],
        "--bucket-capacity",
        help="Size limit per bucket (e.g., 15M, 700M, 4.7G; lowercase suffixes are binary)",
    ),
    recursive: bool = typer.Option(
        DEFAULTS["recursive"], "--recursive", help="Descend into subdirectories"
    ),
    dry_run: bool = typer.Option(
        DEFAULTS["dry_run"], "--dry-run", help="Print the buckets without linking anything"
    ),
    verbose: bool = typer.Option(
        DEFAULTS["verbose"], "--verbose", help="Print every link as it is made"
    ),
) -> None:
    """
    Split files into numbered bucket directories (part/001, part/002, etc.).

    Each bucket holds hard links to the original files, keeping their paths
    relative to the source directory, and never exceeds the bucket capacity.
    """
    try:
        config = Config.build(
            source_directory=source_directory,
            link_destination=link_destination,
            bucket_capacity=bucket_capacity,
            recursive=recursive,
            dry_run=dry_run,
            verbose=verbose,
        )
    except InvalidFormat as e:
        raise typer.BadParameter(str(e), param_hint="'--bucket-capacity'") from e

    logging.basicConfig(
        level=logging.INFO if config.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s: %(message)s",
    )

    try:
        files = collect_files(
            config.source_directory,
            config.recursive,
            exclude=[config.link_destination],
        )
        if not files:
            raise EmptyInput(config.source_directory)
        plan = pack(files, config.bucket_capacity)
    except FitError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise typer.Exit(e.exit_code)

    if config.dry_run:
        print(format_plan(plan, config.link_destination))
        print(
            f"{_plural(plan.file_count, 'file')} would be linked into "
            f"{_plural(len(plan), 'directory', 'directories')}."
        )
        raise typer.Exit(0)

    failures = materialize_plan(
        plan,
        config.link_destination,
        config.source_directory,
        verbose=config.verbose,
    )

    linked = plan.file_count - len(failures)
    print(
        f"\nDone! {linked}/{_plural(plan.file_count, 'file')} linked into "
        f"{_plural(len(plan), 'directory', 'directories')}."
    )
    if failures:
        print(
            f"{_plural(len(failures), 'link')} failed, see warnings above.",
            file=sys.stderr,
        )
