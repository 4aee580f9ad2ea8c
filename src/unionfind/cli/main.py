"""Command-line interface for unionfind.

Provides CLI commands for grouping related elements.
"""

import importlib.metadata
import sys
import time
from pathlib import Path
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from unionfind.audit import AuditLogger

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("unionfind")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development


@click.group()
@click.version_option(version=__version__, prog_name="unionfind")
def cli() -> None:
    """Disjoint-set grouping of related elements.

    Use 'unionfind COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("pairs_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    required=True,
    help="Output JSONL file path",
)
@click.option(
    "--audit-log",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write JSONL audit events to this path",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def components(
    pairs_path: str,
    output: str,
    audit_log: str | None,
    verbose: bool,
) -> None:
    """Group the pairs in PAIRS_PATH into connected components.

    PAIRS_PATH is a JSONL file with one {"a": ..., "b": ...} object per
    line. Each output line describes one component.

    Examples
    --------
        unionfind components pairs.jsonl -o components.jsonl
        unionfind components pairs.jsonl -o out.jsonl --audit-log events.jsonl
    """
    from unionfind.api import group_pairs, read_pairs_jsonl, write_components_jsonl
    from unionfind.audit import AuditLogger, generate_run_id

    logger = AuditLogger(generate_run_id(), Path(audit_log)) if audit_log else None
    start = time.perf_counter()

    try:
        if logger is not None:
            logger.run_started(
                command=sys.argv,
                parameters={"pairs_path": pairs_path, "output": output},
            )

        _set_stage(logger, "read")
        if verbose:
            click.echo(f"Reading pairs: {pairs_path}", err=True)

        pairs = read_pairs_jsonl(pairs_path)
        if logger is not None:
            logger.pairs_read(pairs_path, len(pairs))

        if verbose:
            click.echo(f"Found {len(pairs)} pairs", err=True)

        _set_stage(logger, "group")
        groups = group_pairs(pairs, audit_logger=logger)
        _set_stage(logger, "write")
        count = write_components_jsonl(groups, output)
        if logger is not None:
            logger.components_written(output, count)

        _set_stage(logger, None)
        if logger is not None:
            logger.run_finished(
                status="success",
                duration_seconds=time.perf_counter() - start,
                elements_processed=sum(len(group) for group in groups),
            )

        click.secho(f"✓ Successfully wrote {count} components to {output}", fg="green")

    except Exception as e:
        if logger is not None:
            logger.error(type(e).__name__, str(e))
            logger.run_finished(status="failed", duration_seconds=time.perf_counter() - start)
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)

    finally:
        if logger is not None:
            logger.close()


def _set_stage(logger: "AuditLogger | None", stage: str | None) -> None:
    if logger is not None:
        logger.set_stage(stage)


def main() -> None:
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
