"""Command-line interface for ufset.

Provides commands to group keys from a pairs file and to print the merge
forest of a rigid union sequence.
"""

import importlib.metadata
import json
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

if TYPE_CHECKING:
    from ufset.audit import AuditLogger

__all__ = ["cli"]

try:
    __version__ = importlib.metadata.version("ufset")
except importlib.metadata.PackageNotFoundError:
    __version__ = "0.1.0"  # Fallback for development


def _sort_key(key: object) -> tuple[str, str]:
    return (type(key).__name__, str(key))


def _emit(payload: Any, output: str | None) -> None:
    text = json.dumps(payload, ensure_ascii=False, indent=2)
    if output is None:
        click.echo(text)
        return
    with Path(output).open("w", encoding="utf-8", newline="\n") as f:
        f.write(text + "\n")


def _open_logger(stack: ExitStack, log: str | None) -> "AuditLogger | None":
    from ufset.audit import AuditLogger, generate_run_id

    if log is None:
        return None
    return stack.enter_context(AuditLogger(run_id=generate_run_id(), log_path=Path(log)))


@click.group()
@click.version_option(version=__version__, prog_name="ufset")
def cli() -> None:
    """Disjoint-set (union-find) grouping of keys.

    Use 'ufset COMMAND --help' for command-specific help.
    """


@cli.command()
@click.argument("pairs_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--rigid",
    is_flag=True,
    help="Disable path compression and union by rank",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    default=None,
    help="Output JSON file path (default: stdout)",
)
@click.option(
    "--log",
    type=click.Path(),
    default=None,
    help="Append JSONL audit events to this file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
def components(
    pairs_file: str,
    rigid: bool,
    output: str | None,
    log: str | None,
    verbose: bool,
) -> None:
    """Group the keys of PAIRS_FILE into disjoint sets.

    PAIRS_FILE is a JSONL file with one ["key_a", "key_b"] pair per line.
    Prints a JSON list of groups, each sorted, largest first.

    Examples
    --------
        ufset components pairs.jsonl
        ufset components pairs.jsonl -o groups.json --log events.jsonl
    """
    from ufset import DisjointSets
    from ufset.io import apply_pairs, load_pairs

    with ExitStack() as stack:
        logger = _open_logger(stack, log)
        try:
            pairs = load_pairs(pairs_file)
            if logger is not None:
                logger.pairs_loaded(path=pairs_file, pair_count=len(pairs))

            sets = DisjointSets.rigid(logger) if rigid else DisjointSets.standard(logger)
            apply_pairs(sets, pairs)

            groups = [sorted(group, key=_sort_key) for group in sets.get_components()]
            groups.sort(key=lambda g: (-len(g), _sort_key(g[0])))

            if verbose:
                click.echo(f"Mode: {sets.config.mode}", err=True)
                click.echo(f"Pairs: {len(pairs)}", err=True)
                click.echo(f"Keys: {len(sets)}", err=True)
                click.echo(f"Groups: {len(groups)}", err=True)

            _emit(groups, output)

        except Exception as e:
            if logger is not None:
                logger.error(type(e).__name__, str(e))
            click.secho(f"Error: {e}", fg="red", err=True)
            sys.exit(1)

    if output is not None:
        click.secho(f"✓ Wrote {len(groups)} groups to {output}", fg="green")


@cli.command()
@click.argument("pairs_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(),
    default=None,
    help="Output JSON file path (default: stdout)",
)
@click.option(
    "--log",
    type=click.Path(),
    default=None,
    help="Append JSONL audit events to this file",
)
def tree(
    pairs_file: str,
    output: str | None,
    log: str | None,
) -> None:
    """Print the merge forest of PAIRS_FILE.

    Pairs are unioned in file order on a rigid container, so each merged
    group hangs under the first key of the pair that merged it.

    Examples
    --------
        ufset tree pairs.jsonl
        ufset tree pairs.jsonl -o forest.json
    """
    from ufset import DisjointSets, forest_to_dicts, get_tree
    from ufset.io import apply_pairs, load_pairs

    with ExitStack() as stack:
        logger = _open_logger(stack, log)
        try:
            pairs = load_pairs(pairs_file)
            if logger is not None:
                logger.pairs_loaded(path=pairs_file, pair_count=len(pairs))

            sets = DisjointSets.rigid(logger)
            apply_pairs(sets, pairs)
            forest = get_tree(sets)
            _emit(forest_to_dicts(forest), output)

        except Exception as e:
            if logger is not None:
                logger.error(type(e).__name__, str(e))
            click.secho(f"Error: {e}", fg="red", err=True)
            sys.exit(1)

    if output is not None:
        click.secho(f"✓ Wrote {len(forest)} trees to {output}", fg="green")


if __name__ == "__main__":
    cli()
