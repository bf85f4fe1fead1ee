"""CLI for the ``splitwise_csv`` package.

Exposes callable command handlers (``cmd_read``, ``cmd_validate``) and a
Typer-based console interface on top of them. Environment variables (notably
``SPLITWISE_CSV_LOG_LEVEL``) are loaded from a local ``.env`` using
``python-dotenv`` before any command runs. Parsing logic lives in
``splitwise_csv.reader`` and related modules.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from typer.models import OptionInfo

from .errors import ExpenseCSVError
from .logging_setup import configure_logging, get_logger
from .models import Entry
from .reader import read_expenses
from .serialization import dump_entries_json

_logger = get_logger("splitwise_csv.cli")


class OutputFormat(str, Enum):
    json = "json"
    summary = "summary"


def _load(csv_path: str, encoding: str) -> list[Entry] | None:
    """Read ``csv_path``, reporting failures on stderr.

    Returns ``None`` after printing an error so handlers can exit with ``1``.
    """

    try:
        return read_expenses(csv_path, encoding=encoding)
    except FileNotFoundError:
        print(f"Error: File not found: {csv_path}", file=sys.stderr)
    except PermissionError:
        print(f"Error: Permission denied: {csv_path}", file=sys.stderr)
    except ExpenseCSVError as e:
        print(f"Error: {e}", file=sys.stderr)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Failed to read '{csv_path}': {e}", file=sys.stderr)
    return None


def format_summary(entries: Sequence[Entry]) -> list[str]:
    """One tab-separated line per entry.

    Columns: date, group id, ``<cost> <currency>``, description, then
    ``<user_id>:<paid>/<owed>`` for each participant in slot order.
    """

    lines: list[str] = []
    for e in entries:
        shares = " ".join(f"{u.user_id}:{u.paid_share}/{u.owed_share}" for u in e.users)
        lines.append(
            "\t".join([e.date, e.group_id, f"{e.cost} {e.currency}", e.description, shares])
        )
    return lines


def cmd_read(
    csv_path: str,
    *,
    output_format: OutputFormat = OutputFormat.json,
    encoding: str = "utf-8",
) -> int:
    """Read ``csv_path`` and print its entries to stdout.

    ``json`` prints the full entry list as an indented JSON array; ``summary``
    prints :func:`format_summary` lines. Errors go to stderr and the handler
    returns ``1``; on success it returns ``0``.
    """

    entries = _load(csv_path, encoding)
    if entries is None:
        return 1

    if output_format is OutputFormat.summary:
        for line in format_summary(entries):
            print(line)
    else:
        print(dump_entries_json(entries))
    _logger.info("Printed %d entries from %s", len(entries), csv_path)
    return 0


def cmd_validate(csv_path: str, *, encoding: str = "utf-8") -> int:
    """Validate ``csv_path`` and print ``OK: <n> entries`` when it parses."""

    entries = _load(csv_path, encoding)
    if entries is None:
        return 1
    print(f"OK: {len(entries)} entries")
    return 0


app = typer.Typer(
    name="splitwise-csv",
    help="Read and validate shared-expense CSV exports.",
    add_completion=False,
)


# Module-level option objects to satisfy ruff B008 (no calls in parameter
# defaults).
CSV_PATH_OPTION: OptionInfo = typer.Option(
    ...,  # required
    "--csv-path",
    help="Path to an expense CSV export",
    dir_okay=False,
    file_okay=True,
    exists=False,  # missing files are reported by the handler
)

ENCODING_OPTION: OptionInfo = typer.Option(help="Text encoding of the CSV file.")

FORMAT_OPTION: OptionInfo = typer.Option(..., "--format", help="Output format: json or summary.")


@app.command("read")
def read_cmd(
    csv_path: Annotated[Path, CSV_PATH_OPTION],
    *,
    output_format: Annotated[OutputFormat, FORMAT_OPTION] = OutputFormat.json,
    encoding: Annotated[str, ENCODING_OPTION] = "utf-8",
) -> None:
    """Print the entries of an expense CSV export."""

    code = cmd_read(str(csv_path), output_format=output_format, encoding=encoding)
    raise typer.Exit(code)


@app.command("validate")
def validate_cmd(
    csv_path: Annotated[Path, CSV_PATH_OPTION],
    *,
    encoding: Annotated[str, ENCODING_OPTION] = "utf-8",
) -> None:
    """Check that an expense CSV export parses and its shares add up."""

    raise typer.Exit(cmd_validate(str(csv_path), encoding=encoding))


@app.callback(invoke_without_command=True)
def _root(ctx: typer.Context) -> None:
    """Root command.

    Loads ``.env`` from the current working directory (without overriding
    already-set environment variables) and configures package logging.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    # Central logging setup so child loggers inherit configuration
    configure_logging()

    if ctx.invoked_subcommand is None:
        typer.echo("No subcommand provided. Use --help to see available commands.")
        raise typer.Exit(1)


def main() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
