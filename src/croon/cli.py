"""Command-line interface for croon."""

import logging
from datetime import datetime
from typing import Annotated, Optional

import typer

from ._display import display_next
from ._error import CronError
from ._table import assemble

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="croon",
    help="Expand a cron schedule line and find its next run",
    add_completion=False,
)


def _parse_after(value: str | None) -> datetime:
    if value is None:
        return datetime.now()
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise typer.BadParameter(f"not an ISO 8601 timestamp: {value}") from None


@app.command()
def main(
    expression: Annotated[
        str,
        typer.Argument(help="Schedule line: five fields followed by the command"),
    ],
    next_: Annotated[
        bool,
        typer.Option("--next", "-n", help="Also print the next occurrence"),
    ] = False,
    after: Annotated[
        Optional[str],
        typer.Option("--after", "-a", help="Reference instant for --next (ISO 8601, default now)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Print the values each field of EXPRESSION matches."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        table = assemble(expression)
    except CronError as e:
        logger.debug("rejected %r: %s", expression, e)
        typer.echo(e.display_rich(), err=True)
        raise typer.Exit(1)

    typer.echo(str(table))
    if next_:
        typer.echo(display_next(table.next_from(_parse_after(after))))


if __name__ == "__main__":
    app()
