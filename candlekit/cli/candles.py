"""Candle file commands for the candlekit CLI.

Loads candle files, reports validation failures and displays filtered
candles with their direction.
"""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from candlekit.config import create_template_config, get_config_path, load_settings
from candlekit.errors import CandleFormatError
from candlekit.models import Candle, Direction
from candlekit.series import FilterOptions, filter_candles
from candlekit.validation import validate as validate_candle

console = Console()

DIRECTION_STYLES = {
    Direction.BULLISH: ("▲ Bullish", "green"),
    Direction.BEARISH: ("▼ Bearish", "red"),
    Direction.NEUTRAL: ("- Neutral", "dim"),
}


def _load_or_exit(path: Path) -> list[Candle]:
    """Load candles, printing an error panel and exiting on failure."""
    from candlekit.loader import load_candles

    try:
        return load_candles(path)
    except (CandleFormatError, OSError) as e:
        console.print(Panel(
            f"[red]Failed to read candles:[/red]\n\n{escape(str(e))}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)


def collect_violations(candles: list[Candle]) -> list[tuple[int, Candle, list[str]]]:
    """Validate candles and return (row, candle, errors) for invalid ones.

    Rows are 1-based to match the file.
    """
    violations = []
    for row, candle in enumerate(candles, start=1):
        result = validate_candle(candle)
        if not result.ok:
            violations.append((row, candle, result.errors))
    return violations


def select_candles(
    candles: list[Candle],
    after: Optional[int] = None,
    before: Optional[int] = None,
) -> list[Candle]:
    """Drop invalid candles, then keep those within the inclusive bounds."""
    valid = [candle for candle in candles if validate_candle(candle).ok]
    options = FilterOptions(exclude_before=after, exclude_after=before)
    return filter_candles(valid, options)


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate(file: Path) -> None:
    """Validate every candle in FILE.

    FILE is a .csv or .json file with timestamp, open, high, low, close
    and optional volume columns. Exits with status 1 if any row is invalid.

    \b
    Examples:
      candlekit validate candles.csv
      candlekit validate candles.json
    """
    settings = load_settings()
    candles = _load_or_exit(file)
    violations = collect_violations(candles)

    if not violations:
        console.print(f"[green]✓ All {len(candles)} candles are valid[/green]")
        return

    table = Table(
        title=f"{file.name} - {len(violations)} invalid of {len(candles)} candles",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Row", justify="right", style="dim")
    table.add_column("Timestamp", justify="right")
    table.add_column("Violations", style="red")

    for row, candle, errors in violations[:settings.max_rows]:
        table.add_row(str(row), str(candle.timestamp), "\n".join(errors))

    console.print(table)

    if len(violations) > settings.max_rows:
        console.print(f"[dim]Showing first {settings.max_rows} of {len(violations)} invalid rows[/dim]")

    raise SystemExit(1)


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "-a", "--after",
    type=click.IntRange(min=0),
    default=None,
    help="Keep candles with timestamp >= this value",
)
@click.option(
    "-b", "--before",
    type=click.IntRange(min=0),
    default=None,
    help="Keep candles with timestamp <= this value",
)
@click.option(
    "-n", "--limit",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum rows to display (default: from config, 20)",
)
def show(file: Path, after: Optional[int], before: Optional[int], limit: Optional[int]) -> None:
    """Display valid candles from FILE within a timestamp range.

    Invalid candles are skipped. Bounds are inclusive and default to the
    [filter] section of the config file.

    \b
    Examples:
      candlekit show candles.csv
      candlekit show candles.csv --after 1625097600000
      candlekit show candles.csv -a 1000 -b 4000 -n 5
    """
    settings = load_settings()
    if after is None:
        after = settings.exclude_before
    if before is None:
        before = settings.exclude_after
    limit = limit or settings.max_rows

    candles = _load_or_exit(file)
    selected = select_candles(candles, after=after, before=before)

    if not selected:
        console.print(Panel(
            "[yellow]No valid candles in the requested range[/yellow]",
            title="[bold yellow]No Data[/bold yellow]",
            border_style="yellow",
        ))
        return

    table = Table(
        title=f"{file.name} ({len(selected)} candles)",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Timestamp", style="dim")
    table.add_column("Open", justify="right")
    table.add_column("High", justify="right", style="green")
    table.add_column("Low", justify="right", style="red")
    table.add_column("Close", justify="right")
    table.add_column("Volume", justify="right", style="dim")
    table.add_column("Direction")

    p = settings.precision
    for candle in selected[:limit]:
        label, style = DIRECTION_STYLES[candle.direction()]
        volume = f"{candle.volume:,.{p}f}" if candle.volume is not None else "-"
        table.add_row(
            str(candle.timestamp),
            f"{candle.open:.{p}f}",
            f"{candle.high:.{p}f}",
            f"{candle.low:.{p}f}",
            f"{candle.close:.{p}f}",
            volume,
            f"[{style}]{label}[/{style}]",
        )

    console.print(table)

    if len(selected) > limit:
        console.print(f"[dim]Showing first {limit} of {len(selected)} candles[/dim]")


@click.command()
def config() -> None:
    """Show the config file path, creating a template if missing."""
    config_path = get_config_path()

    if config_path.exists():
        console.print(f"Config file: [cyan]{config_path}[/cyan]")
        return

    create_template_config(config_path)
    console.print(Panel(
        f"Created template config at [cyan]{config_path}[/cyan]\n\n"
        "[dim]Edit display.max_rows, display.precision and the optional "
        "filter.exclude_before / filter.exclude_after bounds.[/dim]",
        title="[bold green]Config Created[/bold green]",
        border_style="green",
    ))
