"""Command-line front end: compute statistics for numbers given as text."""

import argparse
import json
import logging
import sys
from dataclasses import replace

from rich.console import Console
from rich.table import Table

from src.config import ConfigError, Settings, load_settings
from src.engine import (
    FIELDS,
    EmptyResult,
    StatisticsResult,
    calculate,
    is_usable,
    render,
    unusable_reason,
)
from src.stats import VarianceMode

log = logging.getLogger("numstats")
console = Console()

LABELS = {
    "mean": "Mean",
    "median": "Median",
    "mode": "Mode",
    "range": "Range",
    "variance": "Variance",
    "std_dev": "Standard deviation",
}

QUIT_COMMANDS = {":quit", ":q", ":exit"}


def build_table(outcome: StatisticsResult | EmptyResult, settings: Settings) -> Table:
    display = render(outcome, settings)

    if isinstance(outcome, EmptyResult):
        title = "Statistics (no data)"
    else:
        title = f"Statistics (n={outcome.count}, {outcome.variance_mode.value})"

    table = Table(title=title)
    table.add_column("Statistic", style="cyan", no_wrap=True)
    table.add_column("Value", justify="right")
    table.add_column("Note", style="dim")

    for name in FIELDS:
        text = display[name]
        note = ""
        if isinstance(outcome, EmptyResult):
            text = f"[dim]{text}[/dim]"
        elif name != "mode" and not is_usable(getattr(outcome, name)):
            text = f"[red]{text}[/red]"
            note = unusable_reason(outcome)
        table.add_row(LABELS[name], text, note)

    return table


def show(outcome: StatisticsResult | EmptyResult, settings: Settings, as_json: bool) -> None:
    if as_json:
        print(json.dumps(render(outcome, settings), ensure_ascii=False))
    else:
        console.print(build_table(outcome, settings))


def run_interactive(settings: Settings, as_json: bool) -> None:
    """Read one line at a time; each submitted line is one computation."""
    variance_mode = settings.variance_mode
    console.print(
        "[bold]Enter numbers separated by commas, spaces or semicolons.[/bold]\n"
        "[dim]:sample / :population switch the variance mode, :quit exits.[/dim]"
    )
    while True:
        try:
            line = console.input(f"[cyan]{variance_mode.value}>[/cyan] ")
        except EOFError:
            console.print()
            return

        command = line.strip().lower()
        if command in QUIT_COMMANDS:
            return
        if command in (":sample", ":population"):
            variance_mode = VarianceMode(command[1:])
            console.print(f"Variance mode: [bold]{variance_mode.value}[/bold]")
            continue

        show(calculate(line, variance_mode), settings, as_json)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numstats",
        description=(
            "Compute mean, median, mode, range, variance and standard deviation "
            "of the numbers in a piece of text."
        ),
        epilog="Example: %(prog)s '2, 4; 4 4 5 5 7 9' --sample",
    )
    parser.add_argument(
        "numbers",
        nargs="*",
        help="Numbers separated by commas, whitespace or semicolons (default: read stdin)",
    )
    toggle = parser.add_mutually_exclusive_group()
    toggle.add_argument(
        "--sample",
        dest="variance_mode",
        action="store_const",
        const=VarianceMode.SAMPLE,
        default=None,
        help="Use sample variance (divide by N-1)",
    )
    toggle.add_argument(
        "--population",
        dest="variance_mode",
        action="store_const",
        const=VarianceMode.POPULATION,
        help="Use population variance (divide by N); the default unless the config says otherwise",
    )
    parser.add_argument(
        "--digits",
        type=int,
        default=None,
        help="Decimal digits to round results to (default: 4)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a YAML settings file",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the display fields as a JSON object instead of a table",
    )
    parser.add_argument(
        "--interactive",
        "-i",
        action="store_true",
        default=False,
        help="Prompt for input repeatedly; each line is computed on Enter",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=False,
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )

    settings = Settings()
    if args.config:
        try:
            settings = load_settings(args.config)
        except OSError as exc:
            parser.error(f"cannot read config {args.config}: {exc}")
        except ConfigError as exc:
            parser.error(str(exc))
        log.debug("Loaded settings from %s: %s", args.config, settings)

    if args.digits is not None:
        if args.digits < 0:
            parser.error("--digits must be a non-negative integer")
        settings = replace(settings, digits=args.digits)
    if args.variance_mode is not None:
        settings = replace(settings, variance_mode=args.variance_mode)

    try:
        if args.interactive:
            run_interactive(settings, args.json)
            return

        if args.numbers:
            text = " ".join(args.numbers)
        elif not sys.stdin.isatty():
            text = sys.stdin.read()
        else:
            text = ""
        show(calculate(text, settings.variance_mode), settings, args.json)
    except KeyboardInterrupt:
        console.print("\n[bold red]Interrupted![/bold red]")
        sys.exit(130)


if __name__ == "__main__":
    main()
