from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import typer
from rich.console import Console
from rich.table import Table

from .authentic import get_authentic_card, get_card_config
from .builder import BuildParams, CardBuilder
from .config import resolve_parameters
from .errors import LotoError
from .layout import Card
from .logging_setup import setup_logging
from .numbers import get_remaining_numbers, random_call_number
from .serialize import build_run_meta, emit_cards_json, emit_report_json, load_cards_json
from .verify import card_violations
from .verify import verify as verify_cards
from .version import __version__
from .win import check_player_win, get_closest_row

app = typer.Typer(help="Lô Tô card generator and win checker")
console = Console()
logger = logging.getLogger(__name__)


def parse_numbers(raw: str) -> List[int]:
    values: List[int] = []
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        try:
            values.append(int(item))
        except ValueError:
            raise typer.BadParameter(f"not a number: {item!r}") from None
    return values


def render_card(card: Card, title: str) -> Table:
    table = Table(title=title, show_header=False, show_lines=True)
    for _ in range(len(card[0]) if card else 0):
        table.add_column(justify="right", width=3)
    for row in card:
        table.add_row(*("" if cell is None else str(cell) for cell in row))
    return table


@app.callback(invoke_without_command=True)
def common_options(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", help="Show application version and exit", is_eager=True
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(0)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


@app.command()
def generate(
    config: str = typer.Option(None, "--config", help="Path to config file (YAML/JSON)"),
    count: int = typer.Option(None, "--count", help="Number of cards to generate"),
    seed: int = typer.Option(None, "--seed", help="Seed for reproducible cards"),
    out_cards: str = typer.Option(None, "--out-cards", help="cards.json output path"),
    out_report: str = typer.Option(None, "--out-report", help="report.json output path"),
    log_file: str = typer.Option(None, "--log-file", help="Log file path"),
    log_level: str = typer.Option(None, "--log-level", help="DEBUG|INFO|WARN|ERROR"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Resolve params and exit"),
    force: bool = typer.Option(False, "--force", help="Overwrite outputs if they exist"),
    no_mkdirs: bool = typer.Option(False, "--no-mkdirs", help="Do not create parent directories"),
) -> None:
    """Generate cards and a verification report."""
    cli_overrides = {
        "count": count,
        "seed": seed,
        "out_cards": out_cards,
        "out_report": out_report,
        "log_file": log_file,
        "log_level": log_level,
    }
    resolved, params_hash, _cfg_path = resolve_parameters(
        config_path_str=config, cli_overrides=cli_overrides
    )

    setup_logging(
        level=str(resolved.get("log_level", "INFO")),
        log_file=resolved.get("log_file"),
        json_format=(str(resolved.get("log_format", "text")) == "json"),
    )

    if dry_run:
        typer.echo(f"Params hash: {params_hash}")
        raise typer.Exit(0)

    try:
        params = BuildParams(
            count=resolved["count"],
            seed=resolved.get("seed"),
            max_attempts=resolved["max_attempts"],
        )
        result = CardBuilder(max_attempts=params.max_attempts).build(params)
    except LotoError as exc:
        logger.error("Generation failed: %s", exc)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)

    report = verify_cards(result.cards, strict=bool(resolved.get("strict", True)))
    run_meta = build_run_meta(
        app_version=__version__, params_hash=params_hash, seed=params.seed
    )

    out_cards_path = Path(resolved["out_cards"])
    out_report_path = Path(resolved["out_report"])
    emit_cards_json(
        out_cards_path,
        cards=result.cards,
        run_meta=run_meta,
        mkdirs=(not no_mkdirs),
        overwrite=force,
    )
    emit_report_json(
        out_report_path, report=report, mkdirs=(not no_mkdirs), overwrite=force
    )

    typer.echo(f"Generated {len(result.cards)} cards in {result.metrics.total_time:.3f}s")
    typer.echo(f"Average attempts per card: {result.metrics.attempts_per_card:.1f}")
    typer.echo(f"Output files: {out_cards_path}, {out_report_path}")


@app.command()
def verify(
    cards: Path = typer.Option(..., "--cards", help="Path to cards.json"),
    strict: bool = typer.Option(False, "--strict", help="Also require sorted, balanced columns"),
) -> None:
    """Validate every card in a cards.json file."""
    matrices = load_cards_json(cards)
    failures = 0
    for idx, card in enumerate(matrices):
        reasons = card_violations(card, strict=strict)
        if reasons:
            failures += 1
            typer.echo(f"card {idx}: INVALID")
            for reason in reasons:
                typer.echo(f"  - {reason}")
    typer.echo(f"{len(matrices) - failures}/{len(matrices)} cards valid")
    if failures or not matrices:
        raise typer.Exit(code=1)


@app.command()
def authentic(
    ids: Optional[List[int]] = typer.Argument(None, help="Card ids (1-16); all when omitted"),
) -> None:
    """Print printed-card layouts."""
    for card_id in ids or range(1, 17):
        card = get_authentic_card(card_id)
        config = get_card_config(card_id)
        if card is None or config is None:
            typer.echo(f"Unknown card id: {card_id}", err=True)
            raise typer.Exit(code=1)
        console.print(render_card(card, f"{config.name} ({config.color.value})"))


@app.command()
def check(
    cards: Path = typer.Option(..., "--cards", help="Path to cards.json"),
    called: str = typer.Option("", "--called", help="Comma-separated called numbers"),
) -> None:
    """Report whether a player holding these cards has a completed row."""
    matrices = load_cards_json(cards)
    called_set = frozenset(parse_numbers(called))
    result = check_player_win(matrices, called_set)
    if result is not None:
        typer.echo(json.dumps(result.to_dict()))
        return
    typer.echo("No win")
    for idx, card in enumerate(matrices):
        closest = get_closest_row(card, called_set)
        if closest is not None:
            typer.echo(
                f"card {idx}: row {closest.row_index} needs {closest.numbers_needed} more"
            )


@app.command()
def draw(
    called: str = typer.Option("", "--called", help="Comma-separated called numbers"),
    seed: int = typer.Option(None, "--seed", help="Seed for a reproducible draw"),
) -> None:
    """Draw the next number from those not yet called."""
    remaining = get_remaining_numbers(parse_numbers(called))
    number = random_call_number(remaining, seed)
    if number is None:
        typer.echo("All numbers have been called")
        raise typer.Exit(code=1)
    typer.echo(str(number))


def main(argv: Sequence[str] | None = None) -> int:
    try:
        app(args=list(argv) if argv is not None else None, standalone_mode=True)
        return 0
    except SystemExit as e:
        return int(e.code) if e.code is not None else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
