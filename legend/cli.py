from __future__ import annotations

import json
from functools import partial
from typing import List, Optional

import typer
from pydantic import BaseModel, ValidationError
from rich import box

try:
    import typer.rich_utils as tru
except ModuleNotFoundError:  # pragma: no cover - older Typer versions
    tru = None

from legend.config import load_env, load_settings
from legend.errors import ParseExpressionError
from legend.expression import parse
from legend.logging import get_logger, set_level
from legend.rng import RNG
from legend.roller import Options, execute

if tru is not None:  # pragma: no branch
    tru.Panel = partial(tru.Panel, box=box.ASCII)

log = get_logger(__name__)

app = typer.Typer(add_completion=False, help="Roll tabletop dice expressions such as 2d6+2!5.")


class RollRecord(BaseModel):
    expression: str
    values: List[int]
    total: int


@app.command()
def roll(
    expressions: List[str] = typer.Argument(
        ..., metavar="EXPRESSION...", help="Dice expressions: [N]dF[+M|-M][!T]"
    ),
    trance: Optional[bool] = typer.Option(
        None, "--trance/--no-trance", help="Explode on the highest face and the one below it."
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible rolls."),
    json_out: bool = typer.Option(False, "--json", help="Emit results as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every die rolled."),
):
    """Roll each EXPRESSION and print its total and breakdown."""
    load_env()
    try:
        settings = load_settings()
    except ValidationError as e:
        typer.secho(f"ERR: bad LEGEND_* setting\n{e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(2)
    set_level("DEBUG" if verbose else settings.log_level)

    parsed = []
    for text in expressions:
        try:
            parsed.append(parse(text))
        except ParseExpressionError as e:
            typer.secho(f"{text}: {e}", fg=typer.colors.RED, err=True)
            raise typer.Exit(1)

    rng = RNG(settings.seed if seed is None else seed)
    options = Options(destructive_trance=settings.trance if trance is None else trance)
    log.debug("rolling %d expression(s) with %s", len(parsed), options)
    results = [execute(expr, rng, options) for expr in parsed]

    if json_out:
        records = [
            RollRecord(expression=str(expr), values=list(result.values), total=result.total())
            for expr, result in zip(parsed, results)
        ]
        typer.echo(json.dumps([r.model_dump() for r in records], indent=2))
        return

    for text, result in zip(expressions, results):
        typer.echo(f"{text}: {result}" if len(results) > 1 else str(result))


def run() -> None:
    app(prog_name="legend")


__all__ = ["app", "run", "RollRecord"]
