"""Command-line dice roller.

Examples:
  roller 3d4+2d8+6
  roller --crit 1d8+3
  roller --seed 7 4d6

Each die outcome is printed on its own line as it is drawn, then a ``---``
separator and the total.
"""
from __future__ import annotations

import click
import structlog

from Roller.config import Settings, load_settings
from Roller.errors import NotationError
from Roller.logging import setup_logging
from Roller.metrics import inc_counter
from Roller.rules.dice import DiceRNG
from Roller.rules.engine import evaluate
from Roller.rules.types import CRITICAL_MULTIPLIER, NORMAL_MULTIPLIER

log = structlog.get_logger()


def _load_settings_or_default() -> Settings | None:
    try:
        return load_settings()
    except Exception:
        # A broken config.toml/.env should not stop a roll; fall back to defaults.
        return None


@click.command(name="roller", help="A simple die roller.")
@click.argument("input")
@click.option("-c", "--crit", is_flag=True, default=False, help="Critical hit: double the dice.")
@click.option("--seed", type=int, default=None, help="Seed the random source for a repeatable roll.")
@click.pass_context
def main(ctx: click.Context, input: str, crit: bool, seed: int | None) -> None:
    settings = _load_settings_or_default()
    setup_logging(settings)

    if seed is None and settings is not None:
        seed = settings.rng_seed

    multiplier = NORMAL_MULTIPLIER
    if crit:
        click.echo("Critical Hit!")
        multiplier = CRITICAL_MULTIPLIER

    try:
        res = evaluate(
            input,
            multiplier,
            rng=DiceRNG(seed),
            on_outcome=lambda n: click.echo(n),
        )
    except NotationError as exc:
        inc_counter("roll.parse_failed")
        log.warning("cli.roll.failed", input=input, error=str(exc))
        click.echo(str(exc), err=True)
        ctx.exit(1)

    click.echo("---")
    click.echo(res.total)


if __name__ == "__main__":  # pragma: no cover
    main()
