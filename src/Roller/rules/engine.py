from __future__ import annotations

from collections.abc import Callable, Iterable

import structlog

from Roller.metrics import inc_counter
from Roller.notation import parse
from Roller.rules.dice import DiceRNG
from Roller.rules.types import CRITICAL_MULTIPLIER, NORMAL_MULTIPLIER, CastResult, Roll

log = structlog.get_logger()

OutcomeCallback = Callable[[int], None]


def total_from_outcomes(outcomes: Iterable[int], constants: Iterable[int], multiplier: int) -> int:
    # Only the dice are multiplied on a critical; constants are added once.
    return sum(outcomes) * multiplier + sum(constants)


def cast(
    roll: Roll,
    multiplier: int = NORMAL_MULTIPLIER,
    *,
    rng: DiceRNG | None = None,
    on_outcome: OutcomeCallback | None = None,
) -> CastResult:
    """Draw every die in ``roll`` and total the result.

    ``on_outcome`` is called with each outcome as it is drawn, in the order
    the dice appear in the roll.
    """
    if multiplier not in (NORMAL_MULTIPLIER, CRITICAL_MULTIPLIER):
        raise ValueError(f"multiplier must be {NORMAL_MULTIPLIER} or {CRITICAL_MULTIPLIER}, got {multiplier}")
    if rng is None:
        rng = DiceRNG()

    outcomes: list[int] = []
    for die in roll.dice:
        outcome = rng.draw(die)
        outcomes.append(outcome)
        if on_outcome is not None:
            on_outcome(outcome)

    dice_total = sum(outcomes)
    constant_total = sum(roll.constants)
    out = CastResult(
        outcomes=outcomes,
        dice_total=dice_total,
        constant_total=constant_total,
        multiplier=multiplier,
        total=total_from_outcomes(outcomes, roll.constants, multiplier),
    )
    inc_counter("roll.cast")
    if out.crit:
        inc_counter("roll.crit")
    log.debug(
        "rules.engine.cast.result",
        dice_total=out.dice_total,
        constant_total=out.constant_total,
        multiplier=out.multiplier,
        total=out.total,
    )
    return out


def evaluate(
    text: str,
    multiplier: int = NORMAL_MULTIPLIER,
    *,
    rng: DiceRNG | None = None,
    on_outcome: OutcomeCallback | None = None,
) -> CastResult:
    """Parse ``text`` and cast it. Notation errors surface before any draw."""
    roll = parse(text)
    return cast(roll, multiplier, rng=rng, on_outcome=on_outcome)
