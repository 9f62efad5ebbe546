# rules/dice.py

from __future__ import annotations

import random

import structlog

from Roller.metrics import inc_counter
from Roller.rules.types import DieType


class DiceRNG:
    """Call-local random source for die draws.

    With no seed, ``random.Random`` seeds itself from OS entropy, so runs are
    not reproducible. Pass a seed to replay a sequence.
    """

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)
        self._log = structlog.get_logger()

    def draw(self, die: DieType) -> int:
        outcome = self._rng.randint(1, die.sides)
        inc_counter("dice.drawn")
        self._log.debug("rules.dice.draw", die=die.token, outcome=outcome)
        return outcome
