# notation.py

"""Dice-notation parser.

The input is scanned twice, independently: once for dice groups ("3d4") and
once for flat constants ("+6"). The two scans never share state, so an
expression like "+3" yields a constant even though no dice precede it, and a
bare leading number is never read as a constant.
"""

from __future__ import annotations

import re

import structlog

from Roller.errors import NotationError, NumberParseFailure, UnrecognizedDieType
from Roller.metrics import inc_counter
from Roller.rules.types import DieType, Roll

__all__ = [
    "CONSTANTS_RE",
    "DICE_RE",
    "NotationError",
    "NumberParseFailure",
    "UnrecognizedDieType",
    "parse",
]

DICE_RE = re.compile(r"(?P<count>\d+)(?P<dtype>d\d+)\+?")
CONSTANTS_RE = re.compile(r"\+(?P<const>\d+)(\+|\Z)")

# Counts and constants are signed 32-bit in the notation.
_INT_MAX = 2**31 - 1

log = structlog.get_logger()


def _to_int(field: str, text: str) -> int:
    # \d also matches non-ASCII decimal digits; only ASCII runs convert.
    if not text.isascii():
        raise NumberParseFailure(field, text)
    try:
        value = int(text)
    except ValueError:
        raise NumberParseFailure(field, text) from None
    if value > _INT_MAX:
        raise NumberParseFailure(field, text)
    return value


def parse(text: str) -> Roll:
    """Parse ``text`` into a :class:`Roll`.

    Raises UnrecognizedDieType or NumberParseFailure. Input with no dice
    groups and no constants parses to an empty roll.
    """
    log.debug("notation.parse.start", text=text)
    roll = Roll()
    try:
        for m in DICE_RE.finditer(text):
            count = _to_int("count", m.group("count"))
            die = DieType.from_token(m.group("dtype"))
            roll.dice.extend([die] * count)

        for m in CONSTANTS_RE.finditer(text):
            roll.constants.append(_to_int("const", m.group("const")))
    except NotationError as exc:
        inc_counter("notation.failed")
        log.debug("notation.parse.failed", text=text, error=str(exc))
        raise

    inc_counter("notation.parsed")
    log.debug(
        "notation.parse.result",
        dice_count=len(roll.dice),
        constants=list(roll.constants),
    )
    return roll
