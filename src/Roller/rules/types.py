from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from Roller.errors import UnrecognizedDieType

NORMAL_MULTIPLIER = 1
CRITICAL_MULTIPLIER = 2


class DieType(Enum):
    """Supported polyhedral dice; the value is the number of sides."""

    D4 = 4
    D6 = 6
    D8 = 8
    D10 = 10
    D12 = 12
    D20 = 20
    D100 = 100

    @property
    def sides(self) -> int:
        return self.value

    @property
    def token(self) -> str:
        return f"d{self.value}"

    @classmethod
    def from_token(cls, token: str) -> DieType:
        """Map a notation token such as "d20" to its die.

        Only the exact lowercase tokens are recognized; "d04" or "D6" are not.
        """
        try:
            return _BY_TOKEN[token]
        except KeyError:
            raise UnrecognizedDieType(token) from None


_BY_TOKEN: dict[str, DieType] = {d.token: d for d in DieType}


@dataclass
class Roll:
    dice: list[DieType] = field(default_factory=list)
    constants: list[int] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.dice and not self.constants


@dataclass(frozen=True)
class CastResult:
    outcomes: list[int]
    dice_total: int
    constant_total: int
    multiplier: int
    total: int

    @property
    def crit(self) -> bool:
        return self.multiplier == CRITICAL_MULTIPLIER
