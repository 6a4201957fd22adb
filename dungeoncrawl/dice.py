"""Dice expressions of the form ``base+NdS``."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass

_DICE_RE = re.compile(r"\s*([+-]?\d+)\+\s*([+-]?\d+)d\s*([+-]?\d+)")


@dataclass(frozen=True)
class Dice:
    """A base value plus ``num`` rolls of a ``sides``-sided die."""

    base: int
    num: int
    sides: int

    @classmethod
    def parse(cls, text: str) -> "Dice":
        """Parse text such as ``10+2d6``."""
        match = _DICE_RE.match(text)
        if match is None:
            raise ValueError(f"not a dice expression: {text!r}")
        base, num, sides = (int(g) for g in match.groups())
        return cls(base, num, sides)

    def roll(self, rng: random.Random | None = None) -> int:
        """Roll the dice and return the total."""
        source = rng if rng is not None else random
        return self.base + sum(source.randrange(self.sides) + 1 for _ in range(self.num))

    def __str__(self) -> str:
        return f"{self.base}+{self.num}d{self.sides}"