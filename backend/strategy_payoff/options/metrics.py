"""
Max profit / max loss values.

A metric is either a bounded dollar amount or one of two sentinels:
``UNBOUNDED`` for a theoretically unlimited outcome and ``APPROXIMATE`` for an
unbounded-equivalent outcome that is not formula-exact (synthetic stock).
The sentinels render as "Unlimited" and "Large" on the wire.
"""

from dataclasses import dataclass
from typing import Union

@dataclass(frozen=True)
class Bounded:
    value: float

    def scaled(self, multiplier: float) -> "Bounded":
        return Bounded(self.value * multiplier)

    def display(self) -> float:
        return self.value

@dataclass(frozen=True)
class Unbounded:
    def scaled(self, multiplier: float) -> "Unbounded":
        return self

    def display(self) -> str:
        return "Unlimited"

@dataclass(frozen=True)
class Approximate:
    def scaled(self, multiplier: float) -> "Approximate":
        return self

    def display(self) -> str:
        return "Large"

Metric = Union[Bounded, Unbounded, Approximate]

UNBOUNDED = Unbounded()
APPROXIMATE = Approximate()
