from dataclasses import dataclass
from typing import List, Sequence, Tuple

@dataclass(frozen=True)
class PayoffPoint:
    spot: float
    payoff: float

def breakevens_from_curve(curve: Sequence[PayoffPoint]) -> List[float]:
    """Zero crossings of a sampled curve, linearly interpolated between samples."""
    bes: List[float] = []
    for a in curve:
        if a.payoff == 0.0:
            bes.append(a.spot)
    for a, b in zip(curve, curve[1:]):
        ya, yb = a.payoff, b.payoff
        if ya * yb < 0:
            x0, x1 = a.spot, b.spot
            x = x0 + (-ya) * (x1 - x0) / (yb - ya)
            bes.append(x)
    bes_sorted = sorted(bes)
    out: List[float] = []
    for x in bes_sorted:
        if not out or abs(x - out[-1]) > 1e-6:
            out.append(x)
    return out

def extrema_from_curve(curve: Sequence[PayoffPoint]) -> Tuple[float, float]:
    if not curve:
        raise ValueError("curve must be non-empty")
    payoffs = [p.payoff for p in curve]
    return (max(payoffs), min(payoffs))
