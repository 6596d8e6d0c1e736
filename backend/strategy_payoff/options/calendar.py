"""
Calendar spread approximation.

A calendar spread (buy the far-dated option, sell the near-dated one at the
same strike) has no closed-form payoff from intrinsic values alone, because
at the near expiry the far option still carries time value. This module uses
a smooth bell-shaped model instead of pricing the far option:

* at the strike the far option keeps ``FAR_LEG_RETENTION`` of its premium
  (far tenor assumed twice the near tenor, time value ~ sqrt(time)), giving a
  per-share peak of ``FAR_LEG_RETENTION * premium1 - net_debit``;
* away from the strike the P&L decays along a Gaussian of width
  ``WIDTH_PCT * strike`` towards the floor ``-|net_debit|``, which it never
  crosses.

The summary metrics are estimates of this model, not exact values.
"""

import math
from dataclasses import dataclass
from typing import Tuple

FAR_LEG_RETENTION = math.sqrt(0.5)
WIDTH_PCT = 0.05

@dataclass(frozen=True)
class CalendarModel:
    strike: float
    net_debit: float
    peak: float
    floor: float
    width: float

    def payoff(self, spot: float) -> float:
        z = (spot - self.strike) / self.width
        return self.floor + (self.peak - self.floor) * math.exp(-0.5 * z * z)

    def breakevens(self) -> Tuple[float, float]:
        # No crossing with a zero floor or a peak that never clears zero
        if self.floor >= 0 or self.peak <= 0:
            return (self.strike, self.strike)
        half_width = self.width * math.sqrt(2.0 * math.log((self.peak - self.floor) / -self.floor))
        return (self.strike - half_width, self.strike + half_width)

def calendar_model(strike: float, premium1: float, premium2: float) -> CalendarModel:
    net_debit = premium1 - premium2
    floor = -abs(net_debit)
    peak = max(FAR_LEG_RETENTION * premium1 - net_debit, floor)
    return CalendarModel(strike=strike, net_debit=net_debit, peak=peak, floor=floor, width=WIDTH_PCT * strike)
