import math
from typing import Iterable, List, Optional, Sequence

from strategy_payoff.core.config import settings
from strategy_payoff.options.errors import InvalidParameterError
from strategy_payoff.options.params import StrategyParams, require_non_negative, require_positive

# Which parameter centres the generated grid, highest priority first
REFERENCE_FIELDS = ("strike", "strike2", "strike1", "strike3", "put_strike", "stock_price")

def reference_price(params: StrategyParams) -> float:
    for name in REFERENCE_FIELDS:
        value = getattr(params, name, None)
        if value is not None and value > 0:
            return float(value)
    raise InvalidParameterError("strike", "a valid strike or stock price is required")

def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))

def spot_grid(
    reference: float,
    low: Optional[float] = None,
    high: Optional[float] = None,
    step: Optional[float] = None,
    max_points: Optional[int] = None,
) -> List[float]:
    """
    Whole-number spot prices from ``low * reference`` to ``high * reference``.

    Samples are taken every ``step`` units and rounded half-up; rounding can
    map two samples to the same price, in which case only one is kept. A range
    that would need more than ``max_points`` samples is rejected.
    """
    low = settings.spot_range_low if low is None else low
    high = settings.spot_range_high if high is None else high
    step = settings.spot_step if step is None else step
    max_points = settings.max_spot_points if max_points is None else max_points

    reference = require_positive("reference", reference)
    if step <= 0:
        raise InvalidParameterError("step", "must be > 0")
    if high < low:
        raise InvalidParameterError("high", "must be >= low")

    s_min = reference * low
    s_max = reference * high
    # Tolerance so float drift does not drop the upper end
    span = (s_max - s_min + 1e-9) / step
    count = int(math.floor(span)) + 1 if math.isfinite(span) else None
    if count is None or count > max_points:
        raise InvalidParameterError(
            "spot_prices", f"range {s_min:g}..{s_max:g} needs more than {max_points} points at step {step:g}"
        )

    out: List[float] = []
    for i in range(count):
        spot = float(_round_half_up(s_min + i * step))
        if not out or spot > out[-1]:
            out.append(spot)
    return out

def normalize_spots(spots: Iterable[float], max_points: Optional[int] = None) -> List[float]:
    max_points = settings.max_spot_points if max_points is None else max_points
    checked = [require_non_negative("spot_prices", s) for s in spots]
    if not checked:
        raise InvalidParameterError("spot_prices", "must contain at least one price")
    if len(checked) > max_points:
        raise InvalidParameterError("spot_prices", f"at most {max_points} prices are allowed, got {len(checked)}")
    return sorted(set(checked))

def resolve_spots(params: StrategyParams, spot_prices: Optional[Sequence[float]] = None) -> List[float]:
    if spot_prices is not None:
        return normalize_spots(spot_prices)
    return spot_grid(reference_price(params))
