"""
Payoff calculators for named options strategies.

Each strategy is registered once in ``STRATEGIES`` with:

* the parameter structure it accepts,
* a per-share payoff at one spot price, built only from ``call_leg_payoff``
  and ``put_leg_payoff`` (plus a stock leg or netted premium where the
  strategy has one),
* per-share summary metrics (max profit, max loss, breakeven),
* an optional strike-order check run before anything is computed.

``calculate`` is the single entry point: it looks the strategy up, validates
the parameters, samples the payoff over the spot prices and scales every
dollar amount by ``lots * lot_size``. Breakevens stay per-share prices.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Type, Union

from strategy_payoff.options.calendar import calendar_model
from strategy_payoff.options.curve import PayoffPoint
from strategy_payoff.options.errors import InvalidParameterError, StrikeOrderError, UnknownStrategyError
from strategy_payoff.options.legs import call_leg_payoff, put_leg_payoff, stock_payoff
from strategy_payoff.options.metrics import APPROXIMATE, UNBOUNDED, Bounded, Metric
from strategy_payoff.options.params import (
    ButterflyParams,
    CondorParams,
    SameStrikeParams,
    SingleLegParams,
    StockHedgeParams,
    StrangleParams,
    StrategyParams,
    VerticalParams,
)
from strategy_payoff.options.spot_grid import resolve_spots

logger = logging.getLogger(__name__)

Breakeven = Union[float, Tuple[float, float]]

@dataclass(frozen=True)
class Metrics:
    max_profit: Metric
    max_loss: Metric
    breakeven: Breakeven

@dataclass(frozen=True)
class PayoffResult:
    strategy: str
    payoff_curve: Tuple[PayoffPoint, ...]
    max_profit: Metric
    max_loss: Metric
    breakeven: Breakeven
    approximate: bool = False

    @property
    def breakevens(self) -> List[float]:
        if isinstance(self.breakeven, tuple):
            return list(self.breakeven)
        return [self.breakeven]

@dataclass(frozen=True)
class Strategy:
    id: str
    name: str
    description: str
    params_type: Type[StrategyParams]
    payoff: Callable[[Any, float], float]
    metrics: Callable[[Any], Metrics]
    check: Optional[Callable[[Any], None]] = None
    approximate: bool = False

def _metrics(max_profit: Union[float, Metric], max_loss: Union[float, Metric], breakeven: Breakeven) -> Metrics:
    if isinstance(max_profit, (int, float)):
        max_profit = Bounded(float(max_profit))
    if isinstance(max_loss, (int, float)):
        max_loss = Bounded(float(max_loss))
    return Metrics(max_profit=max_profit, max_loss=max_loss, breakeven=breakeven)

def _ascending(strategy_id: str, *named: Tuple[str, float]) -> None:
    for (name_a, a), (name_b, b) in zip(named, named[1:]):
        if not a < b:
            raise StrikeOrderError(strategy_id, f"{name_a} ({a:g}) must be below {name_b} ({b:g})")

# -- single legs ------------------------------------------------------------

def _long_call(p: SingleLegParams, s: float) -> float:
    return call_leg_payoff(s, p.strike, p.premium)

def _long_call_metrics(p: SingleLegParams) -> Metrics:
    return _metrics(UNBOUNDED, -p.premium, p.strike + p.premium)

def _long_put(p: SingleLegParams, s: float) -> float:
    return put_leg_payoff(s, p.strike, p.premium)

def _long_put_metrics(p: SingleLegParams) -> Metrics:
    return _metrics(p.strike - p.premium, -p.premium, p.strike - p.premium)

def _short_call(p: SingleLegParams, s: float) -> float:
    return -call_leg_payoff(s, p.strike, p.premium)

def _short_call_metrics(p: SingleLegParams) -> Metrics:
    return _metrics(p.premium, UNBOUNDED, p.strike + p.premium)

def _short_put(p: SingleLegParams, s: float) -> float:
    return -put_leg_payoff(s, p.strike, p.premium)

def _short_put_metrics(p: SingleLegParams) -> Metrics:
    # Worst case is the underlying going to zero
    return _metrics(p.premium, -(p.strike - p.premium), p.strike - p.premium)

# -- verticals --------------------------------------------------------------
# strike1/premium1 is always the leg the spread is named after: the long call
# of a bull call, the short put of a bull put, and so on.

def _bull_call(p: VerticalParams, s: float) -> float:
    return call_leg_payoff(s, p.strike1, p.premium1) - call_leg_payoff(s, p.strike2, p.premium2)

def _bull_call_metrics(p: VerticalParams) -> Metrics:
    debit = p.premium1 - p.premium2
    return _metrics((p.strike2 - p.strike1) - debit, -debit, p.strike1 + debit)

def _bull_call_check(p: VerticalParams) -> None:
    _ascending("bull-call-spread", ("strike1 (long call)", p.strike1), ("strike2 (short call)", p.strike2))

def _bull_put(p: VerticalParams, s: float) -> float:
    return -put_leg_payoff(s, p.strike1, p.premium1) + put_leg_payoff(s, p.strike2, p.premium2)

def _bull_put_metrics(p: VerticalParams) -> Metrics:
    credit = p.premium1 - p.premium2
    return _metrics(credit, -((p.strike1 - p.strike2) - credit), p.strike1 - credit)

def _bull_put_check(p: VerticalParams) -> None:
    _ascending("bull-put-spread", ("strike2 (long put)", p.strike2), ("strike1 (short put)", p.strike1))

def _bear_call(p: VerticalParams, s: float) -> float:
    return -call_leg_payoff(s, p.strike1, p.premium1) + call_leg_payoff(s, p.strike2, p.premium2)

def _bear_call_metrics(p: VerticalParams) -> Metrics:
    credit = p.premium1 - p.premium2
    return _metrics(credit, -((p.strike2 - p.strike1) - credit), p.strike1 + credit)

def _bear_call_check(p: VerticalParams) -> None:
    _ascending("bear-call-spread", ("strike1 (short call)", p.strike1), ("strike2 (long call)", p.strike2))

def _bear_put(p: VerticalParams, s: float) -> float:
    return put_leg_payoff(s, p.strike1, p.premium1) - put_leg_payoff(s, p.strike2, p.premium2)

def _bear_put_metrics(p: VerticalParams) -> Metrics:
    debit = p.premium1 - p.premium2
    return _metrics((p.strike1 - p.strike2) - debit, -debit, p.strike1 - debit)

def _bear_put_check(p: VerticalParams) -> None:
    _ascending("bear-put-spread", ("strike2 (short put)", p.strike2), ("strike1 (long put)", p.strike1))

# -- synthetics and stock hedges ---------------------------------------------

def _synthetic_long(p: SameStrikeParams, s: float) -> float:
    return call_leg_payoff(s, p.strike, p.premium1) - put_leg_payoff(s, p.strike, p.premium2)

def _synthetic_long_metrics(p: SameStrikeParams) -> Metrics:
    return _metrics(UNBOUNDED, APPROXIMATE, p.strike + (p.premium1 - p.premium2))

def _synthetic_short(p: SameStrikeParams, s: float) -> float:
    return put_leg_payoff(s, p.strike, p.premium1) - call_leg_payoff(s, p.strike, p.premium2)

def _synthetic_short_metrics(p: SameStrikeParams) -> Metrics:
    return _metrics(APPROXIMATE, UNBOUNDED, p.strike - (p.premium1 - p.premium2))

def _protective_put(p: StockHedgeParams, s: float) -> float:
    return stock_payoff(s, p.stock_price, "long") + put_leg_payoff(s, p.strike, p.premium)

def _protective_put_metrics(p: StockHedgeParams) -> Metrics:
    return _metrics(UNBOUNDED, -((p.stock_price - p.strike) + p.premium), p.stock_price + p.premium)

def _protective_call(p: StockHedgeParams, s: float) -> float:
    return stock_payoff(s, p.stock_price, "short") + call_leg_payoff(s, p.strike, p.premium)

def _protective_call_metrics(p: StockHedgeParams) -> Metrics:
    return _metrics(p.stock_price - p.premium, -((p.strike - p.stock_price) + p.premium), p.stock_price - p.premium)

# -- straddles and strangles -------------------------------------------------

def _long_straddle(p: SameStrikeParams, s: float) -> float:
    return call_leg_payoff(s, p.strike, p.premium1) + put_leg_payoff(s, p.strike, p.premium2)

def _long_straddle_metrics(p: SameStrikeParams) -> Metrics:
    total = p.premium1 + p.premium2
    return _metrics(UNBOUNDED, -total, (p.strike - total, p.strike + total))

def _short_straddle(p: SameStrikeParams, s: float) -> float:
    return -call_leg_payoff(s, p.strike, p.premium1) - put_leg_payoff(s, p.strike, p.premium2)

def _short_straddle_metrics(p: SameStrikeParams) -> Metrics:
    total = p.premium1 + p.premium2
    return _metrics(total, UNBOUNDED, (p.strike - total, p.strike + total))

def _long_strangle(p: StrangleParams, s: float) -> float:
    return put_leg_payoff(s, p.put_strike, p.put_premium) + call_leg_payoff(s, p.call_strike, p.call_premium)

def _long_strangle_metrics(p: StrangleParams) -> Metrics:
    total = p.put_premium + p.call_premium
    return _metrics(UNBOUNDED, -total, (p.put_strike - total, p.call_strike + total))

def _short_strangle(p: StrangleParams, s: float) -> float:
    return -put_leg_payoff(s, p.put_strike, p.put_premium) - call_leg_payoff(s, p.call_strike, p.call_premium)

def _short_strangle_metrics(p: StrangleParams) -> Metrics:
    total = p.put_premium + p.call_premium
    return _metrics(total, UNBOUNDED, (p.put_strike - total, p.call_strike + total))

def _strangle_check(strategy_id: str) -> Callable[[StrangleParams], None]:
    def check(p: StrangleParams) -> None:
        _ascending(strategy_id, ("put_strike", p.put_strike), ("call_strike", p.call_strike))
    return check

# -- condors and butterflies -------------------------------------------------
# Premiums arrive netted, so the legs are evaluated at zero premium and the
# net credit (or debit) is added once.

def _iron_condor(p: CondorParams, s: float) -> float:
    return (
        put_leg_payoff(s, p.strike1, 0.0)
        - put_leg_payoff(s, p.strike2, 0.0)
        - call_leg_payoff(s, p.strike3, 0.0)
        + call_leg_payoff(s, p.strike4, 0.0)
        + p.net_premium
    )

def _iron_condor_metrics(p: CondorParams) -> Metrics:
    credit = p.net_premium
    wing = max(p.strike2 - p.strike1, p.strike4 - p.strike3)
    return _metrics(credit, -(wing - credit), (p.strike2 - credit, p.strike3 + credit))

def _iron_condor_check(p: CondorParams) -> None:
    _ascending(
        "iron-condor",
        ("strike1 (long put)", p.strike1),
        ("strike2 (short put)", p.strike2),
        ("strike3 (short call)", p.strike3),
        ("strike4 (long call)", p.strike4),
    )

def _iron_butterfly(p: ButterflyParams, s: float) -> float:
    return (
        put_leg_payoff(s, p.strike1, 0.0)
        - put_leg_payoff(s, p.strike2, 0.0)
        - call_leg_payoff(s, p.strike2, 0.0)
        + call_leg_payoff(s, p.strike3, 0.0)
        + p.net_premium
    )

def _iron_butterfly_metrics(p: ButterflyParams) -> Metrics:
    credit = p.net_premium
    wing = max(p.strike2 - p.strike1, p.strike3 - p.strike2)
    return _metrics(credit, -(wing - credit), (p.strike2 - credit, p.strike2 + credit))

def _iron_butterfly_check(p: ButterflyParams) -> None:
    _ascending(
        "iron-butterfly",
        ("strike1 (long put)", p.strike1),
        ("strike2 (short straddle)", p.strike2),
        ("strike3 (long call)", p.strike3),
    )

def _call_butterfly(p: ButterflyParams, s: float) -> float:
    return (
        call_leg_payoff(s, p.strike1, 0.0)
        - 2.0 * call_leg_payoff(s, p.strike2, 0.0)
        + call_leg_payoff(s, p.strike3, 0.0)
        - p.net_premium
    )

def _call_butterfly_metrics(p: ButterflyParams) -> Metrics:
    debit = p.net_premium
    return _metrics((p.strike2 - p.strike1) - debit, -debit, (p.strike1 + debit, p.strike3 - debit))

def _call_butterfly_check(p: ButterflyParams) -> None:
    _ascending(
        "call-butterfly",
        ("strike1 (lower wing)", p.strike1),
        ("strike2 (body)", p.strike2),
        ("strike3 (upper wing)", p.strike3),
    )
    lower, upper = p.strike2 - p.strike1, p.strike3 - p.strike2
    if abs(lower - upper) > 1e-9:
        raise StrikeOrderError("call-butterfly", f"wings must be equal, got {lower:g} and {upper:g}")

# -- calendar ---------------------------------------------------------------

def _calendar(p: SameStrikeParams, s: float) -> float:
    return calendar_model(p.strike, p.premium1, p.premium2).payoff(s)

def _calendar_metrics(p: SameStrikeParams) -> Metrics:
    model = calendar_model(p.strike, p.premium1, p.premium2)
    return _metrics(model.peak, model.floor, model.breakevens())

STRATEGIES: Dict[str, Strategy] = {
    s.id: s
    for s in [
        Strategy("long-call", "Long Call", "Buy one call.", SingleLegParams, _long_call, _long_call_metrics),
        Strategy("long-put", "Long Put", "Buy one put.", SingleLegParams, _long_put, _long_put_metrics),
        Strategy("short-call", "Short Call", "Sell one call.", SingleLegParams, _short_call, _short_call_metrics),
        Strategy("short-put", "Short Put", "Sell one put.", SingleLegParams, _short_put, _short_put_metrics),
        Strategy(
            "bull-call-spread", "Bull Call Spread",
            "Long call at strike1, short call at the higher strike2 (debit).",
            VerticalParams, _bull_call, _bull_call_metrics, _bull_call_check,
        ),
        Strategy(
            "bull-put-spread", "Bull Put Spread",
            "Short put at strike1, long put at the lower strike2 (credit).",
            VerticalParams, _bull_put, _bull_put_metrics, _bull_put_check,
        ),
        Strategy(
            "bear-call-spread", "Bear Call Spread",
            "Short call at strike1, long call at the higher strike2 (credit).",
            VerticalParams, _bear_call, _bear_call_metrics, _bear_call_check,
        ),
        Strategy(
            "bear-put-spread", "Bear Put Spread",
            "Long put at strike1, short put at the lower strike2 (debit).",
            VerticalParams, _bear_put, _bear_put_metrics, _bear_put_check,
        ),
        Strategy(
            "synthetic-long-stock", "Synthetic Long Stock",
            "Long call (premium1) and short put (premium2) at one strike.",
            SameStrikeParams, _synthetic_long, _synthetic_long_metrics,
        ),
        Strategy(
            "synthetic-short-stock", "Synthetic Short Stock",
            "Long put (premium1) and short call (premium2) at one strike.",
            SameStrikeParams, _synthetic_short, _synthetic_short_metrics,
        ),
        Strategy(
            "protective-put", "Protective Put",
            "Long stock bought at stock_price plus a long put.",
            StockHedgeParams, _protective_put, _protective_put_metrics,
        ),
        Strategy(
            "protective-call", "Protective Call",
            "Short stock sold at stock_price plus a long call.",
            StockHedgeParams, _protective_call, _protective_call_metrics,
        ),
        Strategy(
            "long-straddle", "Long Straddle",
            "Long call (premium1) and long put (premium2) at one strike.",
            SameStrikeParams, _long_straddle, _long_straddle_metrics,
        ),
        Strategy(
            "short-straddle", "Short Straddle",
            "Short call (premium1) and short put (premium2) at one strike.",
            SameStrikeParams, _short_straddle, _short_straddle_metrics,
        ),
        Strategy(
            "long-strangle", "Long Strangle",
            "Long put below long call.",
            StrangleParams, _long_strangle, _long_strangle_metrics, _strangle_check("long-strangle"),
        ),
        Strategy(
            "short-strangle", "Short Strangle",
            "Short put below short call.",
            StrangleParams, _short_strangle, _short_strangle_metrics, _strangle_check("short-strangle"),
        ),
        Strategy(
            "iron-condor", "Iron Condor",
            "Long put < short put < short call < long call, for a net credit.",
            CondorParams, _iron_condor, _iron_condor_metrics, _iron_condor_check,
        ),
        Strategy(
            "iron-butterfly", "Iron Butterfly",
            "Long put < short put and short call at the body < long call, for a net credit.",
            ButterflyParams, _iron_butterfly, _iron_butterfly_metrics, _iron_butterfly_check,
        ),
        Strategy(
            "call-butterfly", "Call Butterfly",
            "Long call, two short calls at the body, long call; equal wings, for a net debit.",
            ButterflyParams, _call_butterfly, _call_butterfly_metrics, _call_butterfly_check,
        ),
        Strategy(
            "calendar-spread", "Calendar Spread",
            "Long far-dated option (premium1), short near-dated option (premium2) at one strike. "
            "Approximate model, see strategy_payoff.options.calendar.",
            SameStrikeParams, _calendar, _calendar_metrics, approximate=True,
        ),
    ]
}

def get_strategy(strategy_id: str) -> Strategy:
    strategy = STRATEGIES.get(strategy_id)
    if strategy is None:
        raise UnknownStrategyError(strategy_id)
    return strategy

def _checked(strategy_id: str, params: StrategyParams) -> Strategy:
    strategy = get_strategy(strategy_id)
    if not isinstance(params, strategy.params_type):
        raise InvalidParameterError(
            "params", f"{strategy_id} expects {strategy.params_type.__name__}, got {type(params).__name__}"
        )
    params.validate()
    if strategy.check is not None:
        strategy.check(params)
    return strategy

def payoff_at(strategy_id: str, params: StrategyParams, spot: float) -> float:
    """Total P&L of the position at a single spot price."""
    strategy = _checked(strategy_id, params)
    return strategy.payoff(params, spot) * params.multiplier

def calculate(
    strategy_id: str,
    params: StrategyParams,
    spot_prices: Optional[Sequence[float]] = None,
) -> PayoffResult:
    """
    Sample a strategy's P&L at expiry and attach its summary metrics.

    ``spot_prices`` defaults to the grid generated around the position's
    reference strike. The call is atomic: invalid input raises before any
    point is computed.
    """
    strategy = _checked(strategy_id, params)
    spots = resolve_spots(params, spot_prices)

    m = params.multiplier
    curve = tuple(PayoffPoint(spot=s, payoff=strategy.payoff(params, s) * m) for s in spots)
    metrics = strategy.metrics(params)

    logger.debug("calculated %s over %d spots (%g..%g)", strategy_id, len(curve), spots[0], spots[-1])
    return PayoffResult(
        strategy=strategy_id,
        payoff_curve=curve,
        max_profit=metrics.max_profit.scaled(m),
        max_loss=metrics.max_loss.scaled(m),
        breakeven=metrics.breakeven,
        approximate=strategy.approximate,
    )
