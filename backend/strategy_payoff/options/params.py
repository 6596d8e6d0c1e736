"""
Parameter structures, one per strategy shape.

Every structure carries ``lots`` (number of contracts) and ``lot_size``
(shares per contract). ``validate()`` checks that each number is finite and in
range; strike ordering is strategy specific and checked in ``strategies``.
"""

import math
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List

from strategy_payoff.options.errors import InvalidParameterError

def _describe(text: str) -> Dict[str, Any]:
    return {"description": text}

def require_finite(name: str, value: Any) -> float:
    if value is None:
        raise InvalidParameterError(name, "value is required")
    if isinstance(value, bool):
        raise InvalidParameterError(name, "must be a number")
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(name, "must be a number")
    if not math.isfinite(value):
        raise InvalidParameterError(name, "must be finite")
    return value

def require_positive(name: str, value: Any) -> float:
    value = require_finite(name, value)
    if value <= 0:
        raise InvalidParameterError(name, "must be > 0")
    return value

def require_non_negative(name: str, value: Any) -> float:
    value = require_finite(name, value)
    if value < 0:
        raise InvalidParameterError(name, "must be >= 0")
    return value

def require_count(name: str, value: Any) -> int:
    value = require_positive(name, value)
    if not value.is_integer():
        raise InvalidParameterError(name, "must be a whole number")
    return int(value)

@dataclass(frozen=True, kw_only=True)
class StrategyParams:
    lots: int = field(default=1, metadata=_describe("Number of contracts"))
    lot_size: int = field(default=1, metadata=_describe("Shares per contract (multiplier)"))

    # Field names decide which check applies; checked values are stored back
    # so counts are ints and prices are floats afterwards
    def validate(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in ("lots", "lot_size"):
                value = require_count(f.name, value)
            elif "strike" in f.name or f.name == "stock_price":
                value = require_positive(f.name, value)
            else:
                value = require_non_negative(f.name, value)
            object.__setattr__(self, f.name, value)

    @property
    def multiplier(self) -> int:
        return self.lots * self.lot_size

    @classmethod
    def describe(cls) -> List[Dict[str, Any]]:
        out: List[Dict[str, Any]] = []
        for f in fields(cls):
            out.append({
                "name": f.name,
                "type": "integer" if f.name in ("lots", "lot_size") else "number",
                "required": f.name not in ("lots", "lot_size"),
                "description": f.metadata.get("description", ""),
            })
        return out

@dataclass(frozen=True, kw_only=True)
class SingleLegParams(StrategyParams):
    strike: float = field(metadata=_describe("Option strike"))
    premium: float = field(metadata=_describe("Premium per share (paid long, received short)"))

@dataclass(frozen=True, kw_only=True)
class VerticalParams(StrategyParams):
    strike1: float = field(metadata=_describe("First leg strike"))
    premium1: float = field(metadata=_describe("First leg premium"))
    strike2: float = field(metadata=_describe("Second leg strike"))
    premium2: float = field(metadata=_describe("Second leg premium"))

@dataclass(frozen=True, kw_only=True)
class SameStrikeParams(StrategyParams):
    strike: float = field(metadata=_describe("Strike shared by both legs"))
    premium1: float = field(metadata=_describe("First leg premium"))
    premium2: float = field(metadata=_describe("Second leg premium"))

@dataclass(frozen=True, kw_only=True)
class StockHedgeParams(StrategyParams):
    stock_price: float = field(metadata=_describe("Stock entry price (cost basis)"))
    strike: float = field(metadata=_describe("Hedging option strike"))
    premium: float = field(metadata=_describe("Hedging option premium paid"))

@dataclass(frozen=True, kw_only=True)
class StrangleParams(StrategyParams):
    put_strike: float = field(metadata=_describe("Put strike (lower)"))
    put_premium: float = field(metadata=_describe("Put premium"))
    call_strike: float = field(metadata=_describe("Call strike (higher)"))
    call_premium: float = field(metadata=_describe("Call premium"))

@dataclass(frozen=True, kw_only=True)
class CondorParams(StrategyParams):
    strike1: float = field(metadata=_describe("Long put strike"))
    strike2: float = field(metadata=_describe("Short put strike"))
    strike3: float = field(metadata=_describe("Short call strike"))
    strike4: float = field(metadata=_describe("Long call strike"))
    net_premium: float = field(metadata=_describe("Net credit received per share"))

@dataclass(frozen=True, kw_only=True)
class ButterflyParams(StrategyParams):
    strike1: float = field(metadata=_describe("Lower wing strike"))
    strike2: float = field(metadata=_describe("Body strike"))
    strike3: float = field(metadata=_describe("Upper wing strike"))
    net_premium: float = field(metadata=_describe("Net premium per share (credit for iron, debit for call butterfly)"))
