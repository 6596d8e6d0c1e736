from typing import Literal

Side = Literal["long", "short"]

def call_leg_payoff(spot: float, strike: float, premium: float) -> float:
    # Per share, long perspective: intrinsic at expiry minus the debit paid
    return max(0.0, spot - strike) - premium

def put_leg_payoff(spot: float, strike: float, premium: float) -> float:
    return max(0.0, strike - spot) - premium

def direction(side: Side) -> int:
    side = side.lower().strip()
    if side == "long":
        return 1
    if side == "short":
        return -1
    raise ValueError("side must be 'long' or 'short'")

def stock_payoff(spot: float, entry_price: float, side: Side = "long") -> float:
    return direction(side) * (spot - entry_price)
