"""
Exceptions raised by the payoff engine.

Every error subclasses ValueError, so callers that already guard numeric
input with ``except ValueError`` keep working.
"""


class PayoffError(ValueError):
    """Base exception for all payoff calculation errors."""

    pass


class UnknownStrategyError(PayoffError):
    """Raised when a strategy identifier is not registered."""

    def __init__(self, strategy_id: str) -> None:
        self.strategy_id = strategy_id
        super().__init__(f"Strategy '{strategy_id}' not found or is not implemented")


class InvalidParameterError(PayoffError):
    """Raised when a numeric input is missing, non-finite or out of range."""

    def __init__(self, field: str, details: str = "") -> None:
        self.field = field
        message = f"Invalid parameter '{field}'"
        if details:
            message += f": {details}"
        super().__init__(message)


class StrikeOrderError(PayoffError):
    """Raised when multi-leg strikes are not in the strategy's canonical order."""

    def __init__(self, strategy_id: str, details: str) -> None:
        self.strategy_id = strategy_id
        super().__init__(f"Invalid strikes for {strategy_id}: {details}")
