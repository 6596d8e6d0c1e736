import logging
from typing import Annotated, ClassVar, List, Literal, Optional, Tuple, Union

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field, RootModel
from pydantic.alias_generators import to_camel

from strategy_payoff.core.config import settings
from strategy_payoff.options.curve import breakevens_from_curve, extrema_from_curve
from strategy_payoff.options.params import StrategyParams
from strategy_payoff.options.strategies import STRATEGIES, Breakeven, calculate, get_strategy, payoff_at

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/payoff", tags=["payoff"])

class CamelModel(BaseModel):
    # Wire names are camelCase (lotSize, netPremium...); snake_case is accepted too
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class StrategyRequest(CamelModel):
    model_config = ConfigDict(extra="forbid")

    # Transport-only fields, not passed to the calculator's parameters
    transport_fields: ClassVar[Tuple[str, ...]] = ("strategy", "spot_prices", "underlying")

    lots: int = Field(1, ge=1)
    lot_size: int = Field(default_factory=lambda: settings.default_lot_size, ge=1)
    spot_prices: Optional[List[float]] = Field(None, min_length=1, description="Explicit spot prices to sample")
    underlying: Optional[float] = Field(None, ge=0, description="Also report P/L at this spot")

class SingleLegRequest(StrategyRequest):
    strategy: Literal["long-call", "long-put", "short-call", "short-put"]
    strike: float = Field(..., gt=0)
    premium: float = Field(..., ge=0)

class VerticalRequest(StrategyRequest):
    strategy: Literal["bull-call-spread", "bull-put-spread", "bear-call-spread", "bear-put-spread"]
    strike1: float = Field(..., gt=0)
    premium1: float = Field(..., ge=0)
    strike2: float = Field(..., gt=0)
    premium2: float = Field(..., ge=0)

class SameStrikeRequest(StrategyRequest):
    strategy: Literal[
        "synthetic-long-stock", "synthetic-short-stock", "long-straddle", "short-straddle", "calendar-spread"
    ]
    strike: float = Field(..., gt=0)
    premium1: float = Field(..., ge=0)
    premium2: float = Field(..., ge=0)

class StockHedgeRequest(StrategyRequest):
    strategy: Literal["protective-put", "protective-call"]
    stock_price: float = Field(..., gt=0)
    strike: float = Field(..., gt=0)
    premium: float = Field(..., ge=0)

class StrangleRequest(StrategyRequest):
    strategy: Literal["long-strangle", "short-strangle"]
    put_strike: float = Field(..., gt=0)
    put_premium: float = Field(..., ge=0)
    call_strike: float = Field(..., gt=0)
    call_premium: float = Field(..., ge=0)

class CondorRequest(StrategyRequest):
    strategy: Literal["iron-condor"]
    strike1: float = Field(..., gt=0)
    strike2: float = Field(..., gt=0)
    strike3: float = Field(..., gt=0)
    strike4: float = Field(..., gt=0)
    net_premium: float = Field(..., ge=0)

class ButterflyRequest(StrategyRequest):
    strategy: Literal["iron-butterfly", "call-butterfly"]
    strike1: float = Field(..., gt=0)
    strike2: float = Field(..., gt=0)
    strike3: float = Field(..., gt=0)
    net_premium: float = Field(..., ge=0)

class CalculateRequest(RootModel):
    root: Annotated[
        Union[
            SingleLegRequest,
            VerticalRequest,
            SameStrikeRequest,
            StockHedgeRequest,
            StrangleRequest,
            CondorRequest,
            ButterflyRequest,
        ],
        Field(discriminator="strategy"),
    ]

class CurvePoint(BaseModel):
    spot: float
    payoff: float

class CalculateResponse(CamelModel):
    strategy: str
    payoff_curve: List[CurvePoint]
    max_profit: float | str
    max_loss: float | str
    breakeven: float | str
    breakevens: List[float]
    curve_breakevens: List[float]
    sampled_max: float
    sampled_min: float
    approximate: bool = False
    pnl: Optional[float] = None

class TemplateParam(CamelModel):
    name: str
    type: str
    required: bool = True
    description: str

class StrategyTemplate(CamelModel):
    id: str
    name: str
    description: str
    approximate: bool = False
    params: List[TemplateParam]

def _to_core(req: StrategyRequest) -> StrategyParams:
    params_type = get_strategy(req.strategy).params_type
    return params_type(**req.model_dump(exclude=set(StrategyRequest.transport_fields)))

def format_breakeven(breakeven: Breakeven) -> float | str:
    # A pair is joined for display; a single breakeven stays numeric
    if isinstance(breakeven, tuple):
        return " & ".join(f"{b:.2f}" for b in breakeven)
    return breakeven

@router.get("/strategies", response_model=List[StrategyTemplate])
def strategies():
    out: List[StrategyTemplate] = []
    for s in STRATEGIES.values():
        params = [
            TemplateParam(
                name=to_camel(p["name"]),
                type=p["type"],
                required=p["required"],
                description=p["description"],
            )
            for p in s.params_type.describe()
        ]
        out.append(StrategyTemplate(id=s.id, name=s.name, description=s.description, approximate=s.approximate, params=params))
    return out

@router.post("/calculate", response_model=CalculateResponse)
def calculate_payoff(body: CalculateRequest):
    req = body.root
    try:
        params = _to_core(req)
        result = calculate(req.strategy, params, req.spot_prices)

        pnl = None
        if req.underlying is not None:
            pnl = payoff_at(req.strategy, params, req.underlying)

        sampled_max, sampled_min = extrema_from_curve(result.payoff_curve)
        return CalculateResponse(
            strategy=result.strategy,
            payoff_curve=[CurvePoint(spot=p.spot, payoff=p.payoff) for p in result.payoff_curve],
            max_profit=result.max_profit.display(),
            max_loss=result.max_loss.display(),
            breakeven=format_breakeven(result.breakeven),
            breakevens=result.breakevens,
            curve_breakevens=breakevens_from_curve(result.payoff_curve),
            sampled_max=sampled_max,
            sampled_min=sampled_min,
            approximate=result.approximate,
            pnl=pnl,
        )
    except ValueError as e:
        logger.warning("rejected %s request: %s", req.strategy, e)
        raise HTTPException(status_code=400, detail=str(e))
