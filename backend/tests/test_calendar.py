"""
Tests for the calendar spread approximation.

The model is a bell curve peaking at the strike and decaying towards the
net-debit floor; these tests pin its documented shape, not market prices.
"""

import math

import pytest

from strategy_payoff.options.calendar import FAR_LEG_RETENTION, WIDTH_PCT, calendar_model
from strategy_payoff.options.metrics import Bounded
from strategy_payoff.options.params import SameStrikeParams
from strategy_payoff.options.strategies import calculate, payoff_at


class TestCalendarModel:
    """Tests for calendar_model."""

    def test_peak_at_strike(self):
        model = calendar_model(100.0, 5.0, 3.0)
        assert model.payoff(100.0) == pytest.approx(FAR_LEG_RETENTION * 5.0 - 2.0)

    def test_decays_towards_floor(self):
        model = calendar_model(100.0, 5.0, 3.0)
        assert model.payoff(200.0) == pytest.approx(-2.0)
        assert model.payoff(0.0) == pytest.approx(-2.0)

    def test_symmetric_around_strike(self):
        model = calendar_model(100.0, 5.0, 3.0)
        assert model.payoff(93.0) == pytest.approx(model.payoff(107.0))

    def test_width_scales_with_strike(self):
        assert calendar_model(200.0, 5.0, 3.0).width == pytest.approx(200.0 * WIDTH_PCT)

    def test_breakevens_cross_zero(self):
        model = calendar_model(100.0, 5.0, 3.0)
        lo, hi = model.breakevens()
        assert lo < 100.0 < hi
        assert model.payoff(lo) == pytest.approx(0.0, abs=1e-9)
        assert model.payoff(hi) == pytest.approx(0.0, abs=1e-9)

    def test_zero_debit_falls_back_to_strike(self):
        model = calendar_model(100.0, 3.0, 3.0)
        assert model.breakevens() == (100.0, 100.0)

    def test_net_credit_crosses_zero(self):
        # premium1 < premium2: floor -1, peak above zero
        model = calendar_model(100.0, 2.0, 3.0)
        assert model.floor == pytest.approx(-1.0)
        assert model.peak > 0
        lo, hi = model.breakevens()
        assert lo < 100.0 < hi
        assert model.payoff(lo) == pytest.approx(0.0, abs=1e-9)
        assert model.payoff(hi) == pytest.approx(0.0, abs=1e-9)

    def test_peak_below_zero_falls_back_to_strike(self):
        # Retained far-leg value never covers a large debit
        model = calendar_model(100.0, 10.0, 0.5)
        assert model.peak < 0
        assert model.breakevens() == (100.0, 100.0)


class TestCalendarSpread:
    """Tests for the calendar-spread calculator."""

    def test_floor_holds_everywhere(self, spots):
        params = SameStrikeParams(strike=100, premium1=5, premium2=3, lots=2, lot_size=50)
        result = calculate("calendar-spread", params, spots)
        floor = -abs(5 - 3) * 2 * 50
        assert all(p.payoff >= floor for p in result.payoff_curve)
        assert result.max_loss == Bounded(floor)

    @pytest.mark.parametrize("premium1,premium2", [(3.0, 3.0), (10.0, 0.5)])
    def test_degenerate_inputs_stay_finite(self, premium1, premium2, spots):
        params = SameStrikeParams(strike=100, premium1=premium1, premium2=premium2)
        result = calculate("calendar-spread", params, spots)
        assert all(math.isfinite(p.payoff) for p in result.payoff_curve)
        assert all(math.isfinite(b) for b in result.breakevens)
        assert result.breakeven == (100.0, 100.0)
        floor = -abs(premium1 - premium2)
        assert all(p.payoff >= floor for p in result.payoff_curve)

    def test_max_profit_is_peak(self):
        params = SameStrikeParams(strike=100, premium1=5, premium2=3, lots=1, lot_size=50)
        result = calculate("calendar-spread", params, [100.0])
        assert result.max_profit.value == pytest.approx(result.payoff_curve[0].payoff)
        assert result.approximate is True

    def test_breakevens_on_curve(self):
        params = SameStrikeParams(strike=100, premium1=5, premium2=3, lots=1, lot_size=50)
        result = calculate("calendar-spread", params, [100.0])
        for be in result.breakevens:
            assert payoff_at("calendar-spread", params, be) == pytest.approx(0.0, abs=1e-6)

    def test_exact_strategies_not_flagged(self):
        params = SameStrikeParams(strike=100, premium1=5, premium2=3)
        assert calculate("long-straddle", params, [100.0]).approximate is False

    def test_net_credit_breakevens_on_curve(self):
        params = SameStrikeParams(strike=100, premium1=2, premium2=3, lots=1, lot_size=50)
        result = calculate("calendar-spread", params, [float(s) for s in range(80, 121)])
        lo, hi = result.breakeven
        assert lo < 100.0 < hi
        for be in result.breakevens:
            assert payoff_at("calendar-spread", params, be) == pytest.approx(0.0, abs=1e-6)
        crossings = [
            (a.spot, b.spot)
            for a, b in zip(result.payoff_curve, result.payoff_curve[1:])
            if (a.payoff < 0) != (b.payoff < 0)
        ]
        assert len(crossings) == 2
        assert crossings[0][0] <= lo <= crossings[0][1]
        assert crossings[1][0] <= hi <= crossings[1][1]
