"""
Tests for sampled-curve analysis.
"""

import pytest

from strategy_payoff.options.curve import PayoffPoint, breakevens_from_curve, extrema_from_curve


def _curve(*pairs):
    return [PayoffPoint(spot=s, payoff=p) for s, p in pairs]


class TestBreakevensFromCurve:
    """Tests for breakevens_from_curve."""

    def test_interpolates_sign_change(self):
        curve = _curve((100.0, -5.0), (110.0, 5.0))
        assert breakevens_from_curve(curve) == [pytest.approx(105.0)]

    def test_exact_zero_counted_once(self):
        curve = _curve((100.0, -5.0), (105.0, 0.0), (110.0, 5.0))
        assert breakevens_from_curve(curve) == [105.0]

    def test_two_crossings(self):
        curve = _curve((90.0, 2.0), (100.0, -8.0), (110.0, 2.0))
        assert breakevens_from_curve(curve) == [pytest.approx(92.0), pytest.approx(108.0)]

    def test_no_crossing(self):
        assert breakevens_from_curve(_curve((90.0, -1.0), (110.0, -2.0))) == []

    def test_short_curve(self):
        assert breakevens_from_curve(_curve((90.0, 1.0))) == []


class TestExtremaFromCurve:
    """Tests for extrema_from_curve."""

    def test_max_and_min(self):
        assert extrema_from_curve(_curve((1.0, 3.0), (2.0, -4.0), (3.0, 1.0))) == (3.0, -4.0)

    def test_empty_curve(self):
        with pytest.raises(ValueError):
            extrema_from_curve([])
