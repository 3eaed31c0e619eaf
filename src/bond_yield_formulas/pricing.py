# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

from enum import Enum

import numpy as np

from bond_yield_formulas.cashflows import BondCashFlowSpec, horizon_spec

__version__ = "0.1.0"


# =============================================================================
# Present Value
# =============================================================================

def present_value(annual_rate: float, spec: BondCashFlowSpec) -> float:
    """
    Theoretical price of a bond's remaining cash flows at a given annual rate.

    Formula:
        P(r) = Σ_{t=1..n} C / (1 + y)^t  +  R / (1 + y)^n

    Where:
        y = r / m                 per-period rate, m = payments_per_year
        C = (coupon_rate / 100) × face_value / m
        n = periods_to_horizon
        R = redemption_value

    P(r) is strictly decreasing in r whenever all cash flows are positive.
    The yield solvers rely on this.

    No validation is performed. A rate at or below -payments_per_year gives
    inf or nan (numpy semantics) rather than an exception.

    Args:
        annual_rate: Annual nominal discount rate as decimal (e.g. 0.06 for 6%)
        spec: Cash-flow specification

    Returns:
        Present value in the same currency units as face_value

    Example:
        >>> spec = horizon_spec(1000.0, 6.0, 2, 10.0)
        >>> round(present_value(0.06, spec), 6)
        1000.0
    """
    y = annual_rate / spec.payments_per_year
    t = np.arange(1, spec.coupon_periods + 1, dtype=np.float64)
    coupons = spec.coupon_payment * np.sum((1.0 + y) ** (-t))
    return float(coupons + spec.redemption_value * np.power(1.0 + y, -spec.periods_to_horizon))


def present_value_vector(annual_rates: np.ndarray, spec: BondCashFlowSpec) -> np.ndarray:
    """Vectorized present_value over an array of annual rates (decimals)."""
    rates = np.atleast_1d(np.asarray(annual_rates, dtype=np.float64))
    y = rates[:, np.newaxis] / spec.payments_per_year
    t = np.arange(1, spec.coupon_periods + 1, dtype=np.float64)[np.newaxis, :]
    coupons = spec.coupon_payment * np.sum((1.0 + y) ** (-t), axis=1)
    redemption = spec.redemption_value * (1.0 + y[:, 0]) ** (-spec.periods_to_horizon)
    return coupons + redemption


def bond_price(
        face_value: float,
        coupon_rate: float,
        yield_percent: float,
        years: float,
        payments_per_year: int = 2
) -> float:
    """
    Price of a bond held to maturity, given its yield as a percentage.

    Args:
        face_value: Par amount
        coupon_rate: Annual coupon as percentage (e.g. 8.0 for 8%)
        yield_percent: Annual yield to maturity as percentage (e.g. 10.0 for 10%)
        years: Years to maturity
        payments_per_year: Coupon frequency (default semiannual)

    Returns:
        Bond price

    Example:
        >>> round(bond_price(1000, 8.0, 10.0, 10, 2), 4)
        875.3779
    """
    spec = horizon_spec(face_value, coupon_rate, payments_per_year, years)
    return present_value(yield_percent / 100.0, spec)


# =============================================================================
# Duration and Convexity
# =============================================================================

def _discounted_flows(annual_rate: float, spec: BondCashFlowSpec) -> tuple[np.ndarray, np.ndarray, float]:
    """Period times, discounted cash flows and their sum, with redemption as its own term."""
    y = annual_rate / spec.payments_per_year
    n = spec.periods_to_horizon
    t = np.arange(1, spec.coupon_periods + 1, dtype=np.float64)
    times = np.append(t, n)
    flows = np.append(np.full(t.shape, spec.coupon_payment), spec.redemption_value)
    pv = flows * (1.0 + y) ** (-times)
    return times, pv, float(np.sum(pv))


def macaulay_duration(annual_rate: float, spec: BondCashFlowSpec) -> float:
    """
    Macaulay duration in years.

    Formula:
        D_mac = [Σ t × PV(CF_t) / P] / m

    Args:
        annual_rate: Annual yield as decimal
        spec: Cash-flow specification

    Returns:
        PV-weighted average time to the bond's cash flows, in years
    """
    times, pv, price = _discounted_flows(annual_rate, spec)
    return float(np.sum(times * pv) / price / spec.payments_per_year)


def modified_duration(annual_rate: float, spec: BondCashFlowSpec) -> float:
    """Macaulay duration divided by (1 + periodic yield)."""
    y = annual_rate / spec.payments_per_year
    return macaulay_duration(annual_rate, spec) / (1.0 + y)


def convexity(annual_rate: float, spec: BondCashFlowSpec) -> float:
    """
    Annualized cash-flow convexity.

    Formula:
        CX = [Σ t(t+1) × PV(CF_t) / P] / m²

    This is the undiscounted form: it omits the (1 + y)^-2 factor of the
    price-yield second derivative. See modified_convexity() for that form.
    """
    times, pv, price = _discounted_flows(annual_rate, spec)
    return float(np.sum(times * (times + 1.0) * pv) / price / spec.payments_per_year ** 2)


def modified_convexity(annual_rate: float, spec: BondCashFlowSpec) -> float:
    """convexity() scaled by (1 + y)^-2, i.e. (1/P) d²P/dr²."""
    y = annual_rate / spec.payments_per_year
    return convexity(annual_rate, spec) / (1.0 + y) ** 2


def current_yield(spec: BondCashFlowSpec) -> float:
    """Annual coupon income over observed price, as percentage."""
    if spec.observed_price is None:
        raise ValueError("current_yield requires observed_price")
    return spec.coupon_payment * spec.payments_per_year / spec.observed_price * 100.0


# =============================================================================
# Premium / Discount Classification
# =============================================================================

class ValuationLevel(Enum):
    """Price relative to face value."""
    HIGH_PREMIUM = "High Premium"
    PREMIUM = "Premium"
    AT_PAR = "At Par"
    DISCOUNT = "Discount"
    DEEP_DISCOUNT = "Deep Discount"
    VERY_DEEP_DISCOUNT = "Very Deep Discount"


def premium_discount_percent(price: float, face_value: float) -> float:
    """(price - face_value) / face_value as percentage; positive means premium."""
    return (price - face_value) / face_value * 100.0


def valuation_level(price: float, face_value: float) -> ValuationLevel:
    """Bucket a price by its premium (+) or discount (-) to face value."""
    pct = premium_discount_percent(price, face_value)
    if pct >= 10:
        return ValuationLevel.HIGH_PREMIUM
    if pct >= 5:
        return ValuationLevel.PREMIUM
    if pct >= 0:
        return ValuationLevel.AT_PAR
    if pct >= -5:
        return ValuationLevel.DISCOUNT
    if pct >= -10:
        return ValuationLevel.DEEP_DISCOUNT
    return ValuationLevel.VERY_DEEP_DISCOUNT
