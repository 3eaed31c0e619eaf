# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
"""
Yield to call, yield to maturity and yield to worst for a CallableBond.

Each yield is a bisection solve (solve_yield) on one horizon:

    YTC: redemption = call_price,  periods = years_to_call × payments_per_year
    YTM: redemption = face_value,  periods = years_to_maturity × payments_per_year
    YTW: min(YTC, YTM)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bond_yield_formulas.cashflows import CallableBond
from bond_yield_formulas.yield_solver import DEFAULT_ITERATIONS, solve_yield

__version__ = "0.1.0"


class Horizon(Enum):
    """Valuation horizon a yield is measured to."""
    CALL = "call"
    MATURITY = "maturity"


@dataclass(frozen=True)
class YieldToWorst:
    """Both horizon yields (annual %) and the lower of the two."""
    yield_to_call: float
    yield_to_maturity: float
    yield_to_worst: float
    worst_horizon: Horizon


def yield_to_call(
        bond: CallableBond,
        price: float,
        iterations: int = DEFAULT_ITERATIONS,
        tolerance: float | None = None,
        strict: bool = False
) -> float:
    """Annual yield (%) assuming the bond is called at call_price on the call date."""
    return solve_yield(bond.call_spec(price), iterations=iterations, tolerance=tolerance, strict=strict)


def yield_to_maturity(
        bond: CallableBond,
        price: float,
        iterations: int = DEFAULT_ITERATIONS,
        tolerance: float | None = None,
        strict: bool = False
) -> float:
    """Annual yield (%) assuming the bond is held to maturity and redeemed at face."""
    return solve_yield(bond.maturity_spec(price), iterations=iterations, tolerance=tolerance, strict=strict)


def yield_to_worst(
        bond: CallableBond,
        price: float,
        iterations: int = DEFAULT_ITERATIONS,
        tolerance: float | None = None,
        strict: bool = False
) -> YieldToWorst:
    """
    Solve both horizons and report the more conservative yield.

    Args:
        bond: Callable bond terms
        price: Observed market price
        iterations: Bisection steps per horizon
        tolerance: Optional early-exit bracket width
        strict: Raise YieldOutOfRangeError for infeasible prices

    Returns:
        YieldToWorst; worst_horizon is MATURITY when the two yields are equal
    """
    ytc = yield_to_call(bond, price, iterations=iterations, tolerance=tolerance, strict=strict)
    ytm = yield_to_maturity(bond, price, iterations=iterations, tolerance=tolerance, strict=strict)
    if ytc < ytm:
        return YieldToWorst(ytc, ytm, ytc, Horizon.CALL)
    return YieldToWorst(ytc, ytm, ytm, Horizon.MATURITY)
