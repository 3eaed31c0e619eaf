# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import warnings

from scipy.optimize import brentq

from bond_yield_formulas.cashflows import BondCashFlowSpec
from bond_yield_formulas.pricing import present_value

__version__ = "0.1.0"

DEFAULT_ITERATIONS = 100
YIELD_BRACKET = (0.0, 1.0)  # annual decimal rates, 0% to 100%

NEWTON_TOLERANCE = 1e-4     # price units
NEWTON_STEP_OUT = 0.01      # annual decimal rate
NEWTON_RATE_BOUNDS = (-0.5, 2.0)


class YieldOutOfRangeError(ValueError):
    """Observed price cannot be matched by any rate in the yield bracket."""


class YieldBracketWarning(UserWarning):
    """Observed price is outside the bracket; the bisection result is pinned to an endpoint."""


class ConvergenceWarning(UserWarning):
    """Iterative solver stopped before reaching its tolerance."""


def _target_price(spec: BondCashFlowSpec) -> float:
    if spec.observed_price is None:
        raise ValueError("observed_price is required to solve for a yield")
    return spec.observed_price


# =============================================================================
# Bisection (reference solver)
# =============================================================================

def solve_yield(
        spec: BondCashFlowSpec,
        iterations: int = DEFAULT_ITERATIONS,
        tolerance: float | None = None,
        strict: bool = False
) -> float:
    """
    Solve for the annual yield that prices spec's cash flows at spec.observed_price.

    ALGORITHM:
    ----------
    Bisection on the annual rate over [0, 1):

        for each iteration:
            mid = (low + high) / 2
            if P(mid) > observed_price:  low = mid    (true rate is higher)
            else:                        high = mid

    The final midpoint is returned. P(r) is strictly decreasing in r, so each
    comparison halves the bracket around the root. After ~53 halvings the
    bracket is one float wide and further iterations leave mid unchanged;
    the default of 100 iterations is a safety margin, not a precision need.

    FEASIBILITY:
    ------------
    A root exists in the bracket only if P(1) <= observed_price <= P(0). If it
    does not, bisection drifts to the nearest endpoint and returns 0% or 100%.
    By default that result is still returned, with a YieldBracketWarning.
    Pass strict=True to raise YieldOutOfRangeError instead.

    Args:
        spec: Cash-flow specification with observed_price set
        iterations: Number of bisection steps (default 100)
        tolerance: If given, stop early once high - low < tolerance
        strict: Raise instead of warn when the price is outside the bracket

    Returns:
        Annual yield as percentage (e.g. 6.0 for 6%)

    Raises:
        ValueError: If observed_price is None
        YieldOutOfRangeError: If strict and the price is outside the bracket
        YieldBracketWarning: If not strict and the price is outside the bracket

    Example:
        >>> spec = horizon_spec(1000.0, 6.0, 2, 10.0, observed_price=1000.0)
        >>> round(solve_yield(spec), 4)
        6.0
    """
    price = _target_price(spec)
    low, high = YIELD_BRACKET

    price_at_low = present_value(low, spec)
    price_at_high = present_value(high, spec)
    if not (price_at_high <= price <= price_at_low):
        message = (
            f"observed_price {price:.6f} is outside the price range "
            f"[{price_at_high:.6f}, {price_at_low:.6f}] spanned by yields "
            f"{low * 100:.0f}%-{high * 100:.0f}%"
        )
        if strict:
            raise YieldOutOfRangeError(message)
        warnings.warn(message + "; result is pinned to the bracket endpoint", YieldBracketWarning)

    mid = (low + high) / 2.0
    for _ in range(iterations):
        mid = (low + high) / 2.0
        if present_value(mid, spec) > price:
            low = mid
        else:
            high = mid
        if tolerance is not None and high - low < tolerance:
            break

    return mid * 100.0


# =============================================================================
# Alternative Solvers
# =============================================================================

def solve_yield_brent(
        spec: BondCashFlowSpec,
        xtol: float = 1e-12,
        max_iterations: int = DEFAULT_ITERATIONS
) -> float:
    """
    Solve for the annual yield with Brent's method (scipy.optimize.brentq).

    Same root as solve_yield() on the same [0, 1] bracket, in far fewer
    function evaluations. Unlike bisection, an infeasible price is an error.

    Args:
        spec: Cash-flow specification with observed_price set
        xtol: Absolute tolerance on the annual decimal rate
        max_iterations: Maximum iterations for Brent's method

    Returns:
        Annual yield as percentage

    Raises:
        ValueError: If observed_price is None or no root lies in the bracket
    """
    price = _target_price(spec)
    low, high = YIELD_BRACKET

    def objective(rate: float, spec: BondCashFlowSpec, price: float) -> float:
        """Objective: model price - observed price."""
        return present_value(rate, spec) - price

    try:
        rate = brentq(objective, low, high, args=(spec, price), xtol=xtol, maxiter=max_iterations)
    except ValueError as e:
        # brentq raises ValueError if f(low) and f(high) have the same sign
        raise ValueError(
            f"Could not find a yield in [{low * 100:.0f}%, {high * 100:.0f}%] for "
            f"observed_price {price:.6f} (periods_to_horizon {spec.periods_to_horizon}, "
            f"redemption_value {spec.redemption_value}). Original error: {e}"
        ) from e
    return rate * 100.0


def solve_yield_newton(
        spec: BondCashFlowSpec,
        tolerance: float = NEWTON_TOLERANCE,
        max_iterations: int = DEFAULT_ITERATIONS
) -> float:
    """
    Solve for the annual yield with Newton-Raphson, starting at the coupon rate.

    Derivative of the price with respect to the annual rate r (y = r/m):

        dP/dr = -Σ t × C / (m (1+y)^(t+1))  -  n × R / (m (1+y)^(n+1))

    Guards:
        - |dP/dr| < 1e-10: nudge the rate up by NEWTON_STEP_OUT and retry.
        - A step landing outside NEWTON_RATE_BOUNDS is replaced by a fixed
          NEWTON_STEP_OUT move toward the root (up if the model price is too
          high, down if it is too low).

    Args:
        spec: Cash-flow specification with observed_price set
        tolerance: Stop once |P(r) - observed_price| < tolerance (price units)
        max_iterations: Maximum Newton steps

    Returns:
        Annual yield as percentage

    Raises:
        ValueError: If observed_price is None
        ConvergenceWarning: If the price tolerance was not reached
    """
    price = _target_price(spec)
    m = spec.payments_per_year
    n = spec.periods_to_horizon
    c = spec.coupon_payment
    lower, upper = NEWTON_RATE_BOUNDS

    rate = spec.coupon_rate / 100.0
    converged = False
    for _ in range(max_iterations):
        price_diff = present_value(rate, spec) - price
        if abs(price_diff) < tolerance:
            converged = True
            break

        y = rate / m
        derivative = 0.0
        for t in range(1, spec.coupon_periods + 1):
            derivative -= (c * t) / ((1.0 + y) ** (t + 1) * m)
        derivative -= (spec.redemption_value * n) / ((1.0 + y) ** (n + 1) * m)

        if abs(derivative) < 1e-10:
            rate += NEWTON_STEP_OUT
            continue

        new_rate = rate - price_diff / derivative
        if new_rate < lower or new_rate > upper:
            rate += NEWTON_STEP_OUT if price_diff > 0 else -NEWTON_STEP_OUT
        else:
            rate = new_rate

    if not converged:
        warnings.warn(
            f"Newton solver did not reach price tolerance {tolerance} in {max_iterations} "
            f"iterations; last rate {rate * 100:.6f}%",
            ConvergenceWarning,
        )
    return rate * 100.0
