# Requires Python 3.12+
"""
Bond Yield Formulas — fixed-coupon bond pricing and yield solving.

Core: bisection solve for the yield that equates a bond's present value to
its observed price, applied to call and maturity horizons for yield to worst.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Cash flow specification and callable bond terms
from bond_yield_formulas.cashflows import (
    PERIOD_TOLERANCE,
    FractionalPeriodWarning,
    BondCashFlowSpec,
    validate_spec,
    horizon_spec,
    BondCashflowSchedule,
    run_bond_cashflow,
    CallableBond,
)

# Pricing, duration, convexity
from bond_yield_formulas.pricing import (
    present_value,
    present_value_vector,
    bond_price,
    macaulay_duration,
    modified_duration,
    convexity,
    modified_convexity,
    current_yield,
    ValuationLevel,
    premium_discount_percent,
    valuation_level,
)

# Yield solvers
from bond_yield_formulas.yield_solver import (
    DEFAULT_ITERATIONS,
    YIELD_BRACKET,
    YieldOutOfRangeError,
    YieldBracketWarning,
    ConvergenceWarning,
    solve_yield,
    solve_yield_brent,
    solve_yield_newton,
)

# Call / maturity / worst yields
from bond_yield_formulas.callable_yields import (
    Horizon,
    YieldToWorst,
    yield_to_call,
    yield_to_maturity,
    yield_to_worst,
)

# Spreads and dollar risk
from bond_yield_formulas.spreads import (
    BondType,
    SpreadLevel,
    yield_spread_bps,
    spread_level,
    dollar_duration,
    price_value_of_basis_point,
    spread_duration_price_change,
)

# Examples
from bond_yield_formulas.examples import (
    BondTerms,
    BondExample,
    BOND_EXAMPLES,
)

__all__ = [
    "__version__",
    # Cash flows
    "PERIOD_TOLERANCE",
    "FractionalPeriodWarning",
    "BondCashFlowSpec",
    "validate_spec",
    "horizon_spec",
    "BondCashflowSchedule",
    "run_bond_cashflow",
    "CallableBond",
    # Pricing
    "present_value",
    "present_value_vector",
    "bond_price",
    "macaulay_duration",
    "modified_duration",
    "convexity",
    "modified_convexity",
    "current_yield",
    "ValuationLevel",
    "premium_discount_percent",
    "valuation_level",
    # Yield solvers
    "DEFAULT_ITERATIONS",
    "YIELD_BRACKET",
    "YieldOutOfRangeError",
    "YieldBracketWarning",
    "ConvergenceWarning",
    "solve_yield",
    "solve_yield_brent",
    "solve_yield_newton",
    # Callable yields
    "Horizon",
    "YieldToWorst",
    "yield_to_call",
    "yield_to_maturity",
    "yield_to_worst",
    # Spreads
    "BondType",
    "SpreadLevel",
    "yield_spread_bps",
    "spread_level",
    "dollar_duration",
    "price_value_of_basis_point",
    "spread_duration_price_change",
    # Examples
    "BondTerms",
    "BondExample",
    "BOND_EXAMPLES",
]
