# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import math
import warnings
from dataclasses import dataclass, replace

import numpy as np

__version__ = "0.1.0"

# A period count within this distance of an integer is treated as that integer
PERIOD_TOLERANCE = 1e-9


class FractionalPeriodWarning(UserWarning):
    """Horizon does not fall on a whole number of coupon periods."""


# =============================================================================
# Cash Flow Specification
# Reference: bond price, yield to maturity and yield to worst calculators
# =============================================================================

@dataclass(frozen=True)
class BondCashFlowSpec:
    """
    Cash-flow schedule of a plain fixed-coupon bond up to a valuation horizon.

    The horizon is either the call date (redemption_value = call price) or the
    maturity date (redemption_value = face value).

    Rate convention:
        - coupon_rate is an annual percentage of face value (e.g. 6.0 for 6%).
        - Discount rates passed to the pricing functions are annual decimals
          (e.g. 0.06 for 6%); solved yields are returned as percentages.

    The record is not validated on construction. Use validate_spec() at the
    boundary where user input enters; the pricing and solver functions accept
    whatever they are given.
    """
    face_value: float            # $ par amount
    coupon_rate: float           # annual % of face value
    payments_per_year: int       # coupon frequency (2 = semiannual)
    periods_to_horizon: float    # years * payments_per_year
    redemption_value: float      # $ repaid at the horizon
    observed_price: float | None = None  # $ market price to match

    @property
    def coupon_payment(self) -> float:
        """Fixed coupon amount paid each period."""
        return (self.coupon_rate / 100.0) * self.face_value / self.payments_per_year

    @property
    def coupon_periods(self) -> int:
        """Number of whole coupon payments before and including the horizon."""
        return int(math.floor(self.periods_to_horizon + PERIOD_TOLERANCE))

    @property
    def years_to_horizon(self) -> float:
        return self.periods_to_horizon / self.payments_per_year

    def with_price(self, observed_price: float) -> BondCashFlowSpec:
        """Copy of this spec with a different observed price."""
        return replace(self, observed_price=observed_price)


def validate_spec(spec: BondCashFlowSpec) -> BondCashFlowSpec:
    """
    Check a BondCashFlowSpec for domain errors and return it unchanged.

    Raises:
        ValueError: If face_value, redemption_value or periods_to_horizon is not positive
        ValueError: If coupon_rate is negative
        ValueError: If payments_per_year is not a positive integer
        ValueError: If observed_price is given and not positive
        FractionalPeriodWarning: If periods_to_horizon is not a whole number
    """
    if spec.face_value <= 0:
        raise ValueError(f"face_value must be positive, got {spec.face_value}")
    if spec.coupon_rate < 0:
        raise ValueError(f"coupon_rate must be non-negative, got {spec.coupon_rate}")
    if int(spec.payments_per_year) != spec.payments_per_year or spec.payments_per_year <= 0:
        raise ValueError(f"payments_per_year must be a positive integer, got {spec.payments_per_year}")
    if spec.periods_to_horizon <= 0:
        raise ValueError(f"periods_to_horizon must be positive, got {spec.periods_to_horizon}")
    if spec.redemption_value <= 0:
        raise ValueError(f"redemption_value must be positive, got {spec.redemption_value}")
    if spec.observed_price is not None and spec.observed_price <= 0:
        raise ValueError(f"observed_price must be positive, got {spec.observed_price}")
    if abs(spec.periods_to_horizon - round(spec.periods_to_horizon)) > PERIOD_TOLERANCE:
        warnings.warn(
            f"periods_to_horizon {spec.periods_to_horizon} is not a whole number of coupon periods; "
            f"summing {spec.coupon_periods} coupons",
            FractionalPeriodWarning,
        )
    return spec


def horizon_spec(
    face_value: float,
    coupon_rate: float,
    payments_per_year: int,
    years_to_horizon: float,
    redemption_value: float | None = None,
    observed_price: float | None = None,
) -> BondCashFlowSpec:
    """
    Build a BondCashFlowSpec from a horizon expressed in years.

    Args:
        face_value: Par amount
        coupon_rate: Annual coupon as percentage (e.g. 6.0 for 6%)
        payments_per_year: Coupon frequency
        years_to_horizon: Years to the call or maturity date
        redemption_value: Amount repaid at the horizon (defaults to face_value)
        observed_price: Market price, required when solving for a yield

    Returns:
        BondCashFlowSpec with periods_to_horizon = years_to_horizon * payments_per_year
    """
    return BondCashFlowSpec(
        face_value=face_value,
        coupon_rate=coupon_rate,
        payments_per_year=payments_per_year,
        periods_to_horizon=years_to_horizon * payments_per_year,
        redemption_value=face_value if redemption_value is None else redemption_value,
        observed_price=observed_price,
    )


# =============================================================================
# Per-Period Cash Flow Schedule
# =============================================================================

@dataclass
class BondCashflowSchedule:
    """
    Container for the discounted cash flows of a BondCashFlowSpec.

    Index 0 is period 1. The last element carries the redemption payment in
    principal; when periods_to_horizon is fractional, the redemption is
    discounted at the fractional horizon and reported on the last row.
    """
    period: np.ndarray
    time_years: np.ndarray
    coupon: np.ndarray
    principal: np.ndarray
    total: np.ndarray
    discount_factor: np.ndarray
    present_value: np.ndarray

    @property
    def price(self) -> float:
        """Sum of discounted cash flows."""
        return float(np.sum(self.present_value))


def run_bond_cashflow(spec: BondCashFlowSpec, annual_rate: float) -> BondCashflowSchedule:
    """
    Lay out a bond's coupon and redemption payments and discount them at annual_rate.

    Args:
        spec: Cash-flow specification
        annual_rate: Annual nominal discount rate as decimal (e.g. 0.06 for 6%)

    Returns:
        BondCashflowSchedule whose present_value column sums to the bond price
    """
    y = annual_rate / spec.payments_per_year
    n = spec.periods_to_horizon
    count = max(spec.coupon_periods, 1)

    period = np.arange(1, count + 1, dtype=np.float64)
    coupon = np.zeros(count)
    coupon[:spec.coupon_periods] = spec.coupon_payment
    principal = np.zeros(count)
    principal[-1] = spec.redemption_value

    coupon_df = (1.0 + y) ** (-period)
    redemption_df = np.power(1.0 + y, -n)

    present_value = coupon * coupon_df
    present_value[-1] += spec.redemption_value * redemption_df

    return BondCashflowSchedule(
        period=period,
        time_years=period / spec.payments_per_year,
        coupon=coupon,
        principal=principal,
        total=coupon + principal,
        discount_factor=coupon_df,
        present_value=present_value,
    )


# =============================================================================
# Callable Bond Object
# =============================================================================
#
# The CallableBond is the input to the yield-to-call / yield-to-maturity /
# yield-to-worst functions. It stores the coupon as percentage and horizons in
# years, and builds one BondCashFlowSpec per horizon.
# =============================================================================

@dataclass
class CallableBond:
    """
    Callable fixed-coupon bond.

    Required fields:
        face_value, coupon_rate, payments_per_year, years_to_maturity,
        years_to_call, call_price.

    Rate convention:
        - coupon_rate is an annual percentage (e.g. 8.0 for 8%).
        - call_price is in currency, on the same scale as face_value
          (e.g. 1040 for a call at 104% of a 1000 bond).
    """
    face_value: float
    coupon_rate: float
    payments_per_year: int
    years_to_maturity: float
    years_to_call: float
    call_price: float

    def __post_init__(self) -> None:
        """Validate bond terms."""
        if self.face_value <= 0:
            raise ValueError(f"face_value must be positive, got {self.face_value}")
        if self.coupon_rate < 0:
            raise ValueError(f"coupon_rate must be non-negative, got {self.coupon_rate}")
        if int(self.payments_per_year) != self.payments_per_year or self.payments_per_year <= 0:
            raise ValueError(f"payments_per_year must be a positive integer, got {self.payments_per_year}")
        if self.years_to_maturity <= 0:
            raise ValueError(f"years_to_maturity must be positive, got {self.years_to_maturity}")
        if self.years_to_call <= 0:
            raise ValueError(f"years_to_call must be positive, got {self.years_to_call}")
        if self.years_to_call > self.years_to_maturity:
            raise ValueError(
                f"years_to_call ({self.years_to_call}) cannot exceed "
                f"years_to_maturity ({self.years_to_maturity})"
            )
        if self.call_price <= 0:
            raise ValueError(f"call_price must be positive, got {self.call_price}")
        for name, years in (("years_to_call", self.years_to_call),
                            ("years_to_maturity", self.years_to_maturity)):
            periods = years * self.payments_per_year
            if abs(periods - round(periods)) > PERIOD_TOLERANCE:
                warnings.warn(
                    f"{name} of {years} is {periods} coupon periods, not a whole number",
                    FractionalPeriodWarning,
                )

    @property
    def call_periods(self) -> float:
        return self.years_to_call * self.payments_per_year

    @property
    def maturity_periods(self) -> float:
        return self.years_to_maturity * self.payments_per_year

    def call_spec(self, observed_price: float | None = None) -> BondCashFlowSpec:
        """Cash flows to the call date, redeemed at call_price."""
        return BondCashFlowSpec(
            face_value=self.face_value,
            coupon_rate=self.coupon_rate,
            payments_per_year=self.payments_per_year,
            periods_to_horizon=self.call_periods,
            redemption_value=self.call_price,
            observed_price=observed_price,
        )

    def maturity_spec(self, observed_price: float | None = None) -> BondCashFlowSpec:
        """Cash flows to maturity, redeemed at face_value."""
        return BondCashFlowSpec(
            face_value=self.face_value,
            coupon_rate=self.coupon_rate,
            payments_per_year=self.payments_per_year,
            periods_to_horizon=self.maturity_periods,
            redemption_value=self.face_value,
            observed_price=observed_price,
        )
