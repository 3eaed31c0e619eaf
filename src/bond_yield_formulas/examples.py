"""
Bond Yield Formulas - Worked Bond Examples

**Version**: 0.1.0
**Last Updated**: 2026-10-16
**Status**: Active

Textbook fixed-coupon bonds with known price/yield pairs. Prices were computed
from the closed-form annuity expression

    P = C × [1 - (1+y)^-n] / y  +  R × (1+y)^-n

and rounded to 4 decimal places, so solved yields agree with the stated
yields to better than 1e-4 percentage points.

Structure:
  (1) BondTerms - coupon, frequency, face value, horizons
  (2) BondExample - terms plus observed price and expected yields
"""

from dataclasses import dataclass
from typing import Optional, Dict

from bond_yield_formulas.cashflows import BondCashFlowSpec, CallableBond, horizon_spec


# =============================================================================
# (1) BOND TERMS
# =============================================================================

@dataclass
class BondTerms:
    """Static bond characteristics."""
    face_value: float                    # Par amount ($)
    coupon_rate: float                   # Annual coupon % (6.0 = 6%)
    payments_per_year: int               # Coupon frequency
    years_to_maturity: float             # Years to final maturity
    years_to_call: Optional[float] = None  # Years to first call (None = non-callable)
    call_price: Optional[float] = None     # Call redemption price ($)


# =============================================================================
# (2) BOND EXAMPLE
# =============================================================================

@dataclass
class BondExample:
    """
    Sample bond with an observed price and the yields it implies.

    Yields are annual percentages (6.0 = 6%).
    """
    id: str
    description: str
    terms: BondTerms
    observed_price: float
    expected_ytm: float

    @property
    def is_callable(self) -> bool:
        return self.terms.years_to_call is not None

    def maturity_spec(self) -> BondCashFlowSpec:
        t = self.terms
        return horizon_spec(t.face_value, t.coupon_rate, t.payments_per_year,
                            t.years_to_maturity, observed_price=self.observed_price)

    def callable_bond(self) -> CallableBond:
        """CallableBond for callable examples; ValueError otherwise."""
        t = self.terms
        if not self.is_callable:
            raise ValueError(f"example {self.id} is not callable")
        return CallableBond(
            face_value=t.face_value,
            coupon_rate=t.coupon_rate,
            payments_per_year=t.payments_per_year,
            years_to_maturity=t.years_to_maturity,
            years_to_call=t.years_to_call,
            call_price=t.call_price,
        )


# =============================================================================
# EXAMPLES
# =============================================================================

PAR_SEMIANNUAL = BondExample(
    id="PAR-6",
    description="10-year 6% semiannual bond priced at par: yield equals coupon.",
    terms=BondTerms(face_value=1000.0, coupon_rate=6.0, payments_per_year=2, years_to_maturity=10.0),
    observed_price=1000.0,
    expected_ytm=6.0,
)

DISCOUNT_SEMIANNUAL = BondExample(
    id="DISC-8-10",
    description=(
        "10-year 8% semiannual bond yielding 10%. "
        "40 × 12.46221034 + 1000 × 0.37688948 = 875.3779."
    ),
    terms=BondTerms(face_value=1000.0, coupon_rate=8.0, payments_per_year=2, years_to_maturity=10.0),
    observed_price=875.3779,
    expected_ytm=10.0,
)

PREMIUM_SEMIANNUAL = BondExample(
    id="PREM-8-6",
    description=(
        "10-year 8% semiannual bond yielding 6%. "
        "40 × 14.87747486 + 1000 × 0.55367575 = 1148.7747."
    ),
    terms=BondTerms(face_value=1000.0, coupon_rate=8.0, payments_per_year=2, years_to_maturity=10.0),
    observed_price=1148.7747,
    expected_ytm=6.0,
)

DISCOUNT_ANNUAL = BondExample(
    id="DISC-5-6-ANNUAL",
    description=(
        "5-year 5% annual-pay bond on 100 face yielding 6%. "
        "5 × 4.21236379 + 100 × 0.74725817 = 95.7876."
    ),
    terms=BondTerms(face_value=100.0, coupon_rate=5.0, payments_per_year=1, years_to_maturity=5.0),
    observed_price=95.7876,
    expected_ytm=6.0,
)

CALLABLE_PREMIUM = BondExample(
    id="CALL-8-6",
    description=(
        "PREM-8-6 made callable in 5 years at 1040. At a 6% call yield the "
        "call-horizon price is 40 × 8.53020284 + 1040 × 0.74409391 = 1115.0658; "
        "the market price of 1148.7747 is above that, so YTC is below YTM "
        "and the call date is the worst case."
    ),
    terms=BondTerms(
        face_value=1000.0, coupon_rate=8.0, payments_per_year=2, years_to_maturity=10.0,
        years_to_call=5.0, call_price=1040.0,
    ),
    observed_price=1148.7747,
    expected_ytm=6.0,
)

CALLABLE_DISCOUNT = BondExample(
    id="CALL-8-10",
    description=(
        "DISC-8-10 made callable in 5 years at 1040. Below par a call only "
        "accelerates the pull to 1040, so YTC exceeds YTM and maturity is the worst case."
    ),
    terms=BondTerms(
        face_value=1000.0, coupon_rate=8.0, payments_per_year=2, years_to_maturity=10.0,
        years_to_call=5.0, call_price=1040.0,
    ),
    observed_price=875.3779,
    expected_ytm=10.0,
)


BOND_EXAMPLES: Dict[str, BondExample] = {
    ex.id: ex for ex in (
        PAR_SEMIANNUAL,
        DISCOUNT_SEMIANNUAL,
        PREMIUM_SEMIANNUAL,
        DISCOUNT_ANNUAL,
        CALLABLE_PREMIUM,
        CALLABLE_DISCOUNT,
    )
}
