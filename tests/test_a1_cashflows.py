"""
Unit tests for bond cash-flow specification and schedule functions.

Version: 0.1.0
Last Updated: 2026-10-16
Status: Active

================================================================================
FUNCTIONS UNDER TEST:
================================================================================
- BondCashFlowSpec: coupon_payment, coupon_periods, years_to_horizon, with_price
- validate_spec: domain checks and fractional-period warning
- horizon_spec: construction from years
- run_bond_cashflow: per-period coupon/redemption schedule and discounting
- CallableBond: validation, call_spec, maturity_spec

================================================================================
"""

import dataclasses
import unittest
import warnings
import numpy as np

from bond_yield_formulas.cashflows import (
    BondCashFlowSpec,
    CallableBond,
    FractionalPeriodWarning,
    horizon_spec,
    run_bond_cashflow,
    validate_spec,
)
from bond_yield_formulas.pricing import present_value


class TestBondCashFlowSpec(unittest.TestCase):
    """Derived properties of the cash-flow spec."""

    def setUp(self):
        self.spec = BondCashFlowSpec(
            face_value=1000.0,
            coupon_rate=6.0,
            payments_per_year=2,
            periods_to_horizon=20,
            redemption_value=1000.0,
            observed_price=980.0,
        )

    def test_coupon_payment(self):
        """6% on 1000 paid semiannually is 30 per period."""
        self.assertAlmostEqual(self.spec.coupon_payment, 30.0, places=12)

    def test_coupon_periods_and_years(self):
        self.assertEqual(self.spec.coupon_periods, 20)
        self.assertAlmostEqual(self.spec.years_to_horizon, 10.0, places=12)

    def test_coupon_periods_effectively_integer(self):
        """A period count within float noise of an integer counts as that integer."""
        spec = horizon_spec(1000.0, 5.0, 12, 0.1 * 3 * 10)
        self.assertEqual(spec.coupon_periods, 36)
        spec = BondCashFlowSpec(1000.0, 5.0, 2, 20 - 1e-12, 1000.0)
        self.assertEqual(spec.coupon_periods, 20)

    def test_fractional_periods_floor(self):
        spec = BondCashFlowSpec(1000.0, 5.0, 2, 4.6, 1000.0)
        self.assertEqual(spec.coupon_periods, 4)

    def test_with_price_returns_copy(self):
        repriced = self.spec.with_price(1010.0)
        self.assertEqual(repriced.observed_price, 1010.0)
        self.assertEqual(self.spec.observed_price, 980.0)
        self.assertEqual(repriced.periods_to_horizon, self.spec.periods_to_horizon)

    def test_spec_is_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.spec.face_value = 500.0

    def test_horizon_spec_defaults_redemption_to_face(self):
        spec = horizon_spec(1000.0, 8.0, 2, 5.0)
        self.assertEqual(spec.redemption_value, 1000.0)
        self.assertEqual(spec.periods_to_horizon, 10.0)
        self.assertIsNone(spec.observed_price)

    def test_horizon_spec_call_redemption(self):
        spec = horizon_spec(1000.0, 8.0, 2, 5.0, redemption_value=1040.0, observed_price=1100.0)
        self.assertEqual(spec.redemption_value, 1040.0)
        self.assertEqual(spec.observed_price, 1100.0)


class TestValidateSpec(unittest.TestCase):
    """Boundary validation of user-supplied specs."""

    def _spec(self, **overrides):
        fields = dict(face_value=1000.0, coupon_rate=5.0, payments_per_year=2,
                      periods_to_horizon=10, redemption_value=1000.0, observed_price=990.0)
        fields.update(overrides)
        return BondCashFlowSpec(**fields)

    def test_valid_spec_returned_unchanged(self):
        spec = self._spec()
        self.assertIs(validate_spec(spec), spec)

    def test_zero_coupon_is_valid(self):
        validate_spec(self._spec(coupon_rate=0.0))

    def test_invalid_fields_raise(self):
        cases = [
            dict(face_value=0.0),
            dict(face_value=-100.0),
            dict(coupon_rate=-1.0),
            dict(payments_per_year=0),
            dict(payments_per_year=2.5),
            dict(periods_to_horizon=0),
            dict(redemption_value=0.0),
            dict(observed_price=0.0),
        ]
        for overrides in cases:
            with self.subTest(overrides=overrides):
                with self.assertRaises(ValueError):
                    validate_spec(self._spec(**overrides))

    def test_missing_price_is_allowed(self):
        validate_spec(self._spec(observed_price=None))

    def test_fractional_periods_warn(self):
        with self.assertWarns(FractionalPeriodWarning):
            validate_spec(self._spec(periods_to_horizon=9.5))

    def test_whole_periods_do_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            validate_spec(self._spec(periods_to_horizon=10.0))


class TestRunBondCashflow(unittest.TestCase):
    """Per-period discounted cash-flow schedule."""

    def test_schedule_shape_and_flows(self):
        spec = horizon_spec(1000.0, 8.0, 2, 10.0)
        cf = run_bond_cashflow(spec, 0.10)

        self.assertEqual(len(cf.period), 20)
        np.testing.assert_array_equal(cf.period, np.arange(1, 21))
        np.testing.assert_allclose(cf.time_years, np.arange(1, 21) / 2.0)
        np.testing.assert_allclose(cf.coupon, np.full(20, 40.0))
        self.assertEqual(cf.principal[-1], 1000.0)
        self.assertTrue(np.all(cf.principal[:-1] == 0.0))
        self.assertAlmostEqual(cf.total[-1], 1040.0, places=12)

    def test_schedule_sums_to_present_value(self):
        spec = horizon_spec(1000.0, 8.0, 2, 10.0)
        for rate in (0.0, 0.03, 0.10, 0.45):
            with self.subTest(rate=rate):
                cf = run_bond_cashflow(spec, rate)
                self.assertAlmostEqual(cf.price, present_value(rate, spec), places=9)

    def test_discount_factors_decrease(self):
        cf = run_bond_cashflow(horizon_spec(100.0, 5.0, 4, 3.0), 0.05)
        self.assertTrue(np.all(np.diff(cf.discount_factor) < 0))
        self.assertAlmostEqual(cf.discount_factor[0], 1.0 / 1.0125, places=12)

    def test_zero_rate_schedule_is_undiscounted(self):
        spec = horizon_spec(1000.0, 6.0, 2, 5.0)
        cf = run_bond_cashflow(spec, 0.0)
        np.testing.assert_allclose(cf.present_value, cf.total)
        self.assertAlmostEqual(cf.price, 1300.0, places=9)

    def test_fractional_horizon_discounts_redemption_at_horizon(self):
        spec = BondCashFlowSpec(1000.0, 6.0, 2, 4.5, 1000.0)
        cf = run_bond_cashflow(spec, 0.06)
        self.assertEqual(len(cf.period), 4)
        expected_last = 30.0 / 1.03 ** 4 + 1000.0 / 1.03 ** 4.5
        self.assertAlmostEqual(cf.present_value[-1], expected_last, places=9)


class TestCallableBond(unittest.TestCase):
    """Validation and horizon specs of CallableBond."""

    def _bond(self, **overrides):
        fields = dict(face_value=1000.0, coupon_rate=8.0, payments_per_year=2,
                      years_to_maturity=10.0, years_to_call=5.0, call_price=1040.0)
        fields.update(overrides)
        return CallableBond(**fields)

    def test_call_and_maturity_specs(self):
        bond = self._bond()
        call = bond.call_spec(1100.0)
        maturity = bond.maturity_spec(1100.0)

        self.assertEqual(call.periods_to_horizon, 10.0)
        self.assertEqual(call.redemption_value, 1040.0)
        self.assertEqual(call.observed_price, 1100.0)

        self.assertEqual(maturity.periods_to_horizon, 20.0)
        self.assertEqual(maturity.redemption_value, 1000.0)
        self.assertEqual(maturity.observed_price, 1100.0)

        for spec in (call, maturity):
            self.assertEqual(spec.face_value, 1000.0)
            self.assertEqual(spec.coupon_rate, 8.0)
            self.assertEqual(spec.payments_per_year, 2)

    def test_call_at_maturity_is_allowed(self):
        bond = self._bond(years_to_call=10.0)
        self.assertEqual(bond.call_periods, bond.maturity_periods)

    def test_invalid_terms_raise(self):
        cases = [
            dict(face_value=0.0),
            dict(coupon_rate=-0.5),
            dict(payments_per_year=0),
            dict(years_to_maturity=0.0),
            dict(years_to_call=0.0),
            dict(years_to_call=12.0),
            dict(call_price=0.0),
        ]
        for overrides in cases:
            with self.subTest(overrides=overrides):
                with self.assertRaises(ValueError):
                    self._bond(**overrides)

    def test_fractional_call_date_warns(self):
        with self.assertWarns(FractionalPeriodWarning):
            self._bond(years_to_call=2.3)


if __name__ == '__main__':
    unittest.main(verbosity=2)
