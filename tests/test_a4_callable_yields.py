"""
Unit tests for yield to call, yield to maturity and yield to worst.

Version: 0.1.0
Last Updated: 2026-10-16
Status: Active

================================================================================
FUNCTIONS UNDER TEST:
================================================================================
- yield_to_call: bisection solve on the call horizon
- yield_to_maturity: bisection solve on the maturity horizon
- yield_to_worst: min(YTC, YTM) with the worst horizon

================================================================================
TEST DATA SOURCES:
================================================================================
- 10y 8% semiannual bond, callable in 5y at 1040:
  priced at 1148.7747 (6% YTM): call horizon is worst
  priced at 875.3779 (10% YTM): maturity horizon is worst

================================================================================
"""

import unittest
import warnings

from bond_yield_formulas.callable_yields import (
    Horizon,
    YieldToWorst,
    yield_to_call,
    yield_to_maturity,
    yield_to_worst,
)
from bond_yield_formulas.cashflows import CallableBond
from bond_yield_formulas.pricing import present_value
from bond_yield_formulas.yield_solver import YieldOutOfRangeError, solve_yield
from tests.utilities import generate_random_callable_bond, get_random_state


DECIMAL_PLACES_FOR_YIELD: int = 4


class TestCallableYields(unittest.TestCase):

    def setUp(self):
        self.bond = CallableBond(
            face_value=1000.0,
            coupon_rate=8.0,
            payments_per_year=2,
            years_to_maturity=10.0,
            years_to_call=5.0,
            call_price=1040.0,
        )

    def test_yield_to_maturity_textbook(self):
        self.assertAlmostEqual(yield_to_maturity(self.bond, 1148.7747), 6.0, places=DECIMAL_PLACES_FOR_YIELD)
        self.assertAlmostEqual(yield_to_maturity(self.bond, 875.3779), 10.0, places=DECIMAL_PLACES_FOR_YIELD)

    def test_yield_to_call_reprices_call_horizon(self):
        price = 1148.7747
        ytc = yield_to_call(self.bond, price)
        self.assertAlmostEqual(present_value(ytc / 100.0, self.bond.call_spec()), price, places=6)

    def test_yields_match_direct_solves(self):
        price = 1100.0
        self.assertEqual(yield_to_call(self.bond, price), solve_yield(self.bond.call_spec(price)))
        self.assertEqual(yield_to_maturity(self.bond, price), solve_yield(self.bond.maturity_spec(price)))

    def test_premium_bond_worst_case_is_call(self):
        result = yield_to_worst(self.bond, 1148.7747)
        self.assertIsInstance(result, YieldToWorst)
        self.assertLess(result.yield_to_call, result.yield_to_maturity)
        self.assertEqual(result.yield_to_worst, result.yield_to_call)
        self.assertEqual(result.worst_horizon, Horizon.CALL)

    def test_discount_bond_worst_case_is_maturity(self):
        result = yield_to_worst(self.bond, 875.3779)
        self.assertGreater(result.yield_to_call, result.yield_to_maturity)
        self.assertEqual(result.yield_to_worst, result.yield_to_maturity)
        self.assertEqual(result.worst_horizon, Horizon.MATURITY)
        self.assertAlmostEqual(result.yield_to_worst, 10.0, places=DECIMAL_PLACES_FOR_YIELD)

    def test_call_at_par_on_maturity_ties_to_maturity(self):
        bond = CallableBond(1000.0, 5.0, 2, 10.0, 10.0, 1000.0)
        result = yield_to_worst(bond, 980.0)
        self.assertEqual(result.yield_to_call, result.yield_to_maturity)
        self.assertEqual(result.worst_horizon, Horizon.MATURITY)

    def test_worst_is_always_minimum(self):
        rng = get_random_state()
        for i in range(25):
            bond = generate_random_callable_bond(rng)
            annual_rate = max(bond.coupon_rate / 100.0 + rng.uniform(-0.02, 0.03), 0.001)
            price = present_value(annual_rate, bond.maturity_spec())
            with self.subTest(bond=i):
                with warnings.catch_warnings():
                    warnings.simplefilter("ignore")
                    result = yield_to_worst(bond, price)
                self.assertEqual(result.yield_to_worst, min(result.yield_to_call, result.yield_to_maturity))
                expected = Horizon.CALL if result.yield_to_call < result.yield_to_maturity else Horizon.MATURITY
                self.assertEqual(result.worst_horizon, expected)

    def test_solver_options_forwarded(self):
        coarse = yield_to_worst(self.bond, 875.3779, iterations=5)
        fine = yield_to_worst(self.bond, 875.3779)
        self.assertNotAlmostEqual(coarse.yield_to_maturity, fine.yield_to_maturity, places=4)

    def test_strict_infeasible_call_price_raises(self):
        # Call horizon can return at most 5 × 80 + 1040 = 1440 undiscounted
        with self.assertRaises(YieldOutOfRangeError):
            yield_to_worst(self.bond, 1500.0, strict=True)


if __name__ == '__main__':
    unittest.main(verbosity=2)
