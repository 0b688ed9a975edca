"""
Unit tests for the amortization engine.

Covers cent rounding (half away from zero, with 12-place noise removal),
the full schedule, range aggregation over [p1, p2], and the agreement
between the two independent simulations.

Version: 0.1.0
Last Updated: 2026-10-19
Status: Active
"""

import math
import unittest
import warnings

import numpy as np

from tvm_standard_formulas.amortization import (
    AmortizationSchedule,
    amortization_schedule,
    amortization_range,
    round_half_away,
    whole_periods,
)
from tvm_standard_formulas.validation import InvalidInputError

# =============================================================================
# Test Parameters
# =============================================================================

CENT: float = 0.005              # half a cent: figures must agree to the printed cent
EXACT: float = 1e-6              # identities that hold up to float addition

MORTGAGE_PV: float = 75000.0
MORTGAGE_RATE: float = 5.5 / 1200
MORTGAGE_N: int = 360
MORTGAGE_PMT: float = -425.84

# Module-level shared data (populated by setUpModule)
MORTGAGE_SCHEDULE: AmortizationSchedule | None = None


def setUpModule():
    """Build the 30-year mortgage schedule once for every test class."""
    global MORTGAGE_SCHEDULE
    MORTGAGE_SCHEDULE = amortization_schedule(MORTGAGE_PV, MORTGAGE_RATE, MORTGAGE_N, MORTGAGE_PMT)


class TestRoundHalfAway(unittest.TestCase):

    def test_ties_round_away_from_zero(self):
        cases = [(0.125, 0.13), (-0.125, -0.13), (2.675, 2.68), (-2.675, -2.68), (0.5, 1.0)]
        for value, expected in cases:
            with self.subTest(value=value):
                places = 0 if value == 0.5 else 2
                self.assertEqual(round_half_away(value, places), expected)

    def test_noise_below_twelve_places_is_removed(self):
        self.assertEqual(round_half_away(0.1 + 0.2, 12), 0.3)
        self.assertEqual(round_half_away(round_half_away(343.74999999999994, 12), 2), 343.75)

    def test_non_finite_values_pass_through(self):
        self.assertTrue(math.isnan(round_half_away(math.nan, 2)))
        self.assertEqual(round_half_away(math.inf, 2), math.inf)

    def test_large_values(self):
        self.assertEqual(round_half_away(1e20, 2), 1e20)
        self.assertEqual(round_half_away(123456789.125, 2), 123456789.13)


class TestWholePeriods(unittest.TestCase):

    def test_cases(self):
        cases = [
            (360, 360),
            (360.0, 360),
            (359.99999999, 360),     # solved N within 1e-7 of an integer
            (360.00000001, 360),
            (254.36, 254),           # fractional N truncates
            (12.0000002, 12),
            (0, 0),
            (0.5, 0),
            (-3.0, 0),
        ]
        for n, expected in cases:
            with self.subTest(n=n):
                self.assertEqual(whole_periods(n), expected)


class TestAmortizationSchedule(unittest.TestCase):

    def test_first_period(self):
        s = MORTGAGE_SCHEDULE
        self.assertEqual(s.period[0], 1)
        self.assertAlmostEqual(s.balance[0], 74917.91, delta=CENT)
        self.assertAlmostEqual(s.principal[0], -82.09, delta=CENT)
        self.assertAlmostEqual(s.interest[0], -343.75, delta=CENT)

    def test_shape(self):
        s = MORTGAGE_SCHEDULE
        self.assertEqual(len(s), MORTGAGE_N)
        for name in ("period", "balance", "principal", "interest"):
            with self.subTest(array=name):
                self.assertEqual(getattr(s, name).shape, (MORTGAGE_N,))
        np.testing.assert_array_equal(s.period, np.arange(1, MORTGAGE_N + 1))

    def test_payment_splits_into_principal_and_interest(self):
        s = MORTGAGE_SCHEDULE
        np.testing.assert_allclose(s.principal + s.interest, MORTGAGE_PMT, rtol=0, atol=EXACT)

    def test_principal_is_balance_change(self):
        s = MORTGAGE_SCHEDULE
        previous = np.concatenate(([MORTGAGE_PV], s.balance[:-1]))
        np.testing.assert_allclose(s.principal, s.balance - previous, rtol=0, atol=EXACT)

    def test_balance_moves_in_whole_cents(self):
        s = MORTGAGE_SCHEDULE
        np.testing.assert_allclose(s.balance * 100.0, np.round(s.balance * 100.0), rtol=0, atol=1e-4)

    def test_loan_amortizes(self):
        s = MORTGAGE_SCHEDULE
        # summed principal repays PV up to the final balance
        self.assertAlmostEqual(s.total_principal, s.balance[-1] - MORTGAGE_PV, delta=EXACT)
        # -425.84 is the exact payment rounded to the cent; the shortfall compounds to ~1.37
        self.assertLess(abs(s.balance[-1]), 2.0)
        self.assertAlmostEqual(s.total_interest, MORTGAGE_N * MORTGAGE_PMT - s.total_principal, delta=EXACT)

    def test_zero_rate_loan_amortizes_exactly(self):
        s = amortization_schedule(1200.0, 0.0, 12, -100.0)
        self.assertEqual(s.total_principal, -1200.0)
        self.assertEqual(s.balance[-1], 0.0)
        self.assertEqual(s.total_interest, 0.0)

    def test_lump_sum_compounds(self):
        s = amortization_schedule(1000.0, 0.01, 3, 0.0)
        np.testing.assert_allclose(s.balance, [1010.0, 1020.1, 1030.3], rtol=0, atol=EXACT)
        np.testing.assert_allclose(s.interest, [-10.0, -10.1, -10.2], rtol=0, atol=EXACT)

    def test_inputs_rounded_to_cents(self):
        rounded = amortization_schedule(75000.004, MORTGAGE_RATE, 12, -425.841751)
        for name in ("balance", "principal", "interest"):
            with self.subTest(array=name):
                np.testing.assert_allclose(getattr(rounded, name), getattr(MORTGAGE_SCHEDULE, name)[:12],
                                           rtol=0, atol=EXACT)

    def test_arrays_are_read_only(self):
        with self.assertRaises(ValueError):
            MORTGAGE_SCHEDULE.balance[0] = 0.0

    def test_fractional_periods_warn_and_truncate(self):
        with self.assertWarns(UserWarning):
            s = amortization_schedule(MORTGAGE_PV, MORTGAGE_RATE, 254.36, -500.0)
        self.assertEqual(len(s), 254)

    def test_zero_periods_is_empty(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            s = amortization_schedule(MORTGAGE_PV, MORTGAGE_RATE, 0, MORTGAGE_PMT)
        self.assertEqual(len(s), 0)
        self.assertEqual(s.total_principal, 0.0)


class TestAmortizationRange(unittest.TestCase):

    def test_first_month(self):
        out = amortization_range(MORTGAGE_PV, MORTGAGE_RATE, MORTGAGE_PMT)
        self.assertEqual((out.p1, out.p2), (1, 1))
        self.assertAlmostEqual(out.balance, 74917.91, delta=CENT)
        self.assertAlmostEqual(out.principal, -82.09, delta=CENT)
        self.assertAlmostEqual(out.interest, -343.75, delta=CENT)

    def test_first_year(self):
        out = amortization_range(MORTGAGE_PV, MORTGAGE_RATE, MORTGAGE_PMT, 1, 12)
        self.assertAlmostEqual(out.balance, 73989.71, delta=CENT)
        self.assertAlmostEqual(out.principal, -1010.29, delta=CENT)
        self.assertAlmostEqual(out.interest, -4099.79, delta=CENT)

    def test_tenth_year(self):
        out = amortization_range(MORTGAGE_PV, MORTGAGE_RATE, MORTGAGE_PMT, 133, 144)
        self.assertAlmostEqual(out.balance, 58309.61, delta=CENT)
        self.assertAlmostEqual(out.principal, -1847.54, delta=CENT)
        self.assertAlmostEqual(out.interest, -3262.54, delta=CENT)

    def test_full_range_matches_schedule(self):
        s = MORTGAGE_SCHEDULE
        out = amortization_range(MORTGAGE_PV, MORTGAGE_RATE, MORTGAGE_PMT, 1, MORTGAGE_N)
        self.assertAlmostEqual(out.balance, s.balance[-1], delta=EXACT)
        self.assertAlmostEqual(out.principal, s.total_principal, delta=EXACT)
        self.assertAlmostEqual(out.interest, s.total_interest, delta=EXACT)

    def test_every_single_period_matches_schedule(self):
        s = MORTGAGE_SCHEDULE
        for p in (1, 2, 59, 60, 61, 180, 359, 360):
            with self.subTest(period=p):
                out = amortization_range(MORTGAGE_PV, MORTGAGE_RATE, MORTGAGE_PMT, p, p)
                self.assertAlmostEqual(out.balance, s.balance[p - 1], delta=EXACT)
                self.assertAlmostEqual(out.principal, s.principal[p - 1], delta=EXACT)
                self.assertAlmostEqual(out.interest, s.interest[p - 1], delta=EXACT)

    def test_sub_ranges_match_schedule_sums(self):
        s = MORTGAGE_SCHEDULE
        for p1, p2 in [(1, 12), (13, 24), (133, 144), (300, 360)]:
            with self.subTest(p1=p1, p2=p2):
                out = amortization_range(MORTGAGE_PV, MORTGAGE_RATE, MORTGAGE_PMT, p1, p2)
                self.assertAlmostEqual(out.principal, float(np.sum(s.principal[p1 - 1:p2])), delta=EXACT)
                self.assertAlmostEqual(out.interest, float(np.sum(s.interest[p1 - 1:p2])), delta=EXACT)

    def test_range_past_term_continues_recurrence(self):
        out = amortization_range(MORTGAGE_PV, MORTGAGE_RATE, MORTGAGE_PMT, 361, 372)
        # the loan is paid off, so further payments drive the balance negative
        self.assertLess(out.balance, -5000.0)

    def test_invalid_range(self):
        for p1, p2 in [(0, 1), (5, 4), (1.5, 2)]:
            with self.subTest(p1=p1, p2=p2):
                with self.assertRaises(InvalidInputError):
                    amortization_range(MORTGAGE_PV, MORTGAGE_RATE, MORTGAGE_PMT, p1, p2)


if __name__ == '__main__':
    unittest.main(verbosity=2)
