"""
Unit tests for rate conversion (nominal annual rate -> effective period rate)
and the annuity-type multiplier.

Version: 0.1.0
Last Updated: 2026-10-19
Status: Active
"""

import unittest

import numpy as np

from tvm_standard_formulas.rates import (
    period_rate,
    period_rate_vector,
    annuity_multiplier,
    nominal_rate_from_period_rate,
)

DECIMAL_PLACES_FOR_ASSERTIONS: int = 12


class TestPeriodRate(unittest.TestCase):
    """period_rate(R, P, C) = (1 + 0.01 R / C)^(C / P) - 1"""

    def test_matching_frequencies_reduce_to_simple_division(self):
        for rate_pct, freq in [(5.5, 12), (6.375, 12), (5.5, 4), (10.0, 1), (0.5, 1)]:
            with self.subTest(rate=rate_pct, freq=freq):
                self.assertAlmostEqual(period_rate(rate_pct, freq, freq), rate_pct / (100.0 * freq),
                                       places=DECIMAL_PLACES_FOR_ASSERTIONS)

    def test_quarterly_compounding_paid_monthly(self):
        # 3% per quarter spread over three monthly payments
        self.assertAlmostEqual(period_rate(12.0, 12, 4), 1.03 ** (1.0 / 3.0) - 1.0,
                               places=DECIMAL_PLACES_FOR_ASSERTIONS)

    def test_monthly_compounding_paid_annually(self):
        self.assertAlmostEqual(period_rate(6.0, 1, 12), 1.005 ** 12 - 1.0,
                               places=DECIMAL_PLACES_FOR_ASSERTIONS)

    def test_zero_rate(self):
        self.assertEqual(period_rate(0.0, 12, 4), 0.0)

    def test_minus_one_hundred_percent(self):
        self.assertEqual(period_rate(-100.0, 1, 1), -1.0)

    def test_compounding_more_often_than_paying_raises_effective_rate(self):
        self.assertGreater(period_rate(8.0, 1, 12), period_rate(8.0, 1, 1))


class TestPeriodRateVector(unittest.TestCase):

    def test_matches_scalar_elementwise(self):
        rates = [0.0, 0.5, 5.5, 6.375, 12.0, 25.0]
        for freq_p, freq_c in [(12, 12), (12, 4), (1, 12), (4, 4)]:
            with self.subTest(P=freq_p, C=freq_c):
                vec = period_rate_vector(rates, freq_p, freq_c)
                expected = np.array([period_rate(r, freq_p, freq_c) for r in rates])
                np.testing.assert_allclose(vec, expected, rtol=0, atol=1e-15)

    def test_preserves_shape(self):
        grid = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        self.assertEqual(period_rate_vector(grid, 12, 12).shape, (2, 3))

    def test_nan_propagates(self):
        vec = period_rate_vector([5.5, np.nan], 12, 12)
        self.assertTrue(np.isfinite(vec[0]))
        self.assertTrue(np.isnan(vec[1]))


class TestAnnuityMultiplier(unittest.TestCase):

    def test_ordinary_annuity(self):
        self.assertEqual(annuity_multiplier(0.0045833, True), 1.0)

    def test_annuity_due(self):
        self.assertAlmostEqual(annuity_multiplier(0.0045833, False), 1.0045833,
                               places=DECIMAL_PLACES_FOR_ASSERTIONS)

    def test_zero_rate_annuity_due(self):
        self.assertEqual(annuity_multiplier(0.0, False), 1.0)


class TestNominalRateFromPeriodRate(unittest.TestCase):

    def test_inverts_period_rate_when_frequencies_match(self):
        for rate_pct, freq in [(5.5, 12), (6.259, 12), (10.0, 1), (5.5, 4)]:
            with self.subTest(rate=rate_pct, freq=freq):
                back = nominal_rate_from_period_rate(period_rate(rate_pct, freq, freq), freq)
                self.assertAlmostEqual(back, rate_pct, places=10)

    def test_scales_by_compounding_frequency(self):
        self.assertAlmostEqual(nominal_rate_from_period_rate(0.005, 12), 6.0, places=12)


if __name__ == '__main__':
    unittest.main(verbosity=2)
