"""
TVM Standard Formulas - Reference Calculator Scenarios

**Version**: 0.1.0
**Last Updated**: 2026-10-19
**Status**: Draft

Worked time-value-of-money problems with the answers a financial calculator
prints for them. Each example is one call to calculate():

  (1) parameters - the TVM parameter set, naming the unknown
  (2) period range - [p1, p2] for the balance/principal/interest aggregates
  (3) expected values - solved result plus, where the example gives them,
      the range aggregates, all checked to `tolerance`

Sign convention: money received positive, money paid out negative.
Rates: nominal annual percentages (5.5 = 5.5%).
"""

from __future__ import annotations

from dataclasses import dataclass

from .calculator import TVMParameters
from .validation import TVMVariable


# =============================================================================
# TVM EXAMPLE
# =============================================================================

@dataclass(frozen=True)
class TVMExample:
    """
    Reference scenario with inputs and expected outputs.

    expected_balance/principal/interest are None when the example only
    checks the solved value.
    """
    id: str
    description: str
    parameters: TVMParameters
    expected_result: float
    p1: int = 1
    p2: int = 1
    expected_balance: float | None = None
    expected_principal: float | None = None
    expected_interest: float | None = None
    tolerance: float = 0.01

    @property
    def unknown_variable(self) -> TVMVariable:
        return self.parameters.unknown_variable

    @property
    def has_aggregates(self) -> bool:
        """True if the example checks balance/principal/interest over [p1, p2]."""
        return self.expected_balance is not None


# =============================================================================
# MORTGAGE: 75,000 at 5.5%, 30 years monthly
# =============================================================================

MORTGAGE_PAYMENT = TVMParameters(
    unknown_variable=TVMVariable.PAYMENT,
    present_value=75000,
    future_value=0,
    interest_rate=5.5,
    number_of_periods=360,
    payments_per_year=12,
    compounding_periods_per_year=12,
)

MORTGAGE_RATE = TVMExample(
    id="MORTGAGE-RATE",
    description="Rate on a 75,000 30-year mortgage paying 425.84 at month end.",
    parameters=TVMParameters(
        unknown_variable=TVMVariable.INTEREST_RATE,
        present_value=75000,
        future_value=0,
        number_of_periods=360,
        payment=-425.84,
        payments_per_year=12,
        compounding_periods_per_year=12,
    ),
    expected_result=5.50,
)

MORTGAGE_RATE_DUE = TVMExample(
    id="MORTGAGE-RATE-DUE",
    description="Same mortgage with payments at the beginning of each month.",
    parameters=TVMParameters(
        unknown_variable=TVMVariable.INTEREST_RATE,
        present_value=75000,
        future_value=0,
        number_of_periods=360,
        payment=-425.84,
        payments_per_year=12,
        compounding_periods_per_year=12,
        is_end_of_period_payment=False,
    ),
    expected_result=5.54,
)

MORTGAGE_FIRST_MONTH = TVMExample(
    id="MORTGAGE-M1",
    description="Level payment and first-month split on the 75,000 mortgage.",
    parameters=MORTGAGE_PAYMENT,
    expected_result=-425.84,
    p1=1,
    p2=1,
    expected_balance=74917.91,          # = 75000 + 343.75 - 425.84
    expected_principal=-82.09,          # = -425.84 - (-343.75)
    expected_interest=-343.75,          # = round(-75000 * 0.055/12, 2)
)

MORTGAGE_FIRST_YEAR = TVMExample(
    id="MORTGAGE-Y1",
    description="First-year (months 1-12) totals on the 75,000 mortgage.",
    parameters=MORTGAGE_PAYMENT,
    expected_result=-425.84,
    p1=1,
    p2=12,
    expected_balance=73989.71,
    expected_principal=-1010.29,        # = 73989.71 - 75000
    expected_interest=-4099.79,         # = 12 * -425.84 - (-1010.29)
)

MORTGAGE_TENTH_YEAR = TVMExample(
    id="MORTGAGE-Y10",
    description="Tenth-year (months 133-144) totals on the 75,000 mortgage.",
    parameters=MORTGAGE_PAYMENT,
    expected_result=-425.84,
    p1=133,
    p2=144,
    expected_balance=58309.61,
    expected_principal=-1847.54,
    expected_interest=-3262.54,         # = 12 * -425.84 - (-1847.54)
)

MORTGAGE_TENTH_YEAR_FROM_PV = TVMExample(
    id="MORTGAGE-Y10-PV",
    description=(
        "Tenth-year totals reached by solving the loan amount from an "
        "unrounded payment of 425.841751."
    ),
    parameters=TVMParameters(
        unknown_variable=TVMVariable.PRESENT_VALUE,
        future_value=0,
        interest_rate=5.5,
        number_of_periods=360,
        payment=-425.841751,
        payments_per_year=12,
        compounding_periods_per_year=12,
    ),
    expected_result=75000.00,           # PV and PMT both round to the mortgage's cents
    p1=133,
    p2=144,
    expected_balance=58309.61,
    expected_principal=-1847.54,
    expected_interest=-3262.54,
)

MORTGAGE_TERM = TVMExample(
    id="MORTGAGE-N",
    description="Months to repay 75,000 at 5.5% paying 500 per month.",
    parameters=TVMParameters(
        unknown_variable=TVMVariable.NUMBER_OF_PERIODS,
        present_value=75000,
        future_value=0,
        interest_rate=5.5,
        payment=-500,
        payments_per_year=12,
        compounding_periods_per_year=12,
    ),
    expected_result=254.36,
)

MORTGAGE_QUARTERLY_PAYMENT = TVMExample(
    id="MORTGAGE-QTR",
    description="Quarterly payment on 75,000 at 5.5% over 30 years (120 quarters).",
    parameters=TVMParameters(
        unknown_variable=TVMVariable.PAYMENT,
        present_value=75000,
        future_value=0,
        interest_rate=5.5,
        number_of_periods=120,
        payments_per_year=4,
        compounding_periods_per_year=4,
    ),
    expected_result=-1279.82,
)


# =============================================================================
# MORTGAGE: 649,000, 30 years monthly
# =============================================================================

JUMBO_RATE = TVMExample(
    id="JUMBO-RATE",
    description="Rate on a 649,000 30-year mortgage paying 4,000 at month end.",
    parameters=TVMParameters(
        unknown_variable=TVMVariable.INTEREST_RATE,
        present_value=649000,
        future_value=0,
        number_of_periods=360,
        payment=-4000,
        payments_per_year=12,
        compounding_periods_per_year=12,
    ),
    expected_result=6.259,
    tolerance=0.001,
)

JUMBO_RATE_DUE = TVMExample(
    id="JUMBO-RATE-DUE",
    description="Same 649,000 mortgage with payments at the beginning of each month.",
    parameters=TVMParameters(
        unknown_variable=TVMVariable.INTEREST_RATE,
        present_value=649000,
        future_value=0,
        number_of_periods=360,
        payment=-4000,
        payments_per_year=12,
        compounding_periods_per_year=12,
        is_end_of_period_payment=False,
    ),
    expected_result=6.31,
    tolerance=0.001,
)

JUMBO_PAYMENT = TVMExample(
    id="JUMBO-PMT",
    description="Monthly payment on 649,000 at 6.375% over 30 years.",
    parameters=TVMParameters(
        unknown_variable=TVMVariable.PAYMENT,
        present_value=649000,
        future_value=0,
        interest_rate=6.375,
        number_of_periods=360,
        payments_per_year=12,
        compounding_periods_per_year=12,
    ),
    expected_result=-4048.92,
)

JUMBO_PAYMENT_DUE = TVMExample(
    id="JUMBO-PMT-DUE",
    description="Beginning-of-month payment on 649,000 at 6.375% over 30 years.",
    parameters=TVMParameters(
        unknown_variable=TVMVariable.PAYMENT,
        present_value=649000,
        future_value=0,
        interest_rate=6.375,
        number_of_periods=360,
        payments_per_year=12,
        compounding_periods_per_year=12,
        is_end_of_period_payment=False,
    ),
    expected_result=-4027.52,           # = -4048.92 / (1 + 0.06375/12)
)


# =============================================================================
# SAVINGS: lump sums at 0.5% annual
# =============================================================================

SAVINGS_FUTURE_VALUE = TVMExample(
    id="SAVINGS-FV",
    description="Value after 20 years of 5,000 deposited at 0.5% annual.",
    parameters=TVMParameters(
        unknown_variable=TVMVariable.FUTURE_VALUE,
        present_value=-5000,
        future_value=0,
        interest_rate=0.5,
        number_of_periods=20,
    ),
    expected_result=5524.48,            # = 5000 * 1.005^20
)

SAVINGS_PRESENT_VALUE = TVMExample(
    id="SAVINGS-PV",
    description="Deposit needed today to have 10,000 in 20 years at 0.5% annual.",
    parameters=TVMParameters(
        unknown_variable=TVMVariable.PRESENT_VALUE,
        future_value=10000,
        interest_rate=0.5,
        number_of_periods=20,
    ),
    expected_result=-9050.63,           # = -10000 / 1.005^20
)


# =============================================================================
# ANNUITIES: 20,000 per year for 10 years at 10%
# =============================================================================

ANNUITY_PRESENT_VALUE = TVMExample(
    id="ANNUITY-PV",
    description="Present value of 20,000 paid at each year end for 10 years at 10%.",
    parameters=TVMParameters(
        unknown_variable=TVMVariable.PRESENT_VALUE,
        future_value=0,
        interest_rate=10,
        number_of_periods=10,
        payment=-20000,
    ),
    expected_result=122891.34,
)

ANNUITY_PRESENT_VALUE_DUE = TVMExample(
    id="ANNUITY-PV-DUE",
    description="Present value of 20,000 paid at each year start for 10 years at 10%.",
    parameters=TVMParameters(
        unknown_variable=TVMVariable.PRESENT_VALUE,
        future_value=0,
        interest_rate=10,
        number_of_periods=10,
        payment=-20000,
        is_end_of_period_payment=False,
    ),
    expected_result=135180.48,          # = 122891.34 * 1.10
)


# =============================================================================
# EXAMPLE REGISTRY
# =============================================================================

TVM_EXAMPLES: dict[str, TVMExample] = {
    # 75,000 mortgage
    "MORTGAGE_RATE": MORTGAGE_RATE,
    "MORTGAGE_RATE_DUE": MORTGAGE_RATE_DUE,
    "MORTGAGE_FIRST_MONTH": MORTGAGE_FIRST_MONTH,
    "MORTGAGE_FIRST_YEAR": MORTGAGE_FIRST_YEAR,
    "MORTGAGE_TENTH_YEAR": MORTGAGE_TENTH_YEAR,
    "MORTGAGE_TENTH_YEAR_FROM_PV": MORTGAGE_TENTH_YEAR_FROM_PV,
    "MORTGAGE_TERM": MORTGAGE_TERM,
    "MORTGAGE_QUARTERLY_PAYMENT": MORTGAGE_QUARTERLY_PAYMENT,

    # 649,000 mortgage
    "JUMBO_RATE": JUMBO_RATE,
    "JUMBO_RATE_DUE": JUMBO_RATE_DUE,
    "JUMBO_PAYMENT": JUMBO_PAYMENT,
    "JUMBO_PAYMENT_DUE": JUMBO_PAYMENT_DUE,

    # Lump sums
    "SAVINGS_FUTURE_VALUE": SAVINGS_FUTURE_VALUE,
    "SAVINGS_PRESENT_VALUE": SAVINGS_PRESENT_VALUE,

    # Annuities
    "ANNUITY_PRESENT_VALUE": ANNUITY_PRESENT_VALUE,
    "ANNUITY_PRESENT_VALUE_DUE": ANNUITY_PRESENT_VALUE_DUE,
}


if __name__ == "__main__":
    from .calculator import calculate_from_parameters

    for name, ex in TVM_EXAMPLES.items():
        out = calculate_from_parameters(ex.parameters, ex.p1, ex.p2, include_schedule=False)
        print(f"\n{name}: {ex.description[:60]}...")
        print(f"  Solve {ex.unknown_variable.field_name}: {out.result:,.4f} "
              f"(expected {ex.expected_result:,.4f} +/- {ex.tolerance})")
        if ex.has_aggregates:
            print(f"  Periods {ex.p1}-{ex.p2}: balance={out.balance:,.2f}, "
                  f"principal={out.principal:,.2f}, interest={out.interest:,.2f}")
