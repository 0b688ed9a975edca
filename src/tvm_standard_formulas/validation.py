# Requires Python 3.12+
# Uses native type hints: list[x], tuple[x, y], X | None (PEP 585, PEP 604)
from __future__ import annotations

import re
from enum import Enum

import numpy as np

__version__ = "0.1.0"


# =============================================================================
# Errors
# =============================================================================

class TVMError(ValueError):
    """Base class for all time-value-of-money calculation failures."""


class InvalidInputError(TVMError):
    """
    Inputs cannot produce a meaningful result.

    Raised for precondition violations, for an interest-rate solve that does
    not converge within its iteration cap, and for numerical degeneracy
    (division by zero, logarithm of a non-positive ratio, overflow) inside
    a solver. Failures are terminal: no partial result is returned.
    """


class UnknownVariableError(TVMError):
    """The unknown-variable discriminant is not one of the five TVM quantities."""


# =============================================================================
# Unknown-variable discriminant
# =============================================================================

class TVMVariable(Enum):
    """The five time-value-of-money quantities, any one of which may be solved for."""
    PRESENT_VALUE = 0
    FUTURE_VALUE = 1
    INTEREST_RATE = 2
    NUMBER_OF_PERIODS = 3
    PAYMENT = 4

    @property
    def field_name(self) -> str:
        """Attribute name of this quantity on TVMParameters (e.g. 'present_value')."""
        return self.name.lower()

    @classmethod
    def coerce(cls, value: TVMVariable | int | str) -> TVMVariable:
        """
        Resolve a member from itself, its integer value, or its name.

        Names are accepted as 'present_value', 'PRESENT_VALUE' or the camelCase
        'presentValue'.

        Raises:
            UnknownVariableError: If value does not name one of the five quantities
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise UnknownVariableError(f"unknown variable must not be a bool, got {value!r}")
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                raise UnknownVariableError(f"unknown variable value out of range, got {value}") from None
        if isinstance(value, str):
            key = value
            if "_" not in key and not key.isupper():
                key = re.sub(r"(?<!^)(?=[A-Z])", "_", key)
            key = key.upper()
            if key in cls.__members__:
                return cls.__members__[key]
        raise UnknownVariableError(f"unknown variable must name a TVM quantity, got {value!r}")


# =============================================================================
# Input Validation
# =============================================================================

def validate_inputs(
        present_value: float | None,
        future_value: float | None,
        interest_rate: float | None,
        number_of_periods: float | None,
        payment: float | None,
        payments_per_year: int,
        compounding_periods_per_year: int,
        unknown_variable: TVMVariable
) -> None:
    """
    Check every precondition before any arithmetic runs.

    Presence:
        Every quantity other than the unknown must be given. Payment is the
        exception: an absent payment is a lump-sum scenario, not an error.
        Every quantity that is given must be finite.

    Frequencies:
        payments_per_year >= 1 and compounding_periods_per_year >= 1

    Per-unknown constraints:
        PRESENT_VALUE, FUTURE_VALUE, PAYMENT:  number_of_periods >= 0 and interest_rate >= -100
        INTEREST_RATE:                         number_of_periods > 0
        NUMBER_OF_PERIODS:                     interest_rate >= -100

    Args:
        present_value: Present value, or None
        future_value: Future value, or None
        interest_rate: Nominal annual rate as percentage, or None
        number_of_periods: Number of payment periods, or None
        payment: Periodic payment, or None for a lump sum
        payments_per_year: Payment periods per year
        compounding_periods_per_year: Compounding periods per year
        unknown_variable: The quantity being solved for

    Raises:
        InvalidInputError: On the first violated precondition
    """
    knowns = {
        TVMVariable.PRESENT_VALUE: present_value,
        TVMVariable.FUTURE_VALUE: future_value,
        TVMVariable.INTEREST_RATE: interest_rate,
        TVMVariable.NUMBER_OF_PERIODS: number_of_periods,
    }
    for variable, value in knowns.items():
        if variable is not unknown_variable and value is None:
            raise InvalidInputError(f"{variable.field_name} is required when solving for "
                                    f"{unknown_variable.field_name}")
    knowns[TVMVariable.PAYMENT] = payment
    for variable, value in knowns.items():
        if variable is not unknown_variable and value is not None and not np.isfinite(value):
            raise InvalidInputError(f"{variable.field_name} must be finite, got {value}")

    if payments_per_year < 1:
        raise InvalidInputError(f"payments_per_year must be at least 1, got {payments_per_year}")
    if compounding_periods_per_year < 1:
        raise InvalidInputError(
            f"compounding_periods_per_year must be at least 1, got {compounding_periods_per_year}"
        )

    if unknown_variable in (TVMVariable.PRESENT_VALUE, TVMVariable.FUTURE_VALUE, TVMVariable.PAYMENT):
        if number_of_periods < 0:
            raise InvalidInputError(f"number_of_periods must be non-negative, got {number_of_periods}")
        if interest_rate < -100:
            raise InvalidInputError(f"interest_rate must be at least -100, got {interest_rate}")
    elif unknown_variable is TVMVariable.INTEREST_RATE:
        if number_of_periods <= 0:
            raise InvalidInputError(f"number_of_periods must be positive, got {number_of_periods}")
    elif unknown_variable is TVMVariable.NUMBER_OF_PERIODS:
        if interest_rate < -100:
            raise InvalidInputError(f"interest_rate must be at least -100, got {interest_rate}")


def validate_period_range(p1: int, p2: int) -> None:
    """
    Check an inclusive, 1-based amortization period range.

    Raises:
        InvalidInputError: If p1 or p2 is not an integer, or 1 <= p1 <= p2 does not hold
    """
    for name, value in (("p1", p1), ("p2", p2)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInputError(f"{name} must be an integer period number, got {value!r}")
    if p1 < 1:
        raise InvalidInputError(f"p1 must be at least 1, got {p1}")
    if p2 < p1:
        raise InvalidInputError(f"p2 cannot precede p1, got {p2} < {p1}")
