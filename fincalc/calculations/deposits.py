"""
Deposit Accrual Calculations

Fixed deposit (compound interest on a lump sum) and recurring deposit
(monthly contributions compounded monthly) maturity values.
"""

import logging
from dataclasses import dataclass

from fincalc.calculations.errors import (
    InvalidInputError,
    require_non_negative,
    require_positive,
    require_whole,
)
from fincalc.calculations.formatting import round_currency

logger = logging.getLogger(__name__)

# Compounding periods per year offered for fixed deposits
COMPOUNDING_FREQUENCIES = {
    "annually": 1,
    "semi-annually": 2,
    "quarterly": 4,
    "monthly": 12,
}

DEFAULT_COMPOUND_FREQUENCY = COMPOUNDING_FREQUENCIES["quarterly"]


@dataclass(frozen=True)
class FDResult:
    """Fixed deposit maturity in whole rupees."""

    maturity_amount: int
    interest_earned: int


@dataclass(frozen=True)
class RDResult:
    """Recurring deposit maturity in whole rupees."""

    maturity_amount: int
    total_investment: int
    interest_earned: int


def calculate_fd(
    principal: float,
    annual_rate: float,
    years: float,
    compound_frequency: int = DEFAULT_COMPOUND_FREQUENCY,
) -> FDResult:
    """
    Calculate fixed deposit maturity.

    A = P * (1 + r/n) ^ (n*t)

    Args:
        principal: Amount deposited
        annual_rate: Annual interest rate in percent (e.g., 7 for 7%)
        years: Deposit duration in years
        compound_frequency: Compounding periods per year (1, 2, 4 or 12)

    Returns:
        FDResult with maturity amount and interest earned
    """
    require_non_negative(principal=principal, annual_rate=annual_rate, years=years)
    if compound_frequency < 1:
        raise InvalidInputError(
            f"compound_frequency must be at least 1, got {compound_frequency}"
        )

    rate = annual_rate / 100
    n = compound_frequency

    maturity_amount = principal * (1 + rate / n) ** (n * years)
    interest_earned = maturity_amount - principal

    logger.debug(
        f"FD principal={principal} rate={annual_rate} years={years} n={n} "
        f"-> maturity={maturity_amount}"
    )

    return FDResult(
        maturity_amount=round_currency(maturity_amount),
        interest_earned=round_currency(interest_earned),
    )


def calculate_rd(
    monthly_investment: float, annual_rate: float, months: int
) -> RDResult:
    """
    Calculate recurring deposit maturity.

    M * ((1 + i)^n - 1) / i * (1 + i), with i the monthly rate.

    Each output is rounded from its own unrounded value, so
    maturity_amount may differ from total_investment + interest_earned
    by one rupee.

    Args:
        monthly_investment: Amount deposited every month
        annual_rate: Annual interest rate in percent
        months: Number of monthly deposits

    Returns:
        RDResult with maturity amount, total investment and interest earned
    """
    require_non_negative(monthly_investment=monthly_investment, months=months)
    require_whole(months=months)
    # The monthly rate is a divisor
    require_positive(annual_rate=annual_rate)

    monthly_rate = annual_rate / 100 / 12
    n = months

    maturity_amount = (
        monthly_investment
        * (((1 + monthly_rate) ** n - 1) / monthly_rate)
        * (1 + monthly_rate)
    )
    total_investment = monthly_investment * months
    interest_earned = maturity_amount - total_investment

    logger.debug(
        f"RD monthly={monthly_investment} rate={annual_rate} months={months} "
        f"-> maturity={maturity_amount}"
    )

    return RDResult(
        maturity_amount=round_currency(maturity_amount),
        total_investment=round_currency(total_investment),
        interest_earned=round_currency(interest_earned),
    )
