"""
Public Provident Fund (PPF) Accrual

Yearly contributions earning annually compounded interest at the
government-notified PPF rate.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from fincalc.calculations.errors import require_non_negative, require_whole
from fincalc.calculations.formatting import round_currency

logger = logging.getLogger(__name__)

# Current PPF rate in percent per annum
PPF_ANNUAL_RATE = 7.1


@dataclass(frozen=True)
class PPFYearEntry:
    """Balance of the account at the end of one year."""

    year: int
    investment: float
    interest: int
    balance: int


@dataclass(frozen=True)
class PPFResult:
    """PPF maturity in whole rupees plus the yearly breakdown."""

    maturity_amount: int
    total_investment: float
    total_interest_earned: int
    yearly_details: Tuple[PPFYearEntry, ...]


def calculate_ppf(
    yearly_investment: float, years: int, annual_rate: float = PPF_ANNUAL_RATE
) -> PPFResult:
    """
    Calculate PPF maturity with a deposit at the start of every year.

    Each year the deposit is added and the whole balance earns a year of
    interest.

    Args:
        yearly_investment: Amount deposited every year
        years: Number of years the account is held
        annual_rate: Annual interest rate in percent (defaults to the PPF rate)

    Returns:
        PPFResult with maturity, totals and one PPFYearEntry per year
    """
    require_non_negative(
        yearly_investment=yearly_investment, years=years, annual_rate=annual_rate
    )
    require_whole(years=years)

    rate = annual_rate / 100
    balance = 0.0
    total_investment = 0.0
    yearly_details: List[PPFYearEntry] = []

    for year in range(1, int(years) + 1):
        total_investment += yearly_investment
        interest_for_year = (balance + yearly_investment) * rate
        balance = balance + yearly_investment + interest_for_year

        yearly_details.append(
            PPFYearEntry(
                year=year,
                investment=yearly_investment,
                interest=round_currency(interest_for_year),
                balance=round_currency(balance),
            )
        )

    logger.debug(
        f"PPF yearly={yearly_investment} years={years} rate={annual_rate} "
        f"-> balance={balance}"
    )

    return PPFResult(
        maturity_amount=round_currency(balance),
        total_investment=total_investment,
        total_interest_earned=round_currency(balance - total_investment),
        yearly_details=tuple(yearly_details),
    )
