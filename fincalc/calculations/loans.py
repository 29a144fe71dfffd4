"""
Loan Calculations

EMI (equated monthly installment) and full month-by-month amortization
schedules. Both use calculate_monthly_payment so the standalone EMI and the
schedule generator always agree on the installment.
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from fincalc.calculations.errors import (
    require_non_negative,
    require_positive,
    require_whole,
)
from fincalc.calculations.formatting import round_currency

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class EMIResult:
    """EMI and loan totals in whole rupees."""

    emi: int
    total_payment: int
    total_interest: int
    principal: float


@dataclass(frozen=True)
class ScheduleEntry:
    """One month of an amortization schedule (unrounded)."""

    month: int
    payment: float
    principal: float
    interest: float
    remaining_principal: float


@dataclass(frozen=True)
class LoanResult:
    """Loan totals in whole rupees plus the monthly schedule."""

    monthly_payment: int
    total_payment: int
    total_interest: int
    payment_schedule: Tuple[ScheduleEntry, ...]


def _validate_loan_inputs(
    principal: float, annual_rate: float, tenure_months: int
) -> None:
    require_non_negative(principal=principal)
    # The monthly rate and the tenure both end up in a denominator
    require_positive(annual_rate=annual_rate, tenure_months=tenure_months)
    require_whole(tenure_months=tenure_months)


def calculate_monthly_payment(
    principal: float, annual_rate: float, tenure_months: int
) -> float:
    """
    Calculate the fixed monthly payment of an amortizing loan.

    EMI = P * i * (1 + i)^n / ((1 + i)^n - 1), with i the monthly rate.

    Args:
        principal: Loan principal amount
        annual_rate: Annual interest rate in percent (e.g., 9 for 9%)
        tenure_months: Loan tenure in months

    Returns:
        Monthly payment (unrounded)
    """
    _validate_loan_inputs(principal, annual_rate, tenure_months)

    monthly_rate = annual_rate / 100 / MONTHS_PER_YEAR
    growth = (1 + monthly_rate) ** tenure_months

    return principal * monthly_rate * growth / (growth - 1)


def calculate_emi(
    loan_amount: float, annual_rate: float, tenure_months: int
) -> EMIResult:
    """
    Calculate EMI and loan totals without building a schedule.

    Total interest here is total payment minus principal. The schedule
    generator sums interest month by month instead, so the two totals
    can differ by a rupee of rounding.
    """
    emi = calculate_monthly_payment(loan_amount, annual_rate, tenure_months)
    total_payment = emi * tenure_months
    total_interest = total_payment - loan_amount

    logger.debug(
        f"EMI loan={loan_amount} rate={annual_rate} months={tenure_months} -> emi={emi}"
    )

    return EMIResult(
        emi=round_currency(emi),
        total_payment=round_currency(total_payment),
        total_interest=round_currency(total_interest),
        principal=loan_amount,
    )


def calculate_loan(
    principal: float, annual_rate: float, tenure_months: int
) -> LoanResult:
    """
    Generate a full amortization schedule.

    Each month the interest is charged on the remaining principal and the
    rest of the fixed payment reduces the principal. The reported
    remaining principal is floored at zero to hide floating-point drift.

    Args:
        principal: Loan principal amount
        annual_rate: Annual interest rate in percent
        tenure_months: Loan tenure in months

    Returns:
        LoanResult with totals and one ScheduleEntry per month
    """
    monthly_payment = calculate_monthly_payment(principal, annual_rate, tenure_months)
    monthly_rate = annual_rate / 100 / MONTHS_PER_YEAR

    remaining_principal = principal
    total_interest = 0.0
    schedule: List[ScheduleEntry] = []

    for month in range(1, int(tenure_months) + 1):
        interest_for_month = remaining_principal * monthly_rate
        principal_for_month = monthly_payment - interest_for_month

        remaining_principal -= principal_for_month
        total_interest += interest_for_month

        schedule.append(
            ScheduleEntry(
                month=month,
                payment=monthly_payment,
                principal=principal_for_month,
                interest=interest_for_month,
                remaining_principal=max(0.0, remaining_principal),
            )
        )

    logger.debug(
        f"Loan principal={principal} rate={annual_rate} months={tenure_months} "
        f"-> payment={monthly_payment} interest={total_interest}"
    )

    return LoanResult(
        monthly_payment=round_currency(monthly_payment),
        total_payment=round_currency(monthly_payment * tenure_months),
        total_interest=round_currency(total_interest),
        payment_schedule=tuple(schedule),
    )


def sample_schedule(
    schedule: Sequence[ScheduleEntry], head: int = 12, step: int = 12
) -> List[ScheduleEntry]:
    """
    Thin a schedule out for charting.

    Keeps the first `head` months, then every `step`-th month after that
    (months 24, 36, ... with the defaults), and always the final month.
    """
    total_months = len(schedule)
    points = list(schedule[: min(head, total_months)])

    if total_months > head:
        for index in range(head + step - 1, total_months, step):
            points.append(schedule[index])

        if points[-1].month != schedule[-1].month:
            points.append(schedule[-1])

    return points
