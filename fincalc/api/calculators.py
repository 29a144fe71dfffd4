"""
Calculator API endpoints.

These endpoints accept form inputs and return calculated results.
The frontend calls them on every slider or field change, so they stay
stateless and cheap. Request models carry the same ranges as the form
controls; anything the formulas still reject comes back as a 400.
"""

import logging
from dataclasses import asdict
from typing import Callable, Dict, List, TypeVar

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field, field_validator

from fincalc.calculations import deposits, income_tax, loans, ppf
from fincalc.calculations.formatting import format_inr
from fincalc.calculations.income_tax import TaxRegime

logger = logging.getLogger(__name__)

router = APIRouter()

T = TypeVar("T")


def _run(calculator: Callable[..., T], **inputs) -> T:
    """Call a calculator, converting rejected inputs into a 400."""
    try:
        return calculator(**inputs)
    except ValueError as e:
        logger.warning(f"{calculator.__name__} rejected inputs {inputs}: {e}")
        raise HTTPException(status_code=400, detail=str(e))


def _formatted(**amounts: float) -> Dict[str, str]:
    return {name: format_inr(amount) for name, amount in amounts.items()}


# =============================================================================
# FIXED DEPOSIT
# =============================================================================


class FDInput(BaseModel):
    """Input for fixed deposit calculation."""

    principal: float = Field(100000, ge=1000, le=10000000)
    interest_rate: float = Field(7, ge=1, le=15)
    tenure_years: float = Field(5, ge=1, le=30)
    compound_frequency: int = deposits.DEFAULT_COMPOUND_FREQUENCY

    @field_validator("compound_frequency")
    @classmethod
    def check_frequency(cls, value: int) -> int:
        allowed = sorted(deposits.COMPOUNDING_FREQUENCIES.values())
        if value not in allowed:
            raise ValueError(f"compound_frequency must be one of {allowed}")
        return value


class FDResponse(BaseModel):
    """Fixed deposit maturity."""

    principal: float
    maturity_amount: int
    interest_earned: int
    formatted: Dict[str, str]


@router.post("/fd", response_model=FDResponse)
async def calculate_fd(inputs: FDInput):
    """Calculate fixed deposit maturity amount and interest earned."""
    result = _run(
        deposits.calculate_fd,
        principal=inputs.principal,
        annual_rate=inputs.interest_rate,
        years=inputs.tenure_years,
        compound_frequency=inputs.compound_frequency,
    )

    return FDResponse(
        principal=inputs.principal,
        **asdict(result),
        formatted=_formatted(
            principal=inputs.principal,
            maturity_amount=result.maturity_amount,
            interest_earned=result.interest_earned,
        ),
    )


# =============================================================================
# RECURRING DEPOSIT
# =============================================================================


class RDInput(BaseModel):
    """Input for recurring deposit calculation."""

    monthly_investment: float = Field(5000, ge=500, le=100000)
    interest_rate: float = Field(7, ge=1, le=15)
    tenure_months: int = Field(36, ge=3, le=120)


class RDResponse(BaseModel):
    """Recurring deposit maturity."""

    maturity_amount: int
    total_investment: int
    interest_earned: int
    formatted: Dict[str, str]


@router.post("/rd", response_model=RDResponse)
async def calculate_rd(inputs: RDInput):
    """Calculate recurring deposit maturity."""
    result = _run(
        deposits.calculate_rd,
        monthly_investment=inputs.monthly_investment,
        annual_rate=inputs.interest_rate,
        months=inputs.tenure_months,
    )

    return RDResponse(**asdict(result), formatted=_formatted(**asdict(result)))


# =============================================================================
# EMI AND LOAN
# =============================================================================


class EMIInput(BaseModel):
    """Input for EMI calculation."""

    loan_amount: float = Field(1000000, ge=10000, le=10000000)
    interest_rate: float = Field(9, ge=1, le=30)
    tenure_months: int = Field(60, ge=12, le=360)


class BreakupSlice(BaseModel):
    """One slice of the principal vs interest chart."""

    name: str
    value: float


class EMIResponse(BaseModel):
    """EMI and loan totals."""

    emi: int
    total_payment: int
    total_interest: int
    principal: float
    breakup: List[BreakupSlice]
    formatted: Dict[str, str]


@router.post("/emi", response_model=EMIResponse)
async def calculate_emi(inputs: EMIInput):
    """Calculate monthly EMI and the principal/interest breakup."""
    result = _run(
        loans.calculate_emi,
        loan_amount=inputs.loan_amount,
        annual_rate=inputs.interest_rate,
        tenure_months=inputs.tenure_months,
    )

    return EMIResponse(
        **asdict(result),
        breakup=[
            BreakupSlice(name="Principal", value=result.principal),
            BreakupSlice(name="Interest", value=result.total_interest),
        ],
        formatted=_formatted(
            emi=result.emi,
            total_payment=result.total_payment,
            total_interest=result.total_interest,
        ),
    )


class LoanInput(BaseModel):
    """Input for loan amortization schedule."""

    principal: float = Field(2000000, ge=10000, le=10000000)
    interest_rate: float = Field(10, ge=1, le=30)
    tenure_months: int = Field(240, ge=12, le=360)


class ScheduleRow(BaseModel):
    """One month of the amortization schedule."""

    month: int
    payment: float
    principal: float
    interest: float
    remaining_principal: float


class LoanResponse(BaseModel):
    """Loan totals with full and chart-sampled schedules."""

    monthly_payment: int
    total_payment: int
    total_interest: int
    payment_schedule: List[ScheduleRow]
    chart_points: List[ScheduleRow]
    formatted: Dict[str, str]


@router.post("/loan", response_model=LoanResponse)
async def calculate_loan(inputs: LoanInput):
    """Generate a loan amortization schedule."""
    result = _run(
        loans.calculate_loan,
        principal=inputs.principal,
        annual_rate=inputs.interest_rate,
        tenure_months=inputs.tenure_months,
    )

    return LoanResponse(
        monthly_payment=result.monthly_payment,
        total_payment=result.total_payment,
        total_interest=result.total_interest,
        payment_schedule=[asdict(entry) for entry in result.payment_schedule],
        chart_points=[
            asdict(entry) for entry in loans.sample_schedule(result.payment_schedule)
        ],
        formatted=_formatted(
            monthly_payment=result.monthly_payment,
            total_payment=result.total_payment,
            total_interest=result.total_interest,
        ),
    )


# =============================================================================
# PPF
# =============================================================================


class PPFInput(BaseModel):
    """Input for PPF calculation."""

    yearly_investment: float = Field(150000, ge=500, le=150000)
    tenure_years: int = Field(15, ge=15, le=50)


class PPFYearRow(BaseModel):
    """PPF balance at the end of one year."""

    year: int
    investment: float
    interest: int
    balance: int


class PPFResponse(BaseModel):
    """PPF maturity with yearly breakdown."""

    annual_rate: float
    maturity_amount: int
    total_investment: float
    total_interest_earned: int
    yearly_details: List[PPFYearRow]
    formatted: Dict[str, str]


@router.post("/ppf", response_model=PPFResponse)
async def calculate_ppf(inputs: PPFInput):
    """Calculate PPF maturity at the current PPF rate."""
    result = _run(
        ppf.calculate_ppf,
        yearly_investment=inputs.yearly_investment,
        years=inputs.tenure_years,
    )

    return PPFResponse(
        annual_rate=ppf.PPF_ANNUAL_RATE,
        **asdict(result),
        formatted=_formatted(
            maturity_amount=result.maturity_amount,
            total_investment=result.total_investment,
            total_interest_earned=result.total_interest_earned,
        ),
    )


# =============================================================================
# INCOME TAX
# =============================================================================


class IncomeTaxInput(BaseModel):
    """Input for income tax calculation."""

    income: float = Field(1000000, ge=250000, le=5000000)
    regime: TaxRegime = TaxRegime.NEW
    age: int = Field(30, ge=18, le=100)


class TaxLiability(BaseModel):
    """Tax liability under one regime."""

    net_taxable_income: int
    income_tax: int
    cess: int
    total_tax_liability: int


class RegimeComparisonResponse(BaseModel):
    """Old vs new regime for the same income and age."""

    old: TaxLiability
    new: TaxLiability
    recommended: TaxRegime
    savings: int


class IncomeTaxResponse(BaseModel):
    """Liability under the selected regime plus the regime comparison."""

    regime: TaxRegime
    net_taxable_income: int
    income_tax: int
    cess: int
    total_tax_liability: int
    comparison: RegimeComparisonResponse
    formatted: Dict[str, str]


@router.post("/income-tax", response_model=IncomeTaxResponse)
async def calculate_income_tax(inputs: IncomeTaxInput):
    """Calculate income tax for the selected regime and compare both regimes."""
    result = _run(
        income_tax.calculate_income_tax,
        income=inputs.income,
        regime=inputs.regime,
        age=inputs.age,
    )
    comparison = _run(income_tax.compare_regimes, income=inputs.income, age=inputs.age)

    return IncomeTaxResponse(
        regime=inputs.regime,
        **asdict(result),
        comparison=RegimeComparisonResponse(**asdict(comparison)),
        formatted=_formatted(**asdict(result), savings=comparison.savings),
    )
