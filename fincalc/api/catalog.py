"""
Calculator catalog shown on the landing page.
"""

from typing import List

from fastapi import APIRouter
from pydantic import BaseModel

router = APIRouter()


class CalculatorInfo(BaseModel):
    """A calculator card on the landing page."""

    slug: str
    title: str
    description: str
    path: str
    endpoint: str
    color: str


CALCULATORS = [
    CalculatorInfo(
        slug="fd",
        title="Fixed Deposit Calculator",
        description="Calculate maturity amount and interest earned on your FD investment.",
        path="/fd-calculator",
        endpoint="/api/calculate/fd",
        color="#38B2AC",
    ),
    CalculatorInfo(
        slug="rd",
        title="Recurring Deposit Calculator",
        description="Calculate returns on your monthly investments with RD calculator.",
        path="/rd-calculator",
        endpoint="/api/calculate/rd",
        color="#4299E1",
    ),
    CalculatorInfo(
        slug="emi",
        title="EMI Calculator",
        description="Calculate monthly EMI, total interest and payment breakup for your loan.",
        path="/emi-calculator",
        endpoint="/api/calculate/emi",
        color="#48BB78",
    ),
    CalculatorInfo(
        slug="ppf",
        title="PPF Calculator",
        description="Calculate the returns on your Public Provident Fund investments.",
        path="/ppf-calculator",
        endpoint="/api/calculate/ppf",
        color="#9F7AEA",
    ),
    CalculatorInfo(
        slug="loan",
        title="Loan Calculator",
        description="Calculate your loan details with flexible terms and interest rates.",
        path="/loan-calculator",
        endpoint="/api/calculate/loan",
        color="#F56565",
    ),
    CalculatorInfo(
        slug="income-tax",
        title="Income Tax Calculator",
        description="Estimate your income tax liability under different tax regimes.",
        path="/income-tax-calculator",
        endpoint="/api/calculate/income-tax",
        color="#2C5282",
    ),
]


@router.get("", response_model=List[CalculatorInfo])
async def list_calculators():
    """List the available calculators."""
    return CALCULATORS
