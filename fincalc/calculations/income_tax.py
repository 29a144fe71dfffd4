"""
Income Tax Calculations

Progressive slab tax for resident individuals (FY 2023-24 slabs) under the
old (deduction based) and new (flat rate) regimes, plus health and
education cess.

Slab tables are ordered tuples of TaxBracket. Each bracket carries the
tax already accrued below its lower bound, so any income is evaluated as
base_tax + (income - lower_bound) * rate for the bracket containing it.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Dict, Tuple

from fincalc.calculations.errors import require_non_negative
from fincalc.calculations.formatting import round_currency

logger = logging.getLogger(__name__)

STANDARD_DEDUCTION = 50000
CESS_RATE = 0.04

SENIOR_CITIZEN_AGE = 60
SUPER_SENIOR_CITIZEN_AGE = 80


class TaxRegime(str, enum.Enum):
    """Alternative rule sets for computing tax liability."""

    OLD = "old"  # Slab rates with deductions
    NEW = "new"  # Lower slab rates, no deductions


class AgeBand(str, enum.Enum):
    """Age bands with separate old regime exemption limits."""

    BELOW_60 = "below_60"
    SENIOR = "senior"
    SUPER_SENIOR = "super_senior"


@dataclass(frozen=True)
class TaxBracket:
    """A slab starting (exclusively) at lower_bound."""

    lower_bound: float
    base_tax: float  # Tax accrued on income up to lower_bound
    rate: float  # Marginal rate as decimal


@dataclass(frozen=True)
class IncomeTaxResult:
    """Tax liability in whole rupees."""

    net_taxable_income: int
    income_tax: int
    cess: int
    total_tax_liability: int


@dataclass(frozen=True)
class RegimeComparison:
    """Both regimes evaluated for the same income and age."""

    old: IncomeTaxResult
    new: IncomeTaxResult
    recommended: TaxRegime
    savings: int


OLD_REGIME_BRACKETS: Dict[AgeBand, Tuple[TaxBracket, ...]] = {
    AgeBand.BELOW_60: (
        TaxBracket(0, 0, 0.0),
        TaxBracket(250000, 0, 0.05),
        TaxBracket(500000, 12500, 0.2),
        TaxBracket(1000000, 112500, 0.3),
    ),
    AgeBand.SENIOR: (
        TaxBracket(0, 0, 0.0),
        TaxBracket(300000, 0, 0.05),
        TaxBracket(500000, 10000, 0.2),
        TaxBracket(1000000, 110000, 0.3),
    ),
    # No 5% slab for super senior citizens
    AgeBand.SUPER_SENIOR: (
        TaxBracket(0, 0, 0.0),
        TaxBracket(500000, 0, 0.2),
        TaxBracket(1000000, 100000, 0.3),
    ),
}

NEW_REGIME_BRACKETS: Tuple[TaxBracket, ...] = (
    TaxBracket(0, 0, 0.0),
    TaxBracket(300000, 0, 0.05),
    TaxBracket(600000, 15000, 0.1),
    TaxBracket(900000, 45000, 0.15),
    TaxBracket(1200000, 90000, 0.2),
    TaxBracket(1500000, 150000, 0.3),
)


def get_age_band(age: float) -> AgeBand:
    """Map an age in years to its old regime age band."""
    if age >= SUPER_SENIOR_CITIZEN_AGE:
        return AgeBand.SUPER_SENIOR
    if age >= SENIOR_CITIZEN_AGE:
        return AgeBand.SENIOR
    return AgeBand.BELOW_60


def select_brackets(regime: TaxRegime, age: float) -> Tuple[TaxBracket, ...]:
    """Pick the slab table for a regime; only the old regime depends on age."""
    if TaxRegime(regime) is TaxRegime.NEW:
        return NEW_REGIME_BRACKETS
    return OLD_REGIME_BRACKETS[get_age_band(age)]


def evaluate_brackets(
    taxable_income: float, brackets: Tuple[TaxBracket, ...]
) -> float:
    """
    Evaluate a piecewise-linear slab table.

    Income exactly on a bound is taxed by the lower bracket. Above the top
    bound the top marginal rate applies without limit.

    Args:
        taxable_income: Income after deductions
        brackets: Slab table ordered by ascending lower_bound

    Returns:
        Tax before cess (unrounded)
    """
    for bracket in reversed(brackets):
        if taxable_income > bracket.lower_bound:
            return bracket.base_tax + (taxable_income - bracket.lower_bound) * bracket.rate
    return 0.0


def calculate_income_tax(
    income: float, regime: TaxRegime, age: float
) -> IncomeTaxResult:
    """
    Calculate income tax liability for one regime.

    The standard deduction is only available under the old regime. Net
    taxable income is not floored at zero, incomes below the deduction
    report a negative taxable income and no tax.

    Args:
        income: Gross annual income
        regime: TaxRegime.OLD or TaxRegime.NEW (or "old" / "new")
        age: Age of the taxpayer in years

    Returns:
        IncomeTaxResult with taxable income, tax, cess and total liability
    """
    require_non_negative(income=income, age=age)
    regime = TaxRegime(regime)

    standard_deduction = STANDARD_DEDUCTION if regime is TaxRegime.OLD else 0
    taxable_income = income - standard_deduction

    tax = evaluate_brackets(taxable_income, select_brackets(regime, age))
    cess = tax * CESS_RATE

    logger.debug(
        f"Income tax income={income} regime={regime.value} age={age} "
        f"-> taxable={taxable_income} tax={tax}"
    )

    return IncomeTaxResult(
        net_taxable_income=round_currency(taxable_income),
        income_tax=round_currency(tax),
        cess=round_currency(cess),
        total_tax_liability=round_currency(tax + cess),
    )


def compare_regimes(income: float, age: float) -> RegimeComparison:
    """
    Evaluate both regimes and recommend the one with the lower liability.

    On equal liability the old regime is recommended.
    """
    old = calculate_income_tax(income, TaxRegime.OLD, age)
    new = calculate_income_tax(income, TaxRegime.NEW, age)

    if old.total_tax_liability <= new.total_tax_liability:
        recommended = TaxRegime.OLD
    else:
        recommended = TaxRegime.NEW

    return RegimeComparison(
        old=old,
        new=new,
        recommended=recommended,
        savings=abs(old.total_tax_liability - new.total_tax_liability),
    )
