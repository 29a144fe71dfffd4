"""
Financial Calculation Engine

Pure calculator functions for deposits, loans, PPF and income tax.
All amounts in results are whole rupees, rounded with round_currency.
"""

from fincalc.calculations import deposits, formatting, income_tax, loans, ppf
from fincalc.calculations.deposits import calculate_fd, calculate_rd
from fincalc.calculations.errors import InvalidInputError
from fincalc.calculations.formatting import format_inr, round_currency
from fincalc.calculations.income_tax import (
    TaxRegime,
    calculate_income_tax,
    compare_regimes,
)
from fincalc.calculations.loans import calculate_emi, calculate_loan
from fincalc.calculations.ppf import calculate_ppf

__all__ = [
    "deposits",
    "formatting",
    "income_tax",
    "loans",
    "ppf",
    "InvalidInputError",
    "TaxRegime",
    "calculate_fd",
    "calculate_rd",
    "calculate_emi",
    "calculate_loan",
    "calculate_ppf",
    "calculate_income_tax",
    "compare_regimes",
    "format_inr",
    "round_currency",
]
