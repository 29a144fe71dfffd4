"""
Financial Calculators

Fixed deposit, recurring deposit, EMI, PPF, loan amortization and
income tax calculators served over a JSON API.
"""

__version__ = "0.1.0"
