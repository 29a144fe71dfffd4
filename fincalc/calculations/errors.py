"""
Input validation shared by the calculators.
"""

import math


class InvalidInputError(ValueError):
    """Raised when a calculator receives inputs its formula cannot handle."""


def require_finite(**values: float) -> None:
    """Reject NaN and infinite inputs."""
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidInputError(f"{name} must be a finite number, got {value}")


def require_non_negative(**values: float) -> None:
    """Reject negative amounts, rates and durations."""
    require_finite(**values)
    for name, value in values.items():
        if value < 0:
            raise InvalidInputError(f"{name} must not be negative, got {value}")


def require_positive(**values: float) -> None:
    """Reject zero or negative values used as divisors or period counts."""
    require_finite(**values)
    for name, value in values.items():
        if value <= 0:
            raise InvalidInputError(f"{name} must be greater than zero, got {value}")


def require_whole(**values: float) -> None:
    """Reject fractional period counts (15.0 is accepted, 12.5 is not)."""
    require_finite(**values)
    for name, value in values.items():
        if not float(value).is_integer():
            raise InvalidInputError(f"{name} must be a whole number, got {value}")
