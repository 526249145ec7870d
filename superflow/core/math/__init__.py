"""
Core math modules для superflow

Математические примитивы над балансами и flow rate с гарантией
отсутствия переполнения и потери точности.
"""

# Numerical Safeguards
from superflow.core.math.numerical_safeguards import (
    # Ranges
    DECIMAL_CONTEXT,
    DECIMAL_PRECISION,
    INT96_MAX,
    INT96_MIN,
    INT256_MAX,
    INT256_MIN,
    # Exceptions
    ArithmeticDomainViolation,
    # Integers
    checked_int,
    require_int,
    # Decimal sanitization
    is_valid_decimal,
    sanitize_decimal,
    # Utilities
    clamp,
    # Validation
    validate_non_negative,
)

# Units
from superflow.core.math.units import from_decimals, to_decimals

# Accrual
from superflow.core.math.accrual import current_amount, elapsed_seconds

# Deposit
from superflow.core.math.deposit import required_deposit

__all__ = [
    # Numerical Safeguards — Ranges
    "DECIMAL_CONTEXT",
    "DECIMAL_PRECISION",
    "INT96_MAX",
    "INT96_MIN",
    "INT256_MAX",
    "INT256_MIN",
    # Numerical Safeguards — Exceptions
    "ArithmeticDomainViolation",
    # Numerical Safeguards — Integers
    "checked_int",
    "require_int",
    # Numerical Safeguards — Decimal sanitization
    "is_valid_decimal",
    "sanitize_decimal",
    # Numerical Safeguards — Utilities
    "clamp",
    # Numerical Safeguards — Validation
    "validate_non_negative",
    # Units
    "from_decimals",
    "to_decimals",
    # Accrual
    "current_amount",
    "elapsed_seconds",
    # Deposit
    "required_deposit",
]
