"""
Units — Конверсия между smallest unit и display unit токена

Единственный допустимый способ преобразований между:
- smallest unit (целое число, как хранит ledger)
- display unit (Decimal, smallest unit * 10**-decimals)

ЗАПРЕЩЕНО смешивать единицы без явного конвертера из этого модуля.
"""

from decimal import Decimal
from typing import Any

from superflow.core.math.numerical_safeguards import (
    DECIMAL_CONTEXT,
    require_int,
    sanitize_decimal,
    validate_non_negative,
)


def from_decimals(amount: int, decimals: int) -> Decimal:
    """
    Конверсия: smallest unit → display unit

    Args:
        amount: Значение в smallest unit (может быть отрицательным)
        decimals: Количество знаков токена (>= 0)

    Returns:
        Значение в display unit (точное, без округления)

    Examples:
        >>> from_decimals(1500, 3)
        Decimal('1.500')
    """
    require_int(amount, "amount")
    validate_non_negative(decimals, "decimals")

    return Decimal(amount).scaleb(-decimals, context=DECIMAL_CONTEXT)


def to_decimals(value: Any, decimals: int) -> int:
    """
    Конверсия: display unit → smallest unit

    Лишние знаки после decimals отбрасываются (усечение к нулю).

    Args:
        value: Значение в display unit (Decimal / int / float / str)
        decimals: Количество знаков токена (>= 0)

    Returns:
        Значение в smallest unit

    Raises:
        ValueError: Если value не является конечным числом

    Examples:
        >>> to_decimals("1.5", 18)
        1500000000000000000
        >>> to_decimals("0.0019", 3)
        1
    """
    validate_non_negative(decimals, "decimals")

    display_value = sanitize_decimal(value)
    if display_value is None:
        raise ValueError(f"Cannot convert non-numeric value {value!r} to smallest unit")

    return int(display_value.scaleb(decimals, context=DECIMAL_CONTEXT))
