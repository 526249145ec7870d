"""
Deposit — залог, необходимый для открытия / изменения flow

    deposit = flow_rate * liquidation_period_seconds

Залог покрывает полный liquidation window: solvency monitor успевает
отреагировать до того, как баланс stream-а станет отрицательным.
Нет flow (rate <= 0) или нет окна (period <= 0) → залог 0.
"""

from decimal import Decimal
from typing import Any

from superflow.core.math.numerical_safeguards import DECIMAL_CONTEXT, sanitize_decimal


def required_deposit(flow_rate: Any, liquidation_period_seconds: int) -> Decimal:
    """
    Залог для flow_rate.

    Единица результата совпадает с единицей flow_rate
    (display unit → display unit, smallest unit → smallest unit).

    Args:
        flow_rate: Запрошенный rate (Decimal / int / float / str)
        liquidation_period_seconds: Liquidation period токена

    Returns:
        Залог (>= 0)

    Examples:
        >>> required_deposit(1, 3600)
        Decimal('3600')
        >>> required_deposit(-5, 3600)
        Decimal('0')
    """
    rate = sanitize_decimal(flow_rate)

    if rate is None or rate <= 0 or liquidation_period_seconds <= 0:
        return Decimal(0)

    return DECIMAL_CONTEXT.multiply(rate, Decimal(liquidation_period_seconds))
