"""
Accrual — текущий баланс токена из снапшота и прошедшего времени

Баланс в снапшоте валиден только на момент last_update_date. Любое чтение
после этого момента пересчитывает значение:

    amount = balance + net_flow_rate * elapsed
    elapsed = floor(now - last_update_date), целые секунды

Clock skew (now < last_update_date) трактуется как elapsed = 0: баланс
никогда не уменьшается задним числом из-за рассинхронизации часов.
"""

import math

from superflow.core.math.numerical_safeguards import checked_int, clamp, require_int


def elapsed_seconds(last_update_date: float, now: float) -> int:
    """
    Прошедшее время в целых секундах (усечение, clamp к 0).

    Examples:
        >>> elapsed_seconds(100, 110.9)
        10
        >>> elapsed_seconds(100, 90)
        0
    """
    return clamp(math.floor(now - last_update_date), min_value=0)


def current_amount(
    balance: int,
    net_flow_rate: int,
    last_update_date: float,
    now: float,
) -> int:
    """
    Текущий баланс с учётом накопления.

    Args:
        balance: Баланс в smallest unit на момент last_update_date
        net_flow_rate: Net flow (smallest unit / секунда, со знаком)
        last_update_date: Момент снапшота (unix seconds)
        now: Текущий момент (unix seconds)

    Returns:
        Баланс в smallest unit на момент now

    Raises:
        TypeError: Если balance или net_flow_rate не int
        ArithmeticDomainViolation: Если результат вне диапазона int256
    """
    require_int(balance, "balance")
    require_int(net_flow_rate, "net_flow_rate")

    elapsed = elapsed_seconds(last_update_date, now)
    return checked_int(balance + net_flow_rate * elapsed, "current_amount")
