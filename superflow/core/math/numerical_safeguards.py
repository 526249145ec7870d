"""
Numerical Safeguards — Safe Integer / Decimal Primitives

Модуль обеспечивает численную устойчивость операций над балансами и rate:
- Проверка диапазонов целых чисел ledger-а (int256 для балансов, int96 для flow rate)
- Санитизация Decimal значений (NaN/Inf и нечисловой ввод не пропагируют)
- Decimal контекст с точностью, достаточной для 256-битных целых
- Clamp и валидация параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Переполнение никогда не "заворачивается" (wrap) — только exception
2. NaN/Inf никогда не пропагируют (заменяются на fallback)
3. Decimal операции не теряют точность для значений в диапазоне int256
4. Все операции детерминированы и воспроизводимы
"""

from decimal import ROUND_DOWN, Context, Decimal, InvalidOperation
from typing import Any, Final

# =============================================================================
# ДИАПАЗОНЫ LEDGER-А
# =============================================================================

# Балансы и накопленные суммы: signed 256-bit
INT256_MIN: Final[int] = -(2**255)
INT256_MAX: Final[int] = 2**255 - 1

# Flow rate в ledger-е хранится как signed 96-bit
INT96_MIN: Final[int] = -(2**95)
INT96_MAX: Final[int] = 2**95 - 1

# 2**256 имеет 78 десятичных цифр; запас на масштабирование decimals
DECIMAL_PRECISION: Final[int] = 120

# Контекст для всех Decimal операций; усечение (никогда не округляем вверх)
DECIMAL_CONTEXT: Final[Context] = Context(prec=DECIMAL_PRECISION, rounding=ROUND_DOWN)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ArithmeticDomainViolation(ArithmeticError):
    """
    Результат вне представимого диапазона ledger-а.

    Возникает вместо тихого переполнения: вызывающая сторона должна
    отклонить операцию, а не отправлять заведомо некорректное значение.
    """

    pass


# =============================================================================
# ЦЕЛЫЕ ЧИСЛА
# =============================================================================


def require_int(value: Any, name: str) -> int:
    """
    Проверка, что значение — целое число (bool не допускается).

    Raises:
        TypeError: Если value не int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def checked_int(
    value: int,
    name: str,
    min_value: int = INT256_MIN,
    max_value: int = INT256_MAX,
) -> int:
    """
    Проверка, что целое значение помещается в диапазон.

    Args:
        value: Проверяемое значение
        name: Имя величины (для сообщения об ошибке)
        min_value: Нижняя граница (default: INT256_MIN)
        max_value: Верхняя граница (default: INT256_MAX)

    Returns:
        value без изменений

    Raises:
        ArithmeticDomainViolation: Если value вне [min_value, max_value]
    """
    if value < min_value or value > max_value:
        raise ArithmeticDomainViolation(
            f"{name} {value} outside representable range [{min_value}, {max_value}]"
        )
    return value


# =============================================================================
# DECIMAL САНИТИЗАЦИЯ
# =============================================================================


def is_valid_decimal(value: Decimal) -> bool:
    """Проверка, что Decimal конечный (не NaN, не Inf)."""
    return value.is_finite()


def sanitize_decimal(value: Any, fallback: Decimal | None = None) -> Decimal | None:
    """
    Приведение произвольного числового ввода к конечному Decimal.

    float приводится через str() (без двоичных артефактов),
    строки обрезаются от пробелов.

    Args:
        value: Decimal / int / float / str
        fallback: Значение при невалидном вводе (default: None)

    Returns:
        Конечный Decimal или fallback

    Examples:
        >>> sanitize_decimal("1.5")
        Decimal('1.5')
        >>> sanitize_decimal("abc") is None
        True
        >>> sanitize_decimal(float("nan")) is None
        True
    """
    if isinstance(value, bool) or value is None:
        return fallback

    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, int):
            result = Decimal(value)
        elif isinstance(value, float):
            result = Decimal(str(value))
        elif isinstance(value, str):
            result = Decimal(value.strip())
        else:
            return fallback
    except InvalidOperation:
        return fallback

    if not is_valid_decimal(result):
        return fallback

    return result


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(
    value: int,
    min_value: int | None = None,
    max_value: int | None = None,
) -> int:
    """
    Ограничение значения в заданном диапазоне.

    Examples:
        >>> clamp(5, 0, 10)
        5
        >>> clamp(-1, 0)
        0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: int, name: str) -> None:
    """
    Валидация, что целое значение неотрицательное.

    Raises:
        TypeError: Если value не int
        ValueError: Если value < 0
    """
    require_int(value, name)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
