"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Проверку диапазонов целых чисел (int256 / int96)
2. Decimal санитизацию
3. Clamp
4. Валидацию параметров
"""

from decimal import Decimal

import pytest

from superflow.core.math.numerical_safeguards import (
    DECIMAL_CONTEXT,
    INT96_MAX,
    INT96_MIN,
    INT256_MAX,
    INT256_MIN,
    ArithmeticDomainViolation,
    checked_int,
    clamp,
    is_valid_decimal,
    require_int,
    sanitize_decimal,
    validate_non_negative,
)

# =============================================================================
# ТЕСТЫ ДИАПАЗОНОВ
# =============================================================================


class TestCheckedInt:
    """Тесты для checked_int"""

    def test_bounds_inclusive(self) -> None:
        """Границы диапазона допустимы"""
        assert checked_int(INT256_MAX, "x") == INT256_MAX
        assert checked_int(INT256_MIN, "x") == INT256_MIN

    def test_above_int256_raises(self) -> None:
        """Выход за int256 → ArithmeticDomainViolation"""
        with pytest.raises(ArithmeticDomainViolation, match="balance"):
            checked_int(INT256_MAX + 1, "balance")

    def test_below_int256_raises(self) -> None:
        with pytest.raises(ArithmeticDomainViolation):
            checked_int(INT256_MIN - 1, "balance")

    def test_custom_int96_range(self) -> None:
        assert checked_int(INT96_MAX, "rate", INT96_MIN, INT96_MAX) == INT96_MAX
        with pytest.raises(ArithmeticDomainViolation):
            checked_int(INT96_MAX + 1, "rate", INT96_MIN, INT96_MAX)

    def test_violation_is_arithmetic_error(self) -> None:
        with pytest.raises(ArithmeticError):
            checked_int(INT256_MAX + 1, "x")


class TestRequireInt:
    """Тесты для require_int"""

    def test_int_passes(self) -> None:
        assert require_int(5, "x") == 5

    @pytest.mark.parametrize("value", [1.0, "1", Decimal(1), True, None])
    def test_non_int_raises(self, value) -> None:
        """float / str / Decimal / bool → TypeError"""
        with pytest.raises(TypeError):
            require_int(value, "x")


# =============================================================================
# ТЕСТЫ DECIMAL САНИТИЗАЦИИ
# =============================================================================


class TestSanitizeDecimal:
    """Тесты для sanitize_decimal"""

    def test_string(self) -> None:
        assert sanitize_decimal("1.5") == Decimal("1.5")

    def test_string_with_spaces(self) -> None:
        assert sanitize_decimal(" 2 ") == Decimal(2)

    def test_float_without_binary_artifacts(self) -> None:
        """float приводится через str()"""
        assert sanitize_decimal(0.1) == Decimal("0.1")

    def test_int(self) -> None:
        assert sanitize_decimal(-5) == Decimal(-5)

    @pytest.mark.parametrize(
        "value",
        ["abc", "", None, True, float("nan"), float("inf"), Decimal("NaN"), "Infinity", [1]],
    )
    def test_invalid_returns_fallback(self, value) -> None:
        """Невалидный ввод → fallback"""
        assert sanitize_decimal(value) is None
        assert sanitize_decimal(value, fallback=Decimal(0)) == Decimal(0)

    def test_is_valid_decimal(self) -> None:
        assert is_valid_decimal(Decimal("1")) is True
        assert is_valid_decimal(Decimal("NaN")) is False
        assert is_valid_decimal(Decimal("-Infinity")) is False


class TestDecimalContext:
    """Тесты точности Decimal контекста"""

    def test_int256_product_exact(self) -> None:
        """Произведение значений порядка int256 не теряет точность"""
        value = Decimal(INT256_MAX)
        assert int(DECIMAL_CONTEXT.multiply(value, Decimal(3))) == INT256_MAX * 3


# =============================================================================
# ТЕСТЫ УТИЛИТ И ВАЛИДАЦИИ
# =============================================================================


class TestClamp:
    """Тесты для clamp"""

    def test_within_range(self) -> None:
        assert clamp(5, 0, 10) == 5

    def test_below_min(self) -> None:
        assert clamp(-1, 0, 10) == 0

    def test_above_max(self) -> None:
        assert clamp(15, 0, 10) == 10

    def test_one_sided(self) -> None:
        assert clamp(-3, min_value=0) == 0
        assert clamp(30, max_value=10) == 10


class TestValidation:
    """Тесты для validate_*"""

    def test_validate_non_negative(self) -> None:
        validate_non_negative(0, "decimals")
        with pytest.raises(ValueError, match="decimals"):
            validate_non_negative(-1, "decimals")

    def test_validate_rejects_non_int(self) -> None:
        with pytest.raises(TypeError):
            validate_non_negative(1.5, "decimals")

    def test_package_exports_resolve(self) -> None:
        """Каждое имя из superflow.core.math.__all__ существует"""
        import superflow.core.math as core_math

        for name in core_math.__all__:
            assert hasattr(core_math, name), name
