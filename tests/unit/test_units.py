"""
Тесты для Units — конверсии smallest unit ↔ display unit

Проверяет:
1. from_decimals: точность, знак, большие значения
2. to_decimals: усечение лишних знаков, нечисловой ввод
3. Валидацию decimals
"""

from decimal import Decimal

import pytest

from superflow.core.math.numerical_safeguards import DECIMAL_CONTEXT, INT256_MAX
from superflow.core.math.units import from_decimals, to_decimals


class TestFromDecimals:
    """Тесты для from_decimals"""

    def test_basic(self) -> None:
        assert from_decimals(1500, 3) == Decimal("1.5")

    def test_zero_decimals(self) -> None:
        """decimals = 0 → значение без изменений"""
        assert from_decimals(1000, 0) == Decimal(1000)

    def test_negative_amount(self) -> None:
        assert from_decimals(-1, 2) == Decimal("-0.01")

    def test_int256_exact(self) -> None:
        """Значения порядка int256 конвертируются без потери точности"""
        display = from_decimals(INT256_MAX, 18)
        assert display.scaleb(18, context=DECIMAL_CONTEXT) == Decimal(INT256_MAX)

    def test_negative_decimals_rejected(self) -> None:
        with pytest.raises(ValueError):
            from_decimals(1, -1)

    def test_non_int_amount_rejected(self) -> None:
        with pytest.raises(TypeError):
            from_decimals(1.5, 2)


class TestToDecimals:
    """Тесты для to_decimals"""

    def test_string_value(self) -> None:
        assert to_decimals("1.5", 18) == 1_500_000_000_000_000_000

    def test_decimal_value(self) -> None:
        assert to_decimals(Decimal("0.000001"), 18) == 10**12

    def test_truncates_extra_digits(self) -> None:
        """Лишние знаки отбрасываются, не округляются вверх"""
        assert to_decimals("0.0019", 3) == 1

    def test_truncates_toward_zero_for_negative(self) -> None:
        assert to_decimals("-0.0019", 3) == -1

    def test_int_value(self) -> None:
        assert to_decimals(3, 2) == 300

    @pytest.mark.parametrize("value", ["abc", None, float("nan")])
    def test_non_numeric_rejected(self, value) -> None:
        with pytest.raises(ValueError):
            to_decimals(value, 18)

    def test_negative_decimals_rejected(self) -> None:
        with pytest.raises(ValueError):
            to_decimals("1", -2)
