"""Unit тесты для FlowValidator.

Coverage:
- invalid_address для невалидного получателя
- self_flow_forbidden с каноническим сравнением
- non_positive_rate для 0, отрицательного и нечислового rate
- insufficient_balance / PASS по залогу
- Порядок проверок (short-circuit)
- Precondition: невалидный собственный адрес
"""

from decimal import Decimal

import pytest

from superflow.core.domain import TokenSnapshot
from superflow.flows.validator import FlowValidator, RejectReason, ValidationResult

TOKEN = "0x" + "11" * 20
AGENT = "0x" + "ab" * 20
AGENT_UPPER = "0x" + "AB" * 20
RECIPIENT = "0x" + "c3" * 20
T0 = 1_700_000_000


def make_snapshot(balance=1000, net_flow=0, decimals=0, period=3600, last_update=T0) -> TokenSnapshot:
    return TokenSnapshot(
        address=TOKEN,
        decimals=decimals,
        symbol="DAIx",
        name="Super DAI",
        balance=balance,
        net_flow=net_flow,
        last_update_date=last_update,
        liquidation_period_seconds=period,
    )


@pytest.fixture
def validator():
    """Fixture для FlowValidator."""
    return FlowValidator()


@pytest.fixture
def funded_snapshot():
    """Снапшот с балансом, покрывающим залог rate=1."""
    return make_snapshot(balance=3600)


# =============================================================================
# INVALID ADDRESS
# =============================================================================


def test_invalid_recipient_rejected(validator, funded_snapshot):
    result = validator.validate(funded_snapshot, "not-an-address", Decimal(1), AGENT, T0)

    assert result.accepted is False
    assert result.reason == RejectReason.INVALID_ADDRESS


def test_invalid_recipient_wins_over_other_failures(validator):
    """invalid_address независимо от остальных полей."""
    result = validator.validate(make_snapshot(balance=0), "not-an-address", -5, AGENT, T0)
    assert result.reason == RejectReason.INVALID_ADDRESS


def test_recipient_with_spaces_accepted(validator, funded_snapshot):
    """Пробелы по краям ввода допустимы."""
    result = validator.validate(funded_snapshot, f"  {RECIPIENT} ", Decimal(1), AGENT, T0)
    assert result.accepted is True


# =============================================================================
# SELF FLOW
# =============================================================================


def test_self_flow_forbidden(validator, funded_snapshot):
    result = validator.validate(funded_snapshot, AGENT, Decimal(1), AGENT, T0)
    assert result.reason == RejectReason.SELF_FLOW_FORBIDDEN


def test_self_flow_forbidden_case_insensitive(validator, funded_snapshot):
    """Разный регистр одного адреса — всё равно self flow."""
    result = validator.validate(funded_snapshot, AGENT_UPPER, Decimal(1), AGENT, T0)

    assert result.accepted is False
    assert result.reason == RejectReason.SELF_FLOW_FORBIDDEN


def test_self_flow_checked_before_rate(validator, funded_snapshot):
    result = validator.validate(funded_snapshot, AGENT, 0, AGENT, T0)
    assert result.reason == RejectReason.SELF_FLOW_FORBIDDEN


# =============================================================================
# NON POSITIVE RATE
# =============================================================================


@pytest.mark.parametrize("rate", [0, -5, "0", Decimal("-0.0001")])
def test_non_positive_rate_rejected(validator, funded_snapshot, rate):
    result = validator.validate(funded_snapshot, RECIPIENT, rate, AGENT, T0)
    assert result.reason == RejectReason.NON_POSITIVE_RATE


@pytest.mark.parametrize("rate", ["abc", "", None, float("nan")])
def test_non_numeric_rate_rejected(validator, funded_snapshot, rate):
    """Нечисловой rate не является строго положительным."""
    result = validator.validate(funded_snapshot, RECIPIENT, rate, AGENT, T0)
    assert result.reason == RejectReason.NON_POSITIVE_RATE


# =============================================================================
# BALANCE VS DEPOSIT
# =============================================================================


def test_insufficient_balance(validator):
    """balance=1000 < deposit=1*3600 → insufficient_balance с символом токена."""
    result = validator.validate(make_snapshot(balance=1000), RECIPIENT, 1, AGENT, T0)

    assert result.accepted is False
    assert result.reason == RejectReason.INSUFFICIENT_BALANCE
    assert result.token_symbol == "DAIx"
    assert result.current_amount == 1000
    assert result.required_deposit == 3600


def test_balance_equal_to_deposit_passes(validator, funded_snapshot):
    """balance == deposit → PASS."""
    result = validator.validate(funded_snapshot, RECIPIENT, 1, AGENT, T0)

    assert result.accepted is True
    assert result.is_ok is True
    assert result.reason is None
    assert result.required_deposit == 3600
    assert "PASS" in result.details


def test_balance_compared_in_display_units(validator):
    """Баланс в smallest unit переводится в display unit перед сравнением."""
    snapshot = make_snapshot(balance=5000 * 10**18, decimals=18)

    assert validator.validate(snapshot, RECIPIENT, Decimal(1), AGENT, T0).accepted is True
    assert (
        validator.validate(snapshot, RECIPIENT, Decimal(2), AGENT, T0).reason
        == RejectReason.INSUFFICIENT_BALANCE
    )


def test_accrued_balance_used(validator):
    """Проверка использует баланс, пересчитанный на момент now."""
    snapshot = make_snapshot(balance=0, net_flow=10)

    assert validator.validate(snapshot, RECIPIENT, 1, AGENT, T0 + 360).accepted is True
    assert (
        validator.validate(snapshot, RECIPIENT, 1, AGENT, T0 + 359).reason
        == RejectReason.INSUFFICIENT_BALANCE
    )


def test_stale_snapshot_clock_skew(validator):
    """now < last_update_date: баланс снапшота без изменений."""
    snapshot = make_snapshot(balance=3600, net_flow=-10)
    assert validator.validate(snapshot, RECIPIENT, 1, AGENT, T0 - 100).accepted is True


# =============================================================================
# AGENT ADDRESS / RESULT
# =============================================================================


def test_invalid_recipient_rejected_without_agent_address(validator, funded_snapshot):
    """Адрес агента не загружен: невалидный recipient всё равно отклоняется."""
    result = validator.validate(funded_snapshot, "not-an-address", 1, None, T0)

    assert result.accepted is False
    assert result.reason == RejectReason.INVALID_ADDRESS


@pytest.mark.parametrize("self_address", [None, "not-an-address", ""])
def test_missing_agent_address_never_matches(validator, funded_snapshot, self_address):
    """Без корректного адреса агента self-flow не детектируется, проверки идут дальше."""
    assert validator.validate(funded_snapshot, RECIPIENT, 1, self_address, T0).accepted is True
    assert (
        validator.validate(funded_snapshot, RECIPIENT, 0, self_address, T0).reason
        == RejectReason.NON_POSITIVE_RATE
    )


def test_validation_result_constructors():
    ok = ValidationResult.ok(details="PASS")
    rejected = ValidationResult.rejected(RejectReason.NON_POSITIVE_RATE)

    assert ok.accepted is True and ok.reason is None
    assert rejected.accepted is False
    assert rejected.reason == RejectReason.NON_POSITIVE_RATE
    assert rejected.reason.value == "non_positive_rate"
