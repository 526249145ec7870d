"""Flow Validator: допуск мутации flow

Проверяет, что предлагаемая мутация структурно и экономически корректна.

Порядок проверок (short-circuit на первой неудаче):
1. recipient — корректный адрес → invalid_address
2. recipient != собственный адрес агента (каноническое сравнение) → self_flow_forbidden
3. requested_rate > 0 → non_positive_rate
4. текущий баланс (display unit) >= required deposit → insufficient_balance
5. PASS

Validator не имеет side effects: отображение причины и отправка
мутации — ответственность вызывающей стороны.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from superflow.core.domain.address import Address
from superflow.core.domain.token import TokenSnapshot
from superflow.core.math.deposit import required_deposit
from superflow.core.math.numerical_safeguards import sanitize_decimal
from superflow.core.math.units import from_decimals

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class RejectReason(str, Enum):
    """Закрытый набор причин отказа."""

    INVALID_ADDRESS = "invalid_address"
    SELF_FLOW_FORBIDDEN = "self_flow_forbidden"
    NON_POSITIVE_RATE = "non_positive_rate"
    INSUFFICIENT_BALANCE = "insufficient_balance"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class ValidationResult:
    """Результат валидации мутации flow."""

    accepted: bool
    reason: RejectReason | None

    # Контекст для сообщения пользователю
    token_symbol: str | None = None

    # Диагностика (заполняется при проверке баланса)
    current_amount: int | None = None
    required_deposit: Decimal | None = None

    # Детали
    details: str = ""

    @classmethod
    def ok(cls, **kwargs: Any) -> "ValidationResult":
        return cls(accepted=True, reason=None, **kwargs)

    @classmethod
    def rejected(cls, reason: RejectReason, **kwargs: Any) -> "ValidationResult":
        return cls(accepted=False, reason=reason, **kwargs)

    @property
    def is_ok(self) -> bool:
        return self.accepted


# =============================================================================
# VALIDATOR
# =============================================================================


class FlowValidator:
    """Валидация create / update flow перед отправкой в ledger."""

    def __init__(self):
        """Validator не требует зависимостей (stateless)."""
        pass

    def validate(
        self,
        token_snapshot: TokenSnapshot,
        recipient_address: Any,
        requested_rate: Any,
        self_address: Any,
        now: float,
    ) -> ValidationResult:
        """Оценка мутации flow.

        Args:
            token_snapshot: снапшот выбранного токена
            recipient_address: адрес получателя (как ввёл пользователь)
            requested_rate: запрошенный rate (display unit / секунда)
            self_address: собственный адрес агента приложения
            now: текущий момент (unix seconds)

        Returns:
            ValidationResult с решением о допуске
        """
        # 1. Структурная проверка адреса
        recipient = Address.try_parse(recipient_address)
        if recipient is None:
            return self._reject(
                RejectReason.INVALID_ADDRESS,
                details=f"Recipient is not a valid address: {recipient_address!r}",
            )

        # 2. Flow к собственному агенту запрещён
        # (адрес агента ещё не загружен / некорректен → совпадений нет)
        agent_address = Address.try_parse(self_address)
        if agent_address is not None and recipient == agent_address:
            return self._reject(
                RejectReason.SELF_FLOW_FORBIDDEN,
                details=f"Recipient {recipient} is the app agent",
            )

        # 3. Rate строго положительный (нечисловой ввод тоже отклоняется)
        rate = sanitize_decimal(requested_rate)
        if rate is None or rate <= 0:
            return self._reject(
                RejectReason.NON_POSITIVE_RATE,
                details=f"Flow rate must be positive, got {requested_rate!r}",
            )

        # 4. Баланс покрывает залог
        current = token_snapshot.current_amount(now)
        deposit = required_deposit(rate, token_snapshot.liquidation_period_seconds)

        if from_decimals(current, token_snapshot.decimals) < deposit:
            return self._reject(
                RejectReason.INSUFFICIENT_BALANCE,
                token_symbol=token_snapshot.symbol,
                current_amount=current,
                required_deposit=deposit,
                details=(
                    f"Required deposit {deposit} exceeds current "
                    f"{token_snapshot.symbol} balance"
                ),
            )

        # 5. PASS
        return ValidationResult.ok(
            token_symbol=token_snapshot.symbol,
            current_amount=current,
            required_deposit=deposit,
            details=f"PASS: deposit={deposit} {token_snapshot.symbol}",
        )

    def _reject(self, reason: RejectReason, **kwargs: Any) -> ValidationResult:
        result = ValidationResult.rejected(reason, **kwargs)
        logger.debug(f"Flow mutation rejected: {reason.value} ({result.details})")
        return result
