"""Flow Rate Resolver: поиск существующего flow и rate для отправки

Порядок:
1. Preset update operation → поиск пропускается, action = UPDATE
2. Поиск существующего исходящего flow (не отменён, не входящий,
   тот же контрагент, тот же токен; сравнение адресов каноническое)
3. net_rate = requested_rate (replace semantics: запрошенный rate — новый
   абсолютный rate flow, без сложения с текущим)
4. action = UPDATE если найден существующий flow и rate > 0, иначе CREATE
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from superflow.core.domain.address import Address
from superflow.core.domain.flow import Flow
from superflow.core.math.numerical_safeguards import sanitize_decimal

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class FlowAction(str, Enum):
    """Тип мутации flow (для подписи действия у вызывающей стороны)."""

    CREATE = "create"
    UPDATE = "update"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class FlowRateResolution:
    """Результат разрешения rate."""

    existing_flow: Flow | None
    net_rate: Any
    action: FlowAction

    @property
    def is_update(self) -> bool:
        return self.action == FlowAction.UPDATE


# =============================================================================
# FUNCTIONS
# =============================================================================


def find_existing_flow(
    flows: Iterable[Flow],
    recipient: Any,
    super_token_address: Any,
) -> Flow | None:
    """
    Поиск активного исходящего flow к recipient на токене.

    Невалидный recipient / токен → None (не exception).

    Args:
        flows: Снапшот flows
        recipient: Адрес контрагента (str / Address)
        super_token_address: Адрес токена (str / Address)

    Returns:
        Первый совпавший Flow или None
    """
    recipient_address = Address.try_parse(recipient)
    token_address = Address.try_parse(super_token_address)

    if recipient_address is None or token_address is None:
        return None

    for flow in flows:
        if flow.is_active_outgoing and flow.matches(recipient_address, token_address):
            return flow

    return None


def resolve_rate(existing_flow: Flow | None, requested_rate: Any) -> Any:
    """
    Rate для отправки.

    Существующий flow не влияет на значение: запрошенный rate заменяет
    текущий rate flow целиком.
    """
    return requested_rate


# =============================================================================
# RESOLVER
# =============================================================================


class FlowRateResolver:
    """Разрешение create / update и rate для отправки."""

    def __init__(self):
        """Resolver не требует зависимостей (stateless)."""
        pass

    def resolve(
        self,
        flows: Iterable[Flow],
        recipient: Any,
        super_token_address: Any,
        requested_rate: Any,
        is_update_operation: bool = False,
    ) -> FlowRateResolution:
        """
        Разрешение мутации flow.

        Args:
            flows: Снапшот flows
            recipient: Адрес контрагента
            super_token_address: Адрес токена
            requested_rate: Запрошенный rate (display unit / секунда)
            is_update_operation: Вызывающая сторона обновляет заранее выбранный flow

        Returns:
            FlowRateResolution с существующим flow, rate и action
        """
        if is_update_operation:
            return FlowRateResolution(
                existing_flow=None,
                net_rate=resolve_rate(None, requested_rate),
                action=FlowAction.UPDATE,
            )

        existing_flow = find_existing_flow(flows, recipient, super_token_address)
        net_rate = resolve_rate(existing_flow, requested_rate)

        rate = sanitize_decimal(requested_rate)
        flow_exists = existing_flow is not None and rate is not None and rate > 0
        action = FlowAction.UPDATE if flow_exists else FlowAction.CREATE

        logger.debug(f"Resolved flow mutation: action={action.value}, recipient={recipient}")

        return FlowRateResolution(
            existing_flow=existing_flow,
            net_rate=net_rate,
            action=action,
        )
