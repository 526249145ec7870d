"""Flow Update Planner: следующее желаемое состояние flow

Собирает цепочку, которую вызывающая сторона выполняет перед отправкой
мутации в ledger:
1. FlowRateResolver — поиск существующего flow, create / update
2. FlowValidator — допуск мутации
3. Конверсия rate из display unit в smallest unit (усечение);
   rate, усечённый до 0, отклоняется как non_positive_rate
4. Проверка, что rate помещается в int96 ledger-а

Planner ничего не отправляет: результат — данные для отправки или отказ.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from superflow.core.domain.address import Address
from superflow.core.domain.flow import Flow
from superflow.core.domain.token import TokenSnapshot
from superflow.core.math.deposit import required_deposit
from superflow.core.math.numerical_safeguards import INT96_MAX, INT96_MIN, checked_int
from superflow.core.math.units import to_decimals
from superflow.flows.rate_resolver import FlowAction, FlowRateResolution, FlowRateResolver
from superflow.flows.validator import FlowValidator, RejectReason, ValidationResult

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class FlowUpdatePlan:
    """План мутации flow."""

    validation: ValidationResult
    resolution: FlowRateResolution

    # Rate в smallest unit / секунда, готовый к отправке (None при отказе)
    adjusted_flow_rate: int | None

    # Залог для отображения (display unit)
    required_deposit: Decimal

    @property
    def accepted(self) -> bool:
        return self.validation.accepted

    @property
    def action(self) -> FlowAction:
        return self.resolution.action


# =============================================================================
# FUNCTIONS
# =============================================================================


def find_token_by_address(
    token_snapshots: Iterable[TokenSnapshot],
    address: Any,
) -> TokenSnapshot | None:
    """Поиск снапшота токена по каноническому адресу."""
    token_address = Address.try_parse(address)
    if token_address is None:
        return None

    for snapshot in token_snapshots:
        if snapshot.address == token_address:
            return snapshot

    return None


# =============================================================================
# PLANNER
# =============================================================================


class FlowUpdatePlanner:
    """Create / update flow: resolve → validate → конверсия rate."""

    def __init__(
        self,
        resolver: FlowRateResolver | None = None,
        validator: FlowValidator | None = None,
    ):
        self.resolver = resolver or FlowRateResolver()
        self.validator = validator or FlowValidator()

    def plan(
        self,
        token_snapshot: TokenSnapshot,
        flows: Iterable[Flow],
        recipient: Any,
        requested_rate: Any,
        self_address: Any,
        now: float,
        is_update_operation: bool = False,
    ) -> FlowUpdatePlan:
        """
        Построение плана мутации.

        Args:
            token_snapshot: снапшот выбранного токена
            flows: снапшот flows держателя
            recipient: адрес получателя
            requested_rate: запрошенный rate (display unit / секунда)
            self_address: собственный адрес агента приложения
            now: текущий момент (unix seconds)
            is_update_operation: обновление заранее выбранного flow

        Returns:
            FlowUpdatePlan

        Raises:
            ArithmeticDomainViolation: rate не помещается в int96
        """
        resolution = self.resolver.resolve(
            flows,
            recipient,
            token_snapshot.address,
            requested_rate,
            is_update_operation=is_update_operation,
        )
        validation = self.validator.validate(
            token_snapshot, recipient, requested_rate, self_address, now
        )
        deposit = required_deposit(requested_rate, token_snapshot.liquidation_period_seconds)

        if not validation.accepted:
            return FlowUpdatePlan(
                validation=validation,
                resolution=resolution,
                adjusted_flow_rate=None,
                required_deposit=deposit,
            )

        adjusted_flow_rate = checked_int(
            to_decimals(resolution.net_rate, token_snapshot.decimals),
            "adjusted_flow_rate",
            min_value=INT96_MIN,
            max_value=INT96_MAX,
        )

        # Rate меньше одной smallest unit усекается до 0: отправлять нечего
        if adjusted_flow_rate == 0:
            validation = ValidationResult.rejected(
                RejectReason.NON_POSITIVE_RATE,
                token_symbol=token_snapshot.symbol,
                details=(
                    f"Flow rate {requested_rate!r} is below one smallest unit "
                    f"of {token_snapshot.symbol} (decimals={token_snapshot.decimals})"
                ),
            )
            logger.debug(f"Flow mutation rejected: non_positive_rate ({validation.details})")
            return FlowUpdatePlan(
                validation=validation,
                resolution=resolution,
                adjusted_flow_rate=None,
                required_deposit=deposit,
            )

        logger.debug(
            f"Planned flow {resolution.action.value}: token={token_snapshot.symbol}, "
            f"rate={adjusted_flow_rate}"
        )

        return FlowUpdatePlan(
            validation=validation,
            resolution=resolution,
            adjusted_flow_rate=adjusted_flow_rate,
            required_deposit=deposit,
        )
