"""
TokenSnapshot — Снапшот состояния токена у держателя

Immutable Pydantic модель. Поля фида приходят в camelCase (netFlow,
lastUpdateDate, ...), модель принимает и camelCase, и snake_case.

Баланс валиден только на момент last_update_date; текущее значение
всегда пересчитывается через current_amount().
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from superflow.core.domain.address import Address
from superflow.core.math.accrual import current_amount
from superflow.core.math.units import from_decimals


class TokenSnapshot(BaseModel):
    """
    Снапшот super token баланса.

    Immutable модель (frozen=True): обновления приходят новым снапшотом
    из внешнего balance-tracking процесса.
    """

    # Идентификация
    address: Address = Field(..., description="Адрес токена (уникальный id)")
    decimals: int = Field(..., ge=0, description="Количество знаков display unit")
    symbol: str = Field(..., description="Тикер токена")
    name: str = Field(..., description="Название токена")

    # Состояние на момент снапшота
    balance: int = Field(..., description="Баланс в smallest unit на момент last_update_date")
    net_flow: int = Field(
        ..., alias="netFlow", description="Net flow (smallest unit / секунда, со знаком)"
    )
    last_update_date: int = Field(
        ..., ge=0, alias="lastUpdateDate", description="Момент снапшота (unix seconds)"
    )
    liquidation_period_seconds: int = Field(
        ..., gt=0, alias="liquidationPeriodSeconds", description="Liquidation period токена"
    )

    # Display поля
    inflow_rate: int = Field(default=0, alias="inflowRate", description="Суммарный входящий rate")
    outflow_rate: int = Field(
        default=0, alias="outflowRate", description="Суммарный исходящий rate"
    )
    depletion_date: int | None = Field(
        default=None, alias="depletionDate", description="Момент обнуления баланса (nullable)"
    )
    logo_uri: str | None = Field(default=None, alias="logoURI", description="URI логотипа")

    model_config = {"frozen": True, "populate_by_name": True}

    def current_amount(self, now: float) -> int:
        """
        Баланс в smallest unit на момент now.

        Args:
            now: Текущий момент (unix seconds)
        """
        return current_amount(self.balance, self.net_flow, self.last_update_date, now)

    def current_display_amount(self, now: float) -> Decimal:
        """Баланс в display unit на момент now."""
        return from_decimals(self.current_amount(now), self.decimals)

    def is_available(self) -> bool:
        """Токен отображается, если есть баланс или активный flow."""
        return self.balance != 0 or self.net_flow != 0
