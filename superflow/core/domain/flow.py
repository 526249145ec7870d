"""
Flow — Снапшот flow между аккаунтами

Core никогда не изменяет Flow: модель только читается для поиска
существующего flow при create / update.
"""

from pydantic import BaseModel, Field

from superflow.core.domain.address import Address


class Flow(BaseModel):
    """Непрерывный per-second перевод токена между двумя аккаунтами."""

    entity: Address = Field(..., description="Адрес контрагента")
    super_token_address: Address = Field(
        ..., alias="superTokenAddress", description="Адрес токена flow"
    )
    flow_rate: int = Field(
        ..., alias="flowRate", description="Rate (smallest unit / секунда, > 0 = исходящий)"
    )
    is_incoming: bool = Field(..., alias="isIncoming", description="Входящий flow")
    is_cancelled: bool = Field(default=False, alias="isCancelled", description="Flow отменён")

    model_config = {"frozen": True, "populate_by_name": True}

    @property
    def is_active_outgoing(self) -> bool:
        return not self.is_cancelled and not self.is_incoming

    def matches(self, entity: Address, super_token_address: Address) -> bool:
        """Каноническое совпадение контрагента и токена."""
        return self.entity == entity and self.super_token_address == super_token_address
