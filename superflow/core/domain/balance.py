"""
DisplayBalance — агрегированная запись баланса для отображения

Converted поля опциональны: None означает "курс недоступен" и отличается
от нулевого значения.
"""

from collections.abc import Mapping
from decimal import Decimal
from typing import Any, TypeAlias

from pydantic import BaseModel, Field

from superflow.core.domain.address import Address

# token identifier → currency code → rate
RateTable: TypeAlias = Mapping[str, Mapping[str, Any]]


class DisplayBalance(BaseModel):
    """Сырые поля снапшота плюс суммы в reference currency."""

    address: Address
    amount: int = Field(..., description="Баланс в smallest unit")
    converted_amount: Decimal | None = Field(
        default=None, description="amount * rate (None = курс недоступен)"
    )
    decimals: int = Field(..., ge=0)
    depletion_date: int | None = None
    last_update_date: int
    logo_uri: str | None = None
    name: str
    inflow_rate: int = 0
    outflow_rate: int = 0
    net_flow: int
    converted_net_flow: Decimal | None = Field(
        default=None, description="net_flow * rate (None = курс недоступен)"
    )
    symbol: str

    model_config = {"frozen": True}

    @property
    def has_conversion(self) -> bool:
        return self.converted_amount is not None
