"""Conversion Aggregator: балансы токенов в reference currency

Порядок:
1. Фильтр "available" токенов (баланс != 0 или net flow != 0)
2. Rate-lookup identifier: на test network — фиксированный mainnet токен
   (у test токенов нет рыночного курса), иначе адрес самого токена
3. rate = rate_table[lookup_id][reference_currency]
4. Курс есть → converted_amount = balance * rate, converted_net_flow = net_flow * rate
   Курса нет → converted поля None (не 0, не exception)

Rate table и снапшоты обновляются внешними процессами с разной частотой,
поэтому частичная / устаревшая таблица — нормальный вход: отсутствие
курса только подавляет конверсию.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Final

from superflow.core.domain.address import Address
from superflow.core.domain.balance import DisplayBalance, RateTable
from superflow.core.domain.token import TokenSnapshot
from superflow.core.math.numerical_safeguards import DECIMAL_CONTEXT, sanitize_decimal

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Reference currency по умолчанию
DEFAULT_CURRENCY: Final[str] = "USD"

# DAI (mainnet): rate-lookup identifier для всех токенов test network
TEST_NETWORK_RATE_TOKEN: Final[str] = "0x6B175474E89094C44Da98b954EedeAC495271d0F"

# Типы test network
TEST_NETWORK_TYPES: Final[frozenset[str]] = frozenset(
    {"rinkeby", "ropsten", "kovan", "goerli", "sepolia", "mumbai", "private"}
)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class AggregatorConfig:
    """Конфигурация агрегатора.

    Reference currency передаётся явно (одна валюта на deployment).
    """

    reference_currency: str = DEFAULT_CURRENCY
    test_network_rate_token: str = TEST_NETWORK_RATE_TOKEN


# =============================================================================
# FUNCTIONS
# =============================================================================


def is_test_network(network_type: str | None) -> bool:
    """Проверка, что тип сети — test network."""
    if not network_type:
        return False
    return network_type.strip().lower() in TEST_NETWORK_TYPES


def get_available_tokens(token_snapshots: Iterable[TokenSnapshot]) -> list[TokenSnapshot]:
    """Токены с балансом или активным flow (порядок сохраняется)."""
    return [snapshot for snapshot in token_snapshots if snapshot.is_available()]


def converted_amount(amount: int, rate: Decimal) -> Decimal:
    """amount * rate без потери точности."""
    return DECIMAL_CONTEXT.multiply(Decimal(amount), rate)


def _index_rate_table(rate_table: RateTable | None) -> dict[Address, Mapping[str, Any]]:
    # Ключи таблицы приводятся к канонической форме; нечитаемые ключи пропускаются
    index: dict[Address, Mapping[str, Any]] = {}
    if not rate_table:
        return index

    for key, rates in rate_table.items():
        address = Address.try_parse(key)
        if address is None or not isinstance(rates, Mapping):
            logger.warning(f"Skipping unusable rate table entry: {key!r}")
            continue
        index[address] = rates

    return index


# =============================================================================
# AGGREGATOR
# =============================================================================


class ConversionAggregator:
    """Агрегация балансов в display записи с конверсией в reference currency."""

    def __init__(self, config: AggregatorConfig | None = None):
        """Инициализация агрегатора.

        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or AggregatorConfig()
        self._test_network_rate_token = Address.parse(self.config.test_network_rate_token)

    def rate_lookup_id(self, token_snapshot: TokenSnapshot, test_network: bool) -> Address:
        """Identifier для запроса курса токена."""
        if test_network:
            return self._test_network_rate_token
        return token_snapshot.address

    def rate_lookup_ids(
        self,
        token_snapshots: Iterable[TokenSnapshot],
        test_network: bool,
    ) -> list[Address]:
        """Identifiers для внешнего rate fetcher (без дублей, порядок сохраняется)."""
        lookup_ids: list[Address] = []

        for snapshot in token_snapshots:
            lookup_id = self.rate_lookup_id(snapshot, test_network)
            if lookup_id not in lookup_ids:
                lookup_ids.append(lookup_id)

        return lookup_ids

    def lookup_rate(
        self,
        rate_table: RateTable | None,
        lookup_id: Address,
    ) -> Decimal | None:
        """Курс lookup_id в reference currency или None."""
        return self._lookup(_index_rate_table(rate_table), lookup_id)

    def aggregate(
        self,
        token_snapshots: Iterable[TokenSnapshot],
        rate_table: RateTable | None,
        test_network: bool,
    ) -> list[DisplayBalance]:
        """Агрегация балансов.

        Args:
            token_snapshots: снапшоты токенов (порядок фида)
            rate_table: token identifier → currency → rate (может быть неполной)
            test_network: флаг test network (см. is_test_network)

        Returns:
            DisplayBalance для каждого available токена, в порядке входа
        """
        rates_index = _index_rate_table(rate_table)
        balances = []

        for snapshot in get_available_tokens(token_snapshots):
            lookup_id = self.rate_lookup_id(snapshot, test_network)
            rate = self._lookup(rates_index, lookup_id)

            if rate is None:
                logger.debug(
                    f"No {self.config.reference_currency} rate for {snapshot.symbol} "
                    f"(lookup id {lookup_id})"
                )
                amount_converted = None
                net_flow_converted = None
            else:
                amount_converted = converted_amount(snapshot.balance, rate)
                net_flow_converted = converted_amount(snapshot.net_flow, rate)

            balances.append(
                DisplayBalance(
                    address=snapshot.address,
                    amount=snapshot.balance,
                    converted_amount=amount_converted,
                    decimals=snapshot.decimals,
                    depletion_date=snapshot.depletion_date,
                    last_update_date=snapshot.last_update_date,
                    logo_uri=snapshot.logo_uri,
                    name=snapshot.name,
                    inflow_rate=snapshot.inflow_rate,
                    outflow_rate=snapshot.outflow_rate,
                    net_flow=snapshot.net_flow,
                    converted_net_flow=net_flow_converted,
                    symbol=snapshot.symbol,
                )
            )

        return balances

    def _lookup(
        self,
        rates_index: Mapping[Address, Mapping[str, Any]],
        lookup_id: Address,
    ) -> Decimal | None:
        rates = rates_index.get(lookup_id)
        if rates is None:
            return None

        rate = sanitize_decimal(rates.get(self.config.reference_currency))

        # Нулевой / отрицательный курс трактуется как отсутствующий
        if rate is None or rate <= 0:
            return None

        return rate
