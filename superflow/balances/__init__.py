"""Balances — агрегированное представление балансов в reference currency."""

from .conversion import (
    DEFAULT_CURRENCY,
    TEST_NETWORK_RATE_TOKEN,
    TEST_NETWORK_TYPES,
    AggregatorConfig,
    ConversionAggregator,
    converted_amount,
    get_available_tokens,
    is_test_network,
)

__all__ = [
    "DEFAULT_CURRENCY",
    "TEST_NETWORK_RATE_TOKEN",
    "TEST_NETWORK_TYPES",
    "AggregatorConfig",
    "ConversionAggregator",
    "converted_amount",
    "get_available_tokens",
    "is_test_network",
]
