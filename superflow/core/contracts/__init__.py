"""
Contract Validation Module

Модуль для валидации записей внешних фидов (token snapshots, flows, rate table).
"""

from .feeds import load_flows, load_token_snapshots
from .validators import (
    ContractValidator,
    FlowContract,
    RateTableContract,
    SchemaLoader,
    TokenSnapshotContract,
    validate_flow,
    validate_rate_table,
    validate_token_snapshot,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TokenSnapshotContract",
    "FlowContract",
    "RateTableContract",
    # Functions
    "validate_token_snapshot",
    "validate_flow",
    "validate_rate_table",
    "load_token_snapshots",
    "load_flows",
]
