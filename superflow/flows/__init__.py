"""Flows — разрешение, валидация и планирование мутаций flow.

Цепочка перед отправкой мутации:
- FlowRateResolver: существующий flow, create / update, rate для отправки
- FlowValidator: адрес, self-flow, rate > 0, баланс >= deposit
- FlowUpdatePlanner: resolver + validator + конверсия rate в smallest unit
"""

from .planner import FlowUpdatePlan, FlowUpdatePlanner, find_token_by_address
from .rate_resolver import (
    FlowAction,
    FlowRateResolution,
    FlowRateResolver,
    find_existing_flow,
    resolve_rate,
)
from .validator import FlowValidator, RejectReason, ValidationResult

__all__ = [
    "FlowAction",
    "FlowRateResolution",
    "FlowRateResolver",
    "find_existing_flow",
    "resolve_rate",
    "FlowValidator",
    "RejectReason",
    "ValidationResult",
    "FlowUpdatePlan",
    "FlowUpdatePlanner",
    "find_token_by_address",
]
