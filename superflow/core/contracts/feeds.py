"""
Feed loaders: записи внешних фидов → типизированные модели

Каждая запись сначала проверяется JSON Schema контрактом, затем
разбирается Pydantic моделью (camelCase поля фида через alias).
Порядок записей сохраняется.
"""

import logging
from collections.abc import Iterable
from typing import Any, Dict

from superflow.core.contracts.validators import FlowContract, TokenSnapshotContract
from superflow.core.domain.flow import Flow
from superflow.core.domain.token import TokenSnapshot

logger = logging.getLogger(__name__)


def load_token_snapshots(records: Iterable[Dict[str, Any]]) -> list[TokenSnapshot]:
    """
    Разбор token snapshot фида.

    Raises:
        jsonschema.ValidationError: Запись нарушает контракт
        pydantic.ValidationError: Запись не проходит валидацию модели
    """
    contract = TokenSnapshotContract()
    snapshots = []

    for record in records:
        contract.validate(record)
        snapshots.append(TokenSnapshot.model_validate(record))

    logger.debug(f"Loaded {len(snapshots)} token snapshots")
    return snapshots


def load_flows(records: Iterable[Dict[str, Any]]) -> list[Flow]:
    """
    Разбор flow фида.

    Raises:
        jsonschema.ValidationError: Запись нарушает контракт
        pydantic.ValidationError: Запись не проходит валидацию модели
    """
    contract = FlowContract()
    flows = []

    for record in records:
        contract.validate(record)
        flows.append(Flow.model_validate(record))

    logger.debug(f"Loaded {len(flows)} flows")
    return flows
