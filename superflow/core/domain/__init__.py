"""
Domain models and value objects.

Contains fundamental domain entities: Address, TokenSnapshot, Flow, DisplayBalance.
"""

from superflow.core.domain.address import (
    ADDRESS_SIZE_BYTES,
    Address,
    InvalidAddressError,
    addresses_equal,
    is_valid_address,
)
from superflow.core.domain.balance import DisplayBalance, RateTable
from superflow.core.domain.flow import Flow
from superflow.core.domain.token import TokenSnapshot

__all__ = [
    # Address
    "ADDRESS_SIZE_BYTES",
    "Address",
    "InvalidAddressError",
    "addresses_equal",
    "is_valid_address",
    # Token snapshot
    "TokenSnapshot",
    # Flow
    "Flow",
    # Display balance
    "DisplayBalance",
    "RateTable",
]
