"""
Core domain models, mathematical primitives, and feed contracts.

This module contains the foundational building blocks that are independent
of external systems (ledgers, wallets, rate providers, etc.).
"""
