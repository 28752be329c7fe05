"""Core type definitions for Kitties."""

from typing import TypeAlias

AccountId: TypeAlias = str
"""Opaque, pre-authenticated caller identity supplied by the dispatcher."""

KittyId: TypeAlias = int
"""Unsigned, monotonically allocated kitty index. Never reused."""

Balance: TypeAlias = int
"""Non-negative magnitude in the marketplace balance ledger."""

DNA_LENGTH = 16
"""Size in bytes of a genome and of a breeding selector."""
