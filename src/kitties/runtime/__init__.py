"""Runtime facade: call records, results and the module entry point.

Architecture Note:
    runtime/ is the boundary consumed by the external dispatcher. It owns
    the lock serializing calls and converts ledger errors into CallResults.
"""

from kitties.runtime.calls import Breed, Call, Create, Exchange, SetPrice, Transfer
from kitties.runtime.module import KittiesModule
from kitties.runtime.result import CallResult

__all__ = [
    "KittiesModule",
    "CallResult",
    "Call",
    "Create",
    "Breed",
    "Transfer",
    "SetPrice",
    "Exchange",
]
