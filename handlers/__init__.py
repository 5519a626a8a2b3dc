"""
Function handlers, one per FunctionName.

Importing this package registers every handler in FUNCTION_HANDLERS.
"""

from handlers.registry import FUNCTION_HANDLERS, FunctionHandler, ExecutionContext, handler
from handlers import ledger, farming, consumer, warehouse, admin  # noqa: F401  (registration)

__all__ = ["FUNCTION_HANDLERS", "FunctionHandler", "ExecutionContext", "handler"]
