"""
Reversible operation history.

Operations are executed against a caller-owned target through an
OperationLog, which can then undo and redo them in order.
"""

from command_history.operation_log import (
    LogEntry,
    Operation,
    OperationLog,
    ReversibleOperation,
)

__all__ = [
    "LogEntry",
    "Operation",
    "OperationLog",
    "ReversibleOperation",
]
