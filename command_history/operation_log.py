"""
Reversible operation log (Command pattern).

Callers execute operations against a target they own; the log remembers
each operation together with its target so it can later step backwards
(undo) and forwards again (redo).

Design decisions:
- Two deques used as LIFO stacks: executed operations and undone ones;
  a bounded log gives the undo deque a maxlen so the oldest entry falls off
- Executing a fresh operation discards the redo stack; redo is only valid
  until the history branches
- Undo/redo on an empty stack is an expected condition: it is logged and
  reported with a False return value, never raised
- The log itself only calls ``name``, ``execute(target)`` and
  ``undo(target)``; there is no required base class and the value
  ``execute`` returns is passed back to the caller untouched
- An operation instance can sit on the undo stack only once

Single-threaded by design. Wrap execute/undo/redo in a lock if the log is
ever shared between threads.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Protocol, runtime_checkable

from shared.errors import OperationStateError
from shared.models import OperationKind, OperationStatus

logger = logging.getLogger("operation_log")


@runtime_checkable
class Operation(Protocol):
    """Capabilities the log needs from anything it records."""

    kind: OperationKind
    status: OperationStatus

    @property
    def name(self) -> str: ...

    def execute(self, target: Any) -> OperationStatus: ...

    def undo(self, target: Any) -> OperationStatus: ...


class ReversibleOperation(ABC):
    """
    Status bookkeeping shared by the concrete operations.

    Subclasses implement ``_apply`` (perform the change, return the status the
    target reported) and ``_revert`` (reverse an applied change). Undo only
    calls ``_revert`` when the last execution actually changed the target, so
    an operation the target refused can never reverse something that did not
    happen.
    """

    kind: OperationKind

    def __init__(self):
        self.status = OperationStatus.PENDING

    @property
    def name(self) -> str:
        return type(self).__name__

    def execute(self, target: Any) -> OperationStatus:
        self.status = self._apply(target)
        return self.status

    def undo(self, target: Any) -> OperationStatus:
        """
        Reverse the last execution.

        Returns the status before undoing (APPLIED when something was
        reversed, NO_CHANGE/REJECTED when undo was a no-op).

        Raises:
            OperationStateError: if the operation has not been executed since
                it was created or last undone
        """
        if self.status in (OperationStatus.PENDING, OperationStatus.UNDONE):
            raise OperationStateError(
                f"{self.name} cannot be undone: status is {self.status.value}"
            )

        previous = self.status
        if previous == OperationStatus.APPLIED:
            self._revert(target)
        else:
            logger.debug(f"{self.name} had no effect ({previous.value}), nothing to reverse")
        self.status = OperationStatus.UNDONE
        return previous

    @abstractmethod
    def _apply(self, target: Any) -> OperationStatus:
        ...

    @abstractmethod
    def _revert(self, target: Any) -> None:
        ...

    def __repr__(self) -> str:
        return f"{self.name}(status={self.status.value})"


@dataclass
class LogEntry:
    """An operation and the target it was executed against."""
    operation: Operation
    target: Any


def _status_label(status: Any) -> str:
    return getattr(status, "value", None) or str(status)


class OperationLog:
    """
    Undo/redo history of operations.

    Example usage:
        log = OperationLog()
        log.execute(MoveUp(), elevator)     # floor 1 -> 2
        log.undo()                          # floor 2 -> 1
        log.redo()                          # floor 1 -> 2
        list(log.history())                 # ["MoveUp"]
    """

    def __init__(self, max_depth: Optional[int] = None):
        """
        Args:
            max_depth: Keep at most this many undoable entries; the oldest is
                       dropped first. None means unbounded.
        """
        if max_depth is not None and max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.max_depth = max_depth
        self._undo_stack: deque[LogEntry] = deque(maxlen=max_depth)
        self._redo_stack: deque[LogEntry] = deque()

    def execute(self, operation: Operation, target: Any) -> Optional[OperationStatus]:
        """
        Execute an operation and record it.

        The operation is recorded even when the target refused it, so that
        undo steps back through exactly what the caller asked for.
        Returns whatever the operation's ``execute`` returned (the status it
        ended up in, for ReversibleOperation subclasses).

        Raises:
            OperationStateError: if this operation instance is already on the
                undo stack; each recorded execution needs its own instance
        """
        if any(entry.operation is operation for entry in self._undo_stack):
            raise OperationStateError(
                f"{operation.name} is already recorded; create a new operation instead"
            )

        status = operation.execute(target)
        if self.max_depth is not None and len(self._undo_stack) == self.max_depth:
            logger.debug(f"History full, dropping oldest entry {self._undo_stack[0].operation.name}")
        self._undo_stack.append(LogEntry(operation, target))
        if self._redo_stack:
            logger.debug(f"Discarding {len(self._redo_stack)} redo entries")
            self._redo_stack.clear()

        logger.info(f"Executed {operation.name}: {_status_label(status)}")
        return status

    def undo(self) -> bool:
        """
        Undo the most recent operation.

        The entry only moves to the redo stack once the operation's ``undo``
        has returned; if it raises, both stacks are left as they were.

        Returns:
            True if an operation was undone, False if there was nothing to undo
        """
        if not self._undo_stack:
            logger.warning("Nothing to undo")
            return False

        entry = self._undo_stack[-1]
        entry.operation.undo(entry.target)
        self._redo_stack.append(self._undo_stack.pop())
        logger.info(f"Undid {entry.operation.name}")
        return True

    def redo(self) -> bool:
        """
        Re-execute the most recently undone operation.

        Returns:
            True if an operation was redone, False if there was nothing to redo
        """
        if not self._redo_stack:
            logger.warning("Nothing to redo")
            return False

        entry = self._redo_stack[-1]
        status = entry.operation.execute(entry.target)
        self._undo_stack.append(self._redo_stack.pop())
        logger.info(f"Redid {entry.operation.name}: {_status_label(status)}")
        return True

    def history(self) -> Iterator[str]:
        """Names of undoable operations, most recent first."""
        for entry in reversed(self._undo_stack):
            yield entry.operation.name

    def redo_history(self) -> Iterator[str]:
        """Names of redoable operations, next-to-redo first."""
        for entry in reversed(self._redo_stack):
            yield entry.operation.name

    @property
    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    @property
    def undo_depth(self) -> int:
        return len(self._undo_stack)

    @property
    def redo_depth(self) -> int:
        return len(self._redo_stack)

    def clear(self) -> None:
        """Forget all history. The targets are left as they are."""
        self._undo_stack.clear()
        self._redo_stack.clear()
