"""Ledger entry model: one account's balance and its recent operations."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from models.operation import Operation, OperationKind

DEFAULT_HISTORY_LIMIT = 100


@dataclass
class LedgerEntry:
    """Balance plus a bounded log of recently applied operations.

    Attributes:
        balance: Current balance, never negative.
        recent_operations: Applied operations, oldest first.
        history_limit: Maximum number of operations kept in the log.
            None keeps everything.
    """

    balance: int = 0
    recent_operations: List[Operation] = field(default_factory=list)
    history_limit: Optional[int] = DEFAULT_HISTORY_LIMIT

    def process(self, operations: Iterable[Operation]) -> List[Operation]:
        """Apply operations in order, stopping at the first disallowed one.

        Deposits always apply. A withdrawal applies only when the balance
        covers it. CloseAccount is never applied here. The first operation
        that cannot be applied halts the batch.

        Args:
            operations: Operations to attempt, in order.

        Returns:
            Operations that were not applied: the one that stopped the batch
            followed by everything after it, in original order. Empty when
            every operation applied.
        """
        remaining = list(operations)

        for index, operation in enumerate(remaining):
            if operation.kind is OperationKind.DEPOSIT:
                self.balance += operation.amount
            elif (
                operation.kind is OperationKind.WITHDRAW
                and self.balance >= operation.amount
            ):
                self.balance -= operation.amount
            else:
                return remaining[index:]
            self._record(operation)

        return []

    def snapshot(self) -> "LedgerEntry":
        """Return an independent copy of this entry."""
        return LedgerEntry(
            balance=self.balance,
            recent_operations=list(self.recent_operations),
            history_limit=self.history_limit,
        )

    def to_dict(self) -> dict:
        """Convert entry to a plain dictionary for display."""
        return {
            "balance": self.balance,
            "recent_operations": [op.to_dict() for op in self.recent_operations],
        }

    def _record(self, operation: Operation) -> None:
        self.recent_operations.append(operation)
        if self.history_limit is not None:
            overflow = len(self.recent_operations) - self.history_limit
            if overflow > 0:
                del self.recent_operations[:overflow]
