from dataclasses import dataclass
from enum import Enum

MAX_OPERATION_AMOUNT = 2**32 - 1


class OperationKind(Enum):
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"
    CLOSE_ACCOUNT = "close_account"


@dataclass(frozen=True)
class Operation:
    """A single recorded effect on a ledger entry.

    Attributes:
        kind: Which variant this is.
        amount: Unsigned 32-bit amount; always 0 for CLOSE_ACCOUNT.
    """

    kind: OperationKind
    amount: int = 0

    def __post_init__(self):
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise ValueError(f"Operation amount must be an integer: {self.amount!r}")
        if self.amount < 0 or self.amount > MAX_OPERATION_AMOUNT:
            raise ValueError(
                f"Operation amount out of range 0..{MAX_OPERATION_AMOUNT}: {self.amount}"
            )
        if self.kind is OperationKind.CLOSE_ACCOUNT and self.amount:
            raise ValueError("CloseAccount carries no amount")

    @classmethod
    def deposit(cls, amount: int) -> "Operation":
        return cls(OperationKind.DEPOSIT, amount)

    @classmethod
    def withdraw(cls, amount: int) -> "Operation":
        return cls(OperationKind.WITHDRAW, amount)

    @classmethod
    def close_account(cls) -> "Operation":
        return cls(OperationKind.CLOSE_ACCOUNT)

    @property
    def is_deposit(self) -> bool:
        return self.kind is OperationKind.DEPOSIT

    @property
    def is_withdraw(self) -> bool:
        return self.kind is OperationKind.WITHDRAW

    def to_dict(self) -> dict:
        """Convert operation to a plain dictionary for display."""
        if self.kind is OperationKind.CLOSE_ACCOUNT:
            return {"kind": self.kind.value}
        return {"kind": self.kind.value, "amount": self.amount}

    def __str__(self) -> str:
        if self.kind is OperationKind.CLOSE_ACCOUNT:
            return "close_account"
        return f"{self.kind.value}({self.amount})"
