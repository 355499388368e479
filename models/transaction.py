"""Transactions: composable units of work applied against an account store.

Unlike the store's own deposit/withdraw, Deposit and Withdraw transactions
create a missing account on the fly. Amounts are checked when a transaction
is built, so a bad amount never reaches the store. Effects are applied directly as each
step runs; a failed Chain keeps whatever its earlier steps did.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import reduce
from typing import ClassVar, Dict, List, Sequence, Type

from exceptions import InsufficientFunds, InvalidAccount
from models.operation import MAX_OPERATION_AMOUNT, Operation


class Transaction(ABC):
    """A unit of work against an AccountStore."""

    arity: ClassVar[int] = 0

    @abstractmethod
    def apply(self, store) -> None:
        """Apply the transaction to the store.

        Args:
            store: AccountStore to mutate.

        Raises:
            TransactionError: If the transaction cannot be applied.
        """
        pass

    def then(self, other: "Transaction") -> "Chain":
        """Sequence another transaction after this one."""
        return Chain(self, other)


@dataclass(frozen=True)
class Deposit(Transaction):
    account: str
    amount: int

    arity: ClassVar[int] = 2

    def __post_init__(self):
        _check_amount(self.amount)

    def apply(self, store) -> None:
        entry = store.open_entry(self.account)
        entry.process([Operation.deposit(self.amount)])

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "Deposit":
        return cls(account=args[0], amount=_parse_amount(args[1]))

    def __str__(self) -> str:
        return f"deposit {self.account} {self.amount}"


@dataclass(frozen=True)
class Withdraw(Transaction):
    account: str
    amount: int

    arity: ClassVar[int] = 2

    def __post_init__(self):
        _check_amount(self.amount)

    def apply(self, store) -> None:
        entry = store.open_entry(self.account)
        if entry.balance < self.amount:
            raise InsufficientFunds(self.account, self.amount, entry.balance)
        entry.process([Operation.withdraw(self.amount)])

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "Withdraw":
        return cls(account=args[0], amount=_parse_amount(args[1]))

    def __str__(self) -> str:
        return f"withdraw {self.account} {self.amount}"


@dataclass(frozen=True)
class Transfer(Transaction):
    """Move money from source to target.

    The funds check runs before the existence check: a missing source reads
    as a zero balance, so it fails with InsufficientFunds for any positive
    amount and with InvalidAccount for a zero amount. The target is created
    if needed.
    """

    source: str
    target: str
    amount: int

    arity: ClassVar[int] = 3

    def __post_init__(self):
        _check_amount(self.amount)

    def apply(self, store) -> None:
        source_entry = store.entry(self.source)
        available = source_entry.balance if source_entry is not None else 0

        if available < self.amount:
            raise InsufficientFunds(self.source, self.amount, available)

        if source_entry is None:
            raise InvalidAccount(self.source)

        debit = Operation.withdraw(self.amount)
        credit = Operation.deposit(self.amount)
        source_entry.process([debit])
        store.open_entry(self.target).process([credit])

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "Transfer":
        return cls(source=args[0], target=args[1], amount=_parse_amount(args[2]))

    def __str__(self) -> str:
        return f"transfer {self.source} {self.target} {self.amount}"


@dataclass(frozen=True)
class Chain(Transaction):
    """Two transactions run in order; the second runs only if the first succeeds.

    There is no rollback: if the second fails, the first's effects remain.
    """

    first: Transaction
    second: Transaction

    def apply(self, store) -> None:
        self.first.apply(store)
        self.second.apply(store)

    def steps(self) -> List[Transaction]:
        """Flatten nested chains into the ordered list of leaf transactions."""
        result = []
        for child in (self.first, self.second):
            if isinstance(child, Chain):
                result.extend(child.steps())
            else:
                result.append(child)
        return result

    def __str__(self) -> str:
        return " + ".join(str(step) for step in self.steps())


def chain(*transactions: Transaction) -> Transaction:
    """Fold transactions left to right into nested Chains.

    chain(a, b, c) builds Chain(Chain(a, b), c). A single transaction is
    returned unchanged.

    Raises:
        ValueError: If no transactions are given.
    """
    if not transactions:
        raise ValueError("chain() needs at least one transaction")
    return reduce(Chain, transactions)


TRANSACTION_TYPES: Dict[str, Type[Transaction]] = {
    "deposit": Deposit,
    "withdraw": Withdraw,
    "transfer": Transfer,
}


def get_transaction_type(name: str) -> Type[Transaction]:
    """Get a transaction class by command name."""
    if name not in TRANSACTION_TYPES:
        raise ValueError(f"Unknown transaction type: {name}")
    return TRANSACTION_TYPES[name]


def parse_transactions(tokens: Sequence[str]) -> List[Transaction]:
    """Parse a flat token list into transactions.

    Example:
        ["deposit", "Alice", "100", "transfer", "Alice", "Bob", "30"]
        -> [Deposit("Alice", 100), Transfer("Alice", "Bob", 30)]

    Raises:
        ValueError: On an unknown type, missing arguments or a bad amount.
    """
    transactions = []
    position = 0

    while position < len(tokens):
        kind = tokens[position]
        transaction_type = get_transaction_type(kind)
        args = tokens[position + 1 : position + 1 + transaction_type.arity]
        if len(args) < transaction_type.arity:
            raise ValueError(
                f"'{kind}' expects {transaction_type.arity} arguments, got {len(args)}"
            )
        transactions.append(transaction_type.from_args(args))
        position += 1 + transaction_type.arity

    return transactions


def _parse_amount(value: str) -> int:
    try:
        amount = int(value)
    except ValueError:
        raise ValueError(f"Amount must be a number: {value!r}") from None
    _check_amount(amount)
    return amount


def _check_amount(amount: int) -> None:
    # Amounts end up in Operations, so they share the 32-bit range
    if amount < 0:
        raise ValueError(f"Amount must not be negative: {amount}")
    if amount > MAX_OPERATION_AMOUNT:
        raise ValueError(f"Amount out of range 0..{MAX_OPERATION_AMOUNT}: {amount}")
