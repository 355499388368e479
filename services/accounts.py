"""Account store: the in-memory mapping of account names to ledger entries."""

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from exceptions import NotEnoughMoney, UserNotFound
from logger import get_logger
from models.ledger_entry import DEFAULT_HISTORY_LIMIT, LedgerEntry
from models.operation import Operation

logger = get_logger()


class AccountStore:
    """Owns every ledger entry, keyed by account name.

    Read accessors hand out snapshot copies. Live entries are reachable only
    through entry() and open_entry(), which transactions use to mutate
    balances in place.

    The store is not thread-safe; callers must serialize access.

    Args:
        history_limit: Maximum recent operations kept per entry (None keeps all).
    """

    def __init__(self, history_limit: Optional[int] = DEFAULT_HISTORY_LIMIT):
        self.history_limit = history_limit
        self._accounts: Dict[str, LedgerEntry] = {}

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, name: str) -> bool:
        return name in self._accounts

    def names(self) -> List[str]:
        """Get all account names in enumeration order."""
        return list(self._accounts)

    def create(self, name: str) -> bool:
        """Register a new account with a zero balance.

        Args:
            name: Account name.

        Returns:
            True if the account was created, False if it already existed.
        """
        if name in self._accounts:
            logger.debug(f"Account '{name}' already exists")
            return False

        self._accounts[name] = LedgerEntry(history_limit=self.history_limit)
        logger.debug(f"Created account '{name}'")
        return True

    def remove(self, name: str) -> Optional[LedgerEntry]:
        """Delete an account.

        Args:
            name: Account name.

        Returns:
            The removed entry (final balance and history), or None if not found.
        """
        entry = self._accounts.pop(name, None)
        if entry is not None:
            logger.debug(f"Removed account '{name}' with balance {entry.balance}")
        return entry

    def deposit(self, name: str, amount: int) -> None:
        """Deposit into an existing account.

        Raises:
            UserNotFound: If the account does not exist.
            ValueError: If the amount is not a valid operation amount.
        """
        entry = self._accounts.get(name)
        if entry is None:
            raise UserNotFound(name)

        entry.process([Operation.deposit(amount)])

    def withdraw(self, name: str, amount: int) -> None:
        """Withdraw from an existing account.

        Raises:
            UserNotFound: If the account does not exist.
            NotEnoughMoney: If the balance is lower than amount. Nothing changes.
            ValueError: If the amount is not a valid operation amount.
        """
        entry = self._accounts.get(name)
        if entry is None:
            raise UserNotFound(name)

        if entry.balance < amount:
            raise NotEnoughMoney(required=amount, available=entry.balance)

        entry.process([Operation.withdraw(amount)])

    def balance_of(self, name: str) -> Optional[LedgerEntry]:
        """Get a snapshot copy of an account's entry, or None if not found."""
        entry = self._accounts.get(name)
        if entry is None:
            return None
        return entry.snapshot()

    def list_all(self) -> List[Tuple[str, int]]:
        """Get (name, balance) pairs for every account.

        Order follows account registration but callers should not rely on it.
        """
        return [(name, entry.balance) for name, entry in self._accounts.items()]

    def entries(self) -> Iterator[Tuple[str, LedgerEntry]]:
        """Iterate over (name, snapshot) pairs in enumeration order."""
        for name, entry in self._accounts.items():
            yield name, entry.snapshot()

    def apply_batch(self, operations: Iterable[Tuple[bool, str, int]]) -> None:
        """Apply (is_deposit, name, amount) operations in order.

        Stops at the first failure and raises it. Operations applied before
        the failing one stay applied.

        Raises:
            UserNotFound: If an operation targets a missing account.
            NotEnoughMoney: If a withdrawal exceeds the balance.
        """
        for is_deposit, name, amount in operations:
            if is_deposit:
                self.deposit(name, amount)
            else:
                self.withdraw(name, amount)

    def entry(self, name: str) -> Optional[LedgerEntry]:
        """Get the live entry for an account, or None if not found."""
        return self._accounts.get(name)

    def open_entry(self, name: str) -> LedgerEntry:
        """Get the live entry for an account, creating it if needed."""
        self.create(name)
        return self._accounts[name]

    def seed(self, rows: Iterable[Tuple[str, int]]) -> None:
        """Load (name, balance) pairs as opening balances.

        Each account starts with an empty history. Existing names are
        overwritten.

        Raises:
            ValueError: If a balance is negative.
        """
        for name, balance in rows:
            if balance < 0:
                raise ValueError(f"Negative opening balance for '{name}': {balance}")
            self._accounts[name] = LedgerEntry(
                balance=balance, history_limit=self.history_limit
            )

    def export(self) -> List[Tuple[str, int]]:
        """Get (name, balance) pairs representing the store for persistence."""
        return self.list_all()
