"""Ledger exceptions.

Two families live here side by side: errors raised by the account store's
direct operations, and errors raised while applying transactions.
"""


class LedgerError(Exception):
    """Base exception for the ledger."""

    pass


class AccountStoreError(LedgerError):
    """Direct store operation was rejected."""

    pass


class UserNotFound(AccountStoreError):
    """No account is registered under the given name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Account '{name}' not found")


class NotEnoughMoney(AccountStoreError):
    """Withdrawal exceeds the available balance."""

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"Not enough money: required {required}, available {available}"
        )


class TransactionError(LedgerError):
    """Transaction could not be applied."""

    pass


class InsufficientFunds(TransactionError):
    """Source balance is lower than the transaction amount."""

    def __init__(self, account: str, amount: int, available: int):
        self.account = account
        self.amount = amount
        self.available = available
        super().__init__(
            f"Insufficient funds in '{account}': {amount} requested, "
            f"{available} available"
        )


class InvalidAccount(TransactionError):
    """Transaction refers to an account that does not exist."""

    def __init__(self, account: str):
        self.account = account
        super().__init__(f"Invalid account '{account}'")
