"""Transaction service: runs transactions against the account store."""

from typing import Sequence

from exceptions import TransactionError
from logger import get_logger
from models.transaction import Transaction, chain

logger = get_logger()


class TransactionService:
    """Service for applying transactions with logging."""

    def __init__(self, store):
        """Initialize the transaction service.

        Args:
            store: AccountStore the transactions are applied to.
        """
        self.store = store

    def apply(self, transaction: Transaction) -> None:
        """Apply a single transaction (or chain).

        Args:
            transaction: Transaction to apply.

        Raises:
            TransactionError: If any step fails. Steps that ran before the
                failure keep their effects.
        """
        logger.debug(f"Applying transaction: {transaction}")
        try:
            transaction.apply(self.store)
        except TransactionError as e:
            logger.warning(f"Transaction rejected ({transaction}): {e}")
            raise
        logger.debug(f"Transaction applied: {transaction}")

    def apply_all(self, transactions: Sequence[Transaction]) -> None:
        """Chain transactions in order and apply them, stopping at the first failure.

        Raises:
            ValueError: If the sequence is empty.
            TransactionError: If any step fails.
        """
        self.apply(chain(*transactions))
