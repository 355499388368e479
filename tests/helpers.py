"""Helper utilities for tests."""

from typing import Dict, List

from models.operation import Operation
from services.accounts import AccountStore


def build_store(histories: Dict[str, List[Operation]]) -> AccountStore:
    """Build a store whose accounts have exactly the given histories.

    Accounts are created in dict order and the operations are applied
    through the store, so balances follow the histories.

    Args:
        histories: Account name mapped to the operations to apply.

    Returns:
        AccountStore with one entry per name.
    """
    store = AccountStore(history_limit=None)
    for name, operations in histories.items():
        store.create(name)
        not_applied = store.open_entry(name).process(operations)
        assert not_applied == [], f"Operations for {name} must all apply"
    return store
