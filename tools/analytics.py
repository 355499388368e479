"""Account analysis tools."""

import math
from typing import Dict, Optional, Tuple

from models.ledger_entry import LedgerEntry
from models.operation import OperationKind


def summarize_entry(entry: LedgerEntry) -> Dict[str, float]:
    """Summarize the deposits and withdrawals in an entry's recent history.

    CloseAccount markers are ignored.

    Args:
        entry: Ledger entry to summarize.

    Returns:
        Dictionary with:
        - "deposit_total": Sum of recent deposit amounts (int)
        - "withdraw_total": Sum of recent withdrawal amounts (int)
        - "ratio": deposit_total / withdraw_total (float). With no
          withdrawals this is math.inf if anything was deposited, else 0.0.

    Example:
        {"deposit_total": 1000, "withdraw_total": 500, "ratio": 2.0}
    """
    deposit_total = 0
    withdraw_total = 0

    for operation in entry.recent_operations:
        if operation.kind is OperationKind.DEPOSIT:
            deposit_total += operation.amount
        elif operation.kind is OperationKind.WITHDRAW:
            withdraw_total += operation.amount

    if withdraw_total:
        ratio = deposit_total / withdraw_total
    elif deposit_total:
        ratio = math.inf
    else:
        ratio = 0.0

    return {
        "deposit_total": deposit_total,
        "withdraw_total": withdraw_total,
        "ratio": ratio,
    }


def account_summaries(store) -> Dict[str, Dict[str, float]]:
    """Summarize every account in the store, keyed by name in store order."""
    return {name: summarize_entry(entry) for name, entry in store.entries()}


def rank_accounts(store) -> Optional[Tuple[str, float]]:
    """Find the account with the best deposit/withdrawal ratio.

    The strictly greatest ratio wins; on a tie the account that comes first
    in store order (registration order) is kept.

    Args:
        store: AccountStore to scan.

    Returns:
        (name, ratio) of the best account, or None if the store is empty.
    """
    best = None

    for name, summary in account_summaries(store).items():
        ratio = summary["ratio"]
        if best is None or ratio > best[1]:
            best = (name, ratio)

    return best
