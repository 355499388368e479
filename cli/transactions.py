#!/usr/bin/env python3

from models.operation import MAX_OPERATION_AMOUNT
from models.transaction import Deposit, Transfer, Withdraw, parse_transactions
from tools.batch import load_batch
from logger import get_logger

logger = get_logger()


def _run(services, transaction):
    # Partial effects of a failed chain stay in the store, so save either way
    try:
        services.transactions.apply(transaction)
    finally:
        services.autosave()


def cmd_deposit(args, services):
    """Deposit into an account, creating it if needed."""
    _run(services, Deposit(account=args.name, amount=args.amount))
    logger.info(f"✓ Deposited {args.amount} to {args.name}")


def cmd_withdraw(args, services):
    """Withdraw from an account."""
    _run(services, Withdraw(account=args.name, amount=args.amount))
    logger.info(f"✓ Withdrew {args.amount} from {args.name}")


def cmd_transfer(args, services):
    """Transfer between two accounts."""
    _run(
        services,
        Transfer(source=args.source, target=args.target, amount=args.amount),
    )
    logger.info(f"✓ Transferred {args.amount} from {args.source} to {args.target}")


def cmd_chain(args, services):
    """Run several transactions in order, stopping at the first failure.

    Args:
        args: Parsed command-line arguments with steps, a flat token list like
            deposit Alice 100 transfer Alice Bob 30
        services: Services container
    """
    transactions = parse_transactions(args.steps)
    if len(transactions) < 2:
        raise ValueError("A chain needs at least two transactions")

    try:
        services.transactions.apply_all(transactions)
    finally:
        services.autosave()

    logger.info(f"✓ Chain of {len(transactions)} transactions applied")


def cmd_batch(args, services):
    """Apply a YAML batch of deposits and withdrawals to existing accounts."""
    operations = load_batch(args.file)

    if not operations:
        logger.info("No operations to apply.")
        return

    try:
        services.accounts.apply_batch(operations)
    finally:
        services.autosave()

    logger.info(f"✓ Applied {len(operations)} operations")


def non_negative_int(value: str) -> int:
    amount = int(value)
    if amount < 0 or amount > MAX_OPERATION_AMOUNT:
        raise ValueError(f"Amount out of range 0..{MAX_OPERATION_AMOUNT}: {amount}")
    return amount


def setup_parser(subparsers):
    """Setup transactions subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "transactions",
        help="Deposit, withdraw and transfer",
        description="Run transactions against the ledger",
    )

    transactions_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available transaction commands",
        dest="subcommand",
        required=True,
    )

    # transactions deposit
    deposit_parser = transactions_subparsers.add_parser(
        "deposit", help="Deposit into an account (created if missing)"
    )
    deposit_parser.add_argument("name", help="Account name")
    deposit_parser.add_argument(
        "amount", type=non_negative_int, help="Amount to deposit"
    )
    deposit_parser.set_defaults(func=cmd_deposit)

    # transactions withdraw
    withdraw_parser = transactions_subparsers.add_parser(
        "withdraw", help="Withdraw from an account"
    )
    withdraw_parser.add_argument("name", help="Account name")
    withdraw_parser.add_argument(
        "amount", type=non_negative_int, help="Amount to withdraw"
    )
    withdraw_parser.set_defaults(func=cmd_withdraw)

    # transactions transfer
    transfer_parser = transactions_subparsers.add_parser(
        "transfer", help="Transfer between accounts"
    )
    transfer_parser.add_argument("source", help="Account to debit")
    transfer_parser.add_argument("target", help="Account to credit")
    transfer_parser.add_argument(
        "amount", type=non_negative_int, help="Amount to transfer"
    )
    transfer_parser.set_defaults(func=cmd_transfer)

    # transactions chain
    chain_parser = transactions_subparsers.add_parser(
        "chain",
        help="Run transactions in order, stopping at the first failure",
        description=(
            "Example: chain deposit Alice 100 transfer Alice Bob 30. "
            "Steps that ran before a failure are not rolled back."
        ),
    )
    chain_parser.add_argument("steps", nargs="+", help="Transaction steps")
    chain_parser.set_defaults(func=cmd_chain)

    # transactions batch
    batch_parser = transactions_subparsers.add_parser(
        "batch", help="Apply a YAML batch file to existing accounts"
    )
    batch_parser.add_argument("file", help="Path to the batch YAML file")
    batch_parser.set_defaults(func=cmd_batch)
