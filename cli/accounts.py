#!/usr/bin/env python3

from exceptions import UserNotFound
from logger import get_logger
from models.operation import MAX_OPERATION_AMOUNT

logger = get_logger()


def cmd_add(args, services):
    """Add a new account, optionally with an opening deposit."""
    if args.balance < 0 or args.balance > MAX_OPERATION_AMOUNT:
        raise ValueError(f"Balance out of range 0..{MAX_OPERATION_AMOUNT}")

    if not services.accounts.create(args.name):
        raise ValueError(f"Account '{args.name}' already exists")

    if args.balance:
        services.accounts.deposit(args.name, args.balance)

    services.autosave()
    logger.info(f"✓ Account {args.name} added with balance {args.balance}")


def cmd_remove(args, services):
    """Remove an account and report its final balance."""
    entry = services.accounts.remove(args.name)
    if entry is None:
        raise UserNotFound(args.name)

    services.autosave()
    logger.info(f"✓ Account {args.name} removed (final balance {entry.balance})")


def cmd_balance(args, services):
    """Show an account's balance and recent operations."""
    entry = services.accounts.balance_of(args.name)
    if entry is None:
        raise UserNotFound(args.name)

    logger.info(f"Balance {args.name}: {entry.balance}")

    if entry.recent_operations:
        logger.info("Recent operations:")
        for operation in entry.recent_operations:
            logger.info(f"  {operation}")


def cmd_list(args, services):
    """List all accounts and their balances."""
    rows = sorted(services.accounts.list_all())

    if not rows:
        logger.info("No accounts found.")
        return

    logger.info("\nAccounts:")
    logger.info("=" * 40)
    for name, balance in rows:
        logger.info(f"{name:<28}{balance:>12}")
    logger.info("-" * 40)
    logger.info(f"Total accounts: {len(rows)}")


def setup_parser(subparsers):
    """Setup accounts subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "accounts",
        help="Manage accounts",
        description="Add, remove and inspect accounts",
    )

    accounts_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available account commands",
        dest="subcommand",
        required=True,
    )

    # accounts add
    add_parser = accounts_subparsers.add_parser("add", help="Add a new account")
    add_parser.add_argument("name", help="Account name")
    add_parser.add_argument(
        "balance", type=int, nargs="?", default=0, help="Opening balance"
    )
    add_parser.set_defaults(func=cmd_add)

    # accounts remove
    remove_parser = accounts_subparsers.add_parser("remove", help="Remove an account")
    remove_parser.add_argument("name", help="Account name")
    remove_parser.set_defaults(func=cmd_remove)

    # accounts balance
    balance_parser = accounts_subparsers.add_parser(
        "balance", help="Show an account's balance"
    )
    balance_parser.add_argument("name", help="Account name")
    balance_parser.set_defaults(func=cmd_balance)

    # accounts list
    list_parser = accounts_subparsers.add_parser("list", help="List all accounts")
    list_parser.set_defaults(func=cmd_list)
