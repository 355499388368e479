"""Argument parser shared by the one-shot CLI and the interactive shell."""

import argparse
from cli import accounts, analytics, shell, transactions


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level parser with every command group registered."""
    parser = argparse.ArgumentParser(
        prog="tally",
        description="Tally - In-memory account ledger",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    accounts.setup_parser(subparsers)
    transactions.setup_parser(subparsers)
    analytics.setup_parser(subparsers)
    shell.setup_parser(subparsers)

    return parser
