#!/usr/bin/env python3
"""
Tally CLI - Command-line interface for the account ledger.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    accounts     Add, remove and inspect accounts
    transactions Deposit, withdraw, transfer, chains and batches
    analytics    Deposit/withdrawal ratios
    shell        Interactive session

Examples:
    python -m cli accounts add Alice 100
    python -m cli transactions transfer Alice Bob 30
    python -m cli transactions chain deposit Alice 100 transfer Alice Bob 30
    python -m cli analytics best
    python -m cli shell
"""

import sys
from cli.app import build_parser
from config import load_config
from services.base import Services
from logger import setup_logging


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)

            # Loads the store from the snapshot file
            services = Services(config)

            args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
