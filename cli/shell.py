#!/usr/bin/env python3
"""Interactive shell over the same commands as the one-shot CLI.

Short forms are accepted without the group prefix:

    add <name> [balance]           remove <name>       balance <name>
    deposit <name> <amount>        withdraw <name> <amount>
    transfer <from> <to> <amount>
    + deposit Alice 100 transfer Alice Bob 30
    list    best    ratios    help    exit
"""

import argparse
from logger import get_logger

logger = get_logger()

SHORT_FORMS = {
    "add": ["accounts", "add"],
    "remove": ["accounts", "remove"],
    "balance": ["accounts", "balance"],
    "list": ["accounts", "list"],
    "deposit": ["transactions", "deposit"],
    "withdraw": ["transactions", "withdraw"],
    "transfer": ["transactions", "transfer"],
    "chain": ["transactions", "chain"],
    "+": ["transactions", "chain"],
    "batch": ["transactions", "batch"],
    "best": ["analytics", "best"],
    "ratios": ["analytics", "ratios"],
}

EXIT_COMMANDS = {"exit", "quit"}


def expand_command(tokens):
    """Expand a short form like ['deposit', 'Alice', '5'] into full CLI arguments."""
    if tokens and tokens[0] in SHORT_FORMS:
        return SHORT_FORMS[tokens[0]] + tokens[1:]
    return tokens


def run_line(line, parser, services) -> bool:
    """Run one shell line.

    Returns:
        False when the shell should stop, True otherwise.
    """
    tokens = line.split()
    if not tokens:
        return True

    if tokens[0] in EXIT_COMMANDS:
        return False

    if tokens[0] == "help":
        print(__doc__)
        return True

    # argparse exits on bad input; the shell keeps going
    try:
        args = parser.parse_args(expand_command(tokens))
    except SystemExit:
        return True

    if args.command == "shell":
        print("Already in the shell")
        return True

    try:
        args.func(args, services)
    except Exception as e:
        print(f"Error: {e}")

    return True


def cmd_shell(args, services):
    """Read commands from stdin until exit or end of input."""
    # Imported here because cli.app registers this module's parser
    from cli.app import build_parser

    parser = build_parser()

    print("=== Tally shell === (type 'help' for commands)")
    while True:
        try:
            line = input("> ")
        except EOFError:
            break

        if not run_line(line, parser, services):
            break

    services.autosave()
    logger.info("Leaving shell.")


def setup_parser(subparsers):
    """Setup shell subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "shell",
        help="Start an interactive session",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.set_defaults(func=cmd_shell)
