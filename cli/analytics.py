#!/usr/bin/env python3

from tools.analytics import account_summaries, rank_accounts
from logger import get_logger

logger = get_logger()


def format_ratio(ratio: float) -> str:
    """Format a deposit/withdrawal ratio for display."""
    if ratio == float("inf"):
        return "inf (no withdrawals)"
    return f"{ratio:.3f}"


def cmd_best(args, services):
    """Show the account with the best deposit/withdrawal ratio."""
    result = rank_accounts(services.accounts)

    if result is None:
        logger.info("No accounts found.")
        return

    name, ratio = result
    logger.info(f"Best account: {name} (ratio {format_ratio(ratio)})")


def cmd_ratios(args, services):
    """Show deposit and withdrawal totals for every account."""
    summaries = account_summaries(services.accounts)

    if not summaries:
        logger.info("No accounts found.")
        return

    logger.info(f"\n{'Account':<20}{'Deposits':>14}{'Withdrawals':>14}  Ratio")
    logger.info("=" * 70)
    for name, summary in sorted(summaries.items()):
        logger.info(
            f"{name:<20}{summary['deposit_total']:>14}"
            f"{summary['withdraw_total']:>14}  {format_ratio(summary['ratio'])}"
        )


def setup_parser(subparsers):
    """Setup analytics subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "analytics",
        help="Analyze recent account activity",
        description="Rank accounts by their recent deposit/withdrawal ratio",
    )

    analytics_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available analytics commands",
        dest="subcommand",
        required=True,
    )

    best_parser = analytics_subparsers.add_parser(
        "best", help="Show the account with the best ratio"
    )
    best_parser.set_defaults(func=cmd_best)

    ratios_parser = analytics_subparsers.add_parser(
        "ratios", help="Show deposit/withdrawal totals per account"
    )
    ratios_parser.set_defaults(func=cmd_ratios)
