"""Snapshot manager for the flat name,balance file the store is saved to."""

import csv
import logging
from typing import Iterable, List, TextIO, Tuple

from config import Config

logger = logging.getLogger(__name__)


def read_snapshot(source: TextIO) -> List[Tuple[str, int]]:
    """
    Parse a balance snapshot.

    Expected format (no header):
    - one line per account: name,balance
    - balance is a non-negative integer

    Malformed lines are logged and skipped. If a name appears more than once,
    the first line wins.
    """
    rows = []
    seen = set()
    reader = csv.reader(source)

    line_num = 0
    for row in reader:
        line_num += 1

        if not row:
            continue

        if len(row) != 2:
            logger.warning(f"Skipping malformed line {line_num}: {row}")
            continue

        name = row[0].strip()
        balance_str = row[1].strip()

        if not name:
            logger.warning(f"Skipping line {line_num} with empty name: {row}")
            continue

        try:
            balance = int(balance_str)
        except ValueError:
            logger.warning(f"Skipping line {line_num} with invalid balance: {row}")
            continue

        if balance < 0:
            logger.warning(f"Skipping line {line_num} with negative balance: {row}")
            continue

        if name in seen:
            logger.warning(f"Skipping duplicate account on line {line_num}: {name}")
            continue

        seen.add(name)
        rows.append((name, balance))

    logger.debug(f"Read {len(rows)} accounts from snapshot")
    return rows


def write_snapshot(rows: Iterable[Tuple[str, int]], dest: TextIO) -> int:
    """Write (name, balance) rows as name,balance lines.

    Returns:
        Number of rows written.
    """
    writer = csv.writer(dest, lineterminator="\n")
    count = 0
    for name, balance in rows:
        writer.writerow([name, balance])
        count += 1
    return count


class SnapshotManager:
    """Loads and saves the balance snapshot file.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: Config):
        """Initialize the snapshot manager.

        Args:
            config: Config object containing snapshot configuration.
        """
        self.config = config

    @property
    def path(self):
        """Path to the snapshot file."""
        return self.config.snapshot_path

    def load(self) -> List[Tuple[str, int]]:
        """Read the snapshot, or fall back to the default accounts.

        Returns:
            (name, balance) pairs. When the file does not exist, every
            configured default account with a zero balance.
        """
        if not self.path.exists():
            logger.info(
                f"No snapshot at {self.path}, starting with default accounts"
            )
            return [(name, 0) for name in self.config.default_accounts]

        with open(self.path, "r", newline="") as f:
            return read_snapshot(f)

    def save(self, rows: Iterable[Tuple[str, int]]) -> None:
        """Write the whole snapshot, replacing the previous file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.path, "w", newline="") as f:
            count = write_snapshot(rows, f)

        logger.debug(f"Saved {count} accounts to {self.path}")
