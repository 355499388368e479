"""Shared pytest fixtures for all tests."""

import pytest

from config import Config
from db.snapshot import SnapshotManager
from services.accounts import AccountStore
from services.base import Services


@pytest.fixture
def test_config(tmp_path):
    """Create a test configuration pointing to a temporary data directory.

    Args:
        tmp_path: pytest tmp_path fixture for temporary directory.

    Returns:
        Config: Test configuration object.
    """
    return Config(
        base_dir=tmp_path / "tally",
        data_dir=tmp_path / "tally" / "data",
        snapshot_filename="balance.csv",
        autosave=True,
        history_limit=100,
        log_level="DEBUG",
        log_dir=tmp_path / "tally" / "logs",
        default_accounts=["John", "Alice", "Bob", "Vasya"],
    )


@pytest.fixture
def store():
    """Create an empty AccountStore.

    Returns:
        AccountStore: Store with no accounts.
    """
    return AccountStore()


@pytest.fixture
def snapshot_manager(test_config):
    """Create a SnapshotManager writing under tmp_path.

    Returns:
        SnapshotManager: Snapshot manager for the test config.
    """
    return SnapshotManager(test_config)


@pytest.fixture
def services(test_config, snapshot_manager):
    """Create a Services container backed by a temporary snapshot file.

    The snapshot file does not exist yet, so the store starts with the
    default accounts.

    Returns:
        Services: Services container for testing.
    """
    return Services(test_config, snapshot_manager=snapshot_manager)
