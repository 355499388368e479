"""Base services container for dependency injection."""

from config import Config
from db.snapshot import SnapshotManager
from logger import get_logger

logger = get_logger()


class Services:
    """Container for the account store and the services built on it.

    This class provides a centralized way to access the ledger and makes
    it easy to inject a different snapshot manager for testing.

    Args:
        config: Application configuration object.
        snapshot_manager: Optional snapshot manager for testing. If None, one
            is created from config.
    """

    def __init__(self, config: Config, snapshot_manager=None):
        """Initialize services and load the store from the snapshot.

        Args:
            config: Config object containing application configuration.
            snapshot_manager: Optional snapshot manager for dependency injection
                (testing). If None, creates SnapshotManager from config.
        """
        self.config = config
        self.snapshot_manager = snapshot_manager or SnapshotManager(config)

        # Lazy import to avoid circular dependencies
        from services.accounts import AccountStore
        from services.transactions import TransactionService

        self.accounts = AccountStore(history_limit=config.history_limit)
        self.accounts.seed(self.snapshot_manager.load())
        self.transactions = TransactionService(self.accounts)

    def save(self) -> None:
        """Write the current store to the snapshot file."""
        self.snapshot_manager.save(self.accounts.export())

    def autosave(self) -> None:
        """Save the snapshot if autosave is enabled in the config."""
        if self.config.autosave:
            self.save()
        else:
            logger.debug("Autosave disabled, snapshot not written")
