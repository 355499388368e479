"""Configuration management for Tally.

Reads configuration from ~/.config/tally.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass, field
from typing import List, Optional
import tomllib
import tomli_w

DEFAULT_ACCOUNTS = ["John", "Alice", "Bob", "Vasya"]


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    data_dir: Path
    snapshot_filename: str
    autosave: bool
    history_limit: Optional[int]  # None keeps the whole history
    log_level: str
    log_dir: Path
    default_accounts: List[str] = field(default_factory=lambda: list(DEFAULT_ACCOUNTS))

    @property
    def snapshot_path(self) -> Path:
        """Get the full snapshot path (data_dir/filename)."""
        return self.data_dir / self.snapshot_filename

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        home = Path.home()
        base_dir = home / "data" / "tally"
        return cls(
            base_dir=base_dir,
            data_dir=base_dir,
            snapshot_filename="balance.csv",
            autosave=True,
            history_limit=100,
            log_level="INFO",
            log_dir=base_dir / "logs",
            default_accounts=list(DEFAULT_ACCOUNTS),
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "tally.toml"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    # If config doesn't exist, create it with defaults
    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    return parse_config(data)


def parse_config(data: dict) -> Config:
    """Build a Config from parsed TOML data, using defaults for missing values.

    Args:
        data: Dictionary as returned by tomllib.

    Returns:
        Config object.
    """
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "tally"))

    # 0 in the file means "keep everything"
    history_limit = data.get("history_limit", 100)
    if history_limit < 0:
        raise ValueError(f"history_limit must not be negative: {history_limit}")
    if not history_limit:
        history_limit = None

    default_accounts = list(data.get("default_accounts", DEFAULT_ACCOUNTS))

    snapshot_config = data.get("snapshot", {})
    data_dir = Path(snapshot_config.get("data_dir", base_dir))
    snapshot_filename = snapshot_config.get("filename", "balance.csv")
    autosave = snapshot_config.get("autosave", True)

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    return Config(
        base_dir=base_dir,
        data_dir=data_dir,
        snapshot_filename=snapshot_filename,
        autosave=autosave,
        history_limit=history_limit,
        log_level=log_level,
        log_dir=log_dir,
        default_accounts=default_accounts,
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()

    # Ensure config directory exists
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "history_limit": config.history_limit or 0,
        "default_accounts": list(config.default_accounts),
        "snapshot": {
            "data_dir": str(config.data_dir),
            "filename": config.snapshot_filename,
            "autosave": config.autosave,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
