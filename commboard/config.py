"""
CommBoard Configuration Module

Handles loading, validation, and management of configuration settings.
"""

import sys
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

# Use tomllib for Python 3.11+, tomli for earlier versions
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


@dataclass
class BoardConfig:
    """Board general settings."""
    name: str = "CommBoard"
    motd: str = "Welcome to the community board!"


@dataclass
class StorageConfig:
    """Storage settings."""
    path: str = "~/.local/share/commboard/commboard.db"


@dataclass
class CryptoConfig:
    """Password hashing settings."""
    argon2_time_cost: int = 3
    argon2_memory_kb: int = 32768
    argon2_parallelism: int = 1


@dataclass
class ActivityConfig:
    """Admin dashboard feed settings."""
    per_collection: int = 3
    max_items: int = 10
    recent_limit: int = 5


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "WARNING"
    file: str = ""


@dataclass
class Config:
    """Main configuration container."""
    board: BoardConfig = field(default_factory=BoardConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
    crypto: CryptoConfig = field(default_factory=CryptoConfig)
    activity: ActivityConfig = field(default_factory=ActivityConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> list[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.board.name:
            errors.append("board.name cannot be empty")

        if not self.storage.path:
            errors.append("storage.path cannot be empty")

        if self.crypto.argon2_time_cost < 1:
            errors.append("crypto.argon2_time_cost must be at least 1")
        # argon2 requires at least 8KB per lane
        if self.crypto.argon2_memory_kb < 8 * self.crypto.argon2_parallelism:
            errors.append("crypto.argon2_memory_kb must be at least 8 * argon2_parallelism")
        if self.crypto.argon2_parallelism < 1:
            errors.append("crypto.argon2_parallelism must be at least 1")

        for name in ("per_collection", "max_items", "recent_limit"):
            if getattr(self.activity, name) < 1:
                errors.append(f"activity.{name} must be at least 1")

        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR"]
        if self.logging.level.upper() not in valid_levels:
            errors.append(f"logging.level must be one of: {valid_levels}")

        return errors

    def save(self, path: Path):
        """Save configuration to TOML file."""
        import toml  # For writing

        with open(path, "w") as f:
            toml.dump(self._to_dict(), f)

    def _to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return asdict(self)


def load_config(path: Path) -> Config:
    """Load configuration from TOML file."""
    config = Config()

    if not path.exists():
        return config

    with open(path, "rb") as f:
        data = tomllib.load(f)

    # Map TOML sections to config dataclasses
    if "board" in data:
        config.board = BoardConfig(**data["board"])

    if "storage" in data:
        config.storage = StorageConfig(**data["storage"])

    if "crypto" in data:
        config.crypto = CryptoConfig(**data["crypto"])

    if "activity" in data:
        config.activity = ActivityConfig(**data["activity"])

    if "logging" in data:
        config.logging = LoggingConfig(**data["logging"])

    return config


def create_default_config(path: Path):
    """Create a default configuration file."""
    config = Config()
    config.save(path)
