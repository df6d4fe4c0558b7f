"""Configuration management for carloan-store."""

from dataclasses import dataclass, field
from pathlib import Path

from carloan_store.exceptions import ConfigurationError

DATA_FOLDER = ".vismera_data"

LOG_FORMATS = ("standard", "json")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def default_data_dir() -> Path:
    """Hidden data directory inside the user's home directory."""
    return Path.home() / DATA_FOLDER


@dataclass
class StoreConfig:
    """Configuration for opening a file-backed store."""

    data_dir: Path = field(default_factory=default_data_dir)
    atomic_writes: bool = True
    seed_defaults: bool = True
    log_level: str = "INFO"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        self.data_dir = Path(self.data_dir).expanduser()

    @classmethod
    def from_env(cls) -> "StoreConfig":
        """Create config from environment variables."""
        import os

        data_dir_str = os.getenv("CARLOAN_DATA_DIR")
        log_format = os.getenv("LOG_FORMAT", "standard").lower()
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {log_format!r}"
            )

        return cls(
            data_dir=Path(data_dir_str) if data_dir_str else default_data_dir(),
            atomic_writes=_env_bool("CARLOAN_ATOMIC_WRITES", True),
            seed_defaults=_env_bool("CARLOAN_SEED_DEFAULTS", True),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )


def _env_bool(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment."""
    import os

    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean flag, got {raw!r}")
