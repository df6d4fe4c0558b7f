"""Flat key/value settings persisted as ``key=value`` lines."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path

from carloan_store.store.files import (
    format_key_value,
    is_valid_text,
    parse_key_value,
    read_lines,
    write_lines,
)

logger = logging.getLogger(__name__)

SETTINGS_FILE = "settings.txt"

CURRENCY_SYMBOL = "currency_symbol"
DEFAULT_APR = "default_apr"
DEFAULT_TERM = "default_term"
DEFAULT_PENALTY_RATE = "default_penalty_rate"
DEFAULT_PENALTY_TYPE = "default_penalty_type"
DEFAULT_GRACE_PERIOD = "default_grace_period"
APP_VERSION = "app_version"


class SettingsStore:
    """String-to-string settings with typed convenience getters.

    Keys may not contain ``=``; values may, since lines split on the first
    separator only. Values containing a line break do not survive a reload.
    """

    def __init__(self, data_dir: Path, atomic: bool = True) -> None:
        self.path = Path(data_dir) / SETTINGS_FILE
        self.atomic = atomic
        self._values: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def load(self) -> OSError | None:
        """Load settings from disk; returns the I/O error, if any."""
        values: dict[str, str] = {}
        try:
            for line_number, line in read_lines(self.path):
                if not is_valid_text(line):
                    logger.warning("Ignoring non UTF-8 setting at %s:%d", self.path, line_number)
                    continue
                pair = parse_key_value(line)
                if pair is not None:
                    values[pair[0]] = pair[1]
        except OSError as e:
            logger.error("Failed to load settings from %s", self.path, exc_info=True)
            self._values = {}
            return e
        self._values = values
        return None

    def save(self) -> bool:
        lines = [format_key_value(key, value) for key, value in self._values.items()]
        try:
            write_lines(self.path, lines, atomic=self.atomic)
        except (OSError, UnicodeEncodeError):
            logger.error("Failed to save settings to %s", self.path, exc_info=True)
            return False
        return True

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._values.get(key, default)

    def set(self, key: str, value: str) -> bool:
        """Store *value* under *key* and persist."""
        self._values[key] = str(value)
        return self.save()

    def set_many(self, values: dict[str, str]) -> bool:
        """Store several values with one rewrite."""
        self._values.update({key: str(value) for key, value in values.items()})
        return self.save()

    def delete(self, key: str) -> bool:
        """Remove *key*; ``False`` if it was not set."""
        if key not in self._values:
            return False
        del self._values[key]
        self.save()
        return True

    def as_dict(self) -> dict[str, str]:
        return dict(self._values)

    def get_int(self, key: str, default: int) -> int:
        value = self._values.get(key)
        if value is None:
            return default
        try:
            return int(value.strip())
        except ValueError:
            logger.warning("Setting %s=%r is not an integer, using %s", key, value, default)
            return default

    def get_decimal(self, key: str, default: Decimal) -> Decimal:
        value = self._values.get(key)
        if value is None:
            return default
        try:
            return Decimal(value.strip())
        except InvalidOperation:
            logger.warning("Setting %s=%r is not a number, using %s", key, value, default)
            return default

    def get_bool(self, key: str, default: bool) -> bool:
        value = self._values.get(key)
        if value is None:
            return default
        return value.strip().lower() in ("true", "1", "yes")

    def clear(self) -> None:
        """Drop every setting and delete the backing file."""
        self._values = {}
        try:
            self.path.unlink(missing_ok=True)
        except OSError:
            logger.error("Failed to delete %s", self.path, exc_info=True)
