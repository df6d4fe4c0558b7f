"""Per-entity-type identifier allocation backed by a counter file."""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from carloan_store.store.files import (
    format_key_value,
    is_valid_text,
    parse_key_value,
    read_lines,
    write_lines,
)

logger = logging.getLogger(__name__)

SEQUENCE_FILE = "sequences.txt"

CARS = "cars"
CUSTOMERS = "customers"
LOANS = "loans"
PAYMENTS = "payments"
AMORTIZATION = "amortization"

ENTITY_TYPES = (CARS, CUSTOMERS, LOANS, PAYMENTS, AMORTIZATION)


class SequenceAllocator:
    """Monotonically increasing id counter per entity type.

    Every counter holds the *next* id to hand out. ``next_id`` returns it,
    increments it, and rewrites the whole counter file before releasing the
    lock, so two callers can never receive the same id, even for different
    types that share the file.

    Counters are Python ints and never wrap; past ``2**31 - 1`` the ids stop
    fitting the 32-bit column other tools might expect, which nothing here
    checks.

    Parameters
    ----------
    data_dir : Path
        Directory holding ``sequences.txt``.
    atomic : bool
        Rewrite the counter file through a temp file + rename.
    """

    def __init__(self, data_dir: Path, atomic: bool = True) -> None:
        self.path = Path(data_dir) / SEQUENCE_FILE
        self.atomic = atomic
        self._counters: dict[str, int] = {}
        self._lock = threading.Lock()

    def load(self) -> None:
        """Load counters from disk, defaulting every known type to 1."""
        with self._lock:
            self._counters = {entity_type: 1 for entity_type in ENTITY_TYPES}
            try:
                for line_number, line in read_lines(self.path):
                    if not is_valid_text(line):
                        logger.warning("Ignoring non UTF-8 counter line at %s:%d", self.path, line_number)
                        continue
                    pair = parse_key_value(line.strip())
                    if pair is None:
                        continue
                    key, value = pair
                    try:
                        self._counters[key] = int(value)
                    except ValueError:
                        logger.warning(
                            "Ignoring unparsable counter %r at %s:%d", line, self.path, line_number
                        )
            except OSError:
                logger.warning("Failed to load sequences from %s", self.path, exc_info=True)

    def next_id(self, entity_type: str) -> int:
        """Return the next id for *entity_type* and persist the advanced counter."""
        with self._lock:
            value = self._counters.get(entity_type, 1)
            self._counters[entity_type] = value + 1
            self._save()
            return value

    def peek(self, entity_type: str) -> int:
        """Id the next ``next_id`` call would return, without advancing."""
        with self._lock:
            return self._counters.get(entity_type, 1)

    def snapshot(self) -> dict[str, int]:
        """Copy of all counters."""
        with self._lock:
            return dict(self._counters)

    def clear(self) -> None:
        """Forget all counters and delete the counter file."""
        with self._lock:
            self._counters.clear()
            try:
                self.path.unlink(missing_ok=True)
            except OSError:
                logger.error("Failed to delete %s", self.path, exc_info=True)

    def _save(self) -> bool:
        lines = [format_key_value(key, value) for key, value in self._counters.items()]
        try:
            write_lines(self.path, lines, atomic=self.atomic)
        except OSError:
            logger.error("Failed to save sequences to %s", self.path, exc_info=True)
            return False
        return True
