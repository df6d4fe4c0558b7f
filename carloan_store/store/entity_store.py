"""In-memory record list for one entity type, backed by one text file."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Callable, Generic, Iterable, TypeVar

from carloan_store.exceptions import MalformedRecordError
from carloan_store.store.codec import RecordCodec
from carloan_store.store.files import is_valid_text, read_lines, write_lines
from carloan_store.store.sequences import SequenceAllocator

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class SkippedLine:
    """A line left out of a load because it did not decode."""

    line_number: int
    line: str
    reason: str


@dataclass
class LoadResult(Generic[T]):
    """Outcome of loading one entity file.

    ``skipped`` lists malformed lines that were left out; ``error`` holds
    the I/O error that aborted the load, in which case ``records`` is empty.
    """

    records: list[T] = field(default_factory=list)
    skipped: list[SkippedLine] = field(default_factory=list)
    error: OSError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class EntityStore(Generic[T]):
    """Ordered records of one type plus an id index.

    All reads are served from memory. Every mutation rewrites the whole
    backing file. Mutations are not synchronized; one writer at a time is
    assumed, and with concurrent writers the last full rewrite wins.

    Parameters
    ----------
    path : Path
        Backing file.
    codec : RecordCodec
        Line layout for this type.
    sequences : SequenceAllocator
        Source of new ids.
    sequence_name : str
        Counter key in the sequence file.
    timestamp_field : str | None
        Attribute stamped with ``datetime.now()`` on insert.
    atomic : bool
        Rewrite through a temp file + rename.
    """

    def __init__(
        self,
        path: Path,
        codec: RecordCodec[T],
        sequences: SequenceAllocator,
        sequence_name: str,
        timestamp_field: str | None = None,
        atomic: bool = True,
    ) -> None:
        self.path = Path(path)
        self.codec = codec
        self.sequences = sequences
        self.sequence_name = sequence_name
        self.timestamp_field = timestamp_field
        self.atomic = atomic
        self._records: list[T] = []
        self._index: dict[int, T] = {}

    def __len__(self) -> int:
        return len(self._records)

    def load(self) -> LoadResult[T]:
        """Replace the in-memory list with the file's contents."""
        result: LoadResult[T] = LoadResult()
        records: list[T] = []
        try:
            for line_number, line in read_lines(self.path):
                if not line.strip():
                    continue
                if not is_valid_text(line):
                    logger.warning(
                        "Skipping %s line %d in %s: not valid UTF-8",
                        self.codec.name,
                        line_number,
                        self.path.name,
                    )
                    result.skipped.append(SkippedLine(line_number, line, "not valid UTF-8"))
                    continue
                try:
                    records.append(self.codec.parse(line))
                except MalformedRecordError as e:
                    logger.warning(
                        "Skipping malformed %s line %d in %s: %s",
                        self.codec.name,
                        line_number,
                        self.path.name,
                        e,
                    )
                    result.skipped.append(SkippedLine(line_number, line, str(e)))
        except OSError as e:
            logger.error("Failed to load %s", self.path, exc_info=True)
            result.error = e
            records = []

        self._records = records
        self._reindex()
        result.records = list(records)
        return result

    def save(self) -> bool:
        """Rewrite the backing file from memory; ``False`` if it failed."""
        try:
            lines = [self.codec.encode(record) for record in self._records]
            write_lines(self.path, lines, atomic=self.atomic)
        except (OSError, UnicodeEncodeError, MalformedRecordError):
            logger.error("Failed to save %s", self.path, exc_info=True)
            return False
        return True

    def all(self) -> list[T]:
        """Copy of the records in insertion order."""
        return list(self._records)

    def get(self, record_id: int) -> T | None:
        return self._index.get(record_id)

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        return [record for record in self._records if predicate(record)]

    def any(self, predicate: Callable[[T], bool]) -> bool:
        return any(predicate(record) for record in self._records)

    def insert(self, record: T) -> int:
        """Assign id and timestamp, append, and persist. Returns the new id."""
        self._prepare(record)
        self._append(record)
        self.save()
        return self.codec.get_id(record)

    def insert_many(self, records: Iterable[T]) -> list[int]:
        """Insert each record with its own id, then persist once."""
        ids = []
        for record in records:
            self._prepare(record)
            self._append(record)
            ids.append(self.codec.get_id(record))
        self.save()
        return ids

    def update(self, record: T) -> bool:
        """Replace the stored record with the same id."""
        record_id = self.codec.get_id(record)
        for position, existing in enumerate(self._records):
            if self.codec.get_id(existing) == record_id:
                self._records[position] = record
                self._index[record_id] = record
                self.save()
                return True
        return False

    def delete(self, record_id: int) -> bool:
        """Remove every record with *record_id*; persist only if one was removed."""
        return self.delete_where(lambda record: self.codec.get_id(record) == record_id) > 0

    def delete_where(self, predicate: Callable[[T], bool]) -> int:
        """Remove matching records, persist once if any were removed, return the count."""
        kept = [record for record in self._records if not predicate(record)]
        removed = len(self._records) - len(kept)
        if removed:
            self._records = kept
            self._reindex()
            self.save()
        return removed

    def clear(self) -> None:
        """Drop every record and delete the backing file."""
        self._records = []
        self._index = {}
        try:
            self.path.unlink(missing_ok=True)
        except OSError:
            logger.error("Failed to delete %s", self.path, exc_info=True)

    def _prepare(self, record: T) -> None:
        self.codec.set_id(record, self.sequences.next_id(self.sequence_name))
        if self.timestamp_field:
            setattr(record, self.timestamp_field, datetime.now())

    def _append(self, record: T) -> None:
        self._records.append(record)
        self._index.setdefault(self.codec.get_id(record), record)

    def _reindex(self) -> None:
        # First occurrence wins when a damaged file repeats an id
        self._index = {}
        for record in self._records:
            self._index.setdefault(self.codec.get_id(record), record)
