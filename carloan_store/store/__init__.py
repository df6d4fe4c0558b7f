"""File-backed persistence for car loan records."""

from carloan_store.store.bootstrap import Bootstrapper
from carloan_store.store.codec import FIELD_SEPARATOR, NULL_TOKEN, FieldSpec, RecordCodec
from carloan_store.store.entity_store import EntityStore, LoadResult, SkippedLine
from carloan_store.store.repository import CarLoanRepository
from carloan_store.store.sequences import SequenceAllocator
from carloan_store.store.settings import SettingsStore

__all__ = [
    "Bootstrapper",
    "CarLoanRepository",
    "EntityStore",
    "FIELD_SEPARATOR",
    "FieldSpec",
    "LoadResult",
    "NULL_TOKEN",
    "RecordCodec",
    "SequenceAllocator",
    "SettingsStore",
    "SkippedLine",
]
