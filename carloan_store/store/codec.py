"""Delimited text codec shared by every entity file.

A record is one line: field values in a fixed order joined by ``||``.
Values are not escaped; a text value containing the separator (or a
newline) shifts every column after it when the line is read back. The
encoder logs a warning when it writes such a value.

Encoding rules:

- optional fields that are ``None`` are written as the literal ``null``
- booleans are written as ``true`` / ``false``
- decimals are written in plain notation via ``format(value, "f")``
- dates use ``YYYY-MM-DD``; timestamps use ISO 8601 local date-time
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Generic, TypeVar

from carloan_store.exceptions import MalformedRecordError

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "||"
NULL_TOKEN = "null"

T = TypeVar("T")


def _encode_decimal(value: Decimal) -> str:
    return format(value, "f")


def _decode_decimal(raw: str) -> Decimal:
    try:
        return Decimal(raw)
    except InvalidOperation as e:
        raise ValueError(f"invalid decimal {raw!r}") from e


def _decode_bool(raw: str) -> bool:
    return raw.strip().lower() == "true"


_ENCODERS: dict[str, Callable[[Any], str]] = {
    "str": str,
    "int": str,
    "decimal": _encode_decimal,
    "bool": lambda value: "true" if value else "false",
    "date": lambda value: value.isoformat(),
    "datetime": lambda value: value.isoformat(),
}

_DECODERS: dict[str, Callable[[str], Any]] = {
    "str": lambda raw: raw,
    "int": int,
    "decimal": _decode_decimal,
    "bool": _decode_bool,
    "date": date.fromisoformat,
    "datetime": datetime.fromisoformat,
}


@dataclass(frozen=True)
class FieldSpec:
    """One column of a record line.

    Parameters
    ----------
    name : str
        Dataclass attribute name.
    kind : str
        One of ``str``, ``int``, ``decimal``, ``bool``, ``date``, ``datetime``.
    optional : bool
        ``None`` is written as the ``null`` token and read back as ``None``.
    trailing : bool
        The column may be missing entirely from older lines.
    default : str | None
        Text written when a required value is ``None``.
    """

    name: str
    kind: str = "str"
    optional: bool = False
    trailing: bool = False
    default: str | None = None

    def encode(self, value: Any) -> str:
        if value is None:
            if self.optional:
                return NULL_TOKEN
            if self.default is not None:
                return self.default
            if self.kind == "str":
                return ""
            raise MalformedRecordError(f"{self.name} is required")
        text = _ENCODERS[self.kind](value)
        if self.kind == "str" and _breaks_layout(text):
            logger.warning(
                "Field %s contains the record separator or a line break; "
                "the stored line will not read back intact: %r",
                self.name,
                text,
            )
        return text

    def decode(self, raw: str) -> Any:
        if self.optional and raw == NULL_TOKEN:
            return None
        return _DECODERS[self.kind](raw)


def _breaks_layout(text: str) -> bool:
    return FIELD_SEPARATOR in text or text.endswith("|") or "\n" in text or "\r" in text


class RecordCodec(Generic[T]):
    """Converts between one dataclass type and one delimited text line.

    Parameters
    ----------
    model : type
        Dataclass the lines decode into.
    id_field : str
        Attribute holding the record's identifier.
    fields : tuple[FieldSpec, ...]
        Column layout in file order.
    """

    def __init__(self, model: type[T], id_field: str, fields: tuple[FieldSpec, ...]) -> None:
        self.model = model
        self.id_field = id_field
        self.fields = fields
        self.min_fields = sum(1 for column in fields if not column.trailing)

    @property
    def name(self) -> str:
        return self.model.__name__

    def encode(self, record: T) -> str:
        """Encode *record* as one line (without newline)."""
        return FIELD_SEPARATOR.join(column.encode(getattr(record, column.name)) for column in self.fields)

    def parse(self, line: str) -> T:
        """Decode *line*.

        Raises
        ------
        MalformedRecordError
            If the line has too few columns or a column does not parse.
        """
        parts = line.split(FIELD_SEPARATOR)
        if len(parts) < self.min_fields:
            raise MalformedRecordError(
                f"{self.name}: expected at least {self.min_fields} fields, got {len(parts)}"
            )
        values: dict[str, Any] = {}
        for column, raw in zip(self.fields, parts):
            try:
                values[column.name] = column.decode(raw)
            except ValueError as e:
                raise MalformedRecordError(f"{self.name}.{column.name}: {e}") from e
        return self.model(**values)

    def decode(self, line: str) -> T | None:
        """Decode *line*, logging and returning ``None`` when it is malformed."""
        try:
            return self.parse(line)
        except MalformedRecordError as e:
            logger.warning("Failed to parse %s line %r: %s", self.name, line, e)
            return None

    def get_id(self, record: T) -> int:
        return getattr(record, self.id_field)

    def set_id(self, record: T, value: int) -> None:
        setattr(record, self.id_field, value)
