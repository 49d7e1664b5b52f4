"""TSV table value: optional headings plus a grid of text records."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Sequence, Union

from tsvtable.config import (
    DEFAULT_OPTIONS,
    FIELD_SEPARATOR,
    RECORD_SEPARATOR,
    TsvOptions,
    contains_separator,
)
from tsvtable.grid import Grid
from tsvtable.parser import parse_arrays, parse_text
from tsvtable.payload import TablePayload
from tsvtable.storage import PathLike, read_text, write_bytes


class Table:
    """A validated TSV table.

    Headings, when present, are never part of the records: row and column
    access, cell coordinates and ``len()`` all count data rows only.

    Every construction path validates its input. ``Table(records, columns)``
    behaves like ``Table.from_arrays``; ``Table.from_text`` parses text and
    reports failures with line numbers.
    """

    __slots__ = ("_headings", "_records")

    def __init__(
        self,
        records: Sequence[Sequence[str]] = (),
        columns: Optional[Sequence[str]] = None,
        *,
        options: Optional[TsvOptions] = None,
    ) -> None:
        headings, grid = parse_arrays(columns, records, options)
        self._headings: Optional[tuple[str, ...]] = headings
        self._records: Grid[str] = grid

    @classmethod
    def _from_parts(cls, headings: Optional[tuple[str, ...]], records: Grid[str]) -> "Table":
        table = cls.__new__(cls)
        table._headings = headings
        table._records = records
        return table

    # Construction

    @classmethod
    def from_text(
        cls, text: str, with_headers: bool = False, *, options: Optional[TsvOptions] = None
    ) -> "Table":
        """Parse TSV text.

        Args:
            text: Newline-separated records of tab-separated fields.
            with_headers: Treat the first line as column headings.
            options: Parse options; defaults to ``TsvOptions()``.

        Raises:
            TsvParseError: too few headings, or records of unequal length.
        """
        headings, grid = parse_text(text, with_headers, options)
        return cls._from_parts(headings, grid)

    @classmethod
    def from_arrays(
        cls,
        columns: Optional[Sequence[str]] = None,
        records: Sequence[Sequence[str]] = (),
        *,
        options: Optional[TsvOptions] = None,
    ) -> "Table":
        """Build a table from headings and records.

        Raises:
            TsvError: too few headings, or records of unequal length.
        """
        return cls(records, columns, options=options)

    @classmethod
    def load(
        cls,
        path: PathLike,
        with_headers: bool = False,
        *,
        options: Optional[TsvOptions] = None,
    ) -> "Table":
        """Read and parse a TSV file."""
        options = options or DEFAULT_OPTIONS
        text = read_text(path, encoding=options.encoding)
        return cls.from_text(text, with_headers, options=options)

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, options: Optional[TsvOptions] = None) -> "Table":
        payload = TablePayload.model_validate(data)
        return cls(payload.records, payload.columns, options=options)

    @classmethod
    def from_json(cls, text: Union[str, bytes], *, options: Optional[TsvOptions] = None) -> "Table":
        payload = TablePayload.model_validate_json(text)
        return cls(payload.records, payload.columns, options=options)

    # Access

    @property
    def column_headings(self) -> Optional[list[str]]:
        if self._headings is None:
            return None
        return list(self._headings)

    @property
    def records(self) -> list[list[str]]:
        return self._records.rows()

    @property
    def height(self) -> int:
        return self._records.height

    @property
    def width(self) -> int:
        return self._records.width

    def row(self, i: int) -> list[str]:
        """Return data row ``i`` (0-based, headings excluded)."""
        return self._records.row(i)

    def column(self, key: Union[int, str]) -> list[str]:
        """Return a column by 0-based index or by heading name.

        A name lookup returns ``[]`` when the table has no headings. Rows are
        matched through a heading-to-value mapping, so a repeated heading
        resolves to its last position.
        """
        if isinstance(key, str):
            return self._named_column(key)
        return self._records.column(key)

    def _named_column(self, name: str) -> list[str]:
        if self._headings is None:
            return []
        values: list[str] = []
        for record in self._records:
            mapping = dict(zip(self._headings, record))
            if name in mapping:
                values.append(mapping[name])
        return values

    def cell(self, i: int, j: int) -> str:
        return self._records.cell(i, j)

    def set_cell(self, i: int, j: int, value: str) -> None:
        """Replace the value at row ``i``, column ``j`` in place."""
        if not isinstance(value, str):
            raise TypeError(f"cell values must be str, not {type(value).__name__}")
        if contains_separator(value):
            raise ValueError(f"cell values must not contain tab or newline characters: {value!r}")
        self._records.set(i, j, value)

    def __getitem__(self, key: Union[int, str, tuple[int, int]]):
        if isinstance(key, tuple):
            i, j = key
            return self.cell(i, j)
        if isinstance(key, str):
            return self._named_column(key)
        return self.row(key)

    def __setitem__(self, key: tuple[int, int], value: str) -> None:
        if not isinstance(key, tuple):
            raise TypeError("Table assignment requires a (row, column) pair")
        i, j = key
        self.set_cell(i, j, value)

    def __len__(self) -> int:
        return self._records.height

    def __iter__(self) -> Iterator[list[str]]:
        return iter(self._records)

    # Serialization

    def serialize(self) -> str:
        """Return the canonical TSV text.

        The heading line, when present, comes first. Lines are separated by
        newlines with none after the last one, so a table with headings and
        no records serializes to the heading line alone.
        """
        lines: list[str] = []
        if self._headings is not None:
            lines.append(FIELD_SEPARATOR.join(self._headings))
        lines.extend(FIELD_SEPARATOR.join(record) for record in self._records)
        return RECORD_SEPARATOR.join(lines)

    def to_bytes(self, encoding: str = "utf-8") -> bytes:
        return self.serialize().encode(encoding)

    def save(self, path: PathLike, *, options: Optional[TsvOptions] = None) -> None:
        """Write the serialized table to ``path``."""
        options = options or DEFAULT_OPTIONS
        write_bytes(path, self.to_bytes(options.encoding), atomic=options.atomic_write)

    def to_payload(self) -> TablePayload:
        return TablePayload(columns=self.column_headings, records=self.records)

    def to_dict(self) -> dict[str, Any]:
        return self.to_payload().model_dump()

    def to_json(self) -> str:
        return self.to_payload().model_dump_json()

    # Value semantics

    def copy(self) -> "Table":
        return self._from_parts(self._headings, self._records.copy())

    def __copy__(self) -> "Table":
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> "Table":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Table):
            return NotImplemented
        return self._headings == other._headings and self._records == other._records

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return (
            f"Table(height={self.height}, width={self.width}, "
            f"column_headings={self.column_headings!r})"
        )


TSV = Table
