"""Custom exceptions for TSV tables."""

from __future__ import annotations

from typing import Literal


ErrorKind = Literal["too_few_column_headings", "columns_not_equal"]

TOO_FEW_COLUMN_HEADINGS: ErrorKind = "too_few_column_headings"
COLUMNS_NOT_EQUAL: ErrorKind = "columns_not_equal"

_KINDS = (TOO_FEW_COLUMN_HEADINGS, COLUMNS_NOT_EQUAL)


def _check_kind(kind: str) -> None:
    if kind not in _KINDS:
        raise ValueError(f"Unknown TSV error kind: {kind}")


class TsvBaseError(Exception):
    """Base exception for TSV table failures."""


class TsvError(TsvBaseError):
    """Raised when arrays handed to a table have an invalid shape.

    Carries no location: the records did not come from text.
    """

    def __init__(self, kind: ErrorKind) -> None:
        _check_kind(kind)
        self.kind = kind
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if self.kind == TOO_FEW_COLUMN_HEADINGS:
            return (
                "The number of headings must be equal to or exceed the number "
                "of fields found in the longest row."
            )
        return "All records must have an equal number of fields."

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash((type(self), self.kind))

    def __reduce__(self):
        return (type(self), (self.kind,))

    def __repr__(self) -> str:
        return f"TsvError({self.kind!r})"


class TsvParseError(TsvBaseError):
    """Raised when TSV text has an invalid shape.

    Attributes:
        kind: Which shape rule failed.
        line_number: 1-based physical line of the reported row.
    """

    def __init__(self, kind: ErrorKind, line_number: int) -> None:
        _check_kind(kind)
        self.kind = kind
        self.line_number = line_number
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if self.kind == TOO_FEW_COLUMN_HEADINGS:
            return (
                "The number of headings must equal or exceed the number of "
                f"columns found on line {self.line_number}."
            )
        return f"All records must have the number of columns as line {self.line_number}."

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.kind, self.line_number) == (other.kind, other.line_number)

    def __hash__(self) -> int:
        return hash((type(self), self.kind, self.line_number))

    def __reduce__(self):
        return (type(self), (self.kind, self.line_number))

    def __repr__(self) -> str:
        return f"TsvParseError({self.kind!r}, line_number={self.line_number})"


class GridIndexError(TsvBaseError, IndexError):
    """Raised when a row, column or cell coordinate is out of range."""


class GridShapeError(TsvBaseError, ValueError):
    """Raised when a grid is given a row wider than its width."""


class TsvFileError(TsvBaseError):
    """Raised when loading or saving a table file fails."""
