"""In-memory TSV tables with strict shape validation."""

from tsvtable.config import TsvOptions
from tsvtable.errors import (
    COLUMNS_NOT_EQUAL,
    TOO_FEW_COLUMN_HEADINGS,
    GridIndexError,
    GridShapeError,
    TsvBaseError,
    TsvError,
    TsvFileError,
    TsvParseError,
)
from tsvtable.grid import Grid
from tsvtable.payload import TablePayload
from tsvtable.table import TSV, Table

__all__ = [
    "TsvOptions",
    "COLUMNS_NOT_EQUAL",
    "TOO_FEW_COLUMN_HEADINGS",
    "GridIndexError",
    "GridShapeError",
    "TsvBaseError",
    "TsvError",
    "TsvFileError",
    "TsvParseError",
    "Grid",
    "TablePayload",
    "TSV",
    "Table",
]
