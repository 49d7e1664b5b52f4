"""Splitting and shape validation of TSV input.

Text and arrays go through the same two shape rules:

* with headings, there must be at least as many headings as fields in the
  widest row;
* every row must have as many fields as the widest row.

A failing rule is reported against the first row whose length equals the
widest row. That row is not always the one out of step (a single short row
among wide ones is still reported at the first wide row); callers rely on
this position, so it stays.
"""

from __future__ import annotations

import logging
import re
from typing import Optional, Sequence

from tsvtable.config import (
    DEFAULT_OPTIONS,
    FIELD_SEPARATOR,
    LINE_BREAKS,
    TsvOptions,
    contains_separator,
)
from tsvtable.errors import (
    COLUMNS_NOT_EQUAL,
    TOO_FEW_COLUMN_HEADINGS,
    ErrorKind,
    TsvError,
    TsvParseError,
)
from tsvtable.grid import Grid

logger = logging.getLogger(__name__)

_NEWLINE_RE = re.compile("\r\n|[" + re.escape(LINE_BREAKS) + "]")

Headings = Optional[tuple[str, ...]]


def split_lines(text: str, *, allow_trailing_newline: bool = False) -> list[list[str]]:
    """Split text into lines of fields, one entry per physical line."""

    if not isinstance(text, str):
        raise TypeError(f"TSV text must be str, not {type(text).__name__}")
    lines = _NEWLINE_RE.split(text)
    if allow_trailing_newline and len(lines) > 1 and lines[-1] == "":
        lines.pop()
    return [line.split(FIELD_SEPARATOR) for line in lines]


def find_violation(
    headings: Headings, records: Sequence[Sequence[str]]
) -> Optional[tuple[ErrorKind, int]]:
    """Return the failed rule and 0-based index of the reported row, if any."""

    if not records:
        return None
    max_width = max(len(record) for record in records)
    reported = next(idx for idx, record in enumerate(records) if len(record) == max_width)
    if headings is not None and len(headings) < max_width:
        return TOO_FEW_COLUMN_HEADINGS, reported
    if any(len(record) != max_width for record in records):
        return COLUMNS_NOT_EQUAL, reported
    return None


def build_grid(
    headings: Headings, records: Sequence[Sequence[str]], options: TsvOptions
) -> Grid[str]:
    """Build the record grid once the shape rules have passed."""

    if headings is not None:
        width = len(headings)
    elif records:
        width = len(records[0])
    else:
        width = 0
    return Grid(records, width=width, fill=options.fill_value)


def parse_text(
    text: str, with_headers: bool = False, options: Optional[TsvOptions] = None
) -> tuple[Headings, Grid[str]]:
    """Parse TSV text into headings and a record grid.

    Raises:
        TsvParseError: a shape rule failed; ``line_number`` is the physical
            line of the reported row, counting the heading line.
    """

    options = options or DEFAULT_OPTIONS
    all_lines = split_lines(text, allow_trailing_newline=options.allow_trailing_newline)
    if with_headers:
        headings: Headings = tuple(all_lines[0])
        data_lines = all_lines[1:]
        first_line = 2
    else:
        headings = None
        data_lines = all_lines
        first_line = 1

    violation = find_violation(headings, data_lines)
    if violation is not None:
        kind, index = violation
        line_number = index + first_line
        logger.debug("TSV text rejected: %s at line %d", kind, line_number)
        raise TsvParseError(kind, line_number)

    grid = build_grid(headings, data_lines, options)
    logger.debug("Parsed TSV text: %d records, width %d", grid.height, grid.width)
    return headings, grid


def _check_text_values(values: Sequence[object], what: str) -> None:
    for value in values:
        if not isinstance(value, str):
            raise TypeError(f"{what} must contain only str values, got {type(value).__name__}")
        if contains_separator(value):
            raise ValueError(f"{what} must not contain tab or newline characters: {value!r}")


def parse_arrays(
    columns: Optional[Sequence[str]],
    records: Sequence[Sequence[str]],
    options: Optional[TsvOptions] = None,
) -> tuple[Headings, Grid[str]]:
    """Validate caller-supplied headings and records.

    Raises:
        TsvError: a shape rule failed.
        TypeError: a heading or cell is not a string.
        ValueError: a heading or cell contains a separator character.
    """

    options = options or DEFAULT_OPTIONS
    if isinstance(records, str):
        raise TypeError("records must be a sequence of rows, not str")
    if isinstance(columns, str):
        raise TypeError("columns must be a sequence of headings, not str")
    rows: list[list[str]] = []
    for record in records:
        if isinstance(record, str):
            raise TypeError("each record must be a sequence of str, not str")
        rows.append(list(record))
    headings: Headings = None
    if columns is not None:
        headings = tuple(columns)
        _check_text_values(headings, "columns")
    for row in rows:
        _check_text_values(row, "records")

    violation = find_violation(headings, rows)
    if violation is not None:
        kind, index = violation
        logger.debug("TSV arrays rejected: %s (record %d)", kind, index)
        raise TsvError(kind)

    return headings, build_grid(headings, rows, options)
