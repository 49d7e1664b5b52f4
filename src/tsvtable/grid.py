"""Rectangular two-dimensional storage."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, Optional, Sequence, TypeVar, Union

from tsvtable.errors import GridIndexError, GridShapeError

T = TypeVar("T")

_NO_FILL: Any = object()


class Grid(Generic[T]):
    """Fixed-width, fixed-height grid addressed by (row, column).

    The grid does not validate its input beyond width: callers hand it
    rectangular rows. When ``width`` exceeds a row's length, the row is
    padded with ``fill``; a grid built without ``fill`` rejects short rows.
    Only cell values ever change after construction.
    """

    __slots__ = ("_rows", "_width")

    def __init__(
        self,
        rows: Iterable[Sequence[T]] = (),
        width: Optional[int] = None,
        fill: T = _NO_FILL,
    ) -> None:
        stored = [list(row) for row in rows]
        if width is None:
            width = len(stored[0]) if stored else 0
        if not isinstance(width, int) or isinstance(width, bool) or width < 0:
            raise GridShapeError(f"Grid width must be a non-negative integer: {width!r}")
        for idx, row in enumerate(stored):
            if len(row) > width:
                raise GridShapeError(
                    f"Row {idx} has {len(row)} cells, wider than grid width {width}."
                )
            if len(row) < width:
                if fill is _NO_FILL:
                    raise GridShapeError(
                        f"Row {idx} has {len(row)} cells, grid width is {width}."
                    )
                row.extend([fill] * (width - len(row)))
        self._rows: list[list[T]] = stored
        self._width = width

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def width(self) -> int:
        return self._width

    def _check_row(self, i: int) -> None:
        if not isinstance(i, int) or isinstance(i, bool):
            raise TypeError(f"Row index must be an int, not {type(i).__name__}")
        if not 0 <= i < len(self._rows):
            raise GridIndexError(f"Row index {i} out of range for height {len(self._rows)}")

    def _check_column(self, j: int) -> None:
        if not isinstance(j, int) or isinstance(j, bool):
            raise TypeError(f"Column index must be an int, not {type(j).__name__}")
        if not 0 <= j < self._width:
            raise GridIndexError(f"Column index {j} out of range for width {self._width}")

    def row(self, i: int) -> list[T]:
        """Return a copy of row ``i``."""
        self._check_row(i)
        return list(self._rows[i])

    def column(self, j: int) -> list[T]:
        """Return the ``j``-th cell of every row, top to bottom."""
        self._check_column(j)
        return [row[j] for row in self._rows]

    def cell(self, i: int, j: int) -> T:
        self._check_row(i)
        self._check_column(j)
        return self._rows[i][j]

    def set(self, i: int, j: int, value: T) -> None:
        self._check_row(i)
        self._check_column(j)
        self._rows[i][j] = value

    def rows(self) -> list[list[T]]:
        """Return a copy of all rows."""
        return [list(row) for row in self._rows]

    def copy(self) -> "Grid[T]":
        return Grid(self._rows, width=self._width)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[list[T]]:
        for row in self._rows:
            yield list(row)

    def __getitem__(self, key: Union[int, tuple[int, int]]):
        if isinstance(key, tuple):
            i, j = key
            return self.cell(i, j)
        return self.row(key)

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        if not isinstance(key, tuple):
            raise TypeError("Grid assignment requires a (row, column) pair")
        i, j = key
        self.set(i, j, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._width == other._width and self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid(height={self.height}, width={self.width})"
