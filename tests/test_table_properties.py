from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from tsvtable import Table, TsvError, TsvParseError
from tsvtable.errors import COLUMNS_NOT_EQUAL, TOO_FEW_COLUMN_HEADINGS


WELL_FORMED = [
    ("A\tB\n1\t2\n3\t4", True),
    ("A\tB\n1\t2\n3\t4", False),
    ("Date\tMemo\tDeposit\n08/25/2022\tOpen Account\t500\n08/26/2022\t\t", True),
    ("x", False),
    ("\t\t", False),
    ("name\n\n\n", False),
    ("a\nb\n", False),
    ("A\nx\n", True),
]


@pytest.mark.parametrize("text,with_headers", WELL_FORMED)
def test_round_trip(text: str, with_headers: bool) -> None:
    table = Table.from_text(text, with_headers=with_headers)
    assert table.serialize() == text


@pytest.mark.parametrize("text,with_headers", WELL_FORMED)
def test_rows_share_one_length(text: str, with_headers: bool) -> None:
    table = Table.from_text(text, with_headers=with_headers)
    assert {len(table.row(i)) for i in range(len(table))} <= {table.width}


def test_header_sufficiency_text_mode() -> None:
    with pytest.raises(TsvParseError) as excinfo:
        Table.from_text("A\tB\n1\t2\t3", with_headers=True)
    assert excinfo.value.kind == TOO_FEW_COLUMN_HEADINGS
    assert excinfo.value.line_number == 2


def test_header_sufficiency_array_mode() -> None:
    with pytest.raises(TsvError) as excinfo:
        Table.from_arrays(["A", "B"], [["1", "2", "3"]])
    assert excinfo.value == TsvError(TOO_FEW_COLUMN_HEADINGS)
    assert Table.from_arrays(["A", "B", "C"], [["1", "2", "3"]]).width == 3


def test_equal_columns_rule() -> None:
    with pytest.raises(TsvError) as excinfo:
        Table.from_arrays(records=[["1", "2"], ["1"]])
    assert excinfo.value.kind == COLUMNS_NOT_EQUAL


def test_coordinate_access() -> None:
    table = Table.from_text("A\tB\n1\t2\n3\t4", with_headers=True)
    assert table.cell(0, 0) == "1"
    assert table.cell(1, 1) == "4"
    table.set_cell(0, 0, "9")
    assert table.cell(0, 0) == "9"


def test_named_column_lookup() -> None:
    table = Table.from_arrays(["X", "Y"], [["a", "b"], ["c", "d"]])
    assert table.column("Y") == ["b", "d"]
    assert table.column("Z") == []


def test_idempotent_reserialization() -> None:
    table = Table.from_text("A\tB\n1\t2\n3\t4", with_headers=True)
    assert table.serialize() == table.serialize()


def test_zero_data_rows_is_valid() -> None:
    table = Table.from_text("A\tB", with_headers=True)
    assert len(table) == 0
    assert table.column(1) == []
    assert table.column("A") == []
    assert Table.from_arrays(records=[]).width == 0
