import tempfile
import unittest
from pathlib import Path

from tsvtable import Table, TsvOptions, TsvParseError
from tsvtable.errors import TsvFileError
from tsvtable.storage import read_text, write_bytes


class TestStorage(unittest.TestCase):
    def test_write_then_read(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "nested" / "out.tsv"
            write_bytes(path, b"a\tb")
            self.assertEqual(read_text(path), "a\tb")
            self.assertEqual(sorted(p.name for p in path.parent.iterdir()), ["out.tsv"])

    def test_non_atomic_write(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "out.tsv"
            path.write_text("old", encoding="utf-8")
            write_bytes(path, b"new", atomic=False)
            self.assertEqual(path.read_bytes(), b"new")

    def test_atomic_write_replaces(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "out.tsv"
            path.write_text("old", encoding="utf-8")
            write_bytes(str(path), b"new")
            self.assertEqual(path.read_bytes(), b"new")

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaisesRegex(TsvFileError, r"missing\.tsv"):
                read_text(Path(tmpdir) / "missing.tsv")

    def test_directory_target(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(TsvFileError):
                write_bytes(tmpdir, b"x")
            with self.assertRaises(TsvFileError):
                read_text(tmpdir)

    def test_rejects_text(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            with self.assertRaises(TypeError):
                write_bytes(Path(tmpdir) / "x.tsv", "text")  # type: ignore[arg-type]


class TestTableFiles(unittest.TestCase):
    def test_save_and_load(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "ledger.tsv"
            table = Table.from_arrays(["Date", "Memo"], [["08/25/2022", "Pay Day"]])
            table.save(path)
            self.assertEqual(path.read_bytes(), b"Date\tMemo\n08/25/2022\tPay Day")
            self.assertEqual(Table.load(path, with_headers=True), table)

    def test_load_reports_line(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "bad.tsv"
            path.write_text("A\n1\t2\n", encoding="utf-8")
            with self.assertRaises(TsvParseError) as ctx:
                Table.load(path, with_headers=True)
            self.assertEqual(ctx.exception.line_number, 2)

    def test_load_crlf_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "crlf.tsv"
            path.write_bytes(b"A\tB\r\n1\t2\r\n3\t4")
            table = Table.load(path, with_headers=True)
            self.assertEqual(table.records, [["1", "2"], ["3", "4"]])

    def test_empty_last_record_survives_save_and_load(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "single.tsv"
            table = Table.from_arrays(["A"], [["x"], [""]])
            table.save(path)
            self.assertEqual(path.read_bytes(), b"A\nx\n")
            loaded = Table.load(path, with_headers=True)
            self.assertEqual(loaded.records, [["x"], [""]])
            self.assertEqual(loaded, table)

    def test_encoding_option(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "latin.tsv"
            options = TsvOptions(encoding="latin-1", atomic_write=False)
            Table.from_arrays(records=[["café"]]).save(path, options=options)
            self.assertEqual(path.read_bytes(), "café".encode("latin-1"))
            self.assertEqual(Table.load(path, options=options).cell(0, 0), "café")


if __name__ == "__main__":
    unittest.main()
