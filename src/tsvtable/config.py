"""Parse and write options."""

from __future__ import annotations

import codecs
from dataclasses import dataclass


FIELD_SEPARATOR = "\t"
RECORD_SEPARATOR = "\n"
# Every character that ends a line when text is split.
LINE_BREAKS = "\n\x0b\x0c\r\x85\u2028\u2029"


def contains_separator(value: str) -> bool:
    return FIELD_SEPARATOR in value or any(ch in value for ch in LINE_BREAKS)


@dataclass(frozen=True)
class TsvOptions:
    """Options shared by parsing, loading and saving.

    Attributes:
        fill_value: Value for cells a short row lacks under wider headings.
        allow_trailing_newline: Drop one empty line at the end of the text, so
            a final newline ends the last record instead of opening an empty
            one. Off by default: every physical line is a record.
        encoding: Text encoding used for files and ``Table.to_bytes``.
        atomic_write: Write through a temp file and rename over the target.
    """

    fill_value: str = ""
    allow_trailing_newline: bool = False
    encoding: str = "utf-8"
    atomic_write: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.fill_value, str):
            raise ValueError("fill_value must be a string")
        if contains_separator(self.fill_value):
            raise ValueError("fill_value must not contain tab or newline characters")
        if not isinstance(self.allow_trailing_newline, bool):
            raise ValueError("allow_trailing_newline must be a bool")
        if not isinstance(self.atomic_write, bool):
            raise ValueError("atomic_write must be a bool")
        if not isinstance(self.encoding, str) or not self.encoding:
            raise ValueError("encoding must be a non-empty string")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {self.encoding}") from exc


DEFAULT_OPTIONS = TsvOptions()
