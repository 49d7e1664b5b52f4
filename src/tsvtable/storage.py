"""Reading and writing table files."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from tsvtable.errors import TsvFileError

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def read_text(path: PathLike, encoding: str = "utf-8") -> str:
    """Read a whole file as text."""

    path = Path(path)
    if not path.exists():
        raise TsvFileError(f"TSV file not found: {path}")
    if not path.is_file():
        raise TsvFileError(f"TSV path is not a file: {path}")
    # newline="" keeps line endings for the parser to split.
    with path.open("r", encoding=encoding, newline="") as handle:
        text = handle.read()
    logger.debug("Read %d characters from %s", len(text), path)
    return text


def write_bytes(path: PathLike, data: bytes, *, atomic: bool = True) -> None:
    """Write ``data`` to ``path``, creating parent directories.

    With ``atomic`` the bytes go to a temp file in the target directory which
    is fsynced and then renamed over ``path``; readers never see a partial
    file. Failures are not retried.
    """

    if not isinstance(data, (bytes, bytearray)):
        raise TypeError("write_bytes expects bytes")
    path = Path(path)
    if path.exists() and path.is_dir():
        raise TsvFileError(f"TSV path is a directory: {path}")
    path.parent.mkdir(parents=True, exist_ok=True)

    if not atomic:
        with path.open("wb") as handle:
            handle.write(data)
        logger.debug("Wrote %d bytes to %s", len(data), path)
        return

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
    logger.debug("Atomically wrote %d bytes to %s", len(data), path)
