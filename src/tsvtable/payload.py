"""Pydantic model for dict and JSON interchange of tables."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class TablePayload(BaseModel):
    """Typed form of a table: optional headings plus rows of text cells.

    Only types are checked here. Shape rules (heading count, equal rows) are
    applied when the payload is turned into a ``Table``.
    """

    model_config = ConfigDict(extra="forbid")

    columns: Optional[list[StrictStr]] = None
    records: list[list[StrictStr]] = Field(default_factory=list)
