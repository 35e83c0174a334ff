"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class DiffKind(str, Enum):
    """Classification of one compared line position"""

    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"
    REPLACE = "replace"


class DiffLine(BaseModel):
    """One row of a line-by-line query comparison"""

    kind: DiffKind
    left_text: str | None = None
    right_text: str | None = None
    left_line_number: int | None = None  # 1-indexed
    right_line_number: int | None = None


class DiffStatistics(BaseModel):
    """Summary counts derived from a diff line sequence"""

    additions: int
    deletions: int
    unchanged: int


class DiffRequest(BaseModel):
    """Request to compare two query texts"""

    left: str = ""
    right: str = ""
    left_label: str = "Your Query"
    right_label: str = "Solution"


class DiffResponse(BaseModel):
    """Complete comparison of two query texts"""

    left_label: str
    right_label: str
    lines: list[DiffLine]
    statistics: DiffStatistics
    unified: str  # Unified view rendering
