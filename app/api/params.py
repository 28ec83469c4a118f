"""Reusable path parameters."""

from typing import Annotated

from fastapi import Path

from app.schemas.common import MAX_ROW_ID

RowIdPath = Annotated[int, Path(gt=0, le=MAX_ROW_ID)]
