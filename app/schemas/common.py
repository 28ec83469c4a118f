"""Schemas shared across resources."""

from typing import Annotated

from pydantic import BaseModel, Field, StrictInt

# Largest primary key a signed 64-bit INTEGER column can hold
MAX_ROW_ID = 2**63 - 1

RowId = Annotated[int, Field(gt=0, le=MAX_ROW_ID)]
StrictRowId = Annotated[StrictInt, Field(gt=0, le=MAX_ROW_ID)]


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
