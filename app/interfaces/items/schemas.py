"""
Pydantic schemas for item API request/response validation.

These schemas enforce input validation and define the API contract.
No business logic belongs here.
"""

from pydantic import BaseModel, Field

NAME_MIN_LEN = 1
NAME_MAX_LEN = 255
NAME_DESCRIPTION = "Display name of the item"

# Signed 64-bit range of the id column.
MIN_ITEM_ID = -(2**63)
MAX_ITEM_ID = 2**63 - 1


class ItemCreateRequest(BaseModel):
    """Request schema for creating an item.

    Attributes:
        name: Display name (1-255 chars).
    """

    name: str = Field(
        ...,
        min_length=NAME_MIN_LEN,
        max_length=NAME_MAX_LEN,
        description=NAME_DESCRIPTION,
    )


class ItemUpdateRequest(BaseModel):
    """Request schema for renaming an item."""

    name: str = Field(
        ...,
        min_length=NAME_MIN_LEN,
        max_length=NAME_MAX_LEN,
        description=NAME_DESCRIPTION,
    )


class ItemResponse(BaseModel):
    """A single item as returned by the API."""

    id: int
    name: str
