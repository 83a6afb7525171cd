"""
Domain entities for the item resource.

Entities contain no framework imports and no IO operations.
"""

from dataclasses import dataclass

RESOURCE_NAME = "Item"


@dataclass(frozen=True)
class Item:
    """A stored item.

    Attributes:
        id: Database-assigned identifier, unique and auto-incrementing.
        name: Display name.
    """

    id: int
    name: str
