"""
Data Transfer Objects for the item application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass

from app.domain.items.entities import Item


@dataclass(frozen=True)
class CreateItemCommand:
    """Input DTO for creating an item.

    Attributes:
        name: Display name of the new item.
    """

    name: str


@dataclass(frozen=True)
class GetItemQuery:
    """Input DTO for fetching a single item."""

    item_id: int


@dataclass(frozen=True)
class UpdateItemCommand:
    """Input DTO for renaming an item.

    Attributes:
        item_id: Identifier of the item to update.
        name: New display name.
    """

    item_id: int
    name: str


@dataclass(frozen=True)
class DeleteItemCommand:
    """Input DTO for deleting an item."""

    item_id: int


@dataclass(frozen=True)
class ItemResult:
    """Output DTO for a single item.

    Attributes:
        id: Database-assigned identifier.
        name: Display name.
    """

    id: int
    name: str

    @classmethod
    def from_entity(cls, item: Item) -> "ItemResult":
        return cls(id=item.id, name=item.name)
