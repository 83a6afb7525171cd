"""ORM models for the item resource."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database import Base

NAME_MAX_LENGTH = 255


class ItemModel(Base):
    """Row in the items table."""

    __tablename__ = "items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)

    def __repr__(self) -> str:
        return f"ItemModel(id={self.id!r}, name={self.name!r})"
