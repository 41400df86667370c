"""Dog ORM — persists the single Dog entity.

Invariants:
    - id is an autoincrement integer primary key assigned by the database
    - name, breed, description are non-nullable text
    - age is a non-nullable float (JSON numbers, integral or not)
"""

from sqlalchemy import Float, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from dog_service.db.base import Base


class Dog(Base):
    """Dog row — the only table in the service."""
    __tablename__ = "dogs"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
    breed: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    age: Mapped[float] = mapped_column(Float, nullable=False)
