"""
Recipe API - MealPlan SQLAlchemy Model
========================================

What:  ORM model representing the `meal_plans` table.

Table Design Rationale:
    - date: kept as the text the client sent (e.g. "2023-06-05")
    - recipe_ids: JSON array serialized to TEXT ("[1,2]"). No foreign key:
      plans may reference recipes that do not exist (yet)
    - notes: nullable; most plans have none
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from recipe_api.database import Base


class MealPlan(Base):
    """
    A named, dated selection of recipes.

    Lifecycle:
        Inserted, listed, deleted by id. Never updated.
    """

    __tablename__ = "meal_plans"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    date: Mapped[str] = mapped_column(String(32), nullable=False)

    recipe_ids: Mapped[str] = mapped_column(Text, nullable=False)

    notes: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    def __repr__(self) -> str:
        return f"<MealPlan(id={self.id}, name='{self.name}', date='{self.date}')>"
