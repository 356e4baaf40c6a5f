"""
Recipe API - Recipe SQLAlchemy Model
======================================

What:  ORM model representing the `recipes` table.
Who:   Queried by RecipeService through the persistence gateway; created by
       Database.create_schema().

Table Design Rationale:
    - Integer autoincrement id: assigned by the datastore, returned on insert
    - category: free-form label (breakfast, lunch, dinner...); indexed because
      the list endpoint filters on it by exact match
    - ingredients: one free-form delimited string, not a child table
    - prep_time: minutes
"""

from sqlalchemy import Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from recipe_api.database import Base


class Recipe(Base):
    """
    A stored recipe.

    Lifecycle:
        Inserted once and never updated. The API exposes no recipe deletion.
    """

    __tablename__ = "recipes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    category: Mapped[str] = mapped_column(String(100), nullable=False)

    # Why TEXT: step lists have no natural length limit
    instructions: Mapped[str] = mapped_column(Text, nullable=False)

    ingredients: Mapped[str] = mapped_column(Text, nullable=False)

    prep_time: Mapped[int] = mapped_column(Integer, nullable=False)

    __table_args__ = (
        Index("idx_recipes_category", "category"),
    )

    def __repr__(self) -> str:
        return f"<Recipe(id={self.id}, name='{self.name}', category='{self.category}')>"
