"""
Recipe API - Recipe Service
=============================

What:  Business logic behind the three recipe endpoints.
Why:   Keeps route handlers down to HTTP concerns; this class can be tested with
       a mocked gateway and no database.
How:   Each method runs one parameterized statement through the
       PersistenceGateway and shapes the rows into response models.

Error Handling Strategy:
    Input has already been validated by the caller (see recipe_api.validators).
    Our own exceptions (NotFoundError) propagate unchanged. Anything else raised
    while talking to the datastore is logged with its traceback and re-raised
    as ServerError with a resource-specific message.
"""

import logging
from typing import List, Optional

from sqlalchemy import insert, select

from recipe_api.exceptions import NotFoundError, ServerError
from recipe_api.gateway import PersistenceGateway
from recipe_api.models.recipe import Recipe
from recipe_api.schemas.common import fits_integer_column
from recipe_api.schemas.recipe import (
    RecipeCreate,
    RecipeCreatedResponse,
    RecipeResponse,
)

logger = logging.getLogger(__name__)

recipes = Recipe.__table__


class RecipeService:
    """
    Responsibilities:
        - list_recipes(): all recipes, or those in one category
        - get_recipe(): single recipe by id, NotFoundError when absent
        - create_recipe(): insert and echo the stored row
    """

    async def list_recipes(
        self, gateway: PersistenceGateway, category: Optional[str] = None
    ) -> List[RecipeResponse]:
        """
        List recipes, optionally filtered by exact category match.

        Query plan:
            SELECT * FROM recipes [WHERE category = :category] ORDER BY id

        Returns an empty list (not an error) when nothing matches.
        """
        query = select(recipes)
        if category:
            query = query.where(recipes.c.category == category)
        query = query.order_by(recipes.c.id)

        try:
            rows = await gateway.fetch_all(query)
        except Exception as e:
            logger.error("Database error listing recipes: %s", str(e), exc_info=True)
            raise ServerError(
                message="Server error while fetching recipes",
                context={"category": category, "error_type": type(e).__name__},
            )

        return [RecipeResponse.model_validate(row) for row in rows]

    async def get_recipe(self, gateway: PersistenceGateway, recipe_id: int) -> RecipeResponse:
        """
        Retrieve a single recipe by id.

        Raises:
            NotFoundError: no row with this id (→ 404 "Recipe not found")
            ServerError: query execution failed (→ 500)
        """
        # Outside the INTEGER column range, so no row can match
        if not fits_integer_column(recipe_id):
            raise NotFoundError("Recipe not found", resource_id=recipe_id)

        try:
            row = await gateway.fetch_one(
                select(recipes).where(recipes.c.id == recipe_id)
            )
        except Exception as e:
            logger.error("Database error fetching recipe %s: %s", recipe_id, str(e), exc_info=True)
            raise ServerError(
                message="Server error while fetching recipe",
                context={"recipe_id": recipe_id, "error_type": type(e).__name__},
            )

        if row is None:
            raise NotFoundError("Recipe not found", resource_id=recipe_id)

        return RecipeResponse.model_validate(row)

    async def create_recipe(
        self, gateway: PersistenceGateway, data: RecipeCreate
    ) -> RecipeCreatedResponse:
        """
        Insert a validated recipe and return it with its new id.

        The response echoes the inserted values rather than re-reading the row,
        so creation costs exactly one statement.
        """
        values = data.model_dump()
        try:
            result = await gateway.execute_write(insert(recipes).values(**values))
        except Exception as e:
            logger.error("Database error adding recipe: %s", str(e), exc_info=True)
            raise ServerError(
                message="Server error while adding recipe",
                context={"error_type": type(e).__name__},
            )

        logger.info("Recipe %s created (%s)", result.inserted_id, data.name)
        return RecipeCreatedResponse(
            message="Recipe added successfully",
            recipe=RecipeResponse(id=result.inserted_id, **values),
        )


# Stateless; one instance shared by all requests
recipe_service = RecipeService()
