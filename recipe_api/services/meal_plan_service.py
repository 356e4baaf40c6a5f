"""
Recipe API - Meal Plan Service
================================

What:  Business logic behind the three meal-plan endpoints.
How:   One parameterized statement per call through the PersistenceGateway.

Not-found status:
    Deleting a meal plan that does not exist answers 400, not 404. Existing
    clients rely on it, so NotFoundError is raised with status_code=400 here
    while recipe lookups keep the default 404.
"""

import logging
from typing import List

from sqlalchemy import delete, insert, select

from recipe_api.exceptions import NotFoundError, ServerError
from recipe_api.gateway import PersistenceGateway
from recipe_api.models.meal_plan import MealPlan
from recipe_api.schemas.common import MessageResponse, fits_integer_column
from recipe_api.schemas.meal_plan import (
    MealPlanCreate,
    MealPlanCreatedResponse,
    MealPlanResponse,
)

logger = logging.getLogger(__name__)

meal_plans = MealPlan.__table__


class MealPlanService:
    """
    Responsibilities:
        - create_meal_plan(): insert with recipe_ids serialized to JSON text
        - list_meal_plans(): every plan, unfiltered
        - delete_meal_plan(): delete by id, NotFoundError (400) when nothing was deleted
    """

    async def create_meal_plan(
        self, gateway: PersistenceGateway, data: MealPlanCreate
    ) -> MealPlanCreatedResponse:
        values = {
            "name": data.name,
            "date": data.date,
            "recipe_ids": data.serialized_recipe_ids(),
            "notes": data.notes,
        }
        try:
            result = await gateway.execute_write(insert(meal_plans).values(**values))
        except Exception as e:
            logger.error("Database error creating meal plan: %s", str(e), exc_info=True)
            raise ServerError(
                message="Server error while creating meal plan",
                context={"error_type": type(e).__name__},
            )

        logger.info("Meal plan %s created (%s, %s)", result.inserted_id, data.name, data.date)
        return MealPlanCreatedResponse(
            message="Meal plan created successfully",
            meal_plan=MealPlanResponse(id=result.inserted_id, **values),
        )

    async def list_meal_plans(self, gateway: PersistenceGateway) -> List[MealPlanResponse]:
        """Return all meal plans in insertion order; [] when the table is empty."""
        try:
            rows = await gateway.fetch_all(select(meal_plans).order_by(meal_plans.c.id))
        except Exception as e:
            logger.error("Database error listing meal plans: %s", str(e), exc_info=True)
            raise ServerError(
                message="Server error while fetching meal plans",
                context={"error_type": type(e).__name__},
            )

        return [MealPlanResponse.model_validate(row) for row in rows]

    async def delete_meal_plan(
        self, gateway: PersistenceGateway, meal_plan_id: int
    ) -> MessageResponse:
        """
        Delete a meal plan by id.

        Not idempotent in status: the first call answers 200, a repeat answers
        400 "Meal plan not found" (the end state is the same).

        Raises:
            NotFoundError: no row was deleted (status 400)
            ServerError: the delete failed (→ 500)
        """
        if not fits_integer_column(meal_plan_id):
            raise NotFoundError(
                "Meal plan not found", resource_id=meal_plan_id, status_code=400
            )

        try:
            result = await gateway.execute_write(
                delete(meal_plans).where(meal_plans.c.id == meal_plan_id)
            )
        except Exception as e:
            logger.error(
                "Database error deleting meal plan %s: %s", meal_plan_id, str(e), exc_info=True
            )
            raise ServerError(
                message="Server error while deleting meal plan",
                context={"meal_plan_id": meal_plan_id, "error_type": type(e).__name__},
            )

        if result.rowcount == 0:
            raise NotFoundError(
                "Meal plan not found", resource_id=meal_plan_id, status_code=400
            )

        logger.info("Meal plan %s deleted", meal_plan_id)
        return MessageResponse(message="Meal plan deleted successfully")


meal_plan_service = MealPlanService()
