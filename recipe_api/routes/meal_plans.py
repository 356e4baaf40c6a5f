"""
Recipe API - Meal Plan Route Handlers
=======================================

What:  POST /api/meal-plans, GET /api/meal-plans, DELETE /api/meal-plans/{id}.
How:   Same shape as the recipe routes: validate, delegate, return.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends

from recipe_api.database import get_gateway
from recipe_api.gateway import PersistenceGateway
from recipe_api.schemas.common import ErrorResponse, MessageResponse
from recipe_api.schemas.meal_plan import MealPlanCreatedResponse, MealPlanResponse
from recipe_api.services.meal_plan_service import meal_plan_service
from recipe_api.validators import parse_id, validate_meal_plan

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Meal Plans"])


@router.post(
    "/meal-plans",
    response_model=MealPlanCreatedResponse,
    responses={
        400: {"description": "Missing or invalid field", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create a meal plan",
    description=(
        "name, date and recipe_ids are required; notes is optional. "
        "recipe_ids is stored and returned as serialized JSON text."
    ),
)
async def create_meal_plan(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    gateway: PersistenceGateway = Depends(get_gateway),
) -> MealPlanCreatedResponse:
    data = validate_meal_plan(payload)
    return await meal_plan_service.create_meal_plan(gateway, data)


@router.get(
    "/meal-plans",
    response_model=List[MealPlanResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all meal plans",
)
async def list_meal_plans(
    gateway: PersistenceGateway = Depends(get_gateway),
) -> List[MealPlanResponse]:
    return await meal_plan_service.list_meal_plans(gateway)


@router.delete(
    "/meal-plans/{meal_plan_id}",
    response_model=MessageResponse,
    responses={
        400: {"description": "Non-numeric id or meal plan not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Delete a meal plan",
)
async def delete_meal_plan(
    meal_plan_id: str,
    gateway: PersistenceGateway = Depends(get_gateway),
) -> MessageResponse:
    """
    Delete a meal plan by id.

    A missing plan answers 400 (not 404), unlike recipe lookups.
    """
    return await meal_plan_service.delete_meal_plan(gateway, parse_id(meal_plan_id, "meal plan"))
