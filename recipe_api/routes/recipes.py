"""
Recipe API - Recipe Route Handlers
====================================

What:  GET /api/recipes, GET /api/recipes/{id}, POST /api/recipes.
How:   Validate raw input (recipe_api.validators), delegate to RecipeService,
       return the response model. Errors are formatted by the global handlers.

Why path ids and bodies arrive untyped:
    Declaring `recipe_id: int` or a typed body model would make FastAPI answer
    422 on bad input. The API answers 400 with `{"error": ...}`, so the raw
    values go through the validation layer instead.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query

from recipe_api.database import get_gateway
from recipe_api.gateway import PersistenceGateway
from recipe_api.schemas.common import ErrorResponse
from recipe_api.schemas.recipe import RecipeCreatedResponse, RecipeResponse
from recipe_api.services.recipe_service import recipe_service
from recipe_api.validators import parse_id, validate_recipe

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Recipes"])


@router.get(
    "/recipes",
    response_model=List[RecipeResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List recipes, optionally filtered by category",
)
async def list_recipes(
    category: Optional[str] = Query(
        default=None,
        description="Exact category to filter on (e.g. breakfast, lunch, dinner)",
    ),
    gateway: PersistenceGateway = Depends(get_gateway),
) -> List[RecipeResponse]:
    return await recipe_service.list_recipes(gateway, category=category)


@router.get(
    "/recipes/{recipe_id}",
    response_model=RecipeResponse,
    responses={
        400: {"description": "Non-numeric id", "model": ErrorResponse},
        404: {"description": "Recipe not found", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single recipe by id",
)
async def get_recipe(
    recipe_id: str,
    gateway: PersistenceGateway = Depends(get_gateway),
) -> RecipeResponse:
    return await recipe_service.get_recipe(gateway, parse_id(recipe_id, "recipe"))


@router.post(
    "/recipes",
    response_model=RecipeCreatedResponse,
    responses={
        400: {"description": "Missing or invalid field", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Add a new recipe",
    description=(
        "All of name, category, instructions, ingredients and prep_time are required. "
        "Responds 200 with the stored recipe including its new id."
    ),
)
async def create_recipe(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    gateway: PersistenceGateway = Depends(get_gateway),
) -> RecipeCreatedResponse:
    data = validate_recipe(payload)
    return await recipe_service.create_recipe(gateway, data)
