"""
Recipe API - Meal Plan Request/Response Schemas
=================================================

What:  Pydantic models for the meal-plan endpoints.

recipe_ids on the wire:
    Clients send a JSON array (`[1, 2]`). The datastore keeps it serialized as
    compact JSON text, and responses return that stored text (`"[1,2]"`).
"""

import json
from typing import List, Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr


class MealPlanCreate(BaseModel):
    """A validated new meal plan, ready to insert."""

    name: StrictStr
    date: StrictStr
    # Strict: "2" and true are rejected as ids
    recipe_ids: List[StrictInt]
    notes: Optional[StrictStr] = None

    def serialized_recipe_ids(self) -> str:
        """Compact JSON text stored in meal_plans.recipe_ids."""
        return json.dumps(self.recipe_ids, separators=(",", ":"))


class MealPlanResponse(BaseModel):
    """
    What:  A stored meal plan.
    Who:   Returned by GET /api/meal-plans and inside the create response.
    """

    id: int = Field(description="Datastore-assigned meal plan id")
    name: str
    date: str = Field(description="Calendar date, as sent by the client")
    recipe_ids: str = Field(description="Serialized JSON array of recipe ids, e.g. \"[1,2]\"")
    notes: Optional[str] = Field(default=None)

    model_config = {"from_attributes": True}


class MealPlanCreatedResponse(BaseModel):
    """Returned by POST /api/meal-plans."""

    message: str = Field(default="Meal plan created successfully")
    meal_plan: MealPlanResponse
