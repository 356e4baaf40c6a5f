"""
Recipe API - Request Validation Layer
=======================================

What:  Presence checks and id parsing run on raw request input before any
       persistence call.
Why:   Every failure here is a 400 with a message the client can act on, so the
       checks raise ValidationError instead of letting FastAPI answer 422.
How:   Route handlers pass raw path segments and JSON bodies. Presence is
       checked here; type and range rules live on the pydantic models
       (`RecipeCreate`, `MealPlanCreate`) and their errors are mapped to one
       message per field.

Presence rules:
    A field is missing when it is absent, null or a blank string.
    `prep_time` is also missing when it is the number 0, which keeps the
    historical "All fields are required" response for zero. The string "0" is
    present and fails the range rule instead ("prep_time must be a positive
    integer"), the same split as a truthiness check on the JSON value.
"""

import re
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from recipe_api.exceptions import ValidationError
from recipe_api.schemas.meal_plan import MealPlanCreate
from recipe_api.schemas.recipe import RecipeCreate

RECIPE_FIELDS = ("name", "category", "instructions", "ingredients", "prep_time")
MEAL_PLAN_REQUIRED_FIELDS = ("name", "date", "recipe_ids")

ALL_FIELDS_REQUIRED = "All fields are required"
MEAL_PLAN_FIELDS_REQUIRED = "Name, date and recipe_ids are required"

# Client-facing message per field when the model rejects a present value
FIELD_MESSAGES: Dict[str, str] = {
    "name": "name must be a string",
    "category": "category must be a string",
    "instructions": "instructions must be a string",
    "ingredients": "ingredients must be a string",
    "prep_time": "prep_time must be a positive integer",
    "date": "date must be a string",
    "recipe_ids": "recipe_ids must be a list of integers",
    "notes": "notes must be a string",
}

# Optional sign and ASCII digits only; int() alone would also take "0_1", "+5", "١"
_ID_PATTERN = re.compile(r"-?\d+", re.ASCII)

ModelT = TypeVar("ModelT", bound=BaseModel)


def is_missing(value: Any) -> bool:
    """True for absent/null values and blank strings. 0 and [] are present."""
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def parse_id(raw: Optional[str], resource: str) -> int:
    """
    Parse a path segment into an integer row id.

    The result can still be outside the INTEGER column range; lookups treat
    such ids as not found.

    Raises:
        ValidationError: the segment is empty or not a plain integer
            ("abc", "1.5", "0_1").
    """
    value = (raw or "").strip()
    if not _ID_PATTERN.fullmatch(value):
        raise ValidationError(
            f"Invalid {resource} id", field="id", context={"value": raw}
        )
    return int(value)


def _build(model: Type[ModelT], payload: Mapping[str, Any]) -> ModelT:
    """Run the model's rules; report the first rejected field."""
    try:
        return model.model_validate(dict(payload))
    except PydanticValidationError as e:
        errors = e.errors(include_url=False)
        field = str(errors[0]["loc"][0])
        raise ValidationError(
            FIELD_MESSAGES.get(field, f"{field} is invalid"),
            field=field,
            context={"errors": [err["msg"] for err in errors]},
        )


def validate_recipe(payload: Optional[Mapping[str, Any]]) -> RecipeCreate:
    """
    Check a POST /api/recipes body.

    Raises:
        ValidationError: "All fields are required" when any of the five fields
            is missing (prep_time 0 included), or a field-specific message when
            a present field has the wrong type or range.
    """
    payload = payload or {}

    missing = [f for f in RECIPE_FIELDS if is_missing(payload.get(f))]
    prep_time = payload.get("prep_time")
    # bool is an int subclass and False == 0; false is a type error, not absence
    if "prep_time" not in missing and prep_time == 0 and not isinstance(prep_time, bool):
        missing.append("prep_time")
    if missing:
        raise ValidationError(ALL_FIELDS_REQUIRED, context={"missing": missing})

    return _build(RecipeCreate, payload)


def validate_meal_plan(payload: Optional[Mapping[str, Any]]) -> MealPlanCreate:
    """
    Check a POST /api/meal-plans body.

    recipe_ids must be a JSON array of integers (it may be empty). Whether the
    ids exist in `recipes` is not checked.
    """
    payload = payload or {}

    missing = [f for f in MEAL_PLAN_REQUIRED_FIELDS if is_missing(payload.get(f))]
    if missing:
        raise ValidationError(MEAL_PLAN_FIELDS_REQUIRED, context={"missing": missing})

    return _build(MealPlanCreate, payload)
