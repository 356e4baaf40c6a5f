"""
Recipe API - Recipe Request/Response Schemas
==============================================

What:  Pydantic models for the recipe endpoints.
Why:   Responses are serialized (and documented in OpenAPI) from these models.
       `RecipeCreate` holds the type and range rules for a new recipe; the
       validation layer runs it once a raw body has passed the presence checks.

RecipeCreate rules:
    - Text fields must be JSON strings (no number or bool coercion).
    - prep_time is a whole number of minutes in 1..INTEGER_MAX. Numeric strings
      ("15") and integral floats (15.0) are accepted, booleans are not.
"""

from pydantic import BaseModel, Field, StrictStr, field_validator

from recipe_api.schemas.common import INTEGER_MAX


class RecipeCreate(BaseModel):
    """A validated new recipe, ready to insert."""

    name: StrictStr
    category: StrictStr
    instructions: StrictStr
    ingredients: StrictStr
    prep_time: int = Field(gt=0, le=INTEGER_MAX, description="Preparation time in minutes")

    @field_validator("prep_time", mode="before")
    @classmethod
    def reject_bool(cls, v):
        """Lax int parsing would turn true/false into 1/0."""
        if isinstance(v, bool):
            raise ValueError("prep_time cannot be a boolean")
        return v


class RecipeResponse(BaseModel):
    """
    What:  A stored recipe.
    Who:   Returned by GET /api/recipes (as array items) and GET /api/recipes/{id}.
    """

    id: int = Field(description="Datastore-assigned recipe id")
    name: str
    category: str = Field(description="Free-form label such as breakfast, lunch, dinner")
    instructions: str
    ingredients: str = Field(description="Free-form delimited ingredient list")
    prep_time: int = Field(description="Preparation time in minutes")

    model_config = {"from_attributes": True}


class RecipeCreatedResponse(BaseModel):
    """Returned by POST /api/recipes."""

    message: str = Field(default="Recipe added successfully")
    recipe: RecipeResponse
