"""
Recipe API - Validation Layer Unit Tests
==========================================

What:  Tests for id parsing and request-body presence/shape checks.
How:   Pure functions, no database or HTTP.
"""

import pytest

from recipe_api.exceptions import ValidationError
from recipe_api.validators import (
    is_missing,
    parse_id,
    validate_meal_plan,
    validate_recipe,
)


class TestParseId:

    def test_numeric_string(self):
        assert parse_id("42", "recipe") == 42

    def test_surrounding_whitespace_is_ignored(self):
        assert parse_id(" 7 ", "recipe") == 7

    @pytest.mark.parametrize(
        "raw", ["abc", "1.5", "1e3", "", "   ", None, "0_1", "+5", "\u0661\u0662", "- 3"]
    )
    def test_non_numeric_rejected(self, raw):
        with pytest.raises(ValidationError, match="Invalid recipe id"):
            parse_id(raw, "recipe")

    def test_negative_and_oversized_ids_parse(self):
        # Range is left to the lookups, which answer not-found
        assert parse_id("-3", "recipe") == -3
        assert parse_id("99999999999999999999", "recipe") == 99999999999999999999

    def test_message_names_resource(self):
        with pytest.raises(ValidationError, match="Invalid meal plan id"):
            parse_id("x", "meal plan")


class TestIsMissing:

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing(self, value):
        assert is_missing(value)

    @pytest.mark.parametrize("value", [0, [], "a", 5])
    def test_present(self, value):
        assert not is_missing(value)


class TestValidateRecipe:

    def test_valid_payload(self, sample_recipe):
        data = validate_recipe(sample_recipe)
        assert data.model_dump() == sample_recipe

    @pytest.mark.parametrize(
        "field", ["name", "category", "instructions", "ingredients", "prep_time"]
    )
    def test_each_field_required(self, sample_recipe, field):
        del sample_recipe[field]
        with pytest.raises(ValidationError, match="All fields are required"):
            validate_recipe(sample_recipe)

    def test_blank_string_counts_as_missing(self, sample_recipe):
        sample_recipe["name"] = "  "
        with pytest.raises(ValidationError, match="All fields are required"):
            validate_recipe(sample_recipe)

    def test_zero_prep_time_counts_as_missing(self, sample_recipe):
        sample_recipe["prep_time"] = 0
        with pytest.raises(ValidationError, match="All fields are required") as exc_info:
            validate_recipe(sample_recipe)
        assert exc_info.value.context["missing"] == ["prep_time"]

    def test_none_body(self):
        with pytest.raises(ValidationError, match="All fields are required"):
            validate_recipe(None)

    @pytest.mark.parametrize(
        "prep_time", [-5, "soon", 2.5, True, False, [10], 10**20, 2**31]
    )
    def test_invalid_prep_time(self, sample_recipe, prep_time):
        sample_recipe["prep_time"] = prep_time
        with pytest.raises(ValidationError, match="prep_time must be a positive integer"):
            validate_recipe(sample_recipe)

    def test_numeric_string_prep_time_is_coerced(self, sample_recipe):
        sample_recipe["prep_time"] = "15"
        assert validate_recipe(sample_recipe).prep_time == 15

    def test_integral_float_and_upper_bound_accepted(self, sample_recipe):
        sample_recipe["prep_time"] = 20.0
        assert validate_recipe(sample_recipe).prep_time == 20

        sample_recipe["prep_time"] = 2**31 - 1
        assert validate_recipe(sample_recipe).prep_time == 2**31 - 1

    def test_zero_string_is_present_but_out_of_range(self, sample_recipe):
        # Number 0 is missing; the string "0" is a value that fails the range rule
        sample_recipe["prep_time"] = "0"
        with pytest.raises(ValidationError, match="prep_time must be a positive integer"):
            validate_recipe(sample_recipe)

        sample_recipe["prep_time"] = 0.0
        with pytest.raises(ValidationError, match="All fields are required"):
            validate_recipe(sample_recipe)

    def test_non_string_text_field(self, sample_recipe):
        sample_recipe["category"] = 3
        with pytest.raises(ValidationError, match="category must be a string"):
            validate_recipe(sample_recipe)

    def test_extra_fields_ignored(self, sample_recipe):
        sample_recipe["id"] = 77
        assert "id" not in validate_recipe(sample_recipe).model_dump()

    def test_error_context_carries_model_messages(self, sample_recipe):
        sample_recipe["prep_time"] = -1
        with pytest.raises(ValidationError) as exc_info:
            validate_recipe(sample_recipe)
        assert exc_info.value.field == "prep_time"
        assert exc_info.value.context["errors"]


class TestValidateMealPlan:

    def test_valid_payload(self, sample_meal_plan):
        data = validate_meal_plan(sample_meal_plan)
        assert data.recipe_ids == [1, 2]
        assert data.serialized_recipe_ids() == "[1,2]"
        assert data.notes == "Focus on quick meals this week"

    def test_notes_optional(self, sample_meal_plan):
        del sample_meal_plan["notes"]
        assert validate_meal_plan(sample_meal_plan).notes is None

    def test_empty_recipe_ids_allowed(self, sample_meal_plan):
        sample_meal_plan["recipe_ids"] = []
        assert validate_meal_plan(sample_meal_plan).serialized_recipe_ids() == "[]"

    @pytest.mark.parametrize("field", ["name", "date", "recipe_ids"])
    def test_required_fields(self, sample_meal_plan, field):
        del sample_meal_plan[field]
        with pytest.raises(ValidationError, match="Name, date and recipe_ids are required"):
            validate_meal_plan(sample_meal_plan)

    @pytest.mark.parametrize("recipe_ids", ["[1,2]", [1, "2"], [True], [1.5], 3, {"a": 1}])
    def test_recipe_ids_must_be_integer_list(self, sample_meal_plan, recipe_ids):
        sample_meal_plan["recipe_ids"] = recipe_ids
        with pytest.raises(ValidationError, match="recipe_ids must be a list of integers"):
            validate_meal_plan(sample_meal_plan)

    @pytest.mark.parametrize("field", ["name", "date"])
    def test_name_and_date_must_be_strings(self, sample_meal_plan, field):
        sample_meal_plan[field] = 20230605
        with pytest.raises(ValidationError, match=f"{field} must be a string"):
            validate_meal_plan(sample_meal_plan)

    def test_notes_must_be_string(self, sample_meal_plan):
        sample_meal_plan["notes"] = {"text": "hi"}
        with pytest.raises(ValidationError, match="notes must be a string"):
            validate_meal_plan(sample_meal_plan)
