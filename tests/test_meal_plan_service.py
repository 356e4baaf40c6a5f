"""
Recipe API - Meal Plan Service Unit Tests
===========================================

What:  Tests for MealPlanService (create, list, delete).
How:   Uses the mock gateway fixture; no database.
"""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from recipe_api.exceptions import NotFoundError, ServerError
from recipe_api.gateway import WriteResult
from recipe_api.schemas.meal_plan import MealPlanCreate
from recipe_api.services.meal_plan_service import MealPlanService


class TestMealPlanServiceCreate:

    def setup_method(self):
        self.service = MealPlanService()

    @pytest.mark.asyncio
    async def test_create_serializes_recipe_ids(self, mock_gateway):
        mock_gateway.execute_write.return_value = WriteResult(rowcount=1, inserted_id=1)
        data = MealPlanCreate(name="Week of June 5", date="2023-06-05", recipe_ids=[1, 2])

        result = await self.service.create_meal_plan(mock_gateway, data)

        assert result.message == "Meal plan created successfully"
        assert result.meal_plan.id == 1
        assert result.meal_plan.recipe_ids == "[1,2]"
        assert result.meal_plan.notes is None

        statement = mock_gateway.execute_write.await_args.args[0]
        assert statement.compile().params["recipe_ids"] == "[1,2]"

    @pytest.mark.asyncio
    async def test_create_database_error(self, mock_gateway):
        mock_gateway.execute_write.side_effect = IntegrityError(
            "INSERT ...", {}, Exception("NOT NULL constraint failed")
        )
        data = MealPlanCreate(name="Plan", date="2023-06-05", recipe_ids=[])

        with pytest.raises(ServerError, match="Server error while creating meal plan"):
            await self.service.create_meal_plan(mock_gateway, data)


class TestMealPlanServiceList:

    def setup_method(self):
        self.service = MealPlanService()

    @pytest.mark.asyncio
    async def test_list_empty(self, mock_gateway):
        assert await self.service.list_meal_plans(mock_gateway) == []

    @pytest.mark.asyncio
    async def test_list_rows(self, mock_gateway):
        mock_gateway.fetch_all.return_value = [
            {"id": 1, "name": "A", "date": "2023-06-05", "recipe_ids": "[1]", "notes": None},
            {"id": 2, "name": "B", "date": "2023-06-12", "recipe_ids": "[]", "notes": "light"},
        ]

        result = await self.service.list_meal_plans(mock_gateway)

        assert [p.name for p in result] == ["A", "B"]
        assert result[1].notes == "light"

    @pytest.mark.asyncio
    async def test_list_database_error(self, mock_gateway):
        mock_gateway.fetch_all.side_effect = OperationalError("SELECT ...", {}, Exception("gone"))

        with pytest.raises(ServerError, match="Server error while fetching meal plans"):
            await self.service.list_meal_plans(mock_gateway)


class TestMealPlanServiceDelete:

    def setup_method(self):
        self.service = MealPlanService()

    @pytest.mark.asyncio
    async def test_delete_success(self, mock_gateway):
        mock_gateway.execute_write.return_value = WriteResult(rowcount=1)

        result = await self.service.delete_meal_plan(mock_gateway, 1)

        assert result.message == "Meal plan deleted successfully"

    @pytest.mark.asyncio
    async def test_delete_missing_is_400(self, mock_gateway):
        mock_gateway.execute_write.return_value = WriteResult(rowcount=0)

        with pytest.raises(NotFoundError, match="Meal plan not found") as exc_info:
            await self.service.delete_meal_plan(mock_gateway, 404)
        assert exc_info.value.status_code == 400

    @pytest.mark.asyncio
    async def test_delete_out_of_range_id_is_400(self, mock_gateway):
        with pytest.raises(NotFoundError, match="Meal plan not found") as exc_info:
            await self.service.delete_meal_plan(mock_gateway, 99999999999999999999)
        assert exc_info.value.status_code == 400
        mock_gateway.execute_write.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_database_error(self, mock_gateway):
        mock_gateway.execute_write.side_effect = OperationalError("DELETE ...", {}, Exception("gone"))

        with pytest.raises(ServerError, match="Server error while deleting meal plan"):
            await self.service.delete_meal_plan(mock_gateway, 1)
