# Services package init
"""
Recipe API - Services Layer
=============================

What:  Business logic sitting between routes (HTTP) and the persistence gateway.

Service Inventory:
    - RecipeService:   list (optionally by category), get by id, create
    - MealPlanService: create, list, delete by id

Why services are separate from routes:
    Services receive the gateway as an argument, so unit tests hand them an
    AsyncMock and never open a database.
"""
