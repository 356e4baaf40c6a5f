# Routes package init
"""
Recipe API - API Routes Package
=================================

Route Inventory:
    - recipes.py:     GET  /api/recipes              (list, ?category= filter)
                      GET  /api/recipes/{id}         (single recipe)
                      POST /api/recipes              (add recipe)
    - meal_plans.py:  POST   /api/meal-plans         (create plan)
                      GET    /api/meal-plans         (list plans)
                      DELETE /api/meal-plans/{id}    (delete plan)
    - health.py:      GET  /                         (liveness)
                      GET  /health                   (database check)

Design Principle:
    Routes are THIN: extract raw input, validate it, call the service, return.
"""
