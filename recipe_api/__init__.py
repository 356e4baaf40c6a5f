"""
Recipe API - Application Package Initializer
==============================================

A small REST API for recipes and meal plans.

Architecture Note:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Validators → Services (Logic)     │  ← input checks, orchestration
    ├─────────────────────────────────────┤
    │      Persistence Gateway            │  ← fetch_one / fetch_all / execute_write
    ├─────────────────────────────────────┤
    │   Database (engine, sessions)       │  ← async SQLAlchemy, injected per request
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
