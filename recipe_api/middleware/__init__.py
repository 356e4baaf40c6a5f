# Middleware package init
"""
Recipe API - Middleware Package
=================================

Middleware Chain:
    Request → [Request ID] → [Access log] → [CORS] → Route Handler

    Request ID runs first so every record logged further in (access line,
    exception handlers, services) carries its id via RequestIDFilter.
"""
