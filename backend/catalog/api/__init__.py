"""API Layer — FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All failures leave through the global error handlers as a JSON envelope

Design Decisions:
    - Thin routes delegate to the injected CatalogService
"""
