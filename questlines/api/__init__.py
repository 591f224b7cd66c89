"""API Layer — FastAPI routes, error handlers and static frontend serving.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON except export downloads and static files

Design Decisions:
    - Thin routes delegate to the repository
"""
