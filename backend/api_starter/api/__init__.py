"""API Layer — FastAPI routes, middlewares and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON envelopes
"""
