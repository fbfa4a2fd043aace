"""API Starter — FastAPI server template package.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
