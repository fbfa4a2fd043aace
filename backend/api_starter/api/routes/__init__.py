"""Route Modules — one file per concern.

Invariants:
    - Each module defines its own APIRouter
    - not_found is registered last: it matches every path
"""
