"""Not-Found Fallback — uniform 404 envelope for any unmatched path.

Invariants:
    - Registered after every other router (catch-all path)
    - Matches every method, so unknown method+path pairs are 404 rather than 405
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from api_starter.core.error_envelope import build_not_found_envelope

ALL_METHODS = ["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS", "HEAD"]

router = APIRouter(tags=["fallback"])


@router.api_route(
    "/{full_path:path}", methods=ALL_METHODS, include_in_schema=False,
)
async def route_not_found(request: Request, full_path: str):
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=build_not_found_envelope(request.url.path, request.method),
    )
