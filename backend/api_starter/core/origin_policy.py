"""Origin Policy — decides whether a request origin may receive a cross-origin response.

Invariants:
    - PURE: no IO, no async, no environment reads
    - Rules evaluated in order, first match wins:
        1. no origin (same-origin, curl, mobile apps) → allow
        2. development mode → allow
        3. origin in allowed set → allow, otherwise deny
    - A denial always carries a reason naming the origin
"""

from dataclasses import dataclass
from typing import AbstractSet

ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS")
ALLOWED_HEADERS = ("Content-Type", "Authorization")


@dataclass(frozen=True)
class OriginDecision:
    """Outcome of evaluate_origin."""
    allowed: bool
    reason: str | None = None


ALLOW = OriginDecision(allowed=True)


def evaluate_origin(
    origin: str | None,
    allowed_origins: AbstractSet[str],
    is_development: bool,
) -> OriginDecision:
    if not origin:
        return ALLOW
    if is_development:
        return ALLOW
    if origin in allowed_origins:
        return ALLOW
    return OriginDecision(
        allowed=False, reason=f"Origin '{origin}' is not in ALLOWED_ORIGINS",
    )


def cors_response_headers(origin: str | None) -> dict[str, str]:
    """Headers advertised to a request that passed evaluate_origin.

    Origin and credential headers only make sense when an origin was sent.
    """
    headers = {
        "Access-Control-Allow-Methods": ",".join(ALLOWED_METHODS),
        "Access-Control-Allow-Headers": ",".join(ALLOWED_HEADERS),
    }
    if origin:
        headers["Access-Control-Allow-Origin"] = origin
        headers["Access-Control-Allow-Credentials"] = "true"
    return headers
