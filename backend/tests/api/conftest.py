"""API test fixtures — apps built from explicit Settings + httpx async clients.

Invariants:
    - Each fixture builds a fresh app; nothing reads the process environment
    - Lifespan is not run by ASGITransport, so no banner is printed
    - failing_router exposes routes that raise, mounted before the 404 fallback
"""

import pytest
from fastapi import APIRouter, HTTPException
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel

from api_starter.config import Settings
from api_starter.main import create_app

ALLOWED_ORIGIN = "https://app.example.com"


class StatusError(Exception):
    """Application failure that carries its own status, like an HTTP-aware error."""
    def __init__(self, message: str, status: int):
        super().__init__(message)
        self.status = status


class ItemIn(BaseModel):
    name: str
    quantity: int


failing_router = APIRouter(prefix="/api/test")


@failing_router.get("/boom")
async def boom():
    raise RuntimeError("kaboom")


@failing_router.get("/status-error")
async def status_error():
    raise StatusError("X", status=404)


@failing_router.get("/teapot")
async def teapot():
    raise HTTPException(status_code=418, detail="I'm a teapot")


@failing_router.post("/items", status_code=201)
async def create_item(item: ItemIn):
    return {"name": item.name, "quantity": item.quantity}


def _client(settings: Settings) -> AsyncClient:
    app = create_app(settings, routers=[failing_router])
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture
def dev_settings() -> Settings:
    return Settings(node_env="development", allowed_origins="")


@pytest.fixture
def prod_settings() -> Settings:
    return Settings(
        node_env="production",
        allowed_origins=f"{ALLOWED_ORIGIN}, https://www.example.com",
    )


@pytest.fixture
async def dev_client(dev_settings):
    async with _client(dev_settings) as c:
        yield c


@pytest.fixture
async def prod_client(prod_settings):
    async with _client(prod_settings) as c:
        yield c
