"""Health controller - Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from bookstore.setup.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    return {"status": "healthy", "service": get_settings().service_name}


@router.get("/ping")
async def ping() -> str:
    return "pong"
