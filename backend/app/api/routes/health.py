"""Health check endpoints."""

import json
from typing import Any

import httpx
from fastapi import APIRouter, Response

from backend.app.config import Settings, get_settings

router = APIRouter()


async def check_catalog(settings: Settings) -> tuple[bool, str]:
    """Check catalog service reachability.

    Returns:
        (is_ok, status_message)
    """
    try:
        async with httpx.AsyncClient(timeout=settings.catalog_timeout_s) as client:
            response = await client.get(f"{settings.catalog_base_url.rstrip('/')}/destinations")
            response.raise_for_status()
        return (True, "ok")
    except httpx.HTTPError as e:
        return (False, f"error: {type(e).__name__}")


@router.get("/health")
async def health() -> dict[str, str]:
    """Simple health check for Docker/k8s.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok"}


@router.get("/healthz", response_model=None)
async def healthz() -> dict[str, Any] | Response:
    """Health check with collaborator status.

    Returns:
        200 with component status if the catalog is reachable
        503 with status "degraded" otherwise
    """
    settings = get_settings()

    catalog_ok, catalog_status = await check_catalog(settings)

    response_body = {
        "status": "ok" if catalog_ok else "degraded",
        "components": {
            "catalog": catalog_status,
        },
    }

    if not catalog_ok:
        return Response(
            content=json.dumps(response_body),
            status_code=503,
            media_type="application/json",
        )

    return response_body
