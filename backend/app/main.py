"""FastAPI application - trip plan builder service."""

from fastapi import FastAPI

from backend.app.api.routes.health import router as health_router
from backend.app.api.routes.metrics import router as metrics_router
from backend.app.api.routes.plans import router as plans_router
from backend.app.config import get_settings
from backend.app.utils.logging import configure_logging

configure_logging(get_settings().log_level)

app = FastAPI(title="Trip Plan Builder API", version="0.1.0")

# Register routes
app.include_router(health_router, tags=["health"])
app.include_router(metrics_router, tags=["metrics"])
app.include_router(plans_router, tags=["plans"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Trip Plan Builder API", "version": "0.1.0"}
