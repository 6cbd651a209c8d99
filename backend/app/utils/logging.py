"""Structured logging for catalog fetches."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the service."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


class StructuredCatalogLogger:
    """Structured logger for catalog fetches."""

    def log_fetch(
        self,
        category: str,
        destination_id: str | None,
        outcome: str,
        latency_ms: float,
        count: int = 0,
        error_reason: str | None = None,
    ) -> None:
        """Log catalog fetch outcome with structured data."""
        log_data: dict[str, Any] = {
            "category": category,
            "destination_id": destination_id,
            "outcome": outcome,
            "latency_ms": round(latency_ms, 2),
            "count": count,
        }

        if error_reason:
            log_data["error_reason"] = error_reason

        log_msg = f"Catalog fetch: {category} - {outcome}"

        if outcome in ("success", "empty"):
            logger.info(log_msg, extra={"structured": log_data})
        else:
            logger.warning(log_msg, extra={"structured": log_data})
