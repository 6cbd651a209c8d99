"""Catalog adapter - fetch destinations, hotels, cars and places over HTTP.

Fetch failures degrade to an empty result with a notice instead of raising,
so an unavailable catalog never blocks unrelated planning steps. Responses
are normalized (see adapters.normalize) before they leave this module.
"""

import itertools
import time
from dataclasses import dataclass
from datetime import UTC, datetime

import httpx

from backend.app.adapters.normalize import normalize_items
from backend.app.models.catalog import CatalogResult
from backend.app.models.common import CatalogCategory, Provenance
from backend.app.utils.logging import StructuredCatalogLogger
from backend.app.utils.metrics import PrometheusCatalogMetrics

CATALOG_PATHS: dict[CatalogCategory, str] = {
    CatalogCategory.destinations: "/destinations",
    CatalogCategory.hotels: "/hotels",
    CatalogCategory.cars: "/carrentals",
    CatalogCategory.places: "/places",
}


@dataclass(frozen=True)
class FetchTicket:
    """Identifies one in-flight catalog request."""

    category: CatalogCategory
    destination_id: str | None
    seq: int


class LatestRequestGate:
    """Latest-request-wins bookkeeping, one slot per catalog category.

    Every fetch takes a ticket; issuing a new ticket for a category supersedes
    all earlier ones, so a slow earlier response is dropped when it arrives.
    """

    def __init__(self) -> None:
        self._seq = itertools.count(1)
        self._latest: dict[CatalogCategory, FetchTicket] = {}

    def issue(self, category: CatalogCategory, destination_id: str | None) -> FetchTicket:
        ticket = FetchTicket(category=category, destination_id=destination_id, seq=next(self._seq))
        self._latest[category] = ticket
        return ticket

    def is_current(self, ticket: FetchTicket) -> bool:
        return self._latest.get(ticket.category) == ticket

    def current_destination(self, category: CatalogCategory) -> str | None:
        ticket = self._latest.get(category)
        return ticket.destination_id if ticket else None


class CatalogClient:
    """Read-only client for the catalog service."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 4.0,
        client: httpx.AsyncClient | None = None,
        gate: LatestRequestGate | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client
        self.gate = gate or LatestRequestGate()
        self._metrics = PrometheusCatalogMetrics()
        self._log = StructuredCatalogLogger()

    async def fetch(
        self, category: CatalogCategory, destination_id: str | None = None
    ) -> CatalogResult:
        """Fetch and normalize one catalog collection.

        Args:
            category: Which collection to fetch
            destination_id: Scope hotels/cars/places to a destination

        Returns:
            CatalogResult; empty with a notice when the catalog is unavailable,
            empty and stale=True when a newer fetch for the category was issued
            while this one was in flight
        """
        ticket = self.gate.issue(category, destination_id)

        if category == CatalogCategory.places and not destination_id:
            return CatalogResult(
                category=category,
                notice="Destination ID missing",
            )

        url = f"{self.base_url}{CATALOG_PATHS[category]}"
        params = {"destination": destination_id} if destination_id else None

        close_client = False
        client = self._client
        if client is None:
            client = httpx.AsyncClient(timeout=self.timeout)
            close_client = True

        started = time.perf_counter()
        try:
            response = await client.get(url, params=params)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            latency_ms = (time.perf_counter() - started) * 1000
            reason = type(e).__name__
            self._metrics.record_latency(category.value, "error", latency_ms)
            self._metrics.inc_error(category.value, reason)
            self._log.log_fetch(
                category.value, destination_id, "error", latency_ms, error_reason=reason
            )
            if not self.gate.is_current(ticket):
                return self._stale(ticket)
            return CatalogResult(
                category=category,
                destination_id=destination_id,
                notice=f"Could not load {category.value}. Please try again later.",
            )
        finally:
            if close_client:
                await client.aclose()

        latency_ms = (time.perf_counter() - started) * 1000
        if not self.gate.is_current(ticket):
            self._metrics.record_latency(category.value, "stale", latency_ms)
            self._log.log_fetch(category.value, destination_id, "stale", latency_ms)
            return self._stale(ticket)

        items = normalize_items(category, data)
        outcome = "success" if items else "empty"
        self._metrics.record_latency(category.value, outcome, latency_ms)
        self._log.log_fetch(category.value, destination_id, outcome, latency_ms, count=len(items))

        return CatalogResult(
            category=category,
            destination_id=destination_id,
            items=items,
            notice=None if items else f"No {category.value} available.",
            provenance=Provenance(
                source=f"catalog.{category.value}",
                source_url=str(response.url),
                fetched_at=datetime.now(UTC),
            ),
        )

    def _stale(self, ticket: FetchTicket) -> CatalogResult:
        self._metrics.inc_stale_drop(ticket.category.value)
        return CatalogResult(
            category=ticket.category,
            destination_id=ticket.destination_id,
            stale=True,
        )

    async def fetch_destinations(self) -> CatalogResult:
        return await self.fetch(CatalogCategory.destinations)

    async def fetch_hotels(self, destination_id: str | None = None) -> CatalogResult:
        return await self.fetch(CatalogCategory.hotels, destination_id)

    async def fetch_cars(self, destination_id: str | None = None) -> CatalogResult:
        return await self.fetch(CatalogCategory.cars, destination_id)

    async def fetch_places(self, destination_id: str | None) -> CatalogResult:
        return await self.fetch(CatalogCategory.places, destination_id)
