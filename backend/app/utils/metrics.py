"""Prometheus metrics for catalog fetches, planning flow and bookings."""

from prometheus_client import Counter, Histogram

# Catalog fetch metrics
catalog_latency_ms = Histogram(
    "catalog_latency_ms",
    "Catalog fetch latency in milliseconds",
    ["category", "outcome"],
    buckets=[10, 50, 100, 200, 500, 1000, 2000, 4000, 8000],
)

catalog_errors_total = Counter(
    "catalog_errors_total",
    "Total catalog fetch errors",
    ["category", "reason"],
)

catalog_stale_drops_total = Counter(
    "catalog_stale_drops_total",
    "Catalog responses dropped because a newer request superseded them",
    ["category"],
)

# Planning flow metrics
plan_transitions_total = Counter(
    "plan_transitions_total",
    "Planning step transition attempts",
    ["step", "outcome"],
)

# Booking submission metrics
booking_submissions_total = Counter(
    "booking_submissions_total",
    "Booking submissions to the booking service",
    ["outcome"],
)


class PrometheusCatalogMetrics:
    """Prometheus-based catalog metrics implementation."""

    def record_latency(self, category: str, outcome: str, latency_ms: float) -> None:
        """Record catalog fetch latency."""
        catalog_latency_ms.labels(category=category, outcome=outcome).observe(latency_ms)

    def inc_error(self, category: str, reason: str) -> None:
        """Increment error counter."""
        catalog_errors_total.labels(category=category, reason=reason).inc()

    def inc_stale_drop(self, category: str) -> None:
        """Increment stale-response counter."""
        catalog_stale_drops_total.labels(category=category).inc()
