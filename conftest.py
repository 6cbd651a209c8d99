"""Global pytest configuration."""

import os

# Point outbound collaborators at test hosts before any imports
os.environ.setdefault("CATALOG_BASE_URL", "http://catalog.test/api")
os.environ.setdefault("BOOKINGS_BASE_URL", "http://bookings.test/api")
