"""googleapi.config.defaults
=========================

Central place for small, stable default values used across the package.
These defaults can be overridden via environment variables or an external
configuration file, but provide sensible fallbacks for local development and
tests.

This module intentionally avoids importing from other googleapi packages to
prevent circular dependencies. Only plain constants should live here.
"""

from __future__ import annotations

# ---- Signing ----
# All premium (Maps for Work) client ids are issued with this prefix.
CLIENT_ID_PREFIX = "gme-"


# ---- Endpoints ----
MAPS_DEFAULT_BASE_URL = "https://maps.googleapis.com/maps/api"
SEARCH_DEFAULT_BASE_URL = "https://www.googleapis.com/customsearch/v1"

DISTANCE_MATRIX_URL = f"{MAPS_DEFAULT_BASE_URL}/distancematrix/json"
GEOCODE_URL = f"{MAPS_DEFAULT_BASE_URL}/geocode/json"


# ---- Transport ----
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0
DEFAULT_CONNECT_TIMEOUT_SECONDS = 10.0


__all__ = [
    "CLIENT_ID_PREFIX",
    "MAPS_DEFAULT_BASE_URL",
    "SEARCH_DEFAULT_BASE_URL",
    "DISTANCE_MATRIX_URL",
    "GEOCODE_URL",
    "DEFAULT_HTTP_TIMEOUT_SECONDS",
    "DEFAULT_CONNECT_TIMEOUT_SECONDS",
]
