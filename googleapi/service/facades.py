"""Ready-made engines, one per supported API.

Usage::

    from googleapi import GoogleMaps
    from googleapi.entities.maps import DistanceMatrixRequest, Location

    body = GoogleMaps.distance_matrix.query(
        DistanceMatrixRequest(origins=[Location(latitude=40.71, longitude=-73.96)], destinations=[...])
    )
"""
from __future__ import annotations

from ..entities.maps import DistanceMatrixRequest, GeocodeRequest
from ..entities.search import WebSearchRequest
from .engine import HttpEngine


class GoogleMaps:
    """Maps web services."""

    distance_matrix: HttpEngine[DistanceMatrixRequest] = HttpEngine(DistanceMatrixRequest)
    geocode: HttpEngine[GeocodeRequest] = HttpEngine(GeocodeRequest)


class GoogleSearch:
    """Custom Search."""

    web_search: HttpEngine[WebSearchRequest] = HttpEngine(WebSearchRequest)


__all__ = ["GoogleMaps", "GoogleSearch"]
