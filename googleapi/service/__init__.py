"""Service layer: the query engine and per-API facades."""

from .engine import HttpEngine, build_uri
from .facades import GoogleMaps, GoogleSearch

__all__ = ["HttpEngine", "build_uri", "GoogleMaps", "GoogleSearch"]
