"""Request entities for the supported Google web service APIs."""

from .common import BaseRequest, SignableRequest
from .maps import (
    AddressLocation,
    DistanceMatrixRequest,
    GeocodeRequest,
    Location,
    TravelMode,
)
from .search import WebSearchRequest

__all__ = [
    "BaseRequest",
    "SignableRequest",
    "DistanceMatrixRequest",
    "GeocodeRequest",
    "WebSearchRequest",
    "Location",
    "AddressLocation",
    "TravelMode",
]
