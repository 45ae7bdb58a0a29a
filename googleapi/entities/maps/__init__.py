"""Maps web service requests."""

from .common import (
    AddressLocation,
    AvoidWay,
    Location,
    LocationString,
    TransitMode,
    TransitRoutingPreference,
    TravelMode,
    Units,
)
from .distance_matrix import DistanceMatrixRequest
from .geocoding import GeocodeRequest

__all__ = [
    "DistanceMatrixRequest",
    "GeocodeRequest",
    "Location",
    "AddressLocation",
    "LocationString",
    "TravelMode",
    "Units",
    "AvoidWay",
    "TransitMode",
    "TransitRoutingPreference",
]
