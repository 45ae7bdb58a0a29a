"""Location types and enumerations shared by the Maps requests."""
from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


def format_coordinate(value: float) -> str:
    """Shortest round-tripping decimal form, never in exponent notation."""
    return format(Decimal(repr(float(value))), "f")


class Location(BaseModel):
    """A latitude/longitude pair, rendered as ``"lat,lng"``."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90.0, le=90.0)
    longitude: float = Field(..., ge=-180.0, le=180.0)

    def __str__(self) -> str:
        return f"{format_coordinate(self.latitude)},{format_coordinate(self.longitude)}"


class AddressLocation(BaseModel):
    """A free-form address, rendered verbatim."""

    model_config = ConfigDict(frozen=True)

    address: str

    def __str__(self) -> str:
        return self.address


LocationString = Union[Location, AddressLocation]


class TravelMode(str, Enum):
    DRIVING = "driving"
    WALKING = "walking"
    BICYCLING = "bicycling"
    TRANSIT = "transit"


class Units(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class AvoidWay(str, Enum):
    TOLLS = "tolls"
    HIGHWAYS = "highways"
    FERRIES = "ferries"
    INDOOR = "indoor"


class TransitMode(str, Enum):
    BUS = "bus"
    SUBWAY = "subway"
    TRAIN = "train"
    TRAM = "tram"
    RAIL = "rail"


class TransitRoutingPreference(str, Enum):
    LESS_WALKING = "less_walking"
    FEWER_TRANSFERS = "fewer_transfers"


__all__ = [
    "Location",
    "format_coordinate",
    "AddressLocation",
    "LocationString",
    "TravelMode",
    "Units",
    "AvoidWay",
    "TransitMode",
    "TransitRoutingPreference",
]
