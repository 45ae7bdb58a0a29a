"""
Distance Matrix request.

Travel distance and time for a matrix of origins and destinations. Both
collections are required (``None`` and empty are rejected with the same
message) and transit queries need a departure or an arrival time.

The ``DepatureTime`` spelling in the transit rule message is kept as
published; existing consumers compare the message verbatim.
"""
from __future__ import annotations

from datetime import datetime
from typing import ClassVar, List, Optional, Sequence, Tuple

from ...config.defaults import DISTANCE_MATRIX_URL
from ...validation.rules import ValidationRule, required, required_when
from ..common.base_request import SignableRequest, add_param
from .common import (
    AvoidWay,
    LocationString,
    TransitMode,
    TransitRoutingPreference,
    TravelMode,
    Units,
)


class DistanceMatrixRequest(SignableRequest):
    """Distance Matrix API request.

    Attributes:
        origins: Starting points; rendered ``|``-separated.
        destinations: End points; rendered ``|``-separated.
        travel_mode: Mode of transport (``mode``).
        avoid: Route features to avoid.
        units: Unit system for text values.
        language: Result language code.
        transit_modes: Preferred transit vehicles (transit mode only).
        transit_routing_preference: Transit route bias (transit mode only).
        departure_time: Desired departure; naive values are taken as UTC.
        arrival_time: Desired arrival; naive values are taken as UTC.
    """

    api_name: ClassVar[str] = "distancematrix"
    base_url: ClassVar[str] = DISTANCE_MATRIX_URL

    origins: Optional[Tuple[LocationString, ...]] = None
    destinations: Optional[Tuple[LocationString, ...]] = None
    travel_mode: TravelMode = TravelMode.DRIVING
    avoid: Tuple[AvoidWay, ...] = ()
    units: Units = Units.METRIC
    language: Optional[str] = None
    transit_modes: Tuple[TransitMode, ...] = ()
    transit_routing_preference: Optional[TransitRoutingPreference] = None
    departure_time: Optional[datetime] = None
    arrival_time: Optional[datetime] = None

    def required_fields(self) -> Sequence[ValidationRule]:
        return (required("origins"), required("destinations"))

    def conditional_rules(self) -> Sequence[ValidationRule]:
        return (
            required_when(
                "travel_mode",
                TravelMode.TRANSIT,
                ("departure_time", "arrival_time"),
                displays=("DepatureTime", "ArrivalTime"),
            ),
        )

    def api_parameters(self) -> List[Tuple[str, str]]:
        params: List[Tuple[str, str]] = []
        add_param(params, "origins", self.origins)
        add_param(params, "destinations", self.destinations)
        add_param(params, "mode", self.travel_mode)
        add_param(params, "avoid", self.avoid)
        add_param(params, "units", self.units)
        add_param(params, "language", self.language)
        if self.travel_mode is TravelMode.TRANSIT:
            add_param(params, "transit_mode", self.transit_modes)
            add_param(params, "transit_routing_preference", self.transit_routing_preference)
        add_param(params, "departure_time", self.departure_time)
        add_param(params, "arrival_time", self.arrival_time)
        return params


__all__ = ["DistanceMatrixRequest"]
