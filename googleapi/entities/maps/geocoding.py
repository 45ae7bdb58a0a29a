"""Geocoding request: address to coordinates, or the reverse."""
from __future__ import annotations

from typing import ClassVar, List, Optional, Sequence, Tuple

from ...config.defaults import GEOCODE_URL
from ...validation.rules import ValidationRule, required_one_of
from ..common.base_request import SignableRequest, add_param
from .common import Location


class GeocodeRequest(SignableRequest):
    """Geocoding API request; ``address`` or ``location`` must be given."""

    api_name: ClassVar[str] = "geocode"
    base_url: ClassVar[str] = GEOCODE_URL

    address: Optional[str] = None
    location: Optional[Location] = None
    language: Optional[str] = None
    region: Optional[str] = None

    def required_fields(self) -> Sequence[ValidationRule]:
        return (required_one_of(("address", "location")),)

    def api_parameters(self) -> List[Tuple[str, str]]:
        params: List[Tuple[str, str]] = []
        add_param(params, "address", self.address)
        add_param(params, "latlng", self.location)
        add_param(params, "language", self.language)
        add_param(params, "region", self.region)
        return params


__all__ = ["GeocodeRequest"]
