"""Query parameter construction, signed-query policy and URI building."""

from __future__ import annotations

from datetime import datetime, timezone

import pydantic
import pytest

from googleapi.base import GoogleRequest
from googleapi.base.errors import SigningError, ValidationError
from googleapi.entities.maps import (
    AddressLocation,
    AvoidWay,
    DistanceMatrixRequest,
    GeocodeRequest,
    Location,
    TransitMode,
    TravelMode,
)
from googleapi.entities.search import WebSearchRequest
from googleapi.service import build_uri
from googleapi.signing import SignedQueryPolicy


def _matrix(**kwargs) -> DistanceMatrixRequest:
    return DistanceMatrixRequest(
        origins=[Location(latitude=40.7141289, longitude=-73.9614074)],
        destinations=[AddressLocation(address="185 Broadway Ave, Manhattan, NY, USA")],
        **kwargs,
    )


def test_same_fields_give_same_parameters():
    assert _matrix(key="abc").query_parameters() == _matrix(key="abc").query_parameters()


def test_distance_matrix_parameters():
    params = dict(
        _matrix(
            key="abc",
            avoid=[AvoidWay.TOLLS, AvoidWay.FERRIES],
            language="en",
        ).query_parameters()
    )
    assert params == {
        "origins": "40.7141289,-73.9614074",
        "destinations": "185 Broadway Ave, Manhattan, NY, USA",
        "mode": "driving",
        "avoid": "tolls|ferries",
        "units": "metric",
        "language": "en",
        "sensor": "false",
        "key": "abc",
    }


def test_transit_parameters_and_epoch_times():
    departure = datetime(2024, 1, 1, tzinfo=timezone.utc)
    params = dict(
        _matrix(
            travel_mode=TravelMode.TRANSIT,
            transit_modes=[TransitMode.BUS, TransitMode.RAIL],
            departure_time=departure,
        ).query_parameters()
    )
    assert params["mode"] == "transit"
    assert params["transit_mode"] == "bus|rail"
    assert params["departure_time"] == "1704067200"


def test_transit_modes_ignored_outside_transit():
    params = dict(_matrix(transit_modes=[TransitMode.BUS]).query_parameters())
    assert "transit_mode" not in params


def test_unsigned_uri_encoding():
    uri = _matrix(key="abc").base_uri()
    assert uri == (
        "https://maps.googleapis.com/maps/api/distancematrix/json"
        "?origins=40.7141289,-73.9614074"
        "&destinations=185+Broadway+Ave,+Manhattan,+NY,+USA"
        "&mode=driving&units=metric&sensor=false&key=abc"
    )


def test_legacy_policy_keeps_only_sensor(signing_key, client_id):
    request = GeocodeRequest(address="test", key=signing_key, client_id=client_id)
    assert request.base_uri() == "https://maps.googleapis.com/maps/api/geocode/json?sensor=false"


def test_pass_through_policy_drops_only_key(signing_key, client_id):
    request = GeocodeRequest(address="test", key=signing_key, client_id=client_id)
    uri = request.base_uri(policy=SignedQueryPolicy.pass_through())
    assert uri == "https://maps.googleapis.com/maps/api/geocode/json?address=test&sensor=false"
    assert signing_key not in uri


def test_policy_is_ignored_for_unsigned_requests():
    request = GeocodeRequest(address="test", key="abc")
    assert request.base_uri(policy=SignedQueryPolicy.legacy()).endswith("?address=test&sensor=false&key=abc")


def test_build_uri_signed_legacy(signing_key, client_id):
    request = GeocodeRequest(address="test", key=signing_key, client_id=client_id)
    assert build_uri(request) == (
        "https://maps.googleapis.com/maps/api/geocode/json"
        "?sensor=false&client=gme-12345&signature=HDjNwmq8D3o0uOx7s-U9dIQDt-0="
    )


def test_build_uri_signed_pass_through(signing_key, client_id):
    request = GeocodeRequest(address="test", key=signing_key, client_id=client_id)
    assert build_uri(request, SignedQueryPolicy.pass_through()) == (
        "https://maps.googleapis.com/maps/api/geocode/json"
        "?address=test&sensor=false&client=gme-12345&signature=SKlJrEwOyHgY6_BnMuBou0cY3BM="
    )


def test_build_uri_unsigned_has_no_signature():
    uri = build_uri(GeocodeRequest(address="test", key="abc"))
    assert "signature=" not in uri and "client=" not in uri


def test_build_uri_validates_before_signing(client_id):
    with pytest.raises(ValidationError):
        build_uri(GeocodeRequest(client_id=client_id))


def test_build_uri_surfaces_signing_error():
    with pytest.raises(SigningError, match="Invalid signing key."):
        build_uri(GeocodeRequest(address="test", client_id="gme-1"))


def test_build_uri_with_base_url_override():
    uri = build_uri(GeocodeRequest(address="x"), base_url="http://localhost:8080/geocode/json")
    assert uri == "http://localhost:8080/geocode/json?address=x&sensor=false"


def test_requests_are_immutable():
    request = GeocodeRequest(address="test")
    with pytest.raises(pydantic.ValidationError):
        request.address = "other"  # type: ignore[misc]
    changed = request.model_copy(update={"address": "other"})
    assert changed.address == "other" and request.address == "test"


def test_web_search_cannot_carry_client_id():
    with pytest.raises(pydantic.ValidationError):
        WebSearchRequest(key="k", search_engine_id="cx", query="q", client_id="gme-1")


def test_web_search_parameters():
    request = WebSearchRequest(key="k", search_engine_id="cx", query="google api", num=5)
    assert request.base_uri() == "https://www.googleapis.com/customsearch/v1?cx=cx&q=google+api&num=5&key=k"


@pytest.mark.parametrize(
    "request_obj",
    [
        GeocodeRequest(address="test"),
        DistanceMatrixRequest(),
        WebSearchRequest(query="q"),
    ],
)
def test_requests_satisfy_request_protocol(request_obj):
    assert isinstance(request_obj, GoogleRequest)


def test_small_coordinates_render_without_exponent():
    request = GeocodeRequest(location=Location(latitude=0.00001, longitude=-0.00005))
    assert request.base_uri() == (
        "https://maps.googleapis.com/maps/api/geocode/json?latlng=0.00001,-0.00005&sensor=false"
    )


@pytest.mark.parametrize(
    "latitude,longitude,expected",
    [
        (40.7141289, -73.9614074, "40.7141289,-73.9614074"),
        (0, 0, "0.0,0.0"),
        (1e-7, 179.9999999, "0.0000001,179.9999999"),
    ],
)
def test_location_rendering(latitude, longitude, expected):
    assert str(Location(latitude=latitude, longitude=longitude)) == expected
