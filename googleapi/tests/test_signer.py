"""RequestSigner behaviour, including pinned golden signatures."""

from __future__ import annotations

import pytest

from googleapi.base.errors import ErrorCode, SigningError
from googleapi.signing import RequestSigner, SigningCredentials

GEOCODE_URI = "http://maps.googleapis.com/maps/api/geocode/json?address=test"
GOLDEN = (
    "http://maps.googleapis.com/maps/api/geocode/json"
    "?address=test&client=gme-12345&signature=j8outUfvQRE9Yllq22aJM7DzIFM="
)


def test_sign_golden_value(signing_key, client_id):
    outcome = RequestSigner().sign(GEOCODE_URI, SigningCredentials(client_id=client_id, key=signing_key))
    assert outcome.ok
    assert outcome.value == GOLDEN


def test_sign_matches_published_google_example(signing_key):
    # Example vector from Google's URL signing documentation; its client id
    # has no premium prefix, so the prefix check is relaxed here.
    signer = RequestSigner(client_id_prefix="")
    uri = "https://maps.googleapis.com/maps/api/geocode/json?address=New+York"
    signed = signer.sign(uri, SigningCredentials(client_id="clientID", key=signing_key)).unwrap()
    assert signed.endswith("&client=clientID&signature=chaRF2hTJKOScPr-RQCEhZbSzIE=")


def test_sign_without_credentials_returns_uri_unchanged():
    outcome = RequestSigner().sign(GEOCODE_URI, None)
    assert outcome.ok
    assert outcome.value == GEOCODE_URI


def test_sign_is_deterministic(signing_key, client_id):
    creds = SigningCredentials(client_id=client_id, key=signing_key)
    signer = RequestSigner()
    assert signer.sign(GEOCODE_URI, creds).value == signer.sign(GEOCODE_URI, creds).value


@pytest.mark.parametrize("key", ["vNIXE0xscrmjlyV-12Nj_BvUPaw=", "%%% not a key %%%"])
def test_client_id_prefix_checked_before_key_decoding(key):
    outcome = RequestSigner().sign(GEOCODE_URI, SigningCredentials(client_id="12345", key=key))
    assert not outcome.ok
    assert isinstance(outcome.error, SigningError)
    assert outcome.error.code is ErrorCode.SIGNING
    assert str(outcome.error) == "A clientId must start with 'gme-'."


@pytest.mark.parametrize("key", [None, "", "   "])
def test_missing_key_is_invalid(key, client_id):
    outcome = RequestSigner().sign(GEOCODE_URI, SigningCredentials(client_id=client_id, key=key))
    assert str(outcome.error) == "Invalid signing key."


def test_missing_key_reported_before_bad_prefix():
    outcome = RequestSigner().sign(GEOCODE_URI, SigningCredentials(client_id="abc", key=" "))
    assert str(outcome.error) == "Invalid signing key."


def test_undecodable_key_is_invalid(client_id):
    outcome = RequestSigner().sign(GEOCODE_URI, SigningCredentials(client_id=client_id, key="%%%"))
    assert str(outcome.error) == "Invalid signing key."


def test_none_uri_fails_fast(signing_key, client_id):
    with pytest.raises(SigningError):
        RequestSigner().sign(None, SigningCredentials(client_id=client_id, key=signing_key))  # type: ignore[arg-type]


def test_uri_without_query_gets_client_as_first_parameter(signing_key, client_id):
    uri = "https://maps.googleapis.com/maps/api/geocode/json"
    signed = RequestSigner().sign(uri, SigningCredentials(client_id=client_id, key=signing_key)).unwrap()
    assert signed == (
        "https://maps.googleapis.com/maps/api/geocode/json"
        "?client=gme-12345&signature=xCbVCWwY4T09SsRntSSB-fTopMA="
    )


def test_existing_query_is_not_reencoded(signing_key, client_id):
    uri = "https://maps.googleapis.com/maps/api/distancematrix/json?origins=40.1,-73.2|Boston&destinations=New+York"
    signed = RequestSigner().sign(uri, SigningCredentials(client_id=client_id, key=signing_key)).unwrap()
    assert signed.startswith(uri + "&client=gme-12345&signature=")


def test_unwrap_raises_the_signing_error(signing_key):
    outcome = RequestSigner().sign(GEOCODE_URI, SigningCredentials(client_id="x", key=signing_key))
    with pytest.raises(SigningError, match="gme-"):
        outcome.unwrap()


def test_credentials_repr_hides_key(signing_key, client_id):
    assert signing_key not in repr(SigningCredentials(client_id=client_id, key=signing_key))
