"""Tests for error normalization."""

import httpx
import pytest
from pydantic import BaseModel

from ipmaclient.error_codes import ErrorCode
from ipmaclient.exceptions import InvalidResponseError
from ipmaclient.exceptions import IPMAError
from ipmaclient.exceptions import NetworkError
from ipmaclient.exceptions import NotFoundError
from ipmaclient.exceptions import ValidationError
from ipmaclient.exceptions import handle_errors


class Sample(BaseModel):
    value: int


def status_error(status_code: int) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "https://ipma.test/open-data/resource.json")
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError("error", request=request, response=response)


def test_error_string_with_details():
    error = NotFoundError("Location not found", details={"district_id": 99})
    assert str(error) == "Location not found (Code: NOT_FOUND, Details: {'district_id': 99})"


def test_error_string_without_details():
    assert str(NetworkError()) == "Network error occurred (Code: NETWORK_ERROR)"


def test_error_is_hashable():
    error = NetworkError()
    assert {error}


@pytest.mark.parametrize("raised,expected,code", [
    (status_error(404), NotFoundError, ErrorCode.NOT_FOUND),
    (status_error(500), InvalidResponseError, ErrorCode.INVALID_RESPONSE),
    (httpx.ConnectError("refused"), NetworkError, ErrorCode.NETWORK_ERROR),
])
def test_handle_errors_maps_transport_failures(raised, expected, code):
    with pytest.raises(expected) as exc_info:
        with handle_errors("test"):
            raise raised

    assert exc_info.value.code == code
    assert exc_info.value.cause is raised
    assert exc_info.value.details["operation"] == "test"


def test_handle_errors_maps_schema_failures():
    with pytest.raises(ValidationError) as exc_info:
        with handle_errors("test"):
            Sample.model_validate({"value": "not a number"})

    assert exc_info.value.code == ErrorCode.VALIDATION_ERROR
    assert exc_info.value.details["errors"] == 1


def test_handle_errors_passes_client_errors_through():
    original = NotFoundError("Location not found")

    with pytest.raises(NotFoundError) as exc_info:
        with handle_errors("test"):
            raise original

    assert exc_info.value is original


def test_handle_errors_leaves_unrelated_errors():
    with pytest.raises(KeyError):
        with handle_errors("test"):
            raise KeyError("bug")


def test_all_errors_share_base():
    for error in (NetworkError(), NotFoundError(), InvalidResponseError("x"), ValidationError()):
        assert isinstance(error, IPMAError)
