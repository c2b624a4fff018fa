# tests/test_response.py

from core.errors import DuplicateIdError, InvalidStatusError, UnknownIdError
from core.response import ErrorCode, Response


def test_succeed_response():
    response = Response.succeed(detail="ok", data={"changed": True})

    assert response.success
    assert response
    assert response.status_code == 200
    assert response.data["changed"]
    assert str(response) == "Success: ok"


def test_fail_response():
    response = Response.fail(detail="nope", error=ErrorCode.NOT_FOUND, status_code=404)

    assert not response.success
    assert not response
    assert response.data == {}
    assert str(response) == "Error: NOT_FOUND"


def test_from_error_maps_error_codes():
    assert Response.from_error(DuplicateIdError(["a"])).error is ErrorCode.DUPLICATE_ID
    assert Response.from_error(UnknownIdError("a")).error is ErrorCode.UNKNOWN_ID
    assert Response.from_error(UnknownIdError("a")).status_code == 404
    assert (
        Response.from_error(InvalidStatusError("tardy")).error
        is ErrorCode.INVALID_STATUS
    )


def test_response_round_trip_through_dict():
    original = Response.fail(detail="missing", error=ErrorCode.UNKNOWN_ID, status_code=404)

    restored = Response.from_dict(original.to_dict())

    assert restored.error is ErrorCode.UNKNOWN_ID
    assert restored.detail == "missing"
    assert restored.status_code == 404
