"""Unit tests for the error payload factories"""

import pytest
from pydantic import ValidationError

from pipeline_poc.models import ErrorResponse


@pytest.mark.unit
class TestErrorResponseFactories:
    """Each factory stamps its own status code"""

    @pytest.mark.parametrize(
        "factory, code",
        [
            (ErrorResponse.bad_request, 400),
            (ErrorResponse.forbidden, 403),
            (ErrorResponse.not_found, 404),
            (ErrorResponse.internal_error, 500),
            (ErrorResponse.service_unavailable, 503),
        ],
    )
    def test_factory_sets_error_code(self, factory, code):
        error = factory("boom", timestamp=42)

        assert error.error_code == code
        assert error.message == "boom"
        assert error.timestamp == 42

    def test_payload_uses_wire_names(self):
        payload = ErrorResponse.not_found("missing", timestamp=1).to_payload()

        assert payload == {"message": "missing", "errorCode": 404, "timestamp": 1}

    def test_message_is_not_validated(self):
        """Empty messages are passed through unchanged"""
        assert ErrorResponse.bad_request("", timestamp=0).message == ""

    def test_default_timestamps_never_decrease(self):
        readings = [ErrorResponse.internal_error("x").timestamp for _ in range(50)]

        assert readings == sorted(readings)
        assert readings[0] > 0

    def test_payload_is_immutable(self):
        error = ErrorResponse.bad_request("x", timestamp=0)

        with pytest.raises(ValidationError):
            error.error_code = 500
