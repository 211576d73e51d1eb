"""Tests for the guidance failure taxonomy and its HTTP mapping."""

import pytest

from careercampus.api.deps import service_error_to_api_error
from careercampus.core.errors import ModelNotConfiguredError, UpstreamModelError
from careercampus.services.guidance_errors import (
    ConfigurationError,
    EmptyResponseError,
    GuidanceOperation,
    ParseError,
    TransportError,
)


class TestServiceErrors:
    """Tests for ServiceError subclasses."""

    @pytest.mark.parametrize(
        ("error_cls", "kind"),
        [
            (ConfigurationError, "configuration"),
            (TransportError, "transport"),
            (EmptyResponseError, "empty_response"),
            (ParseError, "parse"),
        ],
    )
    def test_kind_and_message(self, error_cls, kind):
        """Each kind keeps its reason private and shows the operation message."""
        error = error_cls(GuidanceOperation.ATS_ANALYSIS, "internal detail")
        assert error.kind == kind
        assert error.user_message == "Failed to analyze resume."
        assert str(error) == "Failed to analyze resume."
        assert error.reason == "internal detail"


class TestServiceErrorToApiError:
    """Tests for service_error_to_api_error()."""

    def test_configuration_maps_to_503(self):
        """A missing key is a 503."""
        api_error = service_error_to_api_error(
            ConfigurationError(GuidanceOperation.RESUME_DRAFT, "no key")
        )
        assert isinstance(api_error, ModelNotConfiguredError)
        assert api_error.status_code == 503
        assert api_error.message == "Failed to generate resume."

    @pytest.mark.parametrize("error_cls", [TransportError, EmptyResponseError, ParseError])
    def test_other_kinds_map_to_502(self, error_cls):
        """Every other failure is a 502 with the generic message."""
        api_error = service_error_to_api_error(
            error_cls(GuidanceOperation.CAREER_PATHS, "detail")
        )
        assert isinstance(api_error, UpstreamModelError)
        assert api_error.status_code == 502
        assert "detail" not in api_error.message
