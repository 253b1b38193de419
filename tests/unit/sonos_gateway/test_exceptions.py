"""Tests for custom exception classes."""

from sonos_gateway.exceptions import ConfigurationException, ErrorCode, GatewayException


class TestErrorCodes:
    """Tests for ErrorCode enum."""

    def test_error_code_values(self):
        assert ErrorCode.GATEWAY_ERROR == "GATEWAY_ERROR"
        assert ErrorCode.CONFIG_ERROR == "CONFIG_ERROR"
        assert ErrorCode.CONFIG_MISSING == "CONFIG_MISSING"


class TestGatewayException:
    """Tests for GatewayException."""

    def test_gateway_exception_basic(self):
        exc = GatewayException(message="Test error")

        assert exc.message == "Test error"
        assert exc.code == ErrorCode.GATEWAY_ERROR
        assert exc.status_code == 500
        assert exc.details == {}
        assert str(exc) == "Test error"

    def test_gateway_exception_with_details(self):
        exc = GatewayException(
            message="Test error", code=ErrorCode.INTERNAL_ERROR, status_code=503, details={"key": "value"}
        )

        assert exc.code == ErrorCode.INTERNAL_ERROR
        assert exc.status_code == 503
        assert exc.details["key"] == "value"


class TestConfigurationException:
    """Tests for ConfigurationException."""

    def test_config_exception_defaults(self):
        exc = ConfigurationException(message="Config error")

        assert isinstance(exc, GatewayException)
        assert exc.code == ErrorCode.CONFIG_ERROR
        assert exc.status_code == 500

    def test_config_missing_error(self):
        exc = ConfigurationException(
            message="Sonos service not initialized",
            code=ErrorCode.CONFIG_MISSING,
            status_code=503,
            details={"component": "sonos_service"},
        )

        assert exc.code == ErrorCode.CONFIG_MISSING
        assert exc.status_code == 503
        assert exc.details["component"] == "sonos_service"
