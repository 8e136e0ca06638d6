"""Tests for public exceptions."""

import pytest

from courier_sdk.exceptions import (
    CourierConfigError,
    CourierError,
    CourierTimeoutError,
    CourierTransportError,
    CourierValidationError,
)


class TestCourierError:
    """Tests for base CourierError."""

    def test_is_exception(self):
        """CourierError should be an Exception."""
        assert issubclass(CourierError, Exception)

    def test_can_be_raised(self):
        """CourierError should be raisable with message."""
        with pytest.raises(CourierError) as exc_info:
            raise CourierError("test error")
        assert str(exc_info.value) == "test error"


class TestCourierTransportError:
    """Tests for CourierTransportError."""

    def test_inherits_from_courier_error(self):
        """CourierTransportError should inherit from CourierError."""
        assert issubclass(CourierTransportError, CourierError)

    def test_with_message_only(self):
        """Should create error with message only."""
        error = CourierTransportError("connection refused")
        assert str(error) == "connection refused"
        assert error.url is None

    def test_with_url(self):
        """Should store the target URL."""
        error = CourierTransportError("connection refused", url="http://test/x")
        assert error.url == "http://test/x"


class TestCourierTimeoutError:
    """Tests for CourierTimeoutError."""

    def test_is_transport_error(self):
        """Timeouts should be catchable as transport errors."""
        with pytest.raises(CourierTransportError):
            raise CourierTimeoutError("timed out", url="http://test/x")


class TestCourierConfigError:
    """Tests for CourierConfigError."""

    def test_inherits_from_courier_error(self):
        """CourierConfigError should inherit from CourierError."""
        assert issubclass(CourierConfigError, CourierError)

    def test_can_be_raised(self):
        """Should be raisable with message."""
        with pytest.raises(CourierConfigError) as exc_info:
            raise CourierConfigError("COURIER_TIMEOUT_MS must be an integer")
        assert str(exc_info.value) == "COURIER_TIMEOUT_MS must be an integer"


class TestCourierValidationError:
    """Tests for CourierValidationError."""

    def test_inherits_from_courier_error(self):
        """CourierValidationError should inherit from CourierError."""
        assert issubclass(CourierValidationError, CourierError)

    def test_is_not_transport_error(self):
        """Input errors should be distinguishable from transport errors."""
        assert not issubclass(CourierValidationError, CourierTransportError)
