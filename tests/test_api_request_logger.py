"""Tests for API request logger."""

from unittest.mock import patch

import pytest

from campus_shuttle.adapters.api_request_logger import (
    log_api_request,
    should_log_requests,
)


class TestShouldLogRequests:
    """Tests for should_log_requests function."""

    def test_when_env_not_set_then_returns_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Given CSH_LOG_REQUESTS not set, when checking, then returns False."""
        monkeypatch.delenv("CSH_LOG_REQUESTS", raising=False)

        assert should_log_requests() is False

    def test_when_env_set_to_true_capitalized_then_returns_true(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given CSH_LOG_REQUESTS=True (capitalized), when checking, then returns True."""
        monkeypatch.setenv("CSH_LOG_REQUESTS", "True")

        assert should_log_requests() is True

    def test_when_env_set_to_false_then_returns_false(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given CSH_LOG_REQUESTS=false, when checking, then returns False."""
        monkeypatch.setenv("CSH_LOG_REQUESTS", "false")

        assert should_log_requests() is False


class TestLogApiRequest:
    """Tests for log_api_request function."""

    @patch("campus_shuttle.adapters.api_request_logger.should_log_requests")
    @patch("campus_shuttle.adapters.api_request_logger.logger")
    def test_when_logging_disabled_then_does_not_log(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given logging disabled, when calling log_api_request, then does not log."""
        mock_should_log.return_value = False

        log_api_request("GET", "https://shuttle.example.edu/api/stops")

        mock_logger.info.assert_not_called()

    @patch("campus_shuttle.adapters.api_request_logger.should_log_requests")
    @patch("campus_shuttle.adapters.api_request_logger.logger")
    def test_when_logging_enabled_with_params_then_logs_full_url(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given logging enabled with params, when calling, then logs URL with sorted params."""
        mock_should_log.return_value = True

        log_api_request(
            "GET", "https://shuttle.example.edu/api/routes", params={"limit": 10, "active": 1}
        )

        mock_logger.info.assert_called_once()
        call_args = mock_logger.info.call_args[0][0]
        assert "GET https://shuttle.example.edu/api/routes?active=1&limit=10" in call_args

    @patch("campus_shuttle.adapters.api_request_logger.should_log_requests")
    @patch("campus_shuttle.adapters.api_request_logger.logger")
    def test_when_url_has_existing_params_then_appends_params(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given URL with existing params, when adding more params, then appends with &."""
        mock_should_log.return_value = True

        log_api_request("GET", "https://shuttle.example.edu/api?existing=1", params={"new": 2})

        call_args = mock_logger.info.call_args[0][0]
        assert "existing=1&new=2" in call_args

    @patch("campus_shuttle.adapters.api_request_logger.should_log_requests")
    @patch("campus_shuttle.adapters.api_request_logger.logger")
    def test_when_logging_with_authorization_header_then_redacts_it(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given Authorization header, when logging, then redacts the value."""
        mock_should_log.return_value = True

        log_api_request(
            "GET",
            "https://shuttle.example.edu/api/stops",
            headers={"Authorization": "Bearer secret-token", "Accept": "application/json"},
        )

        call_args = mock_logger.info.call_args[0][0]
        assert "Headers:" in call_args
        assert "***REDACTED***" in call_args
        assert "secret-token" not in call_args
        assert "application/json" in call_args

    @patch("campus_shuttle.adapters.api_request_logger.should_log_requests")
    @patch("campus_shuttle.adapters.api_request_logger.logger")
    def test_when_logging_with_cookie_header_then_redacts_it(
        self, mock_logger: object, mock_should_log: object
    ) -> None:
        """Given Cookie header, when logging, then redacts the value."""
        mock_should_log.return_value = True

        log_api_request("GET", "https://shuttle.example.edu/api", headers={"Cookie": "sid=abc123"})

        call_args = mock_logger.info.call_args[0][0]
        assert "Cookie" in call_args
        assert "abc123" not in call_args
