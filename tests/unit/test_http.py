"""Unit tests for the requests-backed HTTP client."""

from unittest.mock import Mock, patch

import pytest
import requests

from scopex_rate_client.exceptions import RateFetchException, RateTransportException
from scopex_rate_client.http import HttpResponse, RequestsHttpClient

URL = "https://v2.scopex.dev/misc/rate"
HEADERS = {"Content-Type": "application/json", "User-Agent": "Maestro-Automation"}


@pytest.mark.unit
class TestHttpResponse:
    """Test cases for HttpResponse."""

    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_ok_for_2xx(self, status: int) -> None:
        """Test that 2xx statuses are ok."""
        assert HttpResponse(status=status, body="").ok is True

    @pytest.mark.parametrize("status", [100, 199, 300, 304, 400, 500])
    def test_not_ok_outside_2xx(self, status: int) -> None:
        """Test that redirects and errors are not ok."""
        assert HttpResponse(status=status, body="").ok is False


@pytest.mark.unit
class TestRequestsHttpClient:
    """Test cases for RequestsHttpClient."""

    @patch("requests.get")
    def test_get_success(self, mock_get: Mock) -> None:
        """Test that status and text are copied into HttpResponse."""
        mock_response = Mock()
        mock_response.status_code = 200
        mock_response.text = '{"data":{"rate":83.45}}'
        mock_get.return_value = mock_response

        response = RequestsHttpClient().get(URL, headers=HEADERS)

        assert response == HttpResponse(status=200, body='{"data":{"rate":83.45}}')
        mock_get.assert_called_once_with(URL, headers=HEADERS, timeout=None)

    @patch("requests.get")
    def test_get_passes_timeout(self, mock_get: Mock) -> None:
        """Test that the timeout reaches requests."""
        mock_get.return_value = Mock(status_code=200, text="{}")

        RequestsHttpClient().get(URL, headers=HEADERS, timeout=2.0)

        assert mock_get.call_args[1]["timeout"] == 2.0

    @patch("requests.get")
    def test_get_error_status_is_returned(self, mock_get: Mock) -> None:
        """Test that error statuses are returned rather than raised."""
        mock_get.return_value = Mock(status_code=500, text="Internal Server Error")

        response = RequestsHttpClient().get(URL, headers=HEADERS)

        assert response.status == 500
        assert response.ok is False

    @patch("requests.get")
    def test_get_request_exception(self, mock_get: Mock) -> None:
        """Test that requests errors become RateTransportException."""
        error = requests.ConnectionError("Network error")
        mock_get.side_effect = error

        with pytest.raises(RateTransportException, match="Network error") as exc_info:
            RequestsHttpClient().get(URL, headers=HEADERS)

        assert exc_info.value.url == URL
        assert exc_info.value.original_error is error
        assert exc_info.value.__cause__ is error
        assert isinstance(exc_info.value, RateFetchException)

    @patch("requests.get")
    def test_get_timeout_exception(self, mock_get: Mock) -> None:
        """Test that timeouts are transport failures."""
        mock_get.side_effect = requests.Timeout("read timed out")

        with pytest.raises(RateTransportException, match="read timed out"):
            RequestsHttpClient().get(URL, headers=HEADERS, timeout=0.1)

    @patch("requests.get")
    def test_get_uses_session_when_given(self, mock_get: Mock) -> None:
        """Test that a configured session is used instead of requests.get."""
        session = Mock(spec=requests.Session)
        session.get.return_value = Mock(status_code=204, text="")

        response = RequestsHttpClient(session=session).get(URL, headers=HEADERS)

        assert response.status == 204
        session.get.assert_called_once_with(URL, headers=HEADERS, timeout=None)
        mock_get.assert_not_called()
