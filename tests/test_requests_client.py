"""Tests for the RequestsHttpClient module."""

import pytest
import requests
from unittest.mock import MagicMock, patch

from salt_pipeline.exceptions import SaltApiError
from salt_pipeline.transport.requests_client import RequestsHttpClient


class TestRequestsHttpClient:
    """Tests for RequestsHttpClient."""

    def test_defaults(self):
        client = RequestsHttpClient()
        assert client.timeout == 30.0
        assert client.verify is True
        assert client._session is None

    def test_session_created_once(self):
        client = RequestsHttpClient(verify=False)
        session = client._get_session()
        assert client._get_session() is session
        assert session.verify is False
        assert session.headers["Accept"] == "application/json"

    @patch("salt_pipeline.transport.requests_client.RequestsHttpClient._get_session")
    def test_post_sends_json(self, mock_session):
        mock_resp = MagicMock()
        mock_resp.json.return_value = {"return": [{"token": "abc"}]}
        mock_session.return_value.post.return_value = mock_resp

        client = RequestsHttpClient(timeout=5)
        result = client.post("https://salt:8000/login", {"username": "u"}, {"X-Auth-Token": "t"})

        assert result == {"return": [{"token": "abc"}]}
        mock_session.return_value.post.assert_called_once_with(
            "https://salt:8000/login",
            json={"username": "u"},
            headers={"X-Auth-Token": "t"},
            timeout=5,
        )
        mock_resp.raise_for_status.assert_called_once()

    @patch("salt_pipeline.transport.requests_client.RequestsHttpClient._get_session")
    def test_http_error_raises_with_status(self, mock_session):
        error_resp = MagicMock(status_code=401)
        mock_resp = MagicMock()
        mock_resp.raise_for_status.side_effect = requests.HTTPError("401 Unauthorized", response=error_resp)
        mock_session.return_value.post.return_value = mock_resp

        client = RequestsHttpClient()
        with pytest.raises(SaltApiError) as exc_info:
            client.post("https://salt:8000/login", {})

        assert exc_info.value.status_code == 401

    @patch("salt_pipeline.transport.requests_client.RequestsHttpClient._get_session")
    def test_connection_error_raises(self, mock_session):
        mock_session.return_value.post.side_effect = requests.ConnectionError("refused")

        client = RequestsHttpClient()
        with pytest.raises(SaltApiError) as exc_info:
            client.post("https://salt:8000/", {})

        assert exc_info.value.status_code is None

    @patch("salt_pipeline.transport.requests_client.RequestsHttpClient._get_session")
    def test_invalid_json_raises(self, mock_session):
        mock_resp = MagicMock(status_code=200)
        mock_resp.json.side_effect = ValueError("No JSON object could be decoded")
        mock_session.return_value.post.return_value = mock_resp

        client = RequestsHttpClient()
        with pytest.raises(SaltApiError, match="invalid JSON"):
            client.post("https://salt:8000/", {})

    def test_close(self):
        client = RequestsHttpClient()
        session = MagicMock()
        client._session = session

        client.close()

        session.close.assert_called_once()
        assert client._session is None

    def test_close_without_session(self):
        client = RequestsHttpClient()
        client.close()  # Should not raise
