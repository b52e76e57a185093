"""requests-based HTTP client."""

import logging

import requests

from ..exceptions import SaltApiError
from ..interfaces import HttpClient

logger = logging.getLogger(__name__)


class RequestsHttpClient(HttpClient):
    """HTTP client backed by a requests session.

    The session is created on first use and reused for later calls.
    """

    DEFAULT_HEADERS = {
        "Accept": "application/json",
    }

    def __init__(self, timeout: float = 30.0, verify: bool = True):
        """
        Initialize the client.

        Args:
            timeout: Request timeout in seconds.
            verify: Whether to verify the server's TLS certificate.
        """
        self.timeout = timeout
        self.verify = verify
        self._session = None

    def _get_session(self) -> requests.Session:
        """Get or create the requests session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update(self.DEFAULT_HEADERS)
            self._session.verify = self.verify
        return self._session

    def post(self, url: str, data: dict, headers: dict[str, str] | None = None) -> dict:
        """
        POST a JSON body and return the decoded response.

        Args:
            url: Absolute URL to post to.
            data: Request body.
            headers: Extra request headers (e.g. X-Auth-Token).

        Returns:
            The parsed JSON response.

        Raises:
            SaltApiError: On connection errors, non-2xx responses or invalid JSON.
        """
        session = self._get_session()
        logger.debug(f"POST {url}")

        try:
            response = session.post(url, json=data, headers=headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise SaltApiError(f"Salt API request to {url} failed: {e}", status_code=status) from e
        except requests.RequestException as e:
            raise SaltApiError(f"Salt API request to {url} failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise SaltApiError(
                f"Salt API returned invalid JSON from {url}", status_code=response.status_code
            ) from e

    def close(self) -> None:
        """Close the underlying session."""
        if self._session is not None:
            self._session.close()
            self._session = None
