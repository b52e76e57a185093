"""Abstract interface for the HTTP client used to talk to the Salt API."""

from abc import ABC, abstractmethod


class HttpClient(ABC):
    """Abstract interface for sending JSON requests."""

    @abstractmethod
    def post(self, url: str, data: dict, headers: dict[str, str] | None = None) -> dict:
        """POST data as a JSON body and return the decoded JSON response.

        Args:
            url: Absolute URL to post to.
            data: Request body, serialised as JSON.
            headers: Extra request headers.

        Returns:
            The parsed JSON response.

        Raises:
            SaltApiError: On transport failure, error status or invalid JSON.
        """
        pass
