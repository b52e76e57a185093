"""Salt API connection and login."""

import logging
from dataclasses import dataclass, field

from ..exceptions import SaltApiError
from ..interfaces import CredentialStore, Credentials, HttpClient

logger = logging.getLogger(__name__)


@dataclass
class Connection:
    """Salt connection and context parameters.

    Attributes:
        url: Salt API server URL.
        credentials_id: Id of the credential store entry.
        credentials: Resolved credentials for the id.
        auth_token: Token from the last successful login, or None.
        eauth: External authentication backend used at login.
    """

    url: str
    credentials: Credentials
    credentials_id: str = "salt"
    auth_token: str | None = field(default=None, repr=False)
    eauth: str = "pam"

    def endpoint(self, path: str = "") -> str:
        """Build an absolute URL below the API root."""
        return f"{self.url.rstrip('/')}/{path.lstrip('/')}"

    def is_authenticated(self) -> bool:
        """Check if a token has been acquired."""
        return self.auth_token is not None


def salt_login(http: HttpClient, master: Connection) -> str:
    """
    Log in to the Salt API and return the auth token.

    Args:
        http: HTTP client to send the request with.
        master: Salt connection object.

    Returns:
        The token issued by the Salt API.

    Raises:
        SaltApiError: If the response carries no token.
    """
    data = {
        "username": master.credentials.username,
        "password": master.credentials.password,
        "eauth": master.eauth,
    }
    logger.debug(f"Logging in to {master.url} as {master.credentials.username} ({master.eauth})")
    response = http.post(master.endpoint("login"), data)

    try:
        token = response["return"][0]["token"]
    except (KeyError, IndexError, TypeError) as e:
        raise SaltApiError(f"Salt API login to {master.url} returned no token") from e

    if not token:
        raise SaltApiError(f"Salt API login to {master.url} returned an empty token")

    return token


def connection(
    http: HttpClient,
    credential_store: CredentialStore,
    url: str,
    credentials_id: str = "salt",
    eauth: str = "pam",
) -> Connection:
    """
    Create a Salt connection and log in.

    Args:
        http: HTTP client used for the login request.
        credential_store: Store to resolve credentials_id with.
        url: Salt API server URL.
        credentials_id: Id of the credential store entry.
        eauth: External authentication backend.

    Returns:
        A connection holding a fresh auth token.
    """
    master = Connection(
        url=url,
        credentials=credential_store.get_credentials(credentials_id),
        credentials_id=credentials_id,
        eauth=eauth,
    )
    master.auth_token = salt_login(http, master)
    logger.info(f"Authenticated to Salt API at {url}")
    return master
