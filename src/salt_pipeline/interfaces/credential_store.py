"""Abstract interface for credential stores."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """A username/password pair used to log in to the Salt API."""

    username: str
    password: str = field(repr=False)


class CredentialStore(ABC):
    """Abstract interface for looking up credentials by id."""

    @abstractmethod
    def get_credentials(self, credentials_id: str) -> Credentials:
        """Return the credentials stored under an id.

        Raises:
            CredentialsNotFoundError: If the id is unknown.
        """
        pass
