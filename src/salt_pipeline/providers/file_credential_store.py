"""YAML file-backed credential store."""

from pathlib import Path

import yaml

from ..exceptions import CredentialsNotFoundError
from ..interfaces import CredentialStore, Credentials


class FileCredentialStore(CredentialStore):
    """Credential store that reads a YAML file.

    The file maps credential ids to username/password pairs::

        salt:
          username: jenkins
          password: secret
    """

    def __init__(self, path: str | Path):
        """
        Initialize with the path to the credentials file.

        Args:
            path: Path to the YAML credentials file.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ValueError: If the file isn't valid YAML or a mapping of ids to entries.
        """
        self.path = Path(path).expanduser()
        if not self.path.is_file():
            raise FileNotFoundError(f"Credentials file not found: {path}")

        with open(self.path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in credentials file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Credentials file must contain a mapping: {path}")

        self._entries = data

    def get_credentials(self, credentials_id: str) -> Credentials:
        """
        Look up credentials by id.

        Args:
            credentials_id: Key of the entry in the file.

        Returns:
            The stored credentials.

        Raises:
            CredentialsNotFoundError: If the id is missing.
            ValueError: If the entry lacks a username or password.
        """
        entry = self._entries.get(credentials_id)
        if entry is None:
            raise CredentialsNotFoundError(credentials_id)

        if not isinstance(entry, dict) or "username" not in entry or "password" not in entry:
            raise ValueError(f"Credentials entry {credentials_id!r} needs username and password")

        return Credentials(username=str(entry["username"]), password=str(entry["password"]))
