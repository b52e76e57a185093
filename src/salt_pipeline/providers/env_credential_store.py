"""Environment variable credential store."""

import os
import re

from ..exceptions import CredentialsNotFoundError
from ..interfaces import CredentialStore, Credentials


class EnvCredentialStore(CredentialStore):
    """Credential store that reads <PREFIX>_<ID>_USERNAME / _PASSWORD variables."""

    def __init__(self, prefix: str = "SALT_PIPELINE", environ: dict[str, str] | None = None):
        self.prefix = prefix
        self._environ = environ if environ is not None else os.environ

    def _variable(self, credentials_id: str, suffix: str) -> str:
        key = re.sub(r"[^A-Za-z0-9]", "_", credentials_id).upper()
        return f"{self.prefix}_{key}_{suffix}"

    def get_credentials(self, credentials_id: str) -> Credentials:
        username = self._environ.get(self._variable(credentials_id, "USERNAME"))
        password = self._environ.get(self._variable(credentials_id, "PASSWORD"))

        if username is None or password is None:
            raise CredentialsNotFoundError(credentials_id)

        return Credentials(username=username, password=password)
