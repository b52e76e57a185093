"""Abstract interfaces for salt-pipeline collaborators."""

from .credential_store import CredentialStore, Credentials
from .http_client import HttpClient

__all__ = ["CredentialStore", "Credentials", "HttpClient"]
