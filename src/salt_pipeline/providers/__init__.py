"""Credential store implementations."""

from .env_credential_store import EnvCredentialStore
from .file_credential_store import FileCredentialStore

__all__ = ["EnvCredentialStore", "FileCredentialStore"]
