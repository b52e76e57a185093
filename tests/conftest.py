"""Pytest configuration and fixtures."""

import pytest

from salt_pipeline.core import Connection
from salt_pipeline.exceptions import CredentialsNotFoundError
from salt_pipeline.interfaces import Credentials


class FakeHttpClient:
    """Records posts and answers them from a queue of responses."""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.requests = []

    def post(self, url, data, headers=None):
        self.requests.append((url, data, headers))
        if not self.responses:
            return {"return": [{}]}
        return self.responses.pop(0)


class FakeCredentialStore:
    """In-memory credential store."""

    def __init__(self, entries):
        self.entries = entries

    def get_credentials(self, credentials_id):
        if credentials_id not in self.entries:
            raise CredentialsNotFoundError(credentials_id)
        return self.entries[credentials_id]


@pytest.fixture
def credentials():
    return Credentials(username="jenkins", password="s3cret")


@pytest.fixture
def credential_store(credentials):
    return FakeCredentialStore({"salt": credentials})


@pytest.fixture
def login_response():
    return {"return": [{"token": "abc123", "user": "jenkins", "eauth": "pam"}]}


@pytest.fixture
def master(credentials):
    """An already authenticated connection."""
    return Connection(
        url="https://salt.example.com:8000",
        credentials=credentials,
        auth_token="abc123",
    )


@pytest.fixture
def state_result():
    """A state.sls response with one unchanged, one changed resource per node."""
    return {
        "return": [
            {
                "ctl01": {
                    "pkg_|-ntp_|-ntp_|-installed": {
                        "result": True,
                        "changes": {},
                        "comment": "All specified packages are already installed",
                    },
                    "service_|-ntp_|-ntp_|-running": {
                        "result": True,
                        "changes": {"ntp": True},
                        "comment": "Service ntp has been enabled, and is running",
                    },
                },
                "ctl02": {
                    "pkg_|-ntp_|-ntp_|-installed": {
                        "result": True,
                        "changes": {},
                        "comment": "All specified packages are already installed",
                    },
                },
            }
        ]
    }


@pytest.fixture
def failed_state_result():
    return {
        "return": [
            {
                "cmp01": {
                    "file_|-motd_|-/etc/motd_|-managed": {
                        "result": False,
                        "changes": {},
                        "comment": "Source file salt://motd not found",
                    },
                },
            }
        ]
    }


@pytest.fixture
def http():
    """Fake HTTP client; append to http.responses to script replies."""
    return FakeHttpClient()
