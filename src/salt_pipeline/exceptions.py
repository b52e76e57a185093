"""Exceptions raised by salt-pipeline."""


class SaltPipelineError(Exception):
    """Base exception for salt-pipeline errors."""

    pass


class SaltApiError(SaltPipelineError):
    """Raised when the Salt API cannot be reached or answers unexpectedly."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SaltStateError(SaltPipelineError):
    """Raised when a state run reports a failed resource."""

    def __init__(self, message: str, node: str | None = None, resource=None):
        super().__init__(message)
        self.node = node
        self.resource = resource


class CredentialsNotFoundError(SaltPipelineError, KeyError):
    """Raised when a credential store has no entry for an id."""

    def __init__(self, credentials_id: str):
        super().__init__(f"Credentials not found: {credentials_id}")
        self.credentials_id = credentials_id

    def __str__(self) -> str:
        return self.args[0]
