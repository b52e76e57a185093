"""Salt API pipeline helpers."""

from .client import SaltClient
from .core import Connection, Target
from .exceptions import (
    CredentialsNotFoundError,
    SaltApiError,
    SaltPipelineError,
    SaltStateError,
)

__version__ = "0.1.0"

__all__ = [
    "SaltClient",
    "Connection",
    "Target",
    "CredentialsNotFoundError",
    "SaltApiError",
    "SaltPipelineError",
    "SaltStateError",
]
