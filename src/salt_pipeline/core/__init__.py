"""Core components for salt-pipeline."""

from .command import (
    CLIENT_LOCAL,
    CLIENT_LOCAL_BATCH,
    CLIENT_RUNNER,
    CLIENT_WHEEL,
    Target,
    build_payload,
    run_salt_command,
)
from .connection import Connection, connection, salt_login
from .formatter import (
    format_command_result,
    format_state_result,
    print_salt_command_result,
    print_salt_state_result,
)
from .result import check_result

__all__ = [
    "CLIENT_LOCAL",
    "CLIENT_LOCAL_BATCH",
    "CLIENT_RUNNER",
    "CLIENT_WHEEL",
    "Target",
    "build_payload",
    "run_salt_command",
    "Connection",
    "connection",
    "salt_login",
    "format_command_result",
    "format_state_result",
    "print_salt_command_result",
    "print_salt_state_result",
    "check_result",
]
