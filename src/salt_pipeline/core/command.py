"""Salt API command dispatch."""

import logging
from dataclasses import dataclass

from ..exceptions import SaltApiError
from ..interfaces import HttpClient
from .connection import Connection

logger = logging.getLogger(__name__)

CLIENT_LOCAL = "local"
CLIENT_LOCAL_BATCH = "local_batch"
CLIENT_RUNNER = "runner"
CLIENT_WHEEL = "wheel"


@dataclass(frozen=True)
class Target:
    """Target specification, e.g. Target("I@openssh:server", "compound")."""

    expression: str
    type: str = "compound"

    @classmethod
    def coerce(cls, value: "Target | str | dict") -> "Target":
        """
        Build a Target from a Target, a plain string or an expression mapping.

        Plain strings are compound expressions. Mappings need an "expression"
        key and may carry a "type".

        Raises:
            TypeError: For any other value.
        """
        if isinstance(value, Target):
            return value
        if isinstance(value, str):
            return cls(expression=value)
        if isinstance(value, dict) and isinstance(value.get("expression"), str):
            return cls(expression=value["expression"], type=value.get("type") or "compound")
        raise TypeError(f"Invalid target: {value!r}")


def build_payload(
    client: str,
    target: Target | str,
    function: str,
    batch: bool | None = None,
    args: list | None = None,
    kwargs: dict | None = None,
) -> dict:
    """
    Build the request body for a Salt API call.

    Args:
        client: Client type (local, local_batch, runner, wheel).
        target: Target specification.
        function: Function to execute (e.g. "state.sls").
        batch: Run through the batch interface when True.
        args: Positional arguments to the function.
        kwargs: Keyword arguments to the function.

    Returns:
        The payload dictionary.
    """
    target = Target.coerce(target)
    data = {
        "tgt": target.expression,
        "fun": function,
        "client": client,
        "expr_form": target.type,
    }

    if batch is True:
        data["batch"] = "local_batch"

    if args:
        data["arg"] = args

    if kwargs:
        data["kwarg"] = kwargs

    return data


def run_salt_command(
    http: HttpClient,
    master: Connection,
    client: str,
    target: Target | str,
    function: str,
    batch: bool | None = None,
    args: list | None = None,
    kwargs: dict | None = None,
) -> dict:
    """
    Run an action using the Salt API.

    Args:
        http: HTTP client to send the request with.
        master: Authenticated Salt connection.
        client: Client type.
        target: Target specification.
        function: Function to execute.
        batch: Run through the batch interface when True.
        args: Positional arguments to the function.
        kwargs: Keyword arguments to the function.

    Returns:
        The parsed Salt API response.

    Raises:
        SaltApiError: If the connection has no auth token.
    """
    if not master.is_authenticated():
        raise SaltApiError(f"Not logged in to Salt API at {master.url}")

    data = build_payload(client, target, function, batch=batch, args=args, kwargs=kwargs)
    headers = {
        "X-Auth-Token": master.auth_token,
    }

    logger.debug(f"Calling {function} ({client}) on {data['tgt']}")
    return http.post(master.endpoint(), data, headers)
