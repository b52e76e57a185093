"""Checking of Salt API responses for failed states."""

import logging

from ..exceptions import SaltApiError, SaltStateError

logger = logging.getLogger(__name__)


def iter_resources(node_output) -> list:
    """
    Return the resources contained in one node's output.

    State runs return a mapping of state ids to resources; render errors
    come back as a list of strings.
    """
    if isinstance(node_output, dict):
        return list(node_output.values())
    if isinstance(node_output, list):
        return list(node_output)
    return [node_output]


def is_failed(resource) -> bool:
    """Check if a single state resource reports failure."""
    if not isinstance(resource, dict):
        return True

    outcome = resource.get("result")
    if isinstance(outcome, str):
        return outcome != "true"
    return not outcome


def _report(message: str, fail_on_error: bool, error: Exception) -> None:
    if fail_on_error:
        raise error
    logger.error(message)


def check_result(result: dict, fail_on_error: bool = True) -> None:
    """
    Check a Salt API response for errors.

    Args:
        result: Parsed response of the Salt API.
        fail_on_error: Raise on the first failure instead of logging it.

    Raises:
        SaltApiError: If the response is empty or malformed.
        SaltStateError: If a state resource failed on a node.
    """
    if not isinstance(result, dict) or not isinstance(result.get("return"), list):
        message = f"Salt API returned malformed response: {result}"
        _report(message, fail_on_error, SaltApiError(message))
        return

    for entry in result["return"]:
        if not entry:
            message = f"Salt API returned empty response: {result}"
            _report(message, fail_on_error, SaltApiError(message))
            continue

        if not isinstance(entry, dict):
            message = f"Salt API returned unexpected response: {entry}"
            _report(message, fail_on_error, SaltApiError(message))
            continue

        for node, node_output in entry.items():
            for resource in iter_resources(node_output):
                if is_failed(resource):
                    message = f"Salt state on node {node} failed: {resource}. State output: {node_output}"
                    _report(message, fail_on_error, SaltStateError(message, node=node, resource=resource))
