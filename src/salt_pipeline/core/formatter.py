"""Human-friendly rendering of Salt API responses."""

import json
import os
import sys
from typing import TextIO

TRUE_STRINGS = ("true", "y", "1")


def _reads_true(value) -> bool:
    """Interpret a state result the way a string-to-boolean cast would."""
    return str(value).strip().lower() in TRUE_STRINGS


def _dump(value) -> str:
    return json.dumps(value, indent=4, default=str)


def _entries(result) -> list[dict]:
    """Return the per-minion mappings of a response, skipping anything malformed."""
    if not isinstance(result, dict) or not isinstance(result.get("return"), list):
        return []
    return [entry for entry in result["return"] if isinstance(entry, dict)]


def _render(out: dict, expand_newlines: bool) -> str:
    lines = []
    for node, value in out.items():
        if value:
            body = _dump(value)
            if expand_newlines:
                body = body.replace("\\n", os.linesep)
            lines.append(f"Node {node} changes:")
            lines.append(body)
        else:
            lines.append(f"No changes for node {node}")
    return "\n".join(lines)


def format_state_result(result: dict, only_changes: bool = True) -> str:
    """
    Render a state run result.

    Args:
        result: Parsed response of the Salt API.
        only_changes: If True, keep only failed or changed resources.

    Returns:
        One block per node.
    """
    out = {}
    for entry in _entries(result):
        for node, node_output in entry.items():
            if not isinstance(node_output, dict):
                # render errors and other plain output are kept whole
                out[node] = node_output
                continue

            kept = {}
            for state_id, resource in node_output.items():
                if not isinstance(resource, dict):
                    kept[state_id] = resource
                elif (
                    not _reads_true(resource.get("result"))
                    or resource.get("changes")
                    or not only_changes
                ):
                    kept[state_id] = resource
            out[node] = kept

    return _render(out, expand_newlines=True)


def format_command_result(result: dict) -> str:
    """Render a remote execution result, one block per node."""
    out = {}
    for entry in _entries(result):
        for node, node_output in entry.items():
            out[node] = node_output

    return _render(out, expand_newlines=False)


def print_salt_state_result(result: dict, only_changes: bool = True, stream: TextIO | None = None) -> None:
    """Print a state run result in human-friendly form."""
    print(format_state_result(result, only_changes=only_changes), file=stream or sys.stdout)


def print_salt_command_result(result: dict, stream: TextIO | None = None) -> None:
    """Print a remote execution result in human-friendly form."""
    print(format_command_result(result), file=stream or sys.stdout)
