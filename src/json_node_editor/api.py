"""Public API functions for json-node-editor.

Stateless entry points for hosts that hold their own document and node
state and only need the engine.  None of them keep state between calls.
"""

from __future__ import annotations

from typing import Any

from json_node_editor.coordinator import apply_edit as _apply_edit
from json_node_editor.edit.config import EditorConfig
from json_node_editor.edit.mutator import mutate as _mutate
from json_node_editor.edit.normalizer import normalize_node as _normalize_node
from json_node_editor.graph.builder import GraphBuilder
from json_node_editor.graph.nodes import NodeView
from json_node_editor.path import PathAddress

__all__ = [
    "apply_edit",
    "build_nodes",
    "find_node",
    "json_path_string",
    "mutate",
    "normalize_node",
]


def _as_path(
    path: PathAddress | list[str | int] | tuple[str | int, ...],
) -> PathAddress:
    if isinstance(path, PathAddress):
        return path
    return PathAddress.of(*path)


def normalize_node(node: NodeView | None, config: EditorConfig | None = None) -> str:
    """Return the canonical JSON text of ``node`` (``"{}"`` for None)."""
    return _normalize_node(node, config)


def mutate(
    document: Any,
    path: PathAddress | list[str | int] | tuple[str | int, ...],
    new_value: Any,
) -> Any:
    """Return a copy of ``document`` with ``new_value`` stored at ``path``.

    Args:
        document:  Parsed JSON value.  Never modified.
        path:      A ``PathAddress`` or raw parts (``str`` name, ``int`` index).
        new_value: Parsed JSON value to store.

    Raises:
        TypeMismatchError: If the path does not fit the document.
    """
    return _mutate(document, _as_path(path), new_value)


def apply_edit(
    document_text: str,
    path: PathAddress | list[str | int] | tuple[str | int, ...],
    edited_text: str,
    config: EditorConfig | None = None,
) -> str:
    """Apply raw edited text at ``path`` of a JSON document text.

    Returns:
        The new document text, serialized per ``config``.

    Raises:
        InvalidDocumentError, InvalidEditError, TypeMismatchError,
        SerializationFailureError: see ``json_node_editor.errors``.
    """
    return _apply_edit(document_text, _as_path(path), edited_text, config)


def build_nodes(document: Any) -> list[NodeView]:
    """Build the graph node set for a parsed JSON document."""
    return GraphBuilder().build(document)


def find_node(
    nodes: list[NodeView],
    path: PathAddress | list[str | int] | tuple[str | int, ...],
) -> NodeView | None:
    """Return the node whose path equals ``path``, or None."""
    target = _as_path(path)
    return next((n for n in nodes if n.path == target), None)


def json_path_string(
    path: PathAddress | list[str | int] | tuple[str | int, ...] | None,
) -> str:
    """Format a path as ``$["customer"][0]``; None and the root give ``$``."""
    if path is None:
        return "$"
    return _as_path(path).to_jsonpath()
