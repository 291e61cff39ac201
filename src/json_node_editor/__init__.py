"""JSON node editor - path-addressed edit engine for JSON graph views."""

from __future__ import annotations

from json_node_editor.api import (
    apply_edit,
    build_nodes,
    find_node,
    json_path_string,
    mutate,
    normalize_node,
)
from json_node_editor.coordinator import EditState, SyncCoordinator
from json_node_editor.edit.config import EditorConfig, ParseMode
from json_node_editor.errors import (
    EditStateError,
    InvalidDocumentError,
    InvalidEditError,
    NodeEditError,
    PathNotFoundError,
    SerializationFailureError,
    TypeMismatchError,
)
from json_node_editor.graph import GraphBuilder, NodeRow, NodeView, RowType
from json_node_editor.path import IndexSegment, NameSegment, PathAddress
from json_node_editor.result import SaveResult
from json_node_editor.store import InMemoryDocumentStore, InMemoryGraphStore

__version__: str = "0.1.0"
__all__: list[str] = [
    "EditState",
    "EditStateError",
    "EditorConfig",
    "GraphBuilder",
    "InMemoryDocumentStore",
    "InMemoryGraphStore",
    "IndexSegment",
    "InvalidDocumentError",
    "InvalidEditError",
    "NameSegment",
    "NodeEditError",
    "NodeRow",
    "NodeView",
    "ParseMode",
    "PathAddress",
    "PathNotFoundError",
    "RowType",
    "SaveResult",
    "SerializationFailureError",
    "SyncCoordinator",
    "TypeMismatchError",
    "apply_edit",
    "build_nodes",
    "find_node",
    "json_path_string",
    "mutate",
    "normalize_node",
]
