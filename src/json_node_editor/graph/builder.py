"""GraphBuilder: converts any valid JSON value into a flat list of NodeViews.

This is the reference graph-rebuild collaborator.  It walks the document
depth-first and emits one node per displayable location:

- Every JSON object becomes a node.  Its rows list all of its properties in
  key order: scalars inline as PRIMITIVE rows, nested arrays and objects as
  ARRAY/OBJECT rows whose value is the child count.
- Every scalar that sits directly in an array (or is the whole document)
  becomes a scalar node with a single keyless row.
- Arrays produce no node of their own; each element is visited at
  ``path + [index]``.

Paths are ``PathAddress`` values built during traversal; the root is the
empty path.  Node ids are assigned sequentially per build.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from json_node_editor.graph.nodes import NodeRow, NodeView, RowType
from json_node_editor.path import PathAddress

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None

_SCALAR_TYPES = (str, int, float, bool)


def _row_for(key: str, value: Any) -> NodeRow:
    if isinstance(value, dict):
        return NodeRow(key=key, value=len(value), type=RowType.OBJECT)
    if isinstance(value, list):
        return NodeRow(key=key, value=len(value), type=RowType.ARRAY)
    return NodeRow(key=key, value=value, type=RowType.PRIMITIVE)


@dataclass
class GraphBuilder:
    """Converts a JSON value into the node set displayed by the graph.

    Example::

        builder = GraphBuilder()
        nodes = builder.build({"name": "Ada", "tags": ["x"]})
        # nodes[0]: rows (name="Ada" primitive, tags=1 array), path $
        # nodes[1]: scalar "x", path $["tags"][0]
    """

    def build(self, value: JsonValue) -> list[NodeView]:
        """Convert a JSON value into a list of NodeViews in depth-first order.

        Args:
            value: Any valid JSON value (dict, list, str, int, float, bool, None).

        Returns:
            The node set; empty for an empty top-level array.

        Raises:
            TypeError: If value (or anything nested in it) is not a JSON type.
        """
        nodes: list[NodeView] = []
        self._visit(value, PathAddress.root(), nodes)
        return nodes

    def _visit(self, value: Any, path: PathAddress, nodes: list[NodeView]) -> None:
        if isinstance(value, dict):
            self._visit_object(value, path, nodes)
            return

        if isinstance(value, list):
            for idx, item in enumerate(value):
                self._visit(item, path.child(idx), nodes)
            return

        if value is None or isinstance(value, _SCALAR_TYPES):
            nodes.append(
                NodeView(
                    id=self._next_id(nodes),
                    rows=(NodeRow(key=None, value=value),),
                    path=path,
                )
            )
            return

        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")

    def _visit_object(
        self, obj: dict[str, Any], path: PathAddress, nodes: list[NodeView]
    ) -> None:
        nodes.append(
            NodeView(
                id=self._next_id(nodes),
                rows=tuple(_row_for(key, val) for key, val in obj.items()),
                path=path,
            )
        )
        for key, val in obj.items():
            if isinstance(val, (dict, list)):
                self._visit(val, path.child(key), nodes)
            elif not (val is None or isinstance(val, _SCALAR_TYPES)):
                raise TypeError(f"Unsupported JSON value type: {type(val)!r}")

    @staticmethod
    def _next_id(nodes: list[NodeView]) -> str:
        return str(len(nodes) + 1)
