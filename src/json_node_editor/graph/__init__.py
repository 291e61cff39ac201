"""Graph subpackage: the node representation read by the edit engine.

Re-exports the public API for the graph module:
- NodeView: one graph node (rows + path)
- NodeRow: a single (key, value, type) row
- RowType: StrEnum of the three row kinds (PRIMITIVE, ARRAY, OBJECT)
- GraphBuilder: converts any valid JSON value into a list of NodeViews
"""

from json_node_editor.graph.builder import GraphBuilder
from json_node_editor.graph.nodes import NodeRow, NodeView, RowType

__all__ = ["GraphBuilder", "NodeRow", "NodeView", "RowType"]
