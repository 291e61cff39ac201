"""NodeView dataclass and RowType StrEnum for the graph's node representation.

A graph node is a denormalized view over one location of the JSON document:
an ordered list of rows, each a (key, value, type) triple, plus the
``PathAddress`` of the location the rows describe.  Node views are produced
fresh by the graph builder every time the document changes; the edit engine
only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from json_node_editor.path import PathAddress


class RowType(StrEnum):
    """Coarse type tag of a node row.

    StrEnum values are the lowercased member names:
    - PRIMITIVE -> "primitive" : string, number, bool or null, shown inline
    - ARRAY     -> "array"     : JSON array, rendered by its own child nodes
    - OBJECT    -> "object"    : JSON object, rendered by its own child node
    """

    PRIMITIVE = auto()
    ARRAY = auto()
    OBJECT = auto()


@dataclass(frozen=True, slots=True)
class NodeRow:
    """One displayed field of a node.

    Attributes:
        key:   Property name, or None for the single row of a scalar node.
        value: The scalar value for PRIMITIVE rows; a structural placeholder
               (the child count) for ARRAY and OBJECT rows.
        type:  Coarse type tag (see RowType).
    """

    key: str | None
    value: Any
    type: RowType = RowType.PRIMITIVE


@dataclass(frozen=True, slots=True)
class NodeView:
    """A graph node: its rows and the location they were read from.

    Zero rows represent an empty object.  Exactly one row without a key
    represents a scalar node (the node is itself the value, not a container).

    Attributes:
        id:   Identifier assigned by the builder; stable only within one build.
        rows: Ordered rows, in the document's key order.
        path: Location of this node's value in the document.
    """

    id: str
    rows: tuple[NodeRow, ...] = field(default_factory=tuple)
    path: PathAddress = field(default_factory=PathAddress.root)

    @property
    def is_scalar(self) -> bool:
        return len(self.rows) == 1 and self.rows[0].key is None
