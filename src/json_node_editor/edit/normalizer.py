"""Canonical JSON text for a graph node's rows.

The canonical text is what the panel displays read-only and what seeds the
editor when editing starts::

    rows empty or None           -> "{}"
    one row without a key        -> the row's value as a JSON scalar literal
    otherwise                    -> {key: value} over PRIMITIVE rows with a key,
                                    in row order, indented

ARRAY and OBJECT rows are left out: their contents are shown by their own
child nodes, not inline.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from json_node_editor.edit.config import EditorConfig
from json_node_editor.graph.nodes import NodeRow, NodeView, RowType

__all__ = ["normalize_node", "normalize_node_rows"]

_STRUCTURAL = (RowType.ARRAY, RowType.OBJECT)


def _scalar_literal(value: Any, config: EditorConfig) -> str:
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=config.ensure_ascii)
    # bool and None also go through json so they render as true/false/null
    return json.dumps(value)


def normalize_node_rows(
    rows: Sequence[NodeRow] | None,
    config: EditorConfig | None = None,
) -> str:
    """Render a node's rows as canonical JSON text.

    Args:
        rows:   The node's rows; None is treated as empty.
        config: Serialization settings.  Defaults to ``EditorConfig()``.

    Returns:
        Canonical JSON text.
    """
    if not rows:
        return "{}"
    cfg = config if config is not None else EditorConfig()

    if len(rows) == 1 and rows[0].key is None:
        return _scalar_literal(rows[0].value, cfg)

    obj: dict[str, Any] = {}
    for row in rows:
        if row.type in _STRUCTURAL or row.key is None:
            continue
        obj[row.key] = row.value
    return json.dumps(obj, indent=cfg.indent, ensure_ascii=cfg.ensure_ascii)


def normalize_node(
    node: NodeView | None,
    config: EditorConfig | None = None,
) -> str:
    """Render a node (or no node) as canonical JSON text."""
    return normalize_node_rows(node.rows if node is not None else None, config)
