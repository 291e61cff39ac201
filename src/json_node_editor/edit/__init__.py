"""Edit engine subpackage.

Usage::

    from json_node_editor.edit import EditorConfig, mutate, normalize_node
    from json_node_editor.path import PathAddress

    doc = mutate({"a": {"b": 1}}, PathAddress.of("a", "b"), 2)
    # {"a": {"b": 2}}
"""

from json_node_editor.edit.codec import parse_json
from json_node_editor.edit.config import EditorConfig, ParseMode
from json_node_editor.edit.mutator import mutate, resolve
from json_node_editor.edit.normalizer import normalize_node, normalize_node_rows

__all__ = [
    "EditorConfig",
    "ParseMode",
    "mutate",
    "normalize_node",
    "normalize_node_rows",
    "parse_json",
    "resolve",
]
