"""Path resolution and copy-then-mutate updates on parsed JSON documents.

``mutate`` never touches its input.  It deep-copies the document before the
first write, walks the path, and either returns the updated copy or raises
``TypeMismatchError``; a failed call therefore leaves every holder of the
original document with exactly what they had.

Traversal rules:

- A ``NameSegment`` applies only to a dict.  A missing property on the way
  down is created as ``{}`` (auto-vivified); at the last segment it is set.
- An ``IndexSegment`` applies only to a list and the index must already
  exist.  Arrays are never extended, on the way down or at the last segment.
"""

from __future__ import annotations

import copy
from typing import Any

from json_node_editor.errors import PathNotFoundError, TypeMismatchError
from json_node_editor.path import IndexSegment, NameSegment, PathAddress

__all__ = ["mutate", "resolve"]


def _descend(cursor: Any, seg: NameSegment | IndexSegment, path: PathAddress) -> Any:
    """Step one intermediate segment down, auto-vivifying missing properties."""
    if isinstance(seg, NameSegment):
        if not isinstance(cursor, dict):
            raise TypeMismatchError(path, seg)
        if seg.name not in cursor:
            cursor[seg.name] = {}
        return cursor[seg.name]

    if not isinstance(cursor, list) or seg.index >= len(cursor):
        raise TypeMismatchError(path, seg)
    return cursor[seg.index]


def mutate(document: Any, path: PathAddress, new_value: Any) -> Any:
    """Return a copy of ``document`` with the value at ``path`` replaced.

    Args:
        document:  Parsed JSON value.  Never modified.
        path:      Location to write.  The empty path replaces the document.
        new_value: Parsed JSON value to store.  Copied into the result.

    Returns:
        The updated document (a new object; shares nothing with the inputs).

    Raises:
        TypeMismatchError: If a segment's kind disagrees with the value found
            at that position, or an index is out of range.
    """
    value = copy.deepcopy(new_value)
    if path.is_root:
        return value

    root = copy.deepcopy(document)
    cursor = root
    for seg in path.segments[:-1]:
        cursor = _descend(cursor, seg, path)

    last = path.segments[-1]
    if isinstance(last, NameSegment):
        if not isinstance(cursor, dict):
            raise TypeMismatchError(path, last)
        cursor[last.name] = value
    else:
        if not isinstance(cursor, list) or last.index >= len(cursor):
            raise TypeMismatchError(path, last)
        cursor[last.index] = value

    return root


def resolve(document: Any, path: PathAddress) -> Any:
    """Return the value at ``path`` without copying or creating anything.

    Raises:
        TypeMismatchError: If a segment's kind disagrees with the value found.
        PathNotFoundError: If a property or index does not exist.
    """
    cursor = document
    for seg in path:
        if isinstance(seg, NameSegment):
            if not isinstance(cursor, dict):
                raise TypeMismatchError(path, seg)
            if seg.name not in cursor:
                raise PathNotFoundError(path, seg)
            cursor = cursor[seg.name]
        elif isinstance(seg, IndexSegment):
            if not isinstance(cursor, list):
                raise TypeMismatchError(path, seg)
            if seg.index >= len(cursor):
                raise PathNotFoundError(path, seg)
            cursor = cursor[seg.index]
    return cursor
