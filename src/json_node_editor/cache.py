"""DocumentCache: LRU-backed cache of parsed authoritative documents.

Every save parses the authoritative document text before mutating it.  The
same text is typically parsed again and again while a user edits several
nodes in a row, so parsed trees are cached by their exact text.

Cached trees are shared and must be treated as read-only.  ``mutate`` takes
its own deep copy before writing, so the coordinator can hand a cached tree
straight to it.

Each ``DocumentCache`` instance maintains its own ``LRUCache``; there is no
class-level shared state.

Example::

    from json_node_editor.cache import DocumentCache

    cache = DocumentCache(max_size=8)
    doc = cache.parse('{"a": 1}')        # parsed
    same = cache.parse('{"a": 1}')       # served from memory
    assert doc is same
"""

from __future__ import annotations

from typing import Any

from cachetools import LRUCache

from json_node_editor.edit.codec import parse_json
from json_node_editor.errors import InvalidDocumentError

__all__ = ["DocumentCache"]


class DocumentCache:
    """LRU cache mapping document text to its parsed JSON value.

    Invalid documents are never cached; each attempt re-raises
    ``InvalidDocumentError``.  LRU eviction is silent.

    Args:
        max_size: Maximum number of parsed documents to hold.  Defaults to 32.
    """

    def __init__(self, max_size: int = 32) -> None:
        self._cache: LRUCache[str, Any] = LRUCache(maxsize=max_size)

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    def __contains__(self, text: object) -> bool:
        return text in self._cache

    def parse(self, text: str) -> Any:
        """Return the parsed value of ``text``, parsing only on a cache miss.

        Raises:
            InvalidDocumentError: If ``text`` is not valid JSON or nests too
                deeply to parse.
        """
        try:
            return self._cache[text]
        except KeyError:
            pass

        try:
            value = parse_json(text)
        except (ValueError, TypeError, RecursionError) as exc:
            raise InvalidDocumentError() from exc

        self._cache[text] = value
        return value

    def clear(self) -> None:
        self._cache.clear()
