"""PathAddress: typed, ordered location of a value inside a JSON tree.

A path is a sequence of tagged segments.  A ``NameSegment`` addresses a
property of a JSON object; an ``IndexSegment`` addresses an element of a JSON
array.  The tag is part of the segment's identity, so ``NameSegment("0")``
and ``IndexSegment(0)`` are different segments and the paths containing them
are never equal.

Two display/interchange forms are supported:

- JSONPath-style strings as shown in the editor panel: ``$["customer"][0]``
  (root is ``$``).
- JSON Pointer (RFC 6901): ``/customer/0`` (root is ``""``).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["IndexSegment", "NameSegment", "PathAddress", "Segment"]


@dataclass(frozen=True, slots=True)
class NameSegment:
    """Property-name segment; only ever applied against a JSON object."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            msg = f"name segment must be a str, got {type(self.name)!r}"
            raise TypeError(msg)


@dataclass(frozen=True, slots=True)
class IndexSegment:
    """Array-index segment; only ever applied against a JSON array."""

    index: int

    def __post_init__(self) -> None:
        # bool subclasses int; True must not silently become index 1
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            msg = f"index segment must be an int, got {type(self.index)!r}"
            raise TypeError(msg)
        if self.index < 0:
            msg = f"index segment must be >= 0, got {self.index}"
            raise ValueError(msg)


Segment = NameSegment | IndexSegment


def _to_segment(part: Any) -> Segment:
    if isinstance(part, (NameSegment, IndexSegment)):
        return part
    if isinstance(part, str):
        return NameSegment(part)
    if isinstance(part, int) and not isinstance(part, bool):
        return IndexSegment(part)
    msg = f"path part must be str or int, got {type(part)!r}"
    raise TypeError(msg)


def _escape_pointer_token(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def _unescape_pointer_token(token: str) -> str:
    return token.replace("~1", "/").replace("~0", "~")


def _is_array_index_token(token: str) -> bool:
    return token == "0" or (token.isdigit() and token.isascii() and token[0] != "0")


@dataclass(frozen=True, slots=True)
class PathAddress:
    """Immutable ordered sequence of segments.

    Equality and hashing are value-based over the segment tuple, which makes
    a ``PathAddress`` usable as a lookup key when re-selecting a node in a
    freshly rebuilt node set.

    Example::

        path = PathAddress.of("customer", 0, "name")
        path.to_jsonpath()   # '$["customer"][0]["name"]'
        path.to_pointer()    # '/customer/0/name'
    """

    segments: tuple[Segment, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of segments but store a tuple so hashing works.
        segments = tuple(self.segments)
        for seg in segments:
            if not isinstance(seg, (NameSegment, IndexSegment)):
                msg = f"expected NameSegment or IndexSegment, got {type(seg)!r}"
                raise TypeError(msg)
        object.__setattr__(self, "segments", segments)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def root(cls) -> PathAddress:
        """The empty path, addressing the whole document."""
        return cls(())

    @classmethod
    def of(cls, *parts: Any) -> PathAddress:
        """Build a path from raw parts: ``str`` -> name, ``int`` -> index.

        Segment instances are passed through unchanged.

        Raises:
            TypeError: If a part is neither str, int nor a segment.
        """
        return cls(tuple(_to_segment(p) for p in parts))

    @classmethod
    def from_pointer(cls, pointer: str, document: Any = None) -> PathAddress:
        """Parse an RFC 6901 JSON Pointer.

        Pointer tokens are untyped text.  When ``document`` is given, a token
        becomes an ``IndexSegment`` only where the container reached so far is
        a list; elsewhere it is a ``NameSegment``.  Without a document, any
        canonical array-index token (``0`` or digits without a leading zero)
        becomes an ``IndexSegment``.

        Args:
            pointer:  Pointer text, ``""`` for the root.
            document: Optional parsed JSON used to disambiguate digit tokens.

        Returns:
            The parsed ``PathAddress``.

        Raises:
            ValueError: If a non-empty pointer does not start with ``/``.
        """
        if pointer == "":
            return cls.root()
        if not pointer.startswith("/"):
            msg = f"JSON Pointer must be empty or start with '/', got {pointer!r}"
            raise ValueError(msg)

        segments: list[Segment] = []
        cursor = document
        for raw in pointer[1:].split("/"):
            token = _unescape_pointer_token(raw)
            if document is not None:
                if isinstance(cursor, list) and _is_array_index_token(token):
                    idx = int(token)
                    segments.append(IndexSegment(idx))
                    cursor = cursor[idx] if idx < len(cursor) else None
                else:
                    segments.append(NameSegment(token))
                    cursor = cursor.get(token) if isinstance(cursor, dict) else None
            elif _is_array_index_token(token):
                segments.append(IndexSegment(int(token)))
            else:
                segments.append(NameSegment(token))
        return cls(tuple(segments))

    # ------------------------------------------------------------------
    # Sequence behaviour
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __getitem__(self, item: int) -> Segment:
        return self.segments[item]

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def parent(self) -> PathAddress:
        """Path of the enclosing container; the root is its own parent."""
        return PathAddress(self.segments[:-1])

    def child(self, part: Any) -> PathAddress:
        """Return a new path with ``part`` appended."""
        return PathAddress((*self.segments, _to_segment(part)))

    def parts(self) -> list[str | int]:
        """Untagged parts, e.g. ``["customer", 0]``."""
        return [s.name if isinstance(s, NameSegment) else s.index for s in self]

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def to_jsonpath(self) -> str:
        """Format as the editor's JSON Path string, e.g. ``$["customer"][0]``.

        Names are wrapped in double quotes as-is; they are not escaped.
        """
        if self.is_root:
            return "$"
        rendered = [
            f'"{s.name}"' if isinstance(s, NameSegment) else str(s.index)
            for s in self
        ]
        return "$[" + "][".join(rendered) + "]"

    def to_pointer(self) -> str:
        """Format as an RFC 6901 JSON Pointer, e.g. ``/customer/0``."""
        return "".join(
            "/" + _escape_pointer_token(s.name)
            if isinstance(s, NameSegment)
            else f"/{s.index}"
            for s in self
        )

    def __str__(self) -> str:
        return self.to_jsonpath()
