"""Exception hierarchy for the node edit engine.

Every failure of a single save action is a ``NodeEditError``.  Each one
carries a user-facing ``message`` suitable for display next to the editor,
and each also subclasses the closest builtin so callers that only know
``ValueError``/``TypeError`` still catch it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_node_editor.path import PathAddress, Segment

__all__ = [
    "EditStateError",
    "InvalidDocumentError",
    "InvalidEditError",
    "NodeEditError",
    "PathNotFoundError",
    "SerializationFailureError",
    "TypeMismatchError",
]


class NodeEditError(Exception):
    """Base class for all recoverable edit failures."""

    default_message = "Failed to apply change."

    def __init__(self, message: str | None = None) -> None:
        self.message = message if message is not None else self.default_message
        super().__init__(self.message)


class InvalidDocumentError(NodeEditError, ValueError):
    """The authoritative document text is not valid JSON."""

    default_message = "Current JSON is invalid; cannot apply change."


class InvalidEditError(NodeEditError, ValueError):
    """The edited text is not valid JSON and strict parsing is enabled."""

    default_message = "Edited text is not valid JSON."


class _PathError(NodeEditError):
    def __init__(
        self,
        path: PathAddress,
        segment: Segment | None = None,
        message: str | None = None,
    ) -> None:
        self.path = path
        self.segment = segment
        super().__init__(message)

    def __str__(self) -> str:
        if self.segment is None:
            return f"{self.message} (path {self.path.to_jsonpath()})"
        return f"{self.message} (path {self.path.to_jsonpath()}, at {self.segment!r})"


class TypeMismatchError(_PathError, TypeError):
    """Segment kind disagrees with the value found, or index out of range."""

    default_message = "Failed to set value at path (type mismatch)."


class PathNotFoundError(_PathError, LookupError):
    """A read-only lookup reached a property or index that does not exist."""

    default_message = "No value at path."


class SerializationFailureError(NodeEditError):
    """The mutated document could not be serialized back to text."""

    default_message = "Failed to save changes."


class EditStateError(NodeEditError, RuntimeError):
    """An edit-surface action was requested from the wrong state."""

    default_message = "Action not allowed in the current edit state."
