"""SaveResult dataclass for the outcome of a save action.

This module provides the result type returned by ``SyncCoordinator.save()``.
"""

from __future__ import annotations

from dataclasses import dataclass

from json_node_editor.errors import NodeEditError
from json_node_editor.path import PathAddress

__all__ = ["SaveResult"]


@dataclass(frozen=True, slots=True)
class SaveResult:
    """Outcome of one save action.

    Attributes:
        path: Path of the node the edit was applied to.
        document_text: The committed document text on success; None on failure.
        error: The failure on error; None on success.
    """

    path: PathAddress
    document_text: str | None = None
    error: NodeEditError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str | None:
        """User-facing error message, or None on success."""
        return self.error.message if self.error is not None else None
