"""SyncCoordinator: orchestrates the edit-and-commit cycle of the node panel.

This is the wiring layer between the stores and the pure edit engine.

Architecture:
- ``apply_edit()`` is the pure part of a save: parse the authoritative text,
  parse the edited text, mutate a copy at the node's path, serialize.  Every
  failure surfaces as a typed ``NodeEditError``; nothing is committed.
- ``SyncCoordinator.save()`` runs ``apply_edit()`` and, on success, commits
  the new text through ``DocumentStore.set_document``.  The commit makes the
  graph store rebuild its node set.
- Selection is tracked by path, not by object.  Before committing, the
  coordinator asks the graph store for ``next_rebuild()`` and re-selects the
  node with an equal path once that future resolves, or clears the selection
  if the path no longer exists.  A synchronous rebuild resolves the future
  before ``save()`` returns; a deferred one resolves it later.
- The edit surface is a two-state machine (VIEWING, EDITING).  Failed saves
  stay in EDITING with ``error`` set.  Selecting a node always returns to
  VIEWING and abandons any edit in progress, whether the selection changes
  through ``select()`` or directly in the graph store.
"""

from __future__ import annotations

import json
import logging
from enum import StrEnum, auto
from functools import partial
from typing import TYPE_CHECKING, Any

from json_node_editor.cache import DocumentCache
from json_node_editor.edit.codec import parse_json
from json_node_editor.edit.config import EditorConfig, ParseMode
from json_node_editor.edit.mutator import mutate
from json_node_editor.edit.normalizer import normalize_node
from json_node_editor.errors import (
    EditStateError,
    InvalidDocumentError,
    InvalidEditError,
    NodeEditError,
    SerializationFailureError,
)
from json_node_editor.path import PathAddress
from json_node_editor.result import SaveResult

if TYPE_CHECKING:
    from concurrent.futures import Future

    from json_node_editor.graph.nodes import NodeView
    from json_node_editor.protocols import DocumentStore, GraphStore

__all__ = ["EditState", "SyncCoordinator", "apply_edit"]

logger = logging.getLogger(__name__)


class EditState(StrEnum):
    """State of the edit surface.

    - VIEWING -> "viewing" : canonical text shown read-only
    - EDITING -> "editing" : editor text is user-owned until save or cancel
    """

    VIEWING = auto()
    EDITING = auto()


def _parse_edited(text: str, config: EditorConfig) -> Any:
    try:
        return parse_json(text)
    except RecursionError as exc:
        # raised in both modes; never stored as a string
        raise InvalidEditError("Edited text is nested too deeply.") from exc
    except ValueError as exc:
        if config.parse_mode is ParseMode.STRICT:
            raise InvalidEditError() from exc
        return text


def _serialize(value: Any, config: EditorConfig) -> str:
    try:
        return json.dumps(
            value,
            indent=config.indent,
            ensure_ascii=config.ensure_ascii,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationFailureError(f"Failed to save changes: {exc}") from exc


def apply_edit(
    document_text: str,
    path: PathAddress,
    edited_text: str,
    config: EditorConfig | None = None,
    cache: DocumentCache | None = None,
) -> str:
    """Apply edited text at ``path`` and return the new document text.

    Args:
        document_text: Authoritative document text.
        path:          Location of the edited node.
        edited_text:   Raw text from the editor.
        config:        Parsing/serialization settings.  Defaults to
                       ``EditorConfig()``.
        cache:         Optional parsed-document cache for ``document_text``.

    Returns:
        The serialized updated document.

    Raises:
        InvalidDocumentError: ``document_text`` is not valid JSON or nests
            too deeply to parse.
        InvalidEditError: ``edited_text`` is not valid JSON in STRICT mode,
            or (in either mode) nests too deeply to parse.
        TypeMismatchError: ``path`` does not fit the document.
        SerializationFailureError: The updated document cannot be copied or
            serialized (non-finite numbers, excessive nesting).
    """
    cfg = config if config is not None else EditorConfig()

    if cache is not None:
        current = cache.parse(document_text)
    else:
        try:
            current = parse_json(document_text)
        except (ValueError, TypeError, RecursionError) as exc:
            raise InvalidDocumentError() from exc

    new_value = _parse_edited(edited_text, cfg)
    try:
        updated = mutate(current, path, new_value)
    except RecursionError as exc:
        raise SerializationFailureError(
            "Failed to save changes: document is nested too deeply."
        ) from exc
    return _serialize(updated, cfg)


class SyncCoordinator:
    """Edit surface and commit cycle for the selected graph node.

    Example::

        docs = InMemoryDocumentStore('{"user": {"name": "Ada"}}')
        graph = InMemoryGraphStore(docs)
        panel = SyncCoordinator(docs, graph)

        panel.select(graph.nodes[1])         # the {"name": "Ada"} node
        panel.start_edit()
        panel.update_text('{"name": "Grace"}')
        result = panel.save()
        result.ok                            # True
        graph.selected_node.path             # PathAddress.of("user")
    """

    def __init__(
        self,
        document_store: DocumentStore,
        graph_store: GraphStore,
        config: EditorConfig | None = None,
        max_cache_size: int = 32,
    ) -> None:
        """Initialise the coordinator in the VIEWING state.

        Args:
            document_store: Holder of the authoritative document text.
            graph_store: Holder of the node set and the selected node.
            config: Parsing/serialization settings.  Defaults to
                ``EditorConfig()``.
            max_cache_size: Number of parsed documents kept by the
                coordinator's ``DocumentCache``.
        """
        self._documents = document_store
        self._graph = graph_store
        self._config: EditorConfig = config if config is not None else EditorConfig()
        self._cache = DocumentCache(max_size=max_cache_size)
        self._state = EditState.VIEWING
        self._error: str | None = None
        self._editor_text = self.canonical_text
        # Path of the node being edited; None while VIEWING.
        self._edit_path: PathAddress | None = None
        # Bumped by every explicit select(); a pending reselection from an
        # older save must not override a newer user choice.
        self._selection_epoch = 0

    # ------------------------------------------------------------------
    # Read-only surface
    # ------------------------------------------------------------------

    @property
    def state(self) -> EditState:
        self._abandon_stale_edit()
        return self._state

    @property
    def config(self) -> EditorConfig:
        return self._config

    @property
    def editor_text(self) -> str:
        self._abandon_stale_edit()
        return self._editor_text

    @property
    def error(self) -> str | None:
        """Message of the last failed save; cleared by cancel, select and success."""
        return self._error

    @property
    def selected_node(self) -> NodeView | None:
        return self._graph.selected_node

    @property
    def selected_path(self) -> PathAddress:
        node = self._graph.selected_node
        return node.path if node is not None else PathAddress.root()

    @property
    def canonical_text(self) -> str:
        """Canonical JSON text of the selected node, as shown read-only."""
        return normalize_node(self._graph.selected_node, self._config)

    @property
    def json_path(self) -> str:
        """JSON Path display string of the selected node, e.g. ``$["a"][0]``."""
        return self.selected_path.to_jsonpath()

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------

    def select(self, node: NodeView | None) -> None:
        """Select ``node`` and reset the surface to VIEWING with fresh text."""
        self._selection_epoch += 1
        self._graph.set_selected_node(node)
        self._reset()

    def start_edit(self) -> None:
        """VIEWING -> EDITING, seeding the editor with the canonical text."""
        self._abandon_stale_edit()
        if self._state is not EditState.VIEWING:
            raise EditStateError("Already editing.")
        self._state = EditState.EDITING
        self._error = None
        self._edit_path = self.selected_path
        self._editor_text = self.canonical_text

    def update_text(self, text: str) -> None:
        self._abandon_stale_edit()
        if self._state is not EditState.EDITING:
            raise EditStateError("Cannot change text while not editing.")
        self._editor_text = text

    def cancel(self) -> None:
        """Discard the edited text and return to VIEWING.

        Never touches the document.
        """
        self._reset()

    def save(self) -> SaveResult:
        """Apply the editor text at the edited node's path and commit it.

        Edit failures are returned, not raised: the surface stays in EDITING,
        ``error`` holds the message and the document store is untouched.

        If the graph store's selection moved to another path since
        ``start_edit()``, the edit is abandoned instead: the surface resets to
        VIEWING on the new selection and nothing is committed.

        Raises:
            EditStateError: If called while not editing, or the edit was
                abandoned because the selection changed.
        """
        if self._abandon_stale_edit():
            raise EditStateError("Selection changed while editing; edit discarded.")
        if self._state is not EditState.EDITING or self._edit_path is None:
            raise EditStateError("Nothing to save; start editing first.")

        self._error = None
        path = self._edit_path

        try:
            new_text = apply_edit(
                self._documents.get_document(),
                path,
                self._editor_text,
                self._config,
                cache=self._cache,
            )
        except NodeEditError as exc:
            logger.warning("Save at %s failed: %s", path.to_jsonpath(), exc)
            self._error = exc.message
            return SaveResult(path=path, error=exc)

        rebuilt = self._graph.next_rebuild()
        try:
            self._documents.set_document(new_text)
        except Exception:
            # nobody will wait on this rebuild; release it
            rebuilt.cancel()
            logger.warning("Commit at %s failed in the document store", path)
            raise
        logger.debug("Committed edit at %s", path.to_jsonpath())

        self._state = EditState.VIEWING
        self._edit_path = None
        rebuilt.add_done_callback(
            partial(self._reselect, path, self._selection_epoch)
        )
        return SaveResult(path=path, document_text=new_text)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _reset(self) -> None:
        self._state = EditState.VIEWING
        self._error = None
        self._edit_path = None
        self._editor_text = self.canonical_text

    def _abandon_stale_edit(self) -> bool:
        """Drop an edit whose node is no longer the graph store's selection.

        Returns True when an edit was abandoned.
        """
        if self._state is not EditState.EDITING:
            return False
        if self._edit_path == self.selected_path:
            return False
        logger.debug(
            "Selection moved from %s to %s while editing; edit discarded",
            self._edit_path,
            self.selected_path,
        )
        self._reset()
        return True

    def _reselect(
        self, path: PathAddress, epoch: int, rebuilt: Future[list[NodeView]]
    ) -> None:
        if epoch != self._selection_epoch:
            logger.debug("Selection changed since save at %s; not reselecting", path)
            return

        if rebuilt.cancelled():
            logger.debug("Rebuild after save was cancelled; clearing selection")
            found = None
        elif rebuilt.exception() is not None:
            logger.warning("Rebuild after save failed; clearing selection")
            found = None
        else:
            found = next((n for n in rebuilt.result() if n.path == path), None)

        if found is None:
            logger.debug("No node at %s after rebuild; selection cleared", path)
        self._graph.set_selected_node(found)
        if self._state is EditState.VIEWING:
            self._editor_text = self.canonical_text
