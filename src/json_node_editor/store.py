"""In-memory DocumentStore and GraphStore implementations.

``InMemoryDocumentStore`` holds the authoritative text and notifies its
subscribers after each replacement.  ``InMemoryGraphStore`` subscribes to a
document store and rebuilds the node set with ``GraphBuilder`` whenever the
document changes.

Rebuild completion is explicit.  ``next_rebuild()`` hands out a
``concurrent.futures.Future`` that is resolved with the new node list as
soon as the rebuild has happened, which removes any need to guess how long a
rebuild takes.  With ``deferred=True`` the graph store only queues the new
text and rebuilds on ``flush()``, which is how a host with its own render
loop would drive it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any

from json_node_editor.edit.codec import parse_json
from json_node_editor.errors import InvalidDocumentError
from json_node_editor.graph.builder import GraphBuilder
from json_node_editor.graph.nodes import NodeView

__all__ = ["InMemoryDocumentStore", "InMemoryGraphStore"]

logger = logging.getLogger(__name__)

DocumentListener = Callable[[str], Any]


class InMemoryDocumentStore:
    """Authoritative document text with change notification.

    Args:
        text: Initial document text.  Not validated; an invalid document is
            a legal state that makes every save fail with InvalidDocumentError.
    """

    def __init__(self, text: str = "{}") -> None:
        self._text = text
        self._listeners: list[DocumentListener] = []

    def get_document(self) -> str:
        return self._text

    def set_document(self, text: str) -> None:
        """Replace the document, then notify every subscriber in order."""
        self._text = text
        for listener in list(self._listeners):
            listener(text)

    def subscribe(self, listener: DocumentListener) -> Callable[[], None]:
        """Register ``listener(text)``; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe


class InMemoryGraphStore:
    """Node set rebuilt from a document store, plus the selected node.

    The initial node set is built from the document store's current text at
    construction time, even in deferred mode.

    Args:
        document_store: Store to subscribe to.
        builder: Graph builder.  Defaults to ``GraphBuilder()``.
        deferred: When True, document changes are queued until ``flush()``.
    """

    def __init__(
        self,
        document_store: InMemoryDocumentStore,
        builder: GraphBuilder | None = None,
        deferred: bool = False,
    ) -> None:
        self._builder = builder if builder is not None else GraphBuilder()
        self._deferred = deferred
        self._nodes: list[NodeView] = []
        self._selected: NodeView | None = None
        self._pending: list[Future[list[NodeView]]] = []
        self._queued: str | None = None
        self._rebuild(document_store.get_document())
        self._unsubscribe = document_store.subscribe(self._on_document)

    # ------------------------------------------------------------------
    # GraphStore Protocol surface
    # ------------------------------------------------------------------

    @property
    def nodes(self) -> list[NodeView]:
        return list(self._nodes)

    @property
    def selected_node(self) -> NodeView | None:
        return self._selected

    def set_selected_node(self, node: NodeView | None) -> None:
        self._selected = node

    def next_rebuild(self) -> Future[list[NodeView]]:
        """Return a future resolved by the next rebuild.

        A holder that no longer needs the rebuild may ``cancel()`` it; cancelled
        futures are discarded by the next rebuild.
        """
        future: Future[list[NodeView]] = Future()
        self._pending.append(future)
        return future

    # ------------------------------------------------------------------
    # Rebuild driving
    # ------------------------------------------------------------------

    @property
    def has_pending_rebuild(self) -> bool:
        return self._queued is not None

    def flush(self) -> None:
        """Run a queued rebuild, if any.  No-op when nothing is queued."""
        if self._queued is None:
            return
        text, self._queued = self._queued, None
        self._rebuild(text)

    def close(self) -> None:
        """Stop listening to the document store."""
        self._unsubscribe()

    def _on_document(self, text: str) -> None:
        if self._deferred:
            # Only the latest text matters; older queued text is superseded.
            self._queued = text
            return
        self._rebuild(text)

    def _rebuild(self, text: str) -> None:
        # futures cancelled by their holder are dropped, never resolved
        pending = [f for f in self._pending if f.set_running_or_notify_cancel()]
        self._pending = []
        try:
            value = parse_json(text)
            nodes = self._builder.build(value)
        except (ValueError, TypeError, RecursionError) as exc:
            logger.warning("Graph rebuild failed, node set cleared: %s", exc)
            self._nodes = []
            error = InvalidDocumentError()
            error.__cause__ = exc
            for future in pending:
                future.set_exception(error)
            return

        self._nodes = nodes
        logger.debug("Graph rebuilt with %d nodes", len(nodes))
        for future in pending:
            future.set_result(list(nodes))
