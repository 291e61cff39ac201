"""DocumentStore and GraphStore Protocols: the engine's external collaborators.

Defines the structural interfaces the coordinator talks to.  Hosts plug in
their own stores without inheriting from any base class; any object with
conformant members passes ``isinstance`` checks.

Example::

    from json_node_editor.protocols import DocumentStore

    class FileBackedStore:
        def get_document(self) -> str: ...
        def set_document(self, text: str) -> None: ...

    assert isinstance(FileBackedStore(), DocumentStore)  # True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence
    from concurrent.futures import Future

    from json_node_editor.graph.nodes import NodeView


@runtime_checkable
class DocumentStore(Protocol):
    """Holder of the authoritative document text.

    ``set_document`` is the sole mutation entry point and the sole trigger
    of a node-set rebuild.  Replacement must be atomic: a reader sees either
    the old text or the new text, never a mixture.
    """

    def get_document(self) -> str: ...

    def set_document(self, text: str) -> None: ...


@runtime_checkable
class GraphStore(Protocol):
    """Holder of the current node set and the selected node.

    ``next_rebuild`` returns a future that resolves with the node set built
    from the next committed document.  It must be requested before the
    commit it is meant to observe.
    """

    @property
    def nodes(self) -> Sequence[NodeView]: ...

    @property
    def selected_node(self) -> NodeView | None: ...

    def set_selected_node(self, node: NodeView | None) -> None: ...

    def next_rebuild(self) -> Future[list[NodeView]]: ...
