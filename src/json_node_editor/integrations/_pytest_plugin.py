"""pytest plugin for json-node-editor.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from json_node_editor import (
    EditorConfig,
    PathAddress,
    apply_edit,
    build_nodes,
    find_node,
    normalize_node,
)


@pytest.fixture(scope="session")
def assert_noop_edit() -> Any:
    """Fixture that returns a callable asserting a no-op edit round-trips.

    The check: build the node set for ``document``, take the node at
    ``path``, normalize it, save that text straight back at the same path,
    rebuild, and require the node to still exist with identical canonical
    text (including key order).

    Usage in tests::

        def test_customer_node(assert_noop_edit):
            assert_noop_edit({"customer": {"name": "Ada"}}, ["customer"])

    Returns:
        A callable ``_assert(document, path, config=None) -> str`` that
        returns the canonical text, or raises ``AssertionError``.
    """

    def _assert(
        document: Any,
        path: PathAddress | list[str | int] | tuple[str | int, ...],
        config: EditorConfig | None = None,
    ) -> str:
        """Assert that saving a node's own canonical text changes nothing visible.

        Args:
            document: Parsed JSON document.
            path:     Path of the node to round-trip.
            config:   Optional EditorConfig for normalization and serialization.

        Raises:
            AssertionError: When no node exists at ``path`` before or after the
                edit, or when the canonical text differs.
        """
        target = path if isinstance(path, PathAddress) else PathAddress.of(*path)
        node = find_node(build_nodes(document), target)
        if node is None:
            raise AssertionError(f"No node at {target.to_jsonpath()} in {document!r}")

        before = normalize_node(node, config)
        new_text = apply_edit(json.dumps(document), target, before, config)
        rebuilt = find_node(build_nodes(json.loads(new_text)), target)
        if rebuilt is None:
            raise AssertionError(
                f"Node at {target.to_jsonpath()} disappeared after a no-op edit\n"
                f"  document: {new_text}"
            )

        after = normalize_node(rebuilt, config)
        if after != before:
            raise AssertionError(
                f"No-op edit at {target.to_jsonpath()} changed canonical text\n"
                f"  before: {before}\n"
                f"  after:  {after}"
            )
        return after

    return _assert
