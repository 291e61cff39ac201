"""Packaging correctness verification for json-node-editor.

Tests validate:
- Top-level import exposes the public API
- py.typed marker ships inside the package
- Pytest plugin entry point is registered
- Package metadata is correct

These tests inspect the current installation rather than building a wheel.
"""

from __future__ import annotations

import importlib
from importlib.metadata import entry_points, version
from pathlib import Path


class TestImports:
    def test_import_json_node_editor(self) -> None:
        import json_node_editor

        for name in ("mutate", "normalize_node", "apply_edit", "SyncCoordinator"):
            assert hasattr(json_node_editor, name)

    def test_all_names_resolve(self) -> None:
        import json_node_editor

        for name in json_node_editor.__all__:
            assert getattr(json_node_editor, name) is not None

    def test_py_typed_present(self) -> None:
        import json_node_editor

        package_dir = Path(json_node_editor.__file__).parent
        assert (package_dir / "py.typed").is_file()


class TestMetadata:
    def test_version(self) -> None:
        import json_node_editor

        assert version("json-node-editor") == json_node_editor.__version__ == "0.1.0"


class TestPytestPluginDiscovery:
    def test_entry_point_registered(self) -> None:
        eps = [
            ep
            for ep in entry_points(group="pytest11")
            if ep.value == "json_node_editor.integrations._pytest_plugin"
        ]
        assert eps, "No pytest11 entry point found for json-node-editor"

    def test_fixture_available(self) -> None:
        mod = importlib.import_module("json_node_editor.integrations._pytest_plugin")
        assert callable(mod.assert_noop_edit)
