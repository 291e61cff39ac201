"""Tests for mutate() and resolve().

Covers:
- Root replacement regardless of document shape
- Overwriting object properties and array elements
- Auto-vivification of intermediate objects (never arrays)
- TypeMismatchError on kind disagreement and out-of-range indices
- The input document is never modified, on success or failure
- resolve() lookups and their errors
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from json_node_editor.edit.mutator import mutate, resolve
from json_node_editor.errors import PathNotFoundError, TypeMismatchError
from json_node_editor.path import IndexSegment, NameSegment, PathAddress

P = PathAddress.of

# ---------------------------------------------------------------------------
# Root replacement
# ---------------------------------------------------------------------------


class TestRootReplacement:
    @pytest.mark.parametrize("doc", [{}, {"a": 1}, [1, 2], "s", 3, None, True])
    def test_empty_path_returns_new_value(self, doc: Any) -> None:
        assert mutate(doc, PathAddress.root(), {"new": True}) == {"new": True}

    def test_new_value_not_aliased(self) -> None:
        value = {"a": [1]}
        result = mutate({}, PathAddress.root(), value)
        result["a"].append(2)
        assert value == {"a": [1]}


# ---------------------------------------------------------------------------
# Successful updates
# ---------------------------------------------------------------------------


class TestUpdates:
    def test_nested_property(self) -> None:
        assert mutate({"a": {"b": 1}}, P("a", "b"), 2) == {"a": {"b": 2}}

    def test_new_property_on_existing_object(self) -> None:
        assert mutate({"a": {}}, P("a", "b"), 2) == {"a": {"b": 2}}

    def test_array_element(self) -> None:
        assert mutate({"a": [1, 2, 3]}, P("a", 1), 9) == {"a": [1, 9, 3]}

    def test_through_array_into_object(self) -> None:
        doc = {"items": [{"id": 1}, {"id": 2}]}
        assert mutate(doc, P("items", 1, "id"), 5) == {
            "items": [{"id": 1}, {"id": 5}]
        }

    def test_top_level_array(self) -> None:
        assert mutate([0, 0], P(1), "x") == [0, "x"]

    def test_replace_object_with_scalar(self) -> None:
        assert mutate({"a": {"b": 1}}, P("a"), "flat") == {"a": "flat"}

    def test_key_order_preserved(self) -> None:
        result = mutate({"z": 1, "a": 2, "m": 3}, P("a"), 20)
        assert list(result) == ["z", "a", "m"]

    def test_null_value_set(self) -> None:
        assert mutate({"a": 1}, P("a"), None) == {"a": None}


# ---------------------------------------------------------------------------
# Auto-vivification
# ---------------------------------------------------------------------------


class TestAutoVivify:
    def test_missing_intermediate_objects_created(self) -> None:
        assert mutate({}, P("a", "b"), 3) == {"a": {"b": 3}}

    def test_deep_chain(self) -> None:
        assert mutate({}, P("a", "b", "c"), 1) == {"a": {"b": {"c": 1}}}

    def test_never_creates_array_slots(self) -> None:
        with pytest.raises(TypeMismatchError):
            mutate({}, P("a", 0), 1)

    def test_existing_null_is_not_replaced(self) -> None:
        with pytest.raises(TypeMismatchError):
            mutate({"a": None}, P("a", "b"), 1)


# ---------------------------------------------------------------------------
# Type mismatches
# ---------------------------------------------------------------------------


class TestTypeMismatch:
    def test_index_past_end_of_array(self) -> None:
        with pytest.raises(TypeMismatchError):
            mutate({"a": [1, 2, 3]}, P("a", 5), 9)

    def test_index_equal_to_length(self) -> None:
        with pytest.raises(TypeMismatchError):
            mutate({"a": [1, 2, 3]}, P("a", 3), 9)

    def test_intermediate_index_out_of_range(self) -> None:
        with pytest.raises(TypeMismatchError):
            mutate({"a": [{"b": 1}]}, P("a", 2, "b"), 9)

    def test_name_on_scalar(self) -> None:
        with pytest.raises(TypeMismatchError):
            mutate({"a": 1}, P("a", "b"), 2)

    def test_name_on_array(self) -> None:
        with pytest.raises(TypeMismatchError):
            mutate({"a": [1]}, P("a", "b"), 2)

    def test_intermediate_name_on_array(self) -> None:
        with pytest.raises(TypeMismatchError):
            mutate([{"a": 1}], P("a", "b"), 2)

    def test_index_on_object(self) -> None:
        with pytest.raises(TypeMismatchError):
            mutate({"a": {"0": 1}}, P("a", 0), 2)

    def test_index_on_scalar_root(self) -> None:
        with pytest.raises(TypeMismatchError):
            mutate("text", P(0), 2)

    def test_error_carries_path_and_segment(self) -> None:
        with pytest.raises(TypeMismatchError) as exc_info:
            mutate({"a": 1}, P("a", "b"), 2)
        assert exc_info.value.path == P("a", "b")
        assert exc_info.value.segment == NameSegment("b")
        assert exc_info.value.message == "Failed to set value at path (type mismatch)."

    def test_is_a_type_error(self) -> None:
        with pytest.raises(TypeError):
            mutate({"a": [1]}, P("a", 4), 2)


# ---------------------------------------------------------------------------
# Input immutability
# ---------------------------------------------------------------------------


class TestInputUntouched:
    def test_success_leaves_input_unchanged(self) -> None:
        doc = {"a": {"b": 1}, "c": [1, 2]}
        snapshot = copy.deepcopy(doc)
        result = mutate(doc, P("a", "b"), 2)
        assert doc == snapshot
        assert result is not doc
        assert result["c"] is not doc["c"]

    def test_failure_after_vivify_leaves_input_unchanged(self) -> None:
        # "x" would be vivified before the index segment fails
        doc: dict[str, Any] = {"a": 1}
        snapshot = copy.deepcopy(doc)
        with pytest.raises(TypeMismatchError):
            mutate(doc, P("x", 0, "y"), 2)
        assert doc == snapshot

    def test_failure_leaves_nested_input_unchanged(self) -> None:
        doc = {"a": {"b": [1]}}
        snapshot = copy.deepcopy(doc)
        with pytest.raises(TypeMismatchError):
            mutate(doc, P("a", "new", "b", 3), 0)
        assert doc == snapshot


# ---------------------------------------------------------------------------
# resolve()
# ---------------------------------------------------------------------------


class TestResolve:
    def test_root(self) -> None:
        doc = {"a": 1}
        assert resolve(doc, PathAddress.root()) is doc

    def test_nested(self) -> None:
        assert resolve({"a": [{"b": "x"}]}, P("a", 0, "b")) == "x"

    def test_missing_property(self) -> None:
        with pytest.raises(PathNotFoundError) as exc_info:
            resolve({"a": {}}, P("a", "b"))
        assert exc_info.value.segment == NameSegment("b")

    def test_missing_index(self) -> None:
        with pytest.raises(PathNotFoundError) as exc_info:
            resolve({"a": []}, P("a", 0))
        assert exc_info.value.segment == IndexSegment(0)

    def test_kind_disagreement(self) -> None:
        with pytest.raises(TypeMismatchError):
            resolve({"a": 1}, P("a", "b"))

    def test_does_not_vivify(self) -> None:
        doc: dict[str, Any] = {}
        with pytest.raises(PathNotFoundError):
            resolve(doc, P("a", "b"))
        assert doc == {}
