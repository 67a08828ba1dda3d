"""Tests for flatten() and expand()."""

import typing as _typing

import pytest as _pytest

import dotspace.namespace as namespace


class TestFlatten:
    """Nested to flat."""

    def test_nested(self) -> None:
        assert namespace.flatten({"a": {"b": {"c": "value"}}}) == {"a.b.c": "value"}

    def test_lists_are_leaves(self) -> None:
        assert namespace.flatten({"a": {"b": [1, 2, 3]}}) == {"a.b": [1, 2, 3]}

    def test_list_of_dicts_not_descended(self) -> None:
        data = {"users": [{"name": "a"}]}
        assert namespace.flatten(data) == {"users": [{"name": "a"}]}

    def test_multiple_branches(self) -> None:
        assert namespace.flatten({"a": {"x": 1}, "b": {"y": 2}}) == {"a.x": 1, "b.y": 2}

    def test_flat_input(self) -> None:
        assert namespace.flatten({"a": 1, "b": 2}) == {"a": 1, "b": 2}

    def test_empty(self) -> None:
        assert namespace.flatten({}) == {}

    def test_none_leaf(self) -> None:
        assert namespace.flatten({"a": {"b": None}}) == {"a.b": None}

    def test_deep(self) -> None:
        data = {"a": {"b": {"c": {"d": {"e": "deep"}}}}}
        assert namespace.flatten(data) == {"a.b.c.d.e": "deep"}

    def test_empty_nested_mapping_dropped(self) -> None:
        assert namespace.flatten({"a": {}, "b": 1}) == {"b": 1}

    def test_no_container_entries(self) -> None:
        """No emitted value is itself a mapping."""
        flat = namespace.flatten({"a": {"b": {"c": 1}, "d": [{"e": 2}]}})
        assert all(not isinstance(v, dict) for v in flat.values())

    @_pytest.mark.parametrize("value", [None, 5, "text", [1, 2]])
    def test_non_mapping_input(self, value: _typing.Any) -> None:
        assert namespace.flatten(value) == {}

    def test_leaf_objects_not_copied(self) -> None:
        items = [1, 2]
        assert namespace.flatten({"a": {"items": items}})["a.items"] is items

    def test_preserves_insertion_order(self) -> None:
        flat = namespace.flatten({"z": 1, "a": {"y": 2, "b": 3}})
        assert list(flat) == ["z", "a.y", "a.b"]


class TestExpand:
    """Flat to nested."""

    def test_single_path(self) -> None:
        assert namespace.expand({"a.b.c": "value"}) == {"a": {"b": {"c": "value"}}}

    def test_shared_prefixes(self) -> None:
        flat = {"a.x": 1, "a.y": 2, "b": 3}
        assert namespace.expand(flat) == {"a": {"x": 1, "y": 2}, "b": 3}

    def test_empty(self) -> None:
        assert namespace.expand({}) == {}

    def test_list_values(self) -> None:
        assert namespace.expand({"a.b": [1, 2]}) == {"a": {"b": [1, 2]}}

    def test_leaf_then_branch_conflicts(self) -> None:
        """A path cannot run through another entry's leaf."""
        with _pytest.raises(namespace.HierarchyConflictError):
            namespace.expand({"a": 1, "a.b": 2})

    def test_branch_then_leaf_overwrites(self) -> None:
        assert namespace.expand({"a.b": 2, "a": 1}) == {"a": 1}

    def test_does_not_touch_input(self) -> None:
        flat = {"a.b": 1}
        namespace.expand(flat)
        assert flat == {"a.b": 1}

    def test_invalid_input(self) -> None:
        with _pytest.raises(namespace.InvalidRootError):
            namespace.expand([("a", 1)])  # type: ignore[arg-type]


class TestRoundTrip:
    """expand(flatten(x)) rebuilds x."""

    @_pytest.mark.parametrize(
        "data",
        [
            {"a": {"b": 1, "c": {"d": [1, 2]}}, "e": None},
            {"server": {"host": "localhost", "port": 3000}, "debug": False},
            {"x": "", "y": 0, "z": {"w": {"v": [{"nested": "in list"}]}}},
            {},
        ],
    )
    def test_round_trip(self, data: dict[str, _typing.Any]) -> None:
        assert namespace.expand(namespace.flatten(data)) == data

    def test_round_trip_fixture(self, nested_config: dict[str, _typing.Any]) -> None:
        assert namespace.expand(namespace.flatten(nested_config)) == nested_config
