"""Tests for get_if_exists(), get_must_exist() and exists()."""

import typing as _typing

import pytest as _pytest

import dotspace.namespace as namespace


class TestGetIfExists:
    """Guarded reads."""

    def test_existing_value(self) -> None:
        assert namespace.get_if_exists({"a": {"b": "value"}}, "a.b") == "value"

    def test_missing_path(self) -> None:
        assert namespace.get_if_exists({}, "a.b") is namespace.NotFound

    def test_missing_leaf(self) -> None:
        assert namespace.get_if_exists({"a": {}}, "a.b") is namespace.NotFound

    def test_none_intermediate(self) -> None:
        """A None on the way is a dead end, not an error."""
        assert namespace.get_if_exists({"a": None}, "a.b") is namespace.NotFound

    def test_scalar_intermediate(self) -> None:
        assert namespace.get_if_exists({"a": "text"}, "a.b") is namespace.NotFound

    def test_list_not_indexed(self) -> None:
        """Numeric segments are keys, never list positions."""
        assert namespace.get_if_exists({"items": ["x"]}, "items.0") is namespace.NotFound
        assert namespace.get_if_exists({"items": {"0": "x"}}, "items.0") == "x"

    @_pytest.mark.parametrize("stored", [None, False, 0, "", [], {}])
    def test_empty_values_returned_verbatim(self, stored: _typing.Any) -> None:
        """Stored empty values are found, not mistaken for missing."""
        result = namespace.get_if_exists({"a": {"b": stored}}, "a.b")
        assert result == stored
        assert result is not namespace.NotFound

    def test_returns_same_object(self) -> None:
        inner = {"c": 1}
        assert namespace.get_if_exists({"a": {"b": inner}}, "a.b") is inner

    @_pytest.mark.parametrize("fallback", ["default", 0, False, "", None])
    def test_fallback_for_missing(self, fallback: _typing.Any) -> None:
        """Any fallback, falsy ones and None included, replaces NotFound."""
        result = namespace.get_if_exists({}, "a.b", fallback)
        assert result is fallback

    def test_fallback_ignored_when_present(self) -> None:
        assert namespace.get_if_exists({"a": None}, "a", "default") is None

    def test_stored_sentinel_reads_as_missing(self) -> None:
        data = {"a": namespace.NotFound}
        assert namespace.get_if_exists(data, "a", "fallback") == "fallback"

    def test_empty_segment_key(self) -> None:
        assert namespace.get_if_exists({"a": {"": {"b": 1}}}, "a..b") == 1

    def test_none_address_returns_root(self) -> None:
        data = {"x": 1}
        assert namespace.get_if_exists(data, None) is data

    def test_read_has_no_side_effects(self) -> None:
        data: dict[str, _typing.Any] = {"a": {}}
        namespace.get_if_exists(data, "a.b.c")
        assert data == {"a": {}}

    def test_invalid_root(self) -> None:
        with _pytest.raises(namespace.InvalidRootError):
            namespace.get_if_exists(None, "a")  # type: ignore[arg-type]

    def test_invalid_root_names_operation_and_address(self) -> None:
        with _pytest.raises(namespace.InvalidRootError) as exc_info:
            namespace.get_if_exists(["x"], "server.port")  # type: ignore[arg-type]

        assert str(exc_info.value).startswith("get_if_exists:")
        assert '"server.port"' in str(exc_info.value)
        assert exc_info.value.address == "server.port"


class TestGetMustExist:
    """Required reads."""

    def test_existing_value(self) -> None:
        assert namespace.get_must_exist({"a": {"b": 0}}, "a.b") == 0

    def test_missing_raises_with_address(self) -> None:
        with _pytest.raises(namespace.PathRequiredError) as exc_info:
            namespace.get_must_exist({"a": {}}, "a.b.c")

        assert 'Property not found: "a.b.c"' in str(exc_info.value)
        assert exc_info.value.address == "a.b.c"

    def test_custom_message(self) -> None:
        with _pytest.raises(namespace.PathRequiredError, match="^Port is required$"):
            namespace.get_must_exist({}, "server.port", "Port is required")

    def test_is_lookup_error(self) -> None:
        with _pytest.raises(LookupError):
            namespace.get_must_exist({}, "a")

    def test_none_value_is_returned(self) -> None:
        """A stored None satisfies the requirement."""
        assert namespace.get_must_exist({"a": None}, "a") is None

    def test_stored_sentinel_counts_as_missing(self) -> None:
        with _pytest.raises(namespace.PathRequiredError):
            namespace.get_must_exist({"a": namespace.NotFound}, "a")

    def test_custom_message_for_missing_intermediate(self) -> None:
        with _pytest.raises(namespace.PathRequiredError, match="^Server block missing$") as exc_info:
            namespace.get_must_exist({"a": 1}, "a.b.c", "Server block missing")

        assert exc_info.value.address == "a.b.c"

    def test_invalid_root_names_operation(self) -> None:
        with _pytest.raises(namespace.InvalidRootError, match="^get_must_exist:"):
            namespace.get_must_exist(None, "a")  # type: ignore[arg-type]


class TestExists:
    """Existence checks."""

    def test_existing(self) -> None:
        assert namespace.exists({"a": {"b": 1}}, "a.b") is True

    def test_missing(self) -> None:
        assert namespace.exists({"a": {}}, "a.b") is False

    @_pytest.mark.parametrize("stored", [None, False, 0, ""])
    def test_falsy_values_exist(self, stored: _typing.Any) -> None:
        assert namespace.exists({"a": {"b": stored}}, "a.b") is True

    def test_none_intermediate(self) -> None:
        assert namespace.exists({"a": None}, "a.b") is False

    def test_partial_path(self) -> None:
        """An existing prefix does not make the full path exist."""
        assert namespace.exists({"a": {"b": 1}}, "a.b.c") is False
