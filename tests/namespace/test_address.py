"""Tests for address parsing and joining."""

import pytest as _pytest

import dotspace.namespace as namespace


class TestParse:
    """parse() splits strictly on dots."""

    def test_simple(self) -> None:
        assert namespace.parse("a.b.c") == ("a", "b", "c")

    def test_single_segment(self) -> None:
        assert namespace.parse("single") == ("single",)

    def test_empty_segments_kept(self) -> None:
        """Repeated, leading and trailing dots produce empty segments."""
        assert namespace.parse("a..b") == ("a", "", "b")
        assert namespace.parse(".a") == ("", "a")
        assert namespace.parse("a.") == ("a", "")

    def test_empty_string_is_one_empty_segment(self) -> None:
        assert namespace.parse("") == ("",)

    def test_whitespace_not_trimmed(self) -> None:
        assert namespace.parse(" a . b ") == (" a ", " b ")

    def test_numbers_coerced(self) -> None:
        """Finite numbers address their string form."""
        assert namespace.parse(5) == ("5",)
        assert namespace.parse(1.5) == ("1", "5")

    @_pytest.mark.parametrize(("number", "expected"), [(1.0, ("1",)), (-3.0, ("-3",)), (0.0, ("0",))])
    def test_whole_floats_drop_fraction(self, number: float, expected: tuple[str, ...]) -> None:
        """1.0 addresses the key "1", like the int."""
        assert namespace.parse(number) == expected

    def test_whole_float_reads_int_key(self) -> None:
        assert namespace.get_if_exists({"1": "one"}, 1.0) == "one"  # type: ignore[arg-type]

    @_pytest.mark.parametrize("address", [None, True, float("nan"), float("inf"), ["a"], object()])
    def test_invalid_addresses(self, address: object) -> None:
        """None, bools, non-finite numbers and other types are rejected."""
        with _pytest.raises(namespace.InvalidAddressError):
            namespace.parse(address)

    def test_invalid_address_is_value_error(self) -> None:
        with _pytest.raises(ValueError):
            namespace.parse(None)


class TestJoin:
    """join() combines strings and segment lists."""

    def test_strings(self) -> None:
        assert namespace.join("a", "b", "c") == "a.b.c"

    def test_lists(self) -> None:
        assert namespace.join("a", ["b", "c"]) == "a.b.c"

    def test_mixed(self) -> None:
        assert namespace.join("a", ["b", "c"], "d") == "a.b.c.d"

    def test_dotted_strings_resplit(self) -> None:
        assert namespace.join("a.b", "c.d") == "a.b.c.d"

    def test_empty_parts_kept(self) -> None:
        assert namespace.join("a", "", "b") == "a..b"

    def test_single_part(self) -> None:
        assert namespace.join("single") == "single"

    def test_no_parts(self) -> None:
        assert namespace.join() == ""

    def test_list_items_coerced(self) -> None:
        """List items are single segments, numbers included."""
        assert namespace.join("items", [0, "name"]) == "items.0.name"

    def test_invalid_part(self) -> None:
        with _pytest.raises(namespace.InvalidAddressError):
            namespace.join("a", 5)  # type: ignore[arg-type]

    def test_join_then_read(self) -> None:
        """Joined addresses work with the operations."""
        data = {"users": {"alice": {"role": "admin"}}}
        assert namespace.get_if_exists(data, namespace.join("users", ["alice", "role"])) == "admin"
