"""
Conversion between nested mappings and flat dotted-path mappings.

Example:
    >>> flatten({"server": {"host": "localhost", "ports": [80, 443]}})
    {'server.host': 'localhost', 'server.ports': [80, 443]}
    >>> expand({"server.host": "localhost"})
    {'server': {'host': 'localhost'}}
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import dotspace.namespace._address as _address
import dotspace.namespace._operations as _operations
import dotspace.namespace._traversal as _traversal

FlatMapping: _typing.TypeAlias = dict[str, _typing.Any]


def flatten(container: _typing.Any) -> FlatMapping:
    """
    Flatten nested mappings into {dotted_path: leaf_value}.

    Only mappings are descended into. Lists, tuples, sets, None and other
    objects are leaves and are emitted as-is (not copied). Empty nested
    mappings contribute no entries. A non-mapping argument gives {}.
    """
    result: FlatMapping = {}
    if isinstance(container, _abc.Mapping):
        _flatten_into(container, None, result)
    return result


def _flatten_into(
    mapping: _abc.Mapping[str, _typing.Any],
    prefix: str | None,
    result: FlatMapping,
) -> None:
    for key, value in mapping.items():
        path = str(key) if prefix is None else f"{prefix}{_address.SEPARATOR}{key}"
        if isinstance(value, _abc.Mapping):
            _flatten_into(value, path, result)
        else:
            result[path] = value


def expand(flat: _abc.Mapping[str, _typing.Any]) -> dict[str, _typing.Any]:
    """
    Rebuild nested dicts from {dotted_path: value}.

    Every entry is written with overwrite=True into a fresh dict, so entries
    sharing a prefix end up in the same nested dict.

    Raises:
        InvalidRootError: If flat is not a mapping.
        HierarchyConflictError: If one entry's path runs through another
            entry's leaf (e.g. "a" and "a.b").
    """
    _traversal.check_root(flat, operation="expand")
    result: dict[str, _typing.Any] = {}
    for path, value in flat.items():
        _operations.set_value(result, path, value, overwrite=True)
    return result
