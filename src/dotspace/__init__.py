"""
dotspace - dotted-path access to nested mappings

Read, write and delete values in nested dicts by address ("a.b.c"),
keeping "nothing stored here" (NotFound) apart from stored empty values.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("dotspace")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

from dotspace.namespace import (  # noqa: E402
    NotFound,
    exists,
    expand,
    flatten,
    get_if_exists,
    get_must_exist,
    get_or_create,
    is_not_found,
    join,
    leaf_node,
    remove,
    set_value,
    traverse,
)

__all__ = [
    "__version__",
    "__version_info__",
    "NotFound",
    "exists",
    "expand",
    "flatten",
    "get_if_exists",
    "get_must_exist",
    "get_or_create",
    "is_not_found",
    "join",
    "leaf_node",
    "remove",
    "set_value",
    "traverse",
]
