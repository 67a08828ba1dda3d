"""
Dotted-path access to nested mappings.

Reads distinguish "nothing stored here" (the NotFound sentinel) from stored
empty values such as None, False, 0 and "". Writes create intermediate
dicts on the way and refuse to overwrite unless asked.

Example:
    >>> from dotspace.namespace import get_if_exists, set_value, is_not_found
    >>> config = {}
    >>> set_value(config, "server.port", 3000)
    3000
    >>> get_if_exists(config, "server.port")
    3000
    >>> is_not_found(get_if_exists(config, "server.host"))
    True
"""

from dotspace.namespace._address import SEPARATOR, join, parse
from dotspace.namespace._errors import (
    HierarchyConflictError,
    InvalidAddressError,
    InvalidRootError,
    NamespaceError,
    OverwriteError,
    PathRequiredError,
    TraversalIncompleteError,
    UnknownFactoryError,
)
from dotspace.namespace._factories import (
    register_factory,
    registered_factories,
    resolve_factories,
    resolve_factory,
    unregister_factory,
)
from dotspace.namespace._flatten import expand, flatten
from dotspace.namespace._operations import (
    exists,
    get_if_exists,
    get_must_exist,
    get_or_create,
    is_not_found,
    leaf_node,
    remove,
    set_value,
    write,
)
from dotspace.namespace._sentinel import NotFound
from dotspace.namespace._traversal import Traveller, traverse
from dotspace.namespace._types import UNSET, WriteOptions, WriteOutcome, WriteStatus

__all__ = [
    "SEPARATOR",
    "UNSET",
    "HierarchyConflictError",
    "InvalidAddressError",
    "InvalidRootError",
    "NamespaceError",
    "NotFound",
    "OverwriteError",
    "PathRequiredError",
    "Traveller",
    "TraversalIncompleteError",
    "UnknownFactoryError",
    "WriteOptions",
    "WriteOutcome",
    "WriteStatus",
    "exists",
    "expand",
    "flatten",
    "get_if_exists",
    "get_must_exist",
    "get_or_create",
    "is_not_found",
    "join",
    "leaf_node",
    "parse",
    "register_factory",
    "registered_factories",
    "remove",
    "resolve_factories",
    "resolve_factory",
    "set_value",
    "traverse",
    "unregister_factory",
    "write",
]
