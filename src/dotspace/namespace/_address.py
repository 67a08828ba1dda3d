"""
Dotted address parsing and joining.

An address is a string split strictly on ".": whitespace is kept and
repeated dots produce empty-string segments, which are valid keys.

Example:
    >>> parse("a..b")
    ('a', '', 'b')
    >>> join("a.b", ["c", "d"])
    'a.b.c.d'
"""

from __future__ import annotations

import math as _math
import typing as _typing

import dotspace.namespace._errors as _errors
import dotspace.namespace._types as _types

SEPARATOR = "."


def normalize(address: _typing.Any) -> str:
    """
    Validate an address and return it as a string.

    Numbers are coerced with str() so that ``5`` addresses the key ``"5"``;
    whole floats drop their fraction, so ``5.0`` addresses ``"5"`` too.

    Raises:
        InvalidAddressError: If address is None, a bool, a non-finite
            number, or any other non-string type.
    """
    if isinstance(address, str):
        return address
    if address is None:
        raise _errors.InvalidAddressError(address, "address cannot be None")
    # bool is an int subclass but never a sensible key
    if isinstance(address, bool):
        raise _errors.InvalidAddressError(address, "bool is not an address")
    if isinstance(address, int):
        return str(address)
    if isinstance(address, float):
        if not _math.isfinite(address):
            raise _errors.InvalidAddressError(address, "number is not finite")
        # whole numbers address "1", not "1.0" (two segments)
        return str(int(address)) if address.is_integer() else str(address)
    raise _errors.InvalidAddressError(
        address, f"expected str or number, got {type(address).__name__}"
    )


def parse(address: _typing.Any) -> _types.Address:
    """Split an address into its segments."""
    return tuple(normalize(address).split(SEPARATOR))


def join(*parts: str | _typing.Sequence[_typing.Any]) -> str:
    """
    Join strings and segment lists into one dotted address.

    Strings are split on dots first, so ``join("a.b", "c")`` and
    ``join("a", "b.c")`` give the same result. Lists and tuples contribute
    each element as a single segment.

    Raises:
        InvalidAddressError: If a part is neither a string nor a list/tuple.
    """
    segments: list[str] = []
    for part in parts:
        if isinstance(part, str):
            segments.extend(part.split(SEPARATOR))
        elif isinstance(part, (list, tuple)):
            segments.extend(str(item) for item in part)
        else:
            raise _errors.InvalidAddressError(
                part, f"cannot join {type(part).__name__}"
            )
    return SEPARATOR.join(segments)
