"""
The NotFound sentinel.

NotFound marks "this address has no stored value". It is distinct from every
legitimate stored value, including None, False, 0 and "". Always test for it
with is_not_found() rather than comparing against it yourself.
"""

from __future__ import annotations

import typing as _typing


# Helper function to reconstruct the NotFound singleton during unpickle
def _get_not_found_singleton() -> _NotFoundType:
    """Return the NotFound singleton. Called by pickle to reconstruct."""
    return NotFound


class _NotFoundType:
    """Sentinel type marking an address as not found."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<NotFound>"

    def __reduce__(self) -> tuple[_typing.Callable[[], _NotFoundType], tuple[()]]:
        """Pickle support: ensure singleton is preserved."""
        return (_get_not_found_singleton, ())

    def __copy__(self) -> _NotFoundType:
        return self

    def __deepcopy__(self, memo: dict[int, _typing.Any]) -> _NotFoundType:
        return self


NotFound = _NotFoundType()


def is_not_found_value(value: _typing.Any) -> bool:
    """Return True if value is the NotFound sentinel."""
    return value is NotFound
