"""
Exceptions raised by the namespace package.

Every error derives from NamespaceError and, where an address was being
processed, carries it in the ``address`` attribute and embeds it in the
message.
"""

from __future__ import annotations

import typing as _typing


class NamespaceError(Exception):
    """Base class for all namespace errors."""

    def __init__(self, message: str, *, address: str | None = None) -> None:
        self.address = address
        super().__init__(message)


class InvalidRootError(NamespaceError, TypeError):
    """Raised when the target container is not a mapping."""

    def __init__(
        self,
        root: _typing.Any,
        *,
        operation: str = "namespace",
        address: _typing.Any = None,
    ) -> None:
        self.root = root
        target = "" if address is None else f' for "{address}"'
        super().__init__(
            f"{operation}: object is not a valid namespace root{target} "
            f"(got {type(root).__name__})",
            address=None if address is None else str(address),
        )


class InvalidAddressError(NamespaceError, ValueError):
    """Raised when an address cannot be turned into segments."""

    def __init__(self, address: _typing.Any, reason: str) -> None:
        super().__init__(
            f"address is not valid: {address!r} ({reason})",
            address=address if isinstance(address, str) else None,
        )


class PathRequiredError(NamespaceError, LookupError):
    """Raised by get_must_exist() when nothing is stored at the address."""

    def __init__(self, address: str, message: str | None = None) -> None:
        super().__init__(message or f'Property not found: "{address}"', address=address)


class OverwriteError(NamespaceError):
    """Raised when a write hits an occupied slot without overwrite permission."""

    def __init__(self, address: str, existing: _typing.Any) -> None:
        self.existing = existing
        super().__init__(
            f'set_value: cannot overwrite existing value at "{address}"',
            address=address,
        )


class HierarchyConflictError(NamespaceError):
    """Raised when an intermediate segment holds a value that is not a mapping."""

    def __init__(self, address: str, segment: str, blocker: _typing.Any) -> None:
        self.segment = segment
        self.blocker = blocker
        super().__init__(
            f'no valid object hierarchy to "{address}": segment {segment!r} '
            f"holds {type(blocker).__name__}",
            address=address,
        )


class TraversalIncompleteError(NamespaceError, RuntimeError):
    """Raised when a step handler walks every segment without finishing."""

    def __init__(self, address: str) -> None:
        super().__init__(
            f'traverse: walk of "{address}" ended without the handler finishing',
            address=address,
        )


class UnknownFactoryError(NamespaceError, LookupError):
    """Raised when a default-value factory name is not registered."""

    def __init__(self, name: str, known: _typing.Iterable[str]) -> None:
        self.name = name
        super().__init__(
            f"Unknown factory {name!r}; registered: {', '.join(sorted(known))}"
        )
