"""
Shared types for the namespace package.

- Address: tuple of segments produced by parsing a dotted string
- WriteOptions: behavior flags for guarded writes
- WriteStatus / WriteOutcome: explicit result of the shared write walk
- UNSET: marker for "argument not supplied" where None is a valid argument
"""

from __future__ import annotations

import dataclasses as _dataclasses
import enum as _enum
import typing as _typing

# Example: ("server", "port") represents server.port
Address: _typing.TypeAlias = tuple[str, ...]


class _UnsetType:
    """Marker for optional arguments whose valid values include None."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<UNSET>"


UNSET: _typing.Final = _UnsetType()


@_dataclasses.dataclass(frozen=True, slots=True)
class WriteOptions:
    """Flags controlling set_value()."""

    overwrite: bool = False
    dry_run: bool = False
    ignore_errors: bool = False
    hard_write_hierarchy: bool = False


class WriteStatus(_enum.Enum):
    """How a guarded write ended."""

    WRITTEN = "written"
    SKIPPED = "skipped"  # dry run or ignore_errors, nothing stored
    OCCUPIED = "occupied"  # final slot already holds a value
    CONFLICT = "conflict"  # intermediate segment is not a mapping


@_dataclasses.dataclass(frozen=True, slots=True)
class WriteOutcome:
    """
    Result of the shared write walk.

    Attributes:
        status: How the walk ended.
        value: What set_value() returns (the written value, or None).
        existing: The value already stored at the address (OCCUPIED only).
        segment: The blocking segment (CONFLICT only).
    """

    status: WriteStatus
    value: _typing.Any = None
    existing: _typing.Any = None
    segment: str | None = None
