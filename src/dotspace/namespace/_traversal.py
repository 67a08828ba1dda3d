"""
The generic walk behind every namespace operation.

traverse() walks a dotted address through nested mappings one segment at a
time. At each segment it fills in a Traveller with the step state and hands
it to a step handler. The handler decides what the step means: read through,
create a missing container, stop with a result, or raise.

Example:
    >>> def find_b(t: Traveller) -> None:
    ...     if t.segment == "b":
    ...         t.finish(t.next)
    >>> traverse({"a": {"b": 1}}, "a.b", find_b)
    1
"""

from __future__ import annotations

import collections.abc as _abc
import dataclasses as _dataclasses
import logging as _logging
import typing as _typing

import dotspace.namespace._address as _address
import dotspace.namespace._errors as _errors
import dotspace.namespace._sentinel as _sentinel
import dotspace.namespace._types as _types

_logger = _logging.getLogger(__name__)

StepHandler: _typing.TypeAlias = _typing.Callable[["Traveller"], None]


@_dataclasses.dataclass(slots=True)
class Traveller:
    """
    Mutable step state for one traverse() call.

    The engine updates index, segment, current, next, key_exists and
    is_final before each handler call. Handlers read the step state and the
    caller-supplied settings (options, fallback, error_message), and act
    through finish() and replace_next().

    A Traveller is created per call and discarded afterwards.
    """

    container: _abc.Mapping[str, _typing.Any]
    address: str
    segments: _types.Address
    handler: StepHandler | None = None
    options: _types.WriteOptions = _types.WriteOptions()
    fallback: _typing.Any = _types.UNSET
    error_message: str | None = None

    index: int = -1
    segment: str = ""
    current: _typing.Any = None
    next: _typing.Any = _sentinel.NotFound
    key_exists: bool = False
    is_final: bool = False

    finished: bool = False
    result: _typing.Any = None

    @property
    def has_fallback(self) -> bool:
        """True if the caller supplied a fallback value."""
        return self.fallback is not _types.UNSET

    @property
    def path(self) -> str:
        """The address up to and including the current segment."""
        return _address.SEPARATOR.join(self.segments[: self.index + 1])

    def finish(self, result: _typing.Any = None) -> None:
        """Stop the walk after this step and make result the return value."""
        self.finished = True
        self.result = result

    def replace_next(self, value: _typing.Any) -> None:
        """
        Store value under the current segment and continue the walk into it.

        Raises:
            TypeError: If the current value cannot hold keys.
        """
        if not isinstance(self.current, _abc.MutableMapping):
            raise TypeError(
                f"cannot store {self.segment!r} in {type(self.current).__name__}"
            )
        self.current[self.segment] = value
        self.next = value
        self.key_exists = True


def _read_step(current: _typing.Any, segment: str) -> tuple[bool, _typing.Any]:
    """Read one segment; anything that is not a mapping holding it is absent."""
    if not isinstance(current, _abc.Mapping):
        return False, _sentinel.NotFound
    try:
        if segment not in current:
            return False, _sentinel.NotFound
        return True, current[segment]
    except (KeyError, TypeError):
        return False, _sentinel.NotFound


def check_root(
    container: _typing.Any,
    operation: str = "traverse",
    *,
    address: _typing.Any = None,
) -> None:
    """
    Raises:
        InvalidRootError: If container is not a mapping. The message names
            address when one is given.
    """
    if not isinstance(container, _abc.Mapping):
        raise _errors.InvalidRootError(container, operation=operation, address=address)


def walk(traveller: Traveller, *, require_result: bool = True) -> _typing.Any:
    """
    Run a prepared Traveller over its segments.

    Returns:
        The result passed to finish(), or None when require_result is False
        and no step finished.

    Raises:
        TraversalIncompleteError: If require_result is True and the handler
            never finished.
    """
    traveller.finished = False
    traveller.result = None
    traveller.current = traveller.container
    last_index = len(traveller.segments) - 1

    for index, segment in enumerate(traveller.segments):
        traveller.index = index
        traveller.segment = segment
        traveller.key_exists, traveller.next = _read_step(traveller.current, segment)
        traveller.is_final = index >= last_index

        if traveller.handler is not None:
            traveller.handler(traveller)

        if traveller.finished:
            _logger.debug(
                "Walk of %r finished at segment %d (%r)",
                traveller.address,
                index,
                segment,
            )
            return traveller.result
        traveller.current = traveller.next

    if require_result:
        raise _errors.TraversalIncompleteError(traveller.address)
    return None


def traverse(
    container: _abc.Mapping[str, _typing.Any],
    address: _typing.Any,
    handler: StepHandler | None,
    *,
    options: _types.WriteOptions | None = None,
    fallback: _typing.Any = _types.UNSET,
    error_message: str | None = None,
    require_result: bool = True,
    operation: str = "traverse",
) -> _typing.Any:
    """
    Walk address through container, calling handler at every segment.

    Args:
        container: The root mapping.
        address: Dotted address; None means the root itself.
        handler: Step handler called with the Traveller at each segment.
        options: Write flags made available to the handler.
        fallback: Value made available to the handler for missing paths.
        error_message: Custom message made available to the handler.
        require_result: Treat a walk that never finishes as an error.
            Pass False to walk purely for the handler's side effects.
        operation: Name used in error messages.

    Returns:
        The container itself for a None address, otherwise the result the
        handler passed to finish().

    Raises:
        InvalidRootError: If container is not a mapping.
        InvalidAddressError: If address is not a string or finite number.
        TraversalIncompleteError: If require_result is True and the handler
            never finished.
    """
    check_root(container, operation, address=address)
    if address is None:
        return container

    text = _address.normalize(address)
    traveller = Traveller(
        container=container,
        address=text,
        segments=_address.parse(text),
        handler=handler,
        options=options or _types.WriteOptions(),
        fallback=fallback,
        error_message=error_message,
    )
    return walk(traveller, require_result=require_result)
