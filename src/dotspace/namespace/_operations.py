"""
Public operations, each a step handler plus a call into the shared walk.

Read operations never raise for missing paths; they return NotFound (or a
caller-supplied fallback). Write operations refuse to overwrite by default.
"""

from __future__ import annotations

import collections.abc as _abc
import logging as _logging
import typing as _typing

import dotspace.namespace._errors as _errors
import dotspace.namespace._factories as _factories
import dotspace.namespace._sentinel as _sentinel
import dotspace.namespace._traversal as _traversal
import dotspace.namespace._types as _types

_logger = _logging.getLogger(__name__)


# =============================================================================
# Step handlers
# =============================================================================


def _read_handler(t: _traversal.Traveller) -> None:
    """Stop with NotFound (or the fallback) at the first missing segment."""
    if not t.key_exists or t.next is _sentinel.NotFound:
        t.finish(t.fallback if t.has_fallback else _sentinel.NotFound)
    elif t.is_final:
        t.finish(t.next)


def _required_handler(t: _traversal.Traveller) -> None:
    """Raise PathRequiredError at the first missing segment."""
    if not t.key_exists or t.next is _sentinel.NotFound:
        raise _errors.PathRequiredError(t.address, t.error_message)
    if t.is_final:
        t.finish(t.next)


def _write_handler(value: _typing.Any) -> _traversal.StepHandler:
    """Build the guarded-write handler; it finishes with a WriteOutcome."""

    def handler(t: _traversal.Traveller) -> None:
        opts = t.options
        if not t.is_final:
            if not t.key_exists:
                if opts.dry_run:
                    t.finish(_types.WriteOutcome(_types.WriteStatus.SKIPPED))
                else:
                    t.replace_next({})
            elif not isinstance(t.next, _abc.MutableMapping):
                if opts.ignore_errors:
                    t.finish(_types.WriteOutcome(_types.WriteStatus.SKIPPED))
                elif opts.hard_write_hierarchy:
                    if opts.dry_run:
                        t.finish(_types.WriteOutcome(_types.WriteStatus.SKIPPED))
                    else:
                        _logger.debug(
                            "Replacing %s at %r with a mapping",
                            type(t.next).__name__,
                            t.path,
                        )
                        t.replace_next({})
                else:
                    t.finish(
                        _types.WriteOutcome(
                            _types.WriteStatus.CONFLICT,
                            existing=t.next,
                            segment=t.segment,
                        )
                    )
            return

        if t.key_exists and not opts.overwrite:
            if opts.dry_run or opts.ignore_errors:
                t.finish(_types.WriteOutcome(_types.WriteStatus.SKIPPED))
            else:
                t.finish(_types.WriteOutcome(_types.WriteStatus.OCCUPIED, existing=t.next))
        elif opts.dry_run:
            t.finish(_types.WriteOutcome(_types.WriteStatus.SKIPPED))
        else:
            t.replace_next(value)
            t.finish(_types.WriteOutcome(_types.WriteStatus.WRITTEN, value=value))

    return handler


def _create_handler(
    factories: tuple[_factories.Factory, ...],
    intermediate: _factories.Factory | None,
    check_only: bool,
) -> _traversal.StepHandler:
    """
    Build the get-or-create handler.

    Missing intermediate segments come from intermediate when it is set,
    otherwise from the depth-indexed factories like the final segment.
    """

    def handler(t: _traversal.Traveller) -> None:
        if not t.key_exists:
            if check_only:
                t.finish(_sentinel.NotFound)
                return
            if intermediate is not None and not t.is_final:
                created = intermediate()
            else:
                created = _factories.factory_for_depth(factories, t.index)()
            if not t.is_final and not isinstance(created, _abc.MutableMapping):
                raise _errors.HierarchyConflictError(t.address, t.segment, created)
            t.replace_next(created)
        elif not t.is_final and not isinstance(t.next, _abc.MutableMapping):
            if check_only:
                t.finish(_sentinel.NotFound)
                return
            raise _errors.HierarchyConflictError(t.address, t.segment, t.next)
        if t.is_final:
            t.finish(t.next)

    return handler


# =============================================================================
# Operations
# =============================================================================


def get_or_create(
    container: _abc.MutableMapping[str, _typing.Any],
    address: str | None,
    factory: str | _factories.Factory | _typing.Sequence[str | _factories.Factory] | None = None,
    *,
    intermediate: str | _factories.Factory | None = None,
    check_only: bool = False,
) -> _typing.Any:
    """
    Return the value at address, creating any missing part of the path.

    With a single factory, missing intermediate segments become empty dicts
    and a missing final segment is filled from factory. With a list of
    factories, the segment at depth i is filled from entry i and the last
    entry repeats for deeper segments.

    Args:
        container: The root mapping.
        address: Dotted address; None returns the container.
        factory: Registered factory name, zero-argument callable, or a list
            of either indexed by depth. Defaults to "dict".
        intermediate: Factory for every missing segment except the last,
            overriding factory there. Must produce mappings.
        check_only: Never create anything; return NotFound at the first
            missing segment.

    Raises:
        HierarchyConflictError: If an intermediate segment holds, or a
            factory produces for it, a value that is not a mapping.
        UnknownFactoryError: If factory names an unregistered factory.

    Example:
        >>> data = {}
        >>> get_or_create(data, "a.b.c")
        {}
        >>> data
        {'a': {'b': {'c': {}}}}
        >>> get_or_create(data, "x.y", ["dict", "list"])
        []
    """
    factories = _factories.resolve_factories(factory)
    if intermediate is not None:
        branch: _factories.Factory | None = _factories.resolve_factory(intermediate)
    elif isinstance(factory, (list, tuple)):
        branch = None
    else:
        branch = dict
    return _traversal.traverse(
        container,
        address,
        _create_handler(factories, branch, check_only),
        operation="get_or_create",
    )


def get_if_exists(
    container: _abc.Mapping[str, _typing.Any],
    address: str | None,
    fallback: _typing.Any = _types.UNSET,
) -> _typing.Any:
    """
    Return the value at address, or NotFound if nothing is stored there.

    Stored None, False, 0 and "" are returned as-is; only a missing key
    yields NotFound.

    Args:
        container: The root mapping.
        address: Dotted address; None returns the container.
        fallback: Returned instead of NotFound when the path is missing.
            Any value is allowed, None included.
    """
    return _traversal.traverse(
        container,
        address,
        _read_handler,
        fallback=fallback,
        operation="get_if_exists",
    )


def get_must_exist(
    container: _abc.Mapping[str, _typing.Any],
    address: str | None,
    error_message: str | None = None,
) -> _typing.Any:
    """
    Return the value at address or raise.

    Raises:
        PathRequiredError: If nothing is stored at address. The message is
            error_message if given, else one naming the address.
    """
    return _traversal.traverse(
        container,
        address,
        _required_handler,
        error_message=error_message,
        operation="get_must_exist",
    )


def exists(container: _abc.Mapping[str, _typing.Any], address: str | None) -> bool:
    """True if anything, None included, is stored at address."""
    return not is_not_found(get_if_exists(container, address))


def is_not_found(value: _typing.Any, address: _typing.Any = _types.UNSET) -> bool:
    """
    Test for the NotFound sentinel.

    With one argument, checks value itself. With two, treats value as a
    container and checks the result of get_if_exists(value, address).
    """
    if address is not _types.UNSET:
        value = get_if_exists(value, address)
    return _sentinel.is_not_found_value(value)


def write(
    container: _abc.MutableMapping[str, _typing.Any],
    address: str,
    value: _typing.Any,
    options: _types.WriteOptions | None = None,
) -> _types.WriteOutcome:
    """
    Run the guarded write walk and report how it ended.

    Unlike set_value(), this never raises OverwriteError or
    HierarchyConflictError; those cases come back as OCCUPIED and CONFLICT
    outcomes.

    Raises:
        InvalidAddressError: If address is None or not a valid address.
    """
    if address is None:
        raise _errors.InvalidAddressError(address, "address cannot be None")
    _traversal.check_root(container, operation="set_value", address=address)
    outcome: _types.WriteOutcome = _traversal.traverse(
        container,
        address,
        _write_handler(value),
        options=options,
        operation="set_value",
    )
    _logger.debug("Write to %r: %s", address, outcome.status.value)
    return outcome


def set_value(
    container: _abc.MutableMapping[str, _typing.Any],
    address: str,
    value: _typing.Any,
    *,
    overwrite: bool = False,
    dry_run: bool = False,
    ignore_errors: bool = False,
    hard_write_hierarchy: bool = False,
) -> _typing.Any:
    """
    Store value at address, creating intermediate dicts as needed.

    Args:
        container: The root mapping.
        address: Dotted address. None is rejected.
        value: The value to store.
        overwrite: Replace a value that is already stored at address.
        dry_run: Walk and check without storing anything.
        ignore_errors: Turn overwrite refusals and hierarchy conflicts into
            a silent no-op that returns None.
        hard_write_hierarchy: Replace non-mapping intermediate values with
            empty dicts instead of failing.

    Returns:
        The stored value, or None when nothing was stored.

    Raises:
        OverwriteError: If address is occupied and overwrite is False.
        HierarchyConflictError: If an intermediate segment holds a value
            that is not a mapping.
        InvalidAddressError: If address is None or not a valid address.

    Example:
        >>> config = {}
        >>> set_value(config, "server.port", 3000)
        3000
        >>> set_value(config, "server.port", 8080, overwrite=True)
        8080
    """
    options = _types.WriteOptions(
        overwrite=overwrite,
        dry_run=dry_run,
        ignore_errors=ignore_errors,
        hard_write_hierarchy=hard_write_hierarchy,
    )
    outcome = write(container, address, value, options)
    if outcome.status is _types.WriteStatus.OCCUPIED:
        raise _errors.OverwriteError(str(address), outcome.existing)
    if outcome.status is _types.WriteStatus.CONFLICT:
        raise _errors.HierarchyConflictError(str(address), outcome.segment or "", outcome.existing)
    return outcome.value


def remove(
    container: _abc.MutableMapping[str, _typing.Any],
    address: str,
) -> _typing.Any:
    """
    Delete the value at address and return it.

    Nothing is created on the way. A missing path is not an error.

    Returns:
        The removed value, or NotFound if nothing was stored at address.

    Raises:
        InvalidAddressError: If address is None or not a valid address.
    """
    if address is None:
        raise _errors.InvalidAddressError(address, "address cannot be None")

    def handler(t: _traversal.Traveller) -> None:
        if not t.key_exists:
            t.finish(_sentinel.NotFound)
        elif t.is_final:
            if not isinstance(t.current, _abc.MutableMapping):
                raise TypeError(
                    f"cannot delete {t.segment!r} from {type(t.current).__name__}"
                )
            del t.current[t.segment]
            t.finish(t.next)

    removed = _traversal.traverse(container, address, handler, operation="remove")
    if removed is not _sentinel.NotFound:
        _logger.debug("Removed %r", address)
    return removed


def leaf_node(
    container: _abc.MutableMapping[str, _typing.Any],
    address: str,
    default: _typing.Any,
) -> _typing.Any:
    """
    Store default at address unless something is already there.

    Returns whatever is stored at address afterwards: default if it was
    written, otherwise the existing value (None, 0 and "" included). Useful
    for lazy initialization of caches and registries. Not atomic across
    threads.

    Raises:
        HierarchyConflictError: If an intermediate segment holds a value
            that is not a mapping.
    """
    outcome = write(container, address, default)
    if outcome.status is _types.WriteStatus.OCCUPIED:
        return outcome.existing
    if outcome.status is _types.WriteStatus.CONFLICT:
        raise _errors.HierarchyConflictError(str(address), outcome.segment or "", outcome.existing)
    return outcome.value
