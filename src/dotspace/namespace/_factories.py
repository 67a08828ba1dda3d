"""
Named factories for values created by get_or_create().

Factories are looked up by name in a registry or passed directly as
zero-argument callables. Names are never evaluated as code.
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import dotspace.namespace._errors as _errors

_logger = _logging.getLogger(__name__)

Factory: _typing.TypeAlias = _typing.Callable[[], _typing.Any]

DEFAULT_FACTORY = "dict"

_REGISTRY: dict[str, Factory] = {
    "dict": dict,
    "list": list,
    "set": set,
    "null": lambda: None,
}


def register_factory(name: str, factory: Factory, *, replace: bool = False) -> None:
    """
    Register a named factory.

    Args:
        name: Name used to refer to the factory.
        factory: Zero-argument callable returning a fresh value.
        replace: Allow replacing an already registered name.

    Raises:
        TypeError: If factory is not callable.
        ValueError: If name is taken and replace is False.
    """
    if not callable(factory):
        raise TypeError(f"factory for {name!r} must be callable")
    if name in _REGISTRY and not replace:
        raise ValueError(f"factory {name!r} is already registered")
    _logger.debug("Registering factory %r", name)
    _REGISTRY[name] = factory


def unregister_factory(name: str) -> None:
    """Remove a registered factory; built-in names can be removed too."""
    if name not in _REGISTRY:
        raise _errors.UnknownFactoryError(name, _REGISTRY)
    del _REGISTRY[name]


def registered_factories() -> list[str]:
    return sorted(_REGISTRY)


def resolve_factory(factory: str | Factory | None) -> Factory:
    """
    Turn a factory name or callable into a callable.

    None resolves to the "dict" factory.

    Raises:
        UnknownFactoryError: If a name is not registered.
        TypeError: If factory is neither a string nor callable.
    """
    if factory is None:
        factory = DEFAULT_FACTORY
    if isinstance(factory, str):
        try:
            return _REGISTRY[factory]
        except KeyError:
            raise _errors.UnknownFactoryError(factory, _REGISTRY) from None
    if callable(factory):
        return factory
    raise TypeError(f"factory must be a name or callable, got {type(factory).__name__}")


def resolve_factories(
    factories: str | Factory | _typing.Sequence[str | Factory] | None,
) -> tuple[Factory, ...]:
    """
    Resolve a factory, or a list of factories indexed by segment depth.

    A single name or callable resolves to a one-element tuple. In a list,
    entry i serves the segment at depth i and the last entry serves every
    deeper segment.

    Raises:
        UnknownFactoryError: If a name is not registered.
        TypeError: If an entry is neither a string nor callable.
        ValueError: If the list is empty.
    """
    if not isinstance(factories, (list, tuple)):
        return (resolve_factory(factories),)
    if not factories:
        raise ValueError("factory list cannot be empty")
    return tuple(resolve_factory(f) for f in factories)


def factory_for_depth(factories: tuple[Factory, ...], depth: int) -> Factory:
    """Pick the factory for a segment depth; the last entry repeats."""
    return factories[min(depth, len(factories) - 1)]
