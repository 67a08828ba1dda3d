"""
Shared fixtures for namespace tests.
"""

import typing as _typing

import pytest as _pytest

import dotspace.namespace as namespace


@_pytest.fixture
def restore_factories() -> _typing.Iterator[None]:
    """Undo any factory registrations made by a test."""
    before = {name: namespace.resolve_factory(name) for name in namespace.registered_factories()}
    yield
    for name in namespace.registered_factories():
        if name not in before:
            namespace.unregister_factory(name)
    for name, factory in before.items():
        namespace.register_factory(name, factory, replace=True)
