"""
Configuration sources for namespace and alias tables.

A table can be supplied either as a plain mapping or as a zero-argument
callable. Both are wrapped into a ConfigSource whose current() is called
on every lookup, so callable-backed tables stay live.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, Mapping, Protocol, TypeVar, Union, runtime_checkable

_T = TypeVar("_T", covariant=True)

NamespaceTable = Mapping[str, Union[bool, str]]
AliasTable = Mapping[str, Mapping[str, str]]


@runtime_checkable
class ConfigSource(Protocol[_T]):
    """Read access to a configuration table."""

    def current(self) -> _T:
        ...


class ConstantSource(Generic[_T]):
    """Source backed by a fixed value."""

    def __init__(self, value: _T):
        self._value = value

    def current(self) -> _T:
        return self._value

    def __repr__(self) -> str:
        return f"ConstantSource({self._value!r})"


class AccessorSource(Generic[_T]):
    """Source backed by a callable, re-invoked on every read."""

    def __init__(self, accessor: Callable[[], _T], empty: Callable[[], _T]):
        self._accessor = accessor
        self._empty = empty

    def current(self) -> _T:
        value = self._accessor()
        # An accessor may legitimately have nothing configured yet
        return self._empty() if value is None else value

    def __repr__(self) -> str:
        return f"AccessorSource({self._accessor!r})"


def as_source(value: Any) -> ConfigSource[Dict[str, Any]]:
    """
    Wrap a mapping, a callable or an existing source into a ConfigSource.

    None becomes an empty table.
    """
    if isinstance(value, (ConstantSource, AccessorSource)):
        return value
    if value is None:
        return ConstantSource({})
    if callable(value):
        return AccessorSource(value, dict)
    if not isinstance(value, Mapping):
        raise TypeError(f"expected mapping or callable, got {type(value).__name__}")
    return ConstantSource(value)


__all__ = [
    "ConfigSource",
    "ConstantSource",
    "AccessorSource",
    "as_source",
    "NamespaceTable",
    "AliasTable",
]
