# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Property accessors: read a named property off a target object.

Rules never touch targets directly. They go through a PropertyAccessor,
which either returns the current value or raises one of:
    PropertyNotFoundError   - no such property
    PropertyNotReadableError - property exists but cannot be read
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable

from proprules.errors import PropertyNotFoundError, PropertyNotReadableError

__all__ = (
    "AttributeAccessor",
    "FieldMapAccessor",
    "MappingAccessor",
    "PropertyAccessor",
    "default_accessor",
)


@runtime_checkable
class PropertyAccessor(Protocol):
    """Name -> value lookup with explicit not-found errors."""

    def get(self, target: Any, property_name: str) -> Any: ...


def _details(target: Any, property_name: str) -> dict[str, Any]:
    return {"target": type(target).__name__, "property": property_name}


class AttributeAccessor:
    """Read public attributes and properties.

    Example:
        AttributeAccessor().get(customer, "Name")
    """

    def get(self, target: Any, property_name: str) -> Any:
        if property_name.startswith("_"):
            raise PropertyNotReadableError(
                f"Property '{property_name}' is private",
                details=_details(target, property_name),
            )

        descriptor = inspect.getattr_static(type(target), property_name, None)
        if isinstance(descriptor, property) and descriptor.fget is None:
            raise PropertyNotReadableError(
                f"Property '{property_name}' is write-only",
                details=_details(target, property_name),
            )

        try:
            return getattr(target, property_name)
        except AttributeError as e:
            # Distinguish "no such attribute" from a getter that raised
            try:
                inspect.getattr_static(target, property_name)
            except AttributeError:
                raise PropertyNotFoundError(
                    f"'{type(target).__name__}' has no property '{property_name}'",
                    details=_details(target, property_name),
                ) from None
            raise PropertyNotReadableError(
                f"Reading '{property_name}' failed: {e}",
                details=_details(target, property_name),
            ) from e
        except Exception as e:
            raise PropertyNotReadableError(
                f"Reading '{property_name}' failed: {e}",
                details=_details(target, property_name),
            ) from e

    def __repr__(self) -> str:
        return "AttributeAccessor()"


class MappingAccessor:
    """Read keys of a Mapping target (dicts, row objects)."""

    def get(self, target: Any, property_name: str) -> Any:
        if not isinstance(target, Mapping):
            raise PropertyNotReadableError(
                f"Target is not a mapping: {type(target).__name__}",
                details=_details(target, property_name),
            )
        try:
            return target[property_name]
        except KeyError:
            raise PropertyNotFoundError(
                f"Key '{property_name}' not found",
                details={
                    **_details(target, property_name),
                    "available": sorted(map(str, target.keys())),
                },
            ) from None

    def __repr__(self) -> str:
        return "MappingAccessor()"


class FieldMapAccessor:
    """Explicit table of getters: {property_name: getter(target)}.

    Example:
        accessor = FieldMapAccessor({"Age": lambda p: p.age_in_years()})
    """

    def __init__(self, getters: Mapping[str, Callable[[Any], Any]]):
        for name, getter in getters.items():
            if not callable(getter):
                raise TypeError(f"Getter for '{name}' is not callable")
        self._getters: dict[str, Callable[[Any], Any]] = dict(getters)

    def get(self, target: Any, property_name: str) -> Any:
        getter = self._getters.get(property_name)
        if getter is None:
            raise PropertyNotFoundError(
                f"No getter registered for '{property_name}'",
                details={
                    **_details(target, property_name),
                    "available": self.list_names(),
                },
            )
        try:
            return getter(target)
        except Exception as e:
            raise PropertyNotReadableError(
                f"Getter for '{property_name}' failed: {e}",
                details=_details(target, property_name),
            ) from e

    def list_names(self) -> list[str]:
        return list(self._getters.keys())

    def __contains__(self, property_name: str) -> bool:
        return property_name in self._getters

    def __repr__(self) -> str:
        return f"FieldMapAccessor(properties={self.list_names()})"


class _DefaultAccessor:
    """Mappings by key, everything else by attribute."""

    def __init__(self):
        self._attributes = AttributeAccessor()
        self._mapping = MappingAccessor()

    def get(self, target: Any, property_name: str) -> Any:
        if isinstance(target, Mapping):
            return self._mapping.get(target, property_name)
        return self._attributes.get(target, property_name)

    def __repr__(self) -> str:
        return "DefaultAccessor()"


_DEFAULT_ACCESSOR = _DefaultAccessor()


def default_accessor() -> PropertyAccessor:
    """Accessor used when a rule is called without one."""
    return _DEFAULT_ACCESSOR
