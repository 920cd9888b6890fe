"""Named string properties of translatable objects.

A translatable object exposes an ordered set of named string properties
that the localization merger reads and writes by name. Rather than
reflecting over arbitrary objects at call time, each kind of target is
wrapped in a PropertyAccessor that fixes its declared names up front.

Components:
    PropertyAccessor - Protocol for named property access (structural typing)
    AttributeAccessor - Public ``str`` attributes of a class or instance
    MappingAccessor - Keys of a mutable mapping

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import inspect
from types import MemberDescriptorType
from typing import TYPE_CHECKING, Protocol

from stringbank.errors import PropertyAccessError

if TYPE_CHECKING:
    from collections.abc import Iterable, MutableMapping, Sequence

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "PropertyAccessor",
    # Adapters
    "AttributeAccessor",
    "MappingAccessor",
]


class PropertyAccessor(Protocol):
    """Protocol for reading and writing the named string properties of a target.

    Implementations must report an unknown name, or a value the target
    rejects, by raising PropertyAccessError from set_value().

    Attributes:
        type_name: Name of the target type; the default translation file
            prefix ("LegalityStrings" -> "LegalityStrings_en.txt")
    """

    @property
    def type_name(self) -> str:
        """Name of the target type."""

    def list_names(self) -> Sequence[str]:
        """Return property names in declaration order."""

    def get_value(self, name: str) -> str:
        """Return the current value of a property.

        Raises:
            PropertyAccessError: If name is not a declared property
        """

    def set_value(self, name: str, value: str) -> None:
        """Set a property.

        Raises:
            PropertyAccessError: If name is not a declared property or the
                target rejects the value
        """


def _is_computed(cls: type, name: str) -> bool:
    # Properties, methods and other descriptors; slot fields are plain storage.
    static = inspect.getattr_static(cls, name, None)
    return hasattr(type(static), "__get__") and not isinstance(static, MemberDescriptorType)


def _declared_str_attributes(target: object) -> tuple[str, ...]:
    cls = target if isinstance(target, type) else type(target)
    namespaces = [vars(klass) for klass in reversed(cls.__mro__) if klass is not object]
    if not isinstance(target, type) and hasattr(target, "__dict__"):
        namespaces.append(vars(target))
    names = dict.fromkeys(
        name for namespace in namespaces for name in namespace if not name.startswith("_")
    )
    return tuple(
        name
        for name in names
        if not _is_computed(cls, name) and isinstance(getattr(target, name, None), str)
    )


class AttributeAccessor:
    """PropertyAccessor over the public ``str`` attributes of a class or instance.

    Declared names default to every public attribute whose current value is
    a ``str``, in definition order (base classes first). Pass ``names`` to
    restrict or reorder them.

    Example:
        >>> class MessageStrings:
        ...     Greeting = "Hello"
        ...     Farewell = "Goodbye"
        >>> accessor = AttributeAccessor(MessageStrings)
        >>> accessor.list_names()
        ('Greeting', 'Farewell')
        >>> accessor.set_value("Greeting", "Bonjour")
        >>> MessageStrings.Greeting
        'Bonjour'
    """

    __slots__ = ("_names", "_target")

    def __init__(self, target: object, names: Iterable[str] | None = None) -> None:
        """Initialize attribute accessor.

        Args:
            target: Class or instance holding the string attributes
            names: Declared property names (default: discovered ``str`` attributes)
        """
        self._target = target
        self._names: tuple[str, ...] = (
            tuple(names) if names is not None else _declared_str_attributes(target)
        )

    @property
    def type_name(self) -> str:
        """Name of the wrapped class (or of the instance's class)."""
        cls = self._target if isinstance(self._target, type) else type(self._target)
        return cls.__name__

    def list_names(self) -> tuple[str, ...]:
        """Return declared property names in declaration order."""
        return self._names

    def _check(self, name: str) -> None:
        if name not in self._names:
            msg = f"{self.type_name} has no property '{name}'"
            raise PropertyAccessError(msg, property_name=name)

    def get_value(self, name: str) -> str:
        """Return the current value of a declared attribute.

        Raises:
            PropertyAccessError: If name is not declared
        """
        self._check(name)
        return str(getattr(self._target, name))

    def set_value(self, name: str, value: str) -> None:
        """Assign a declared attribute.

        Raises:
            PropertyAccessError: If name is not declared or the target
                refuses the assignment (read-only property, frozen instance)
        """
        self._check(name)
        try:
            setattr(self._target, name, value)
        except (AttributeError, TypeError, ValueError) as e:
            msg = f"Cannot set {self.type_name}.{name}: {e}"
            raise PropertyAccessError(msg, property_name=name) from e


class MappingAccessor:
    """PropertyAccessor over a mutable mapping with a fixed key set.

    The keys present at construction are the declared properties; setting a
    key that was not present is rejected rather than added.

    Example:
        >>> strings = {"Title": "Editor", "Save": "Save"}
        >>> accessor = MappingAccessor(strings, "EditorStrings")
    """

    __slots__ = ("_mapping", "_names", "_type_name")

    def __init__(self, mapping: MutableMapping[str, str], type_name: str) -> None:
        """Initialize mapping accessor.

        Args:
            mapping: Mapping of property name to value (modified in place)
            type_name: Name used as the default translation file prefix
        """
        self._mapping = mapping
        self._names: tuple[str, ...] = tuple(mapping)
        self._type_name = type_name

    @property
    def type_name(self) -> str:
        """Name given at construction."""
        return self._type_name

    def list_names(self) -> tuple[str, ...]:
        """Return the keys present at construction, in mapping order."""
        return self._names

    def get_value(self, name: str) -> str:
        """Return the value for a declared key.

        Raises:
            PropertyAccessError: If name is not declared
        """
        if name not in self._names:
            msg = f"{self._type_name} has no property '{name}'"
            raise PropertyAccessError(msg, property_name=name)
        return self._mapping[name]

    def set_value(self, name: str, value: str) -> None:
        """Replace the value for a declared key.

        Raises:
            PropertyAccessError: If name is not declared
        """
        if name not in self._names:
            msg = f"{self._type_name} has no property '{name}'"
            raise PropertyAccessError(msg, property_name=name)
        self._mapping[name] = value
