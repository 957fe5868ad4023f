from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any, TypeAlias, TypeVar, overload

from typing_extensions import Self

from locatorwire.resolver import DependencyResolver

T = TypeVar("T")

Factory: TypeAlias = Callable[[], Any]
"""A zero-argument callable producing a registered value."""

Override: TypeAlias = tuple[type[Any], Any]
"""A ``(parameter_type, parameter_instance)`` pair passed to a constructor."""


class IContainerRegistry(ABC):
    """Interface for the registration side of a container."""

    # Shapes: register(From, To), register(From, To, factory=...),
    # register(From, To, "name"), register(From, To, "name", factory=...)
    @abstractmethod
    def register(
        self,
        from_type: type[Any],
        to_type: type[Any],
        name: str | None = None,
        *,
        factory: Factory | None = None,
    ) -> Self:
        """Register a transient mapping from ``from_type`` to ``to_type``."""

    @abstractmethod
    def register_singleton(
        self,
        from_type: type[Any],
        to_type: type[Any],
        name: str | None = None,
        *,
        factory: Factory | None = None,
    ) -> Self:
        """Register a lazily created singleton mapping."""

    @abstractmethod
    def register_instance(
        self,
        service_type: type[Any],
        instance: Any,
        name: str | None = None,
    ) -> Self:
        """Register a pre-built instance."""

    @abstractmethod
    def is_registered(self, service_type: type[Any], name: str | None = None) -> bool:
        """Return true when the type is registered under the contract name."""


class IContainerProvider(ABC):
    """Interface for the resolution side of a container."""

    # Overload 1: resolve(Type) / resolve(Type, "name")
    @overload
    @abstractmethod
    def resolve(self, service_type: type[T], name: str | None = None) -> T: ...

    # Overload 2: resolve(Type, overrides=[...]) / resolve(Type, "name", overrides=[...])
    @overload
    @abstractmethod
    def resolve(
        self,
        service_type: type[T],
        name: str | None = None,
        *,
        overrides: Sequence[Override],
    ) -> T | None: ...

    @abstractmethod
    def resolve(
        self,
        service_type: Any,
        name: str | None = None,
        *,
        overrides: Sequence[Override] | None = None,
    ) -> Any:
        """Resolve a service, optionally constructing it with constructor overrides."""


class IContainerExtension(IContainerRegistry, IContainerProvider):
    """Interface for a container backed by a ``DependencyResolver``."""

    @property
    @abstractmethod
    def instance(self) -> DependencyResolver:
        """Return the backing resolver."""

    @abstractmethod
    def finalize_extension(self) -> None:
        """Finish configuration and release the extension."""

    @abstractmethod
    def dispose(self) -> None:
        """Release the extension and restore global resolver state."""
