from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, TypeVar, overload

from locatorwire._internal.bindings import Binding, Lifetime
from locatorwire._internal.registration_table import RegistrationKey
from locatorwire._internal.validation import (
    require_class,
    require_contract,
    require_factory,
    type_name,
)
from locatorwire.exceptions import (
    LocatorWireResolverDisposedError,
    LocatorWireUnregisteredTypeError,
)
from locatorwire.lock_mode import LockMode

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DependencyResolver(ABC):
    """Interface for resolvers keyed by type plus an optional contract name."""

    @abstractmethod
    def register(
        self,
        factory: Callable[[], Any],
        service_type: type[Any],
        contract: str | None = None,
    ) -> None:
        """Register a factory called on every resolution."""

    @abstractmethod
    def register_lazy_singleton(
        self,
        factory: Callable[[], Any],
        service_type: type[Any],
        contract: str | None = None,
        *,
        lock_mode: LockMode | None = None,
    ) -> None:
        """Register a factory called at most once, on first resolution."""

    @abstractmethod
    def register_constant(
        self,
        value: Any,
        service_type: type[Any],
        contract: str | None = None,
    ) -> None:
        """Register a pre-built value returned on every resolution."""

    @abstractmethod
    def get_service(self, service_type: type[T], contract: str | None = None) -> T:
        """Return the value of the most recent binding for the type and contract."""

    @abstractmethod
    def get_services(self, service_type: type[T], contract: str | None = None) -> list[T]:
        """Return values of every binding for the type and contract."""

    @abstractmethod
    def has_registration(self, service_type: type[Any], contract: str | None = None) -> bool:
        """Return true when at least one binding exists for the type and contract."""

    @abstractmethod
    def unregister_current(self, service_type: type[Any], contract: str | None = None) -> None:
        """Remove the most recent binding for the type and contract."""

    @abstractmethod
    def unregister_all(self, service_type: type[Any], contract: str | None = None) -> None:
        """Remove every binding for the type and contract."""

    @abstractmethod
    def dispose(self) -> None:
        """Drop all bindings and reject further registrations."""


class DefaultDependencyResolver(DependencyResolver):
    """Keep an ordered stack of bindings per type and contract name.

    Registering under an existing key pushes a new binding; ``get_service``
    returns the newest one and ``get_services`` returns all of them in
    registration order. Registrations and resolutions may run concurrently
    from several threads.
    """

    def __init__(self, *, lock_mode: LockMode = LockMode.THREAD) -> None:
        """Initialize an empty resolver.

        Args:
            lock_mode: Default lock strategy for lazy singleton bindings that
                do not pass their own ``lock_mode``.

        """
        self._lock_mode = lock_mode
        self._bindings: dict[RegistrationKey, list[Binding]] = {}
        self._lock = threading.Lock()
        self._disposed = False

    # region Registration Methods
    def register(
        self,
        factory: Callable[[], Any],
        service_type: type[Any],
        contract: str | None = None,
    ) -> None:
        """Register a transient factory.

        Args:
            factory: Zero-argument callable invoked on every ``get_service``.
            service_type: Type key to bind.
            contract: Optional contract name.

        Raises:
            LocatorWireInvalidRegistrationError: If arguments are invalid.
            LocatorWireResolverDisposedError: If the resolver was disposed.

        """
        require_factory(factory, role="Factory")
        self._add(
            RegistrationKey(service_type, contract),
            Binding(service_type=service_type, lifetime=Lifetime.TRANSIENT, factory=factory),
        )

    def register_lazy_singleton(
        self,
        factory: Callable[[], Any],
        service_type: type[Any],
        contract: str | None = None,
        *,
        lock_mode: LockMode | None = None,
    ) -> None:
        """Register a lazily created singleton.

        Args:
            factory: Zero-argument callable invoked on the first ``get_service``.
            service_type: Type key to bind.
            contract: Optional contract name.
            lock_mode: Lock strategy for first creation. ``None`` uses the
                resolver default.

        Raises:
            LocatorWireInvalidRegistrationError: If arguments are invalid.
            LocatorWireResolverDisposedError: If the resolver was disposed.

        """
        require_factory(factory, role="Factory")
        self._add(
            RegistrationKey(service_type, contract),
            Binding(
                service_type=service_type,
                lifetime=Lifetime.SINGLETON,
                factory=factory,
                lock_mode=lock_mode if lock_mode is not None else self._lock_mode,
            ),
        )

    def register_constant(
        self,
        value: Any,
        service_type: type[Any],
        contract: str | None = None,
    ) -> None:
        """Register a pre-built value.

        Raises:
            LocatorWireInvalidRegistrationError: If arguments are invalid.
            LocatorWireResolverDisposedError: If the resolver was disposed.

        """
        self._add(
            RegistrationKey(service_type, contract),
            Binding(service_type=service_type, lifetime=Lifetime.CONSTANT, value=value),
        )

    def _add(self, key: RegistrationKey, binding: Binding) -> None:
        require_class(key.service_type, role="Service type")
        require_contract(key.contract)
        with self._lock:
            if self._disposed:
                msg = f"Cannot register {type_name(key.service_type)} on a disposed resolver."
                raise LocatorWireResolverDisposedError(msg)
            stack = self._bindings.setdefault(key, [])
            stack.append(binding)
        logger.debug(
            "Registered %s binding for %s (contract=%r, depth=%d)",
            binding.lifetime.name.lower(),
            type_name(key.service_type),
            key.contract,
            len(stack),
        )

    # endregion Registration Methods

    # region Resolution Methods
    @overload
    def get_service(self, service_type: type[T], contract: str | None = None) -> T: ...

    @overload
    def get_service(self, service_type: Any, contract: str | None = None) -> Any: ...

    def get_service(self, service_type: Any, contract: str | None = None) -> Any:
        """Resolve the newest binding for ``service_type`` and ``contract``.

        Raises:
            LocatorWireUnregisteredTypeError: If no binding exists.

        """
        with self._lock:
            stack = self._bindings.get(RegistrationKey(service_type, contract))
            binding = stack[-1] if stack else None
        if binding is None:
            raise LocatorWireUnregisteredTypeError(service_type, contract)
        return binding.produce()

    def get_services(self, service_type: Any, contract: str | None = None) -> list[Any]:
        with self._lock:
            bindings = list(self._bindings.get(RegistrationKey(service_type, contract), ()))
        return [binding.produce() for binding in bindings]

    def has_registration(self, service_type: Any, contract: str | None = None) -> bool:
        with self._lock:
            return bool(self._bindings.get(RegistrationKey(service_type, contract)))

    # endregion Resolution Methods

    def unregister_current(self, service_type: Any, contract: str | None = None) -> None:
        key = RegistrationKey(service_type, contract)
        with self._lock:
            stack = self._bindings.get(key)
            if not stack:
                return
            stack.pop()
            if not stack:
                del self._bindings[key]

    def unregister_all(self, service_type: Any, contract: str | None = None) -> None:
        with self._lock:
            self._bindings.pop(RegistrationKey(service_type, contract), None)

    def dispose(self) -> None:
        with self._lock:
            self._bindings.clear()
            self._disposed = True
        logger.debug("Disposed resolver %r", self)

    @property
    def is_disposed(self) -> bool:
        with self._lock:
            return self._disposed
