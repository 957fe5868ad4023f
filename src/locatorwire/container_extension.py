from __future__ import annotations

import functools
import inspect
import logging
import threading
from collections.abc import Callable, Generator, Sequence
from contextlib import contextmanager
from types import TracebackType
from typing import Any, TypeVar, overload

from typing_extensions import Self

from locatorwire._internal.registration_table import RegistrationKey, RegistrationTable
from locatorwire._internal.validation import (
    require_class,
    require_contract,
    require_factory,
    type_name,
)
from locatorwire.container_interface import Factory, IContainerExtension, Override
from locatorwire.exceptions import LocatorWireConstructionError
from locatorwire.locator import Locator
from locatorwire.locator import locator as default_locator
from locatorwire.lock_mode import LockMode
from locatorwire.resolver import DefaultDependencyResolver, DependencyResolver

T = TypeVar("T")

logger = logging.getLogger(__name__)


class LocatorContainerExtension(IContainerExtension):
    """Serve a registry/resolver container contract from a ``DependencyResolver``.

    Every registration is recorded in an internal registration table and then
    bound on the backing resolver, which performs all ordinary resolutions.
    The table is only consulted by ``resolve(..., overrides=...)``.

    Creating an extension installs its resolver in the locator slot;
    ``dispose`` swaps in a fresh empty resolver exactly once, however many
    times it is called.

    Warning:
        ``resolve(..., overrides=...)`` constructs only when the requested
        key has **no** recorded registration, which always fails with
        ``LocatorWireConstructionError`` because there is no target type. When
        the key **is** registered it returns ``None`` without constructing.
        Callers wanting a working instance should use plain ``resolve``.

    """

    def __init__(
        self,
        resolver: DependencyResolver | None = None,
        *,
        locator: Locator | None = None,
        lock_mode: LockMode = LockMode.THREAD,
    ) -> None:
        """Create the extension and install its resolver as the current one.

        Args:
            resolver: Backing resolver. A new ``DefaultDependencyResolver`` is
                created when omitted.
            locator: Locator slot to install into. Defaults to the
                process-wide ``locatorwire.locator.locator``.
            lock_mode: Lock strategy for lazy singletons of a newly created
                resolver. Ignored when ``resolver`` is given.

        Examples:
            .. code-block:: python

                extension = LocatorContainerExtension()
                extension.register(Repository, SqlRepository)
                repository = extension.resolve(Repository)
                extension.dispose()

        """
        self._locator = locator if locator is not None else default_locator
        self._instance = (
            resolver if resolver is not None else DefaultDependencyResolver(lock_mode=lock_mode)
        )
        self._types = RegistrationTable()
        self._dispose_lock = threading.Lock()

        self._locator.set_current(self._instance)
        self._dispose_action: Callable[[], Any] | None = self._locator.reset
        logger.debug("Installed resolver %r on locator %r", self._instance, self._locator)

    @property
    def instance(self) -> DependencyResolver:
        """Return the backing resolver owned by this extension."""
        return self._instance

    @property
    def is_disposed(self) -> bool:
        with self._dispose_lock:
            return self._dispose_action is None

    # region Registration Methods
    def register(
        self,
        from_type: type[Any],
        to_type: type[Any],
        name: str | None = None,
        *,
        factory: Factory | None = None,
    ) -> Self:
        """Register a transient mapping.

        Each resolution builds a new ``to_type`` with no arguments, or calls
        ``factory`` when given.

        Args:
            from_type: Requested type.
            to_type: Concrete type recorded for ``from_type``.
            name: Optional contract name.
            factory: Optional zero-argument callable invoked on every
                resolution instead of ``to_type()``.

        Returns:
            The extension, for chained calls.

        Raises:
            LocatorWireInvalidRegistrationError: If a type is not a class, the
                name is not a string, or the factory is not callable.

        Notes:
            If the backing resolver rejects the binding, the registration
            table entry for the key is restored to its previous value.

        """
        with self._recording(from_type, to_type, name, factory) as creator:
            self._instance.register(creator, from_type, name)
        return self

    def register_singleton(
        self,
        from_type: type[Any],
        to_type: type[Any],
        name: str | None = None,
        *,
        factory: Factory | None = None,
    ) -> Self:
        """Register a lazy singleton mapping.

        The value is created on first resolution, with the same
        ``to_type()``-or-``factory()`` rule as ``register``, and reused after.

        Returns:
            The extension, for chained calls.

        Raises:
            LocatorWireInvalidRegistrationError: If arguments are invalid.

        """
        with self._recording(from_type, to_type, name, factory) as creator:
            self._instance.register_lazy_singleton(creator, from_type, name)
        return self

    def register_instance(
        self,
        service_type: type[Any],
        instance: Any,
        name: str | None = None,
    ) -> Self:
        """Register ``instance`` as the value returned for ``service_type``.

        Instances are not recorded in the registration table.

        Returns:
            The extension, for chained calls.

        """
        self._instance.register_constant(instance, service_type, name)
        return self

    @contextmanager
    def _recording(
        self,
        from_type: type[Any],
        to_type: type[Any],
        name: str | None,
        factory: Factory | None,
    ) -> Generator[Factory, None, None]:
        # Records the table entry, yields the creator for the backing binding,
        # and puts the previous entry back if binding fails.
        require_class(from_type, role="Registered type")
        require_class(to_type, role=f"Target type for {type_name(from_type)}")
        require_contract(name)
        if factory is not None:
            require_factory(factory, role=f"Factory for {type_name(from_type)}")

        key = RegistrationKey(from_type, name)
        previous = self._types.record(key, to_type)
        try:
            if factory is not None:
                yield factory
            else:
                yield functools.partial(_construct, to_type, (), service_type=from_type)
        except Exception:
            self._types.restore(key, previous)
            raise

    # endregion Registration Methods

    # region Resolution Methods
    @overload
    def resolve(self, service_type: type[T], name: str | None = None) -> T: ...

    @overload
    def resolve(
        self,
        service_type: type[T],
        name: str | None = None,
        *,
        overrides: Sequence[Override],
    ) -> T | None: ...

    def resolve(
        self,
        service_type: Any,
        name: str | None = None,
        *,
        overrides: Sequence[Override] | None = None,
    ) -> Any:
        """Resolve ``service_type`` under the optional contract ``name``.

        Without ``overrides`` the call is forwarded to the backing resolver.
        With ``overrides`` (any sequence, even empty) the registration table
        decides, see the class warning: an unregistered key fails with
        ``LocatorWireConstructionError`` and a registered key yields ``None``.

        Args:
            service_type: Requested type.
            name: Optional contract name.
            overrides: ``(parameter_type, parameter_instance)`` pairs whose
                instances are passed positionally, in order, to the
                constructor.

        Raises:
            LocatorWireUnregisteredTypeError: If the backing resolver has no
                binding (plain path).
            LocatorWireConstructionError: If construction is attempted and
                fails (override path).

        """
        if overrides is None:
            return self._instance.get_service(service_type, name)
        return self._resolve_with_overrides(RegistrationKey(service_type, name), overrides)

    def _resolve_with_overrides(self, key: RegistrationKey, overrides: Sequence[Override]) -> Any:
        # Construction only happens on a table miss, where the target is None.
        target_type = self._types.lookup(key)
        if target_type is None:
            arguments = tuple(parameter_instance for _, parameter_instance in overrides)
            return _construct(target_type, arguments, service_type=key.service_type)

        logger.debug(
            "Override resolution of %s (contract=%r) found %s; returning None",
            type_name(key.service_type),
            key.contract,
            type_name(target_type),
        )
        return None

    def is_registered(self, service_type: type[Any], name: str | None = None) -> bool:
        return self._instance.has_registration(service_type, name)

    # endregion Resolution Methods

    # region Lifecycle
    def dispose(self) -> None:
        """Restore the locator slot to a fresh resolver and clear the table.

        Safe to call repeatedly and from several threads: the locator reset
        runs once.
        """
        with self._dispose_lock:
            action, self._dispose_action = self._dispose_action, None
        if action is not None:
            action()
            logger.debug("Disposed extension; locator %r reset", self._locator)
        self._types.clear()

    def finalize_extension(self) -> None:
        self.dispose()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.dispose()

    # endregion Lifecycle


def _construct(
    target_type: type[T] | None,
    arguments: tuple[Any, ...],
    *,
    service_type: Any,
) -> T:
    if target_type is None:
        msg = f"Cannot construct {type_name(service_type)}: no target type is registered for it."
        raise LocatorWireConstructionError(target_type, msg)
    # Types without an introspectable signature are called unchecked.
    try:
        signature = inspect.signature(target_type)
    except (TypeError, ValueError):
        signature = None
    if signature is not None:
        try:
            signature.bind(*arguments)
        except TypeError as error:
            msg = (
                f"Cannot construct {type_name(target_type)} for {type_name(service_type)} "
                f"with {len(arguments)} argument(s): {error}"
            )
            raise LocatorWireConstructionError(target_type, msg) from error
    return target_type(*arguments)
