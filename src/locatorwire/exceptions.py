from __future__ import annotations

from typing import Any


class LocatorWireError(Exception):
    """Represent a base class for all LocatorWire-specific failures.

    Catch this type when you want to handle any LocatorWire error path without
    matching each concrete exception class individually.
    """


class LocatorWireInvalidRegistrationError(LocatorWireError):
    """Signal invalid registration arguments.

    Raised by ``LocatorContainerExtension.register``/``register_singleton`` and
    by the backing resolver's ``register*`` methods when the service type is
    not a class, the factory is not callable, or the contract name is not a
    string.
    """


class LocatorWireUnregisteredTypeError(LocatorWireError):
    """Signal that the backing resolver has no binding for a type and contract.

    Raised by ``DefaultDependencyResolver.get_service`` and surfaced unchanged
    by ``LocatorContainerExtension.resolve``.

    Typical fix is registering the type (under the same contract name) before
    resolving it.
    """

    def __init__(self, service_type: Any, contract: str | None = None) -> None:
        self.service_type = service_type
        self.contract = contract
        name = getattr(service_type, "__qualname__", repr(service_type))
        if contract is None:
            msg = f"{name} is not registered"
        else:
            msg = f"{name} is not registered under contract {contract!r}"
        super().__init__(msg)


class LocatorWireConstructionError(LocatorWireError):
    """Signal that direct construction of a target type failed.

    Raised when the target type is unresolved (``None``) or when its
    constructor rejects the supplied arguments. The original ``TypeError`` is
    chained as ``__cause__`` when present.
    """

    def __init__(self, target_type: Any, msg: str) -> None:
        self.target_type = target_type
        super().__init__(msg)


class LocatorWireResolverDisposedError(LocatorWireError):
    """Signal a registration against a disposed resolver.

    Typical fix is creating a fresh ``DefaultDependencyResolver`` (or a new
    ``LocatorContainerExtension``) instead of reusing a disposed one.
    """
