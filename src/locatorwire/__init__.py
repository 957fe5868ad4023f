from locatorwire.container_extension import LocatorContainerExtension
from locatorwire.container_interface import (
    IContainerExtension,
    IContainerProvider,
    IContainerRegistry,
)
from locatorwire.exceptions import (
    LocatorWireConstructionError,
    LocatorWireError,
    LocatorWireInvalidRegistrationError,
    LocatorWireResolverDisposedError,
    LocatorWireUnregisteredTypeError,
)
from locatorwire.locator import Locator, locator
from locatorwire.lock_mode import LockMode
from locatorwire.resolver import DefaultDependencyResolver, DependencyResolver

__all__ = [
    "DefaultDependencyResolver",
    "DependencyResolver",
    "IContainerExtension",
    "IContainerProvider",
    "IContainerRegistry",
    "Locator",
    "LocatorContainerExtension",
    "LocatorWireConstructionError",
    "LocatorWireError",
    "LocatorWireInvalidRegistrationError",
    "LocatorWireResolverDisposedError",
    "LocatorWireUnregisteredTypeError",
    "LockMode",
    "locator",
]
