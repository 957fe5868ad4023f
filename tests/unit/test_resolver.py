import threading

import pytest

from locatorwire.exceptions import (
    LocatorWireInvalidRegistrationError,
    LocatorWireResolverDisposedError,
    LocatorWireUnregisteredTypeError,
)
from locatorwire.lock_mode import LockMode
from locatorwire.resolver import DefaultDependencyResolver


class IService:
    pass


class ServiceA(IService):
    pass


class ServiceB(IService):
    pass


def test_transient_factory_called_every_resolution(resolver: DefaultDependencyResolver) -> None:
    calls: list[int] = []

    def factory() -> ServiceA:
        calls.append(1)
        return ServiceA()

    resolver.register(factory, IService)

    first = resolver.get_service(IService)
    second = resolver.get_service(IService)

    assert isinstance(first, ServiceA)
    assert first is not second
    assert len(calls) == 2


def test_lazy_singleton_created_once_on_first_resolution(
    resolver: DefaultDependencyResolver,
) -> None:
    calls: list[int] = []

    def factory() -> ServiceA:
        calls.append(1)
        return ServiceA()

    resolver.register_lazy_singleton(factory, IService)
    assert calls == []

    first = resolver.get_service(IService)
    second = resolver.get_service(IService)

    assert first is second
    assert len(calls) == 1


@pytest.mark.parametrize("lock_mode", [LockMode.THREAD, LockMode.NONE])
def test_lazy_singleton_lock_modes_return_same_instance(lock_mode: LockMode) -> None:
    resolver = DefaultDependencyResolver(lock_mode=lock_mode)
    resolver.register_lazy_singleton(ServiceA, IService)

    assert resolver.get_service(IService) is resolver.get_service(IService)


def test_concurrent_lazy_singleton_creation_calls_factory_once(
    resolver: DefaultDependencyResolver,
) -> None:
    calls: list[int] = []
    barrier = threading.Barrier(8)
    results: list[object] = []

    def factory() -> ServiceA:
        calls.append(1)
        return ServiceA()

    resolver.register_lazy_singleton(factory, IService)

    def resolve_service() -> None:
        barrier.wait()
        results.append(resolver.get_service(IService))

    threads = [threading.Thread(target=resolve_service) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert all(r is results[0] for r in results)


def test_constant_returned_unchanged(resolver: DefaultDependencyResolver) -> None:
    value = ServiceA()
    resolver.register_constant(value, IService)

    assert resolver.get_service(IService) is value
    assert resolver.get_service(IService) is value


def test_contracts_are_isolated(resolver: DefaultDependencyResolver) -> None:
    a = ServiceA()
    b = ServiceB()
    resolver.register_constant(a, IService, "a")
    resolver.register_constant(b, IService, "b")

    assert resolver.get_service(IService, "a") is a
    assert resolver.get_service(IService, "b") is b
    assert not resolver.has_registration(IService)


def test_missing_registration_raises(resolver: DefaultDependencyResolver) -> None:
    with pytest.raises(LocatorWireUnregisteredTypeError) as exc_info:
        resolver.get_service(IService, "missing")

    assert exc_info.value.service_type is IService
    assert exc_info.value.contract == "missing"


def test_newest_binding_wins_and_all_are_listed(resolver: DefaultDependencyResolver) -> None:
    a = ServiceA()
    b = ServiceB()
    resolver.register_constant(a, IService)
    resolver.register_constant(b, IService)

    assert resolver.get_service(IService) is b
    assert resolver.get_services(IService) == [a, b]


def test_get_services_empty_when_unregistered(resolver: DefaultDependencyResolver) -> None:
    assert resolver.get_services(IService) == []


def test_unregister_current_pops_newest(resolver: DefaultDependencyResolver) -> None:
    a = ServiceA()
    b = ServiceB()
    resolver.register_constant(a, IService)
    resolver.register_constant(b, IService)

    resolver.unregister_current(IService)
    assert resolver.get_service(IService) is a

    resolver.unregister_current(IService)
    assert not resolver.has_registration(IService)

    resolver.unregister_current(IService)


def test_unregister_all(resolver: DefaultDependencyResolver) -> None:
    resolver.register(ServiceA, IService)
    resolver.register(ServiceB, IService)
    resolver.register(ServiceB, IService, "kept")

    resolver.unregister_all(IService)

    assert not resolver.has_registration(IService)
    assert resolver.has_registration(IService, "kept")


def test_non_callable_factory_rejected(resolver: DefaultDependencyResolver) -> None:
    with pytest.raises(LocatorWireInvalidRegistrationError):
        resolver.register(ServiceA(), IService)  # type: ignore[arg-type]


def test_non_class_service_type_rejected(resolver: DefaultDependencyResolver) -> None:
    with pytest.raises(LocatorWireInvalidRegistrationError):
        resolver.register_constant(1, "service")  # type: ignore[arg-type]


def test_non_string_contract_rejected(resolver: DefaultDependencyResolver) -> None:
    with pytest.raises(LocatorWireInvalidRegistrationError):
        resolver.register(ServiceA, IService, 42)  # type: ignore[arg-type]


def test_dispose_drops_bindings_and_rejects_registrations(
    resolver: DefaultDependencyResolver,
) -> None:
    resolver.register(ServiceA, IService)
    assert not resolver.is_disposed

    resolver.dispose()

    assert resolver.is_disposed
    assert not resolver.has_registration(IService)
    with pytest.raises(LocatorWireResolverDisposedError):
        resolver.register(ServiceA, IService)
