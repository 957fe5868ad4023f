"""Shared pytest fixtures for locatorwire tests."""

from collections.abc import Iterator

import pytest

from locatorwire.container_extension import LocatorContainerExtension
from locatorwire.locator import Locator
from locatorwire.resolver import DefaultDependencyResolver


@pytest.fixture()
def isolated_locator() -> Locator:
    """Locator slot private to one test."""
    return Locator()


@pytest.fixture()
def extension(isolated_locator: Locator) -> Iterator[LocatorContainerExtension]:
    """Extension installed on the private locator, disposed after the test."""
    container_extension = LocatorContainerExtension(locator=isolated_locator)
    yield container_extension
    container_extension.dispose()


@pytest.fixture()
def resolver() -> DefaultDependencyResolver:
    return DefaultDependencyResolver()
