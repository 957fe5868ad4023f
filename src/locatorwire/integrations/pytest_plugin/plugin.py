from __future__ import annotations

from collections.abc import Iterator

import pytest

from locatorwire.container_extension import LocatorContainerExtension


@pytest.fixture()
def locatorwire_extension() -> Iterator[LocatorContainerExtension]:
    """Provide a per-test extension installed on the process-wide locator.

    The extension is disposed after the test, which resets the locator slot to
    a fresh empty resolver, so registrations never leak between tests.

    Yields:
        A new ``LocatorContainerExtension``.

    """
    extension = LocatorContainerExtension()
    try:
        yield extension
    finally:
        extension.dispose()
