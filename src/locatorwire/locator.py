from __future__ import annotations

import logging
import threading

from locatorwire.resolver import DefaultDependencyResolver, DependencyResolver

logger = logging.getLogger(__name__)


class Locator:
    """Process-wide slot holding the current dependency resolver.

    The binding is shared by every thread and task; it is not thread-local.
    A fresh ``DefaultDependencyResolver`` is installed on creation so
    ``get_current`` always returns a resolver.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._current: DependencyResolver = DefaultDependencyResolver()

    def get_current(self) -> DependencyResolver:
        """Return the resolver currently installed in the slot."""
        with self._lock:
            return self._current

    def set_current(self, resolver: DependencyResolver) -> DependencyResolver:
        """Install ``resolver`` and return the one it replaced.

        Args:
            resolver: Resolver to make current.

        """
        with self._lock:
            previous, self._current = self._current, resolver
        logger.debug("Locator %r switched resolver %r -> %r", self, previous, resolver)
        return previous

    def reset(self) -> DependencyResolver:
        """Install a fresh, empty ``DefaultDependencyResolver`` and return it."""
        resolver = DefaultDependencyResolver()
        self.set_current(resolver)
        return resolver


locator = Locator()
"""Default process-wide locator slot."""
