from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from locatorwire._internal.validation import type_name
from locatorwire.lock_mode import LockMode

logger = logging.getLogger(__name__)

_NOT_CREATED: Any = object()


class Lifetime(Enum):
    """Define how a binding produces its value."""

    TRANSIENT = auto()
    """Call the factory on every resolution."""

    SINGLETON = auto()
    """Call the factory once, on first resolution, and reuse the result."""

    CONSTANT = auto()
    """Return a value built before registration."""


@dataclass(kw_only=True)
class Binding:
    """Describe how the backing resolver produces one registered value.

    Exactly one of ``factory`` (transient and singleton bindings) or
    ``value`` (constant bindings) is meaningful.
    """

    service_type: Any
    """The type this binding was registered under."""
    lifetime: Lifetime
    factory: Callable[[], Any] | None = None
    """Zero-argument callable producing the value."""
    value: Any = _NOT_CREATED
    """Cached singleton value, or the registered constant."""
    lock_mode: LockMode = LockMode.THREAD

    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    def produce(self) -> Any:
        """Return the value for one resolution call."""
        if self.lifetime is Lifetime.TRANSIENT:
            return self.factory()  # type: ignore[misc]
        if self.lifetime is Lifetime.CONSTANT:
            return self.value
        if self.value is not _NOT_CREATED:
            return self.value
        if self.lock_mode is LockMode.NONE:
            return self._create_singleton()
        with self._lock:
            if self.value is not _NOT_CREATED:
                return self.value
            return self._create_singleton()

    def _create_singleton(self) -> Any:
        value = self.factory()  # type: ignore[misc]
        self.value = value
        logger.debug("Created lazy singleton for %s", type_name(self.service_type))
        return value
