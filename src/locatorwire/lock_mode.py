from __future__ import annotations

from enum import Enum


class LockMode(Enum):
    """Select locking behavior for lazy singleton creation.

    Use these values for the resolver-level ``lock_mode`` default or for a
    single ``register_lazy_singleton`` call.
    """

    THREAD = "thread"
    """Guard first creation with ``threading.Lock`` so concurrent callers share one value."""

    NONE = "none"
    """Disable locking; concurrent first resolutions may call the factory more than once."""
