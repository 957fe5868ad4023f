from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class RegistrationKey:
    """Identify a binding by requested type and optional contract name.

    ``contract=None`` is the default (unnamed) contract and is a distinct key
    from every named contract, including ``""``.
    """

    service_type: Any
    contract: str | None = None


class RegistrationTable:
    """Record the concrete type registered for each ``RegistrationKey``.

    Registration keys are unique: recording a target for an existing key
    replaces the previous target. All methods are safe to call from several
    threads at once.
    """

    def __init__(self) -> None:
        self._targets: dict[RegistrationKey, type[Any]] = {}
        self._lock = threading.Lock()

    def record(self, key: RegistrationKey, target: type[Any]) -> type[Any] | None:
        """Store ``target`` for ``key``, overwriting any earlier target.

        Args:
            key: Requested type and contract name.
            target: Concrete type that satisfies the key.

        Returns:
            The target previously stored for ``key``, or ``None``.

        """
        with self._lock:
            previous = self._targets.get(key)
            self._targets[key] = target
            return previous

    def restore(self, key: RegistrationKey, previous: type[Any] | None) -> None:
        """Put back the entry ``record`` replaced; ``None`` removes the key."""
        with self._lock:
            if previous is None:
                self._targets.pop(key, None)
            else:
                self._targets[key] = previous

    def lookup(self, key: RegistrationKey) -> type[Any] | None:
        """Return the target recorded for ``key``, or ``None`` when absent."""
        with self._lock:
            return self._targets.get(key)

    def clear(self) -> None:
        with self._lock:
            self._targets.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._targets

    def __len__(self) -> int:
        with self._lock:
            return len(self._targets)
