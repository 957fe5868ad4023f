from __future__ import annotations

import types
from typing import Any

from locatorwire.exceptions import LocatorWireInvalidRegistrationError


def type_name(candidate: object) -> str:
    """Return a readable name for a type key in logs and error messages."""
    return getattr(candidate, "__qualname__", repr(candidate))


def require_class(candidate: object, *, role: str) -> type[Any]:
    """Return ``candidate`` when it can key or build a binding.

    Parameterized aliases such as ``list[int]`` are rejected: they are not
    instantiable classes and do not compare equal to their origin.

    Args:
        candidate: Value passed as a service or target type.
        role: Phrase naming the argument in the error message.

    Raises:
        LocatorWireInvalidRegistrationError: If ``candidate`` is not a plain class.

    """
    if isinstance(candidate, types.GenericAlias) or not isinstance(candidate, type):
        msg = f"{role} must be a class, got {candidate!r}."
        raise LocatorWireInvalidRegistrationError(msg)
    return candidate


def require_contract(contract: object) -> str | None:
    if contract is not None and not isinstance(contract, str):
        msg = f"Contract name must be a string or None, got {contract!r}."
        raise LocatorWireInvalidRegistrationError(msg)
    return contract


def require_factory(factory: object, *, role: str) -> None:
    if not callable(factory):
        msg = f"{role} must be callable, got {factory!r}."
        raise LocatorWireInvalidRegistrationError(msg)


__all__ = ["require_class", "require_contract", "require_factory", "type_name"]
