"""Quickstart: register types on the extension, resolve them back.

The extension installs its resolver on the process-wide locator, so code that
only knows about ``locator`` sees the same registrations.
"""

from __future__ import annotations

from locatorwire import LocatorContainerExtension, locator


class Clock:
    pass


class SystemClock(Clock):
    pass


class Settings:
    def __init__(self) -> None:
        self.host = "localhost"


def main() -> None:
    with LocatorContainerExtension() as extension:
        settings = Settings()
        extension.register(Clock, SystemClock).register_instance(Settings, settings)
        extension.register_singleton(SystemClock, SystemClock, "shared")

        print(f"clock={type(extension.resolve(Clock)).__name__}")  # => clock=SystemClock
        print(f"transient={extension.resolve(Clock) is not extension.resolve(Clock)}")  # => transient=True

        shared = extension.resolve(SystemClock, "shared")
        print(f"singleton={shared is extension.resolve(SystemClock, 'shared')}")  # => singleton=True

        from_locator = locator.get_current().get_service(Settings)
        print(f"host={from_locator.host}")  # => host=localhost

    print(f"after_dispose={locator.get_current().has_registration(Settings)}")  # => after_dispose=False


if __name__ == "__main__":
    main()
