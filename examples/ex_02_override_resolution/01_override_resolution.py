"""Override resolution: constructor arguments are honored only on a miss.

``resolve(..., overrides=...)`` consults the registration table. A registered
key returns ``None``; an unregistered key tries to construct without a target
type and raises ``LocatorWireConstructionError``. Use plain ``resolve`` to get
instances.
"""

from __future__ import annotations

from locatorwire import LocatorContainerExtension, LocatorWireConstructionError


class Database:
    pass


class Repository:
    def __init__(self, database: Database | None = None) -> None:
        self.database = database


class Unregistered:
    pass


def main() -> None:
    with LocatorContainerExtension() as extension:
        extension.register(Repository, Repository)
        overrides = [(Database, Database())]

        print(f"registered={extension.resolve(Repository, overrides=overrides)}")  # => registered=None

        try:
            extension.resolve(Unregistered, overrides=overrides)
        except LocatorWireConstructionError as error:
            print(f"unregistered={type(error).__name__}")  # => unregistered=LocatorWireConstructionError


if __name__ == "__main__":
    main()
