from locatorwire.integrations.pytest_plugin.plugin import locatorwire_extension

__all__ = ["locatorwire_extension"]
