"""Startup-time wiring failures.

Unlike DomainError this IS an exception: a broken handler registry is a
programming error and the application must refuse to start.
"""


class ConfigurationError(Exception):
    """Raised when static wiring (handler registry, subscriptions) is invalid."""
