"""Exceptions for the property translation layer."""


class ConfigurationError(Exception):
    """Raised when connection properties cannot be turned into client options.

    This covers an unknown read preference name, malformed tag-set JSON,
    a malformed write-concern timeout, write-concern values the driver
    rejects, and unknown property keys. Malformed pool sizes and timeouts
    are not configuration errors; they fall back to their defaults.
    """

    pass
