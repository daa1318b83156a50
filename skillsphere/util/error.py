"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings are missing or unsafe for the current environment."""

    pass


class DependencyInjectionError(UtilError):
    """No provider implementation matches the requested component."""

    pass
