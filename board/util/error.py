"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Raised when settings are missing or unsafe for the environment."""

    pass


class DependencyInjectionError(UtilError):
    """Raised when no provider implementation matches a component request."""

    pass
