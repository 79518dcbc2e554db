"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""


class DependencyInjectionError(UtilError):
    """No provider is registered for a requested component."""

    def __init__(self, message: str, component: str | None = None):
        self.component = component
        super().__init__(message)
