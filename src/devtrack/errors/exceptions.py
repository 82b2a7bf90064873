"""Custom exception classes for devtrack."""


class DevTrackError(Exception):
    """Base exception for devtrack."""

    def __init__(self, code: str, message: str, details=None):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message)


class PersistenceError(DevTrackError):
    """A statement failed to execute or its result could not be mapped.

    Always raised ``from`` the underlying store error, which stays
    reachable through :attr:`cause`.
    """

    def __init__(self, message: str, details=None):
        super().__init__("PERSISTENCE_ERROR", message, details)

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__


class ConfigurationError(DevTrackError):
    """Connection string missing, blank or unusable."""

    def __init__(self, message: str, details=None):
        super().__init__("CONFIGURATION_ERROR", message, details)
