"""Custom exception hierarchy for calculagraph."""


class CalculagraphError(Exception):
    """Base exception for all calculagraph errors."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ConfigurationError(CalculagraphError):
    """Raised when a timer decorator is applied with invalid arguments."""

    def __init__(
        self, message: str, field: str | None = None, cause: Exception | None = None
    ) -> None:
        super().__init__(message, cause)
        self.field = field


class InvalidTimeUnitError(ConfigurationError):
    """Raised when the time unit token is not recognized."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message, field="unit", cause=cause)


class InvalidFormatError(ConfigurationError):
    """Raised when the output format string cannot be rendered."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message, field="format", cause=cause)


class InvalidTargetError(ConfigurationError):
    """Raised when a timer decorator is applied to something other than a function."""

    def __init__(self, message: str) -> None:
        super().__init__(message, field="target")
