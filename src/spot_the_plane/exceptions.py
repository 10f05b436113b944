"""Custom exception hierarchy for the application."""


class AppError(Exception):
    """Base exception for the application."""

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


class InvalidCoordinateError(AppError):
    """Raised when a coordinate typed by the user does not parse."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="INVALID_COORDINATE")


class ObserverStoreError(AppError):
    """Raised when the stored observer coordinates cannot be read or written."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="OBSERVER_STORE_ERROR")


class InvalidSettingError(AppError):
    """Raised when an environment setting holds an unusable value."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="INVALID_SETTING")
