"""Custom application-wide exceptions."""


class ApplicationError(Exception):
    """Base class for application-specific errors."""

    def __init__(
        self, message: str = "An application error occurred", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message)
        self.original_exception = original_exception
        self.message = message

    def __str__(self) -> str:
        if self.original_exception:
            return f"{self.message} (Original error: {self.original_exception})"
        return self.message


class SerializationError(ApplicationError):
    """Exception raised when a payload cannot be encoded to or decoded from JSON."""

    def __init__(
        self, message: str = "Serialization failed", original_exception: Exception | None = None
    ) -> None:
        super().__init__(message, original_exception)
        self.message = f"Serialization Error: {message}"


class TransferValidationError(ApplicationError):
    """Exception raised when an inventory transfer is not acceptable for a write request."""

    def __init__(self, issues: list[str], original_exception: Exception | None = None) -> None:
        super().__init__("; ".join(issues) or "Transfer validation failed", original_exception)
        self.issues = list(issues)
        self.message = f"Validation Error: {self.message}"
