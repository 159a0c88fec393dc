"""Custom exceptions for the file search utility."""


class FileSearchError(Exception):
    """Base exception for file search operations."""
    pass


class FileInaccessibleError(FileSearchError):
    """Exception raised when a file cannot be opened for reading."""

    def __init__(self, file_path: str, reason: str = ""):
        self.file_path = file_path
        self.reason = reason
        message = f"Cannot access file '{file_path}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ValidationError(FileSearchError):
    """Exception raised during input validation."""
    pass
