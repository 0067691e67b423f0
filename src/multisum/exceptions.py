"""Exception classes for multisum operations."""


class MultisumError(Exception):
    """Base exception for multisum operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the target that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class ConfigError(MultisumError):
    """Raised when the requested algorithm family/length is invalid."""

    error_prefix = "Invalid configuration"


class MalformedLineError(MultisumError):
    """Raised when a checksum-file line cannot be decoded.

    The raw line is kept on the exception so the caller can report it
    as its own failure entry.
    """

    error_prefix = "Malformed checksum line"

    def __init__(self, line: str, reason: str) -> None:
        """Initialize malformed line error.

        Args:
            line: The raw line that failed to decode.
            reason: Human-readable reason for the failure.

        """
        super().__init__(reason)
        self.line = line
        self.reason = reason


class UnsupportedAlgorithmError(MalformedLineError):
    """Raised when a BSD line names an algorithm that is not supported."""

    error_prefix = "Unsupported algorithm"

    def __init__(self, line: str, name: str, file_path: str | None = None) -> None:
        """Initialize unsupported algorithm error.

        Args:
            line: The raw line naming the algorithm.
            name: The algorithm name found in the line.
            file_path: Path named by the line, when it could be read.

        """
        super().__init__(line, f"unsupported algorithm '{name}'")
        self.name = name
        self.file_path = file_path
