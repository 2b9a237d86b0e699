"""Custom exceptions for polyscan."""


class PolyScanError(Exception):
    """Base exception for all polyscan errors."""

    pass


class ConfigurationError(PolyScanError):
    """Raised when configuration or scan parameters are invalid."""

    pass


class FileFormatError(PolyScanError):
    """Raised when an input file cannot be opened or decoded."""

    def __init__(self, message="", path=None):
        """Initialize FileFormatError with the offending path.

        Args:
            message: Error message
            path: Path of the file that failed (optional)
        """
        super().__init__(message)
        self.path = path

