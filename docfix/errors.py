"""
Exception hierarchy for docfix.

Every error the CLI knows how to report derives from DocFixError.
"""


class DocFixError(Exception):
    """Base class for docfix errors."""

    pass


class JavaParseError(DocFixError):
    """Raised when Java source cannot be split into code and Javadoc chunks."""

    def __init__(self, message: str, position: int = -1):
        super().__init__(message)
        self.position = position


class InvalidEncodingError(DocFixError, ValueError):
    """Raised when a charset name is not known to Python's codec registry."""

    pass
