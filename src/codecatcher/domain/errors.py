"""Domain errors — custom exceptions for codecatcher.

These exceptions are raised by parsers and configuration code and caught
by the analyzers or the presentation layer. They carry no infrastructure
dependencies.
"""


class CodecatcherError(Exception):
    """Base exception for all codecatcher errors."""


class ParseFailure(CodecatcherError):
    """Raised when an underlying parsing library crashes on its input."""

    def __init__(self, source: str, cause: BaseException) -> None:
        super().__init__(f"{source} parser failed: {cause}")
        self.source = source
        self.cause = cause
