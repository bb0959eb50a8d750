"""Custom exceptions for curlparse package.

The parser itself never raises; these cover the surfaces around it.
"""


class CurlparseError(Exception):
    """Base exception class for all curlparse errors."""


class CommandSourceError(CurlparseError):
    """Raised when a curl command cannot be read from its source.

    Example:
        raise CommandSourceError("File not found: request.sh")
    """

    def __init__(self, user_message: str) -> None:
        self.user_message = user_message
        super().__init__(user_message)
