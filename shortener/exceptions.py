"""Exceptions raised by the shortener core.

Classes:
    ShortenerError:
        Generic base class for shortener exceptions.

    InvalidURLError:
        Raised when a submitted URL is missing or not a valid absolute URL.

    NotFoundError:
        Raised when a short code does not exist in the registry.

    CodeSpaceExhaustedError:
        Raised when no free short code was found within the attempt limit.

Example:
    >>> from shortener.exceptions import NotFoundError
    >>> raise NotFoundError("zzzzzz")
    Traceback (most recent call last):
        ...
    shortener.exceptions.NotFoundError: Short code 'zzzzzz' not found
"""


class ShortenerError(Exception):
    """Generic base class for shortener exceptions."""

    pass


class InvalidURLError(ShortenerError, ValueError):
    """Exception raised when a URL is missing or fails validation."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid URL: {reason}")
        self.reason = reason


class NotFoundError(ShortenerError, LookupError):
    """Exception raised when a short code is not in the registry."""

    def __init__(self, code: str):
        super().__init__(f"Short code '{code}' not found")
        self.code = code


class CodeSpaceExhaustedError(ShortenerError):
    """Exception raised when every generated candidate collided.

    Indicates the code length/alphabet is too small for the number of entries.
    """

    def __init__(self, attempts: int):
        super().__init__(f"Unable to generate unique short code after {attempts} attempts")
        self.attempts = attempts
