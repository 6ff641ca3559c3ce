"""
Custom exceptions for B2 operations.

Only the statuses the B2 API documents for each call are translated into
these classes. Everything else is the transport's own exception
(``aiohttp.ClientResponseError``, ``aiohttp.ClientError``, JSON decode
errors) and reaches the caller unchanged.
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Coarse classification of a failed call."""
    UNAUTHORIZED = 'unauthorized'
    USAGE_CAP_EXCEEDED = 'usage_cap_exceeded'
    DUPLICATE_BUCKET_NAME = 'duplicate_bucket_name'
    NOT_AUTHORIZED = 'not_authorized'
    TRANSPORT = 'transport'


class B2Exception(Exception):
    """Base exception for all B2-related errors."""

    kind: ErrorKind = ErrorKind.TRANSPORT
    default_message: str = 'B2 request failed.'

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message (falls back to the class default)
            status_code: HTTP status that triggered the error (if any)
        """
        self.message = message or self.default_message
        self.status_code = status_code
        super().__init__(self.message)


class UnauthorizedError(B2Exception):
    """Key id/secret are wrong or the session token expired (HTTP 401)."""
    kind = ErrorKind.UNAUTHORIZED
    default_message = (
        'The applicationKeyId and/or the applicationKey are wrong '
        'or the auth token is expired.'
    )


class UsageCapExceededError(B2Exception):
    """Account usage cap reached while authorizing (HTTP 403)."""
    kind = ErrorKind.USAGE_CAP_EXCEEDED
    default_message = 'Usage cap exceeded.'


class DuplicateBucketNameError(B2Exception):
    """
    Bucket name already taken (HTTP 400 on bucket creation).

    Bucket names are unique across every B2 account, not only yours.
    """
    kind = ErrorKind.DUPLICATE_BUCKET_NAME
    default_message = 'Bucket name is already in use.'


class NotAuthorizedError(B2Exception, RuntimeError):
    """An authenticated operation was called before authorize() succeeded."""
    kind = ErrorKind.NOT_AUTHORIZED
    default_message = 'Client is not authorized. Call authorize() first.'


def error_kind(exc: BaseException) -> ErrorKind:
    """
    Classify any exception raised by a client operation.

    Typed B2 errors report their own kind; anything else came from the
    transport layer.
    """
    if isinstance(exc, B2Exception):
        return exc.kind
    return ErrorKind.TRANSPORT
