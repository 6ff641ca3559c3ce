"""B2 API status codes and their typed errors."""
from contextlib import contextmanager
from typing import Dict, Iterator, Type

import aiohttp

from ...exceptions import (
    B2Exception,
    UnauthorizedError,
    UsageCapExceededError,
    DuplicateBucketNameError,
)


StatusErrorMap = Dict[int, Type[B2Exception]]

AUTHORIZE_ERRORS: StatusErrorMap = {
    401: UnauthorizedError,
    403: UsageCapExceededError,
}

DEFAULT_ERRORS: StatusErrorMap = {
    401: UnauthorizedError,
}

CREATE_BUCKET_ERRORS: StatusErrorMap = {
    400: DuplicateBucketNameError,
    401: UnauthorizedError,
}


@contextmanager
def translate_status(errors: StatusErrorMap) -> Iterator[None]:
    """
    Translate documented HTTP statuses raised inside the block.

    A ``ClientResponseError`` whose status is in ``errors`` becomes a new
    instance of the mapped class; every other exception re-raises as is.

    Example:
        >>> with translate_status(DEFAULT_ERRORS):
        ...     await sender.post('b2_delete_key', {...})
    """
    try:
        yield
    except aiohttp.ClientResponseError as e:
        error_class = errors.get(e.status)
        if error_class is None:
            raise
        raise error_class(status_code=e.status) from e
