"""B2 API status translation."""
from .api_errors import (
    AUTHORIZE_ERRORS,
    DEFAULT_ERRORS,
    CREATE_BUCKET_ERRORS,
    translate_status,
)

__all__ = [
    'AUTHORIZE_ERRORS',
    'DEFAULT_ERRORS',
    'CREATE_BUCKET_ERRORS',
    'translate_status',
]
