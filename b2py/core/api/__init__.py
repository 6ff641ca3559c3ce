"""B2 API module."""
from .async_client import AsyncAPIClient, SessionBoundSender
from .async_auth import AsyncAuthService
from .errors import (
    AUTHORIZE_ERRORS,
    DEFAULT_ERRORS,
    CREATE_BUCKET_ERRORS,
    translate_status,
)
from .config import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
)

__all__ = [
    'AsyncAPIClient',
    'SessionBoundSender',
    'AsyncAuthService',
    'AUTHORIZE_ERRORS',
    'DEFAULT_ERRORS',
    'CREATE_BUCKET_ERRORS',
    'translate_status',
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
]
