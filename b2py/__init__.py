"""
b2py - Async Python client for the Backblaze B2 native API.

Usage:
    >>> from b2py import StorageClient
    >>> 
    >>> async with StorageClient(key_id, application_key) as b2:
    ...     await b2.authorize()
    ...     bucket_id = await b2.create_bucket("my-bucket")
"""
import logging
from .client import StorageClient, B2Client

# Configuration
from .core.api import (
    APIConfig,
    ProxyConfig,
    SSLConfig,
    TimeoutConfig,
    AsyncAPIClient,
    AsyncAuthService,
)

from .core.session import Session, Allowed
from .core.models import (
    Credential,
    Capability,
    CreateKeyRequest,
    ApplicationKey,
    BucketType,
    CorsRule,
    DEFAULT_CORS_RULES,
    UploadTicket,
    ListFileNamesRequest,
)
from .core.exceptions import (
    B2Exception,
    ErrorKind,
    UnauthorizedError,
    UsageCapExceededError,
    DuplicateBucketNameError,
    NotAuthorizedError,
    error_kind,
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for b2py modules.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'b2py',
        'b2py.api',
        'b2py.auth',
    ]
    
    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'StorageClient',
    'B2Client',  # Alias
    'APIConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'AsyncAPIClient',
    'AsyncAuthService',
    'Session',
    'Allowed',
    'Credential',
    'Capability',
    'CreateKeyRequest',
    'ApplicationKey',
    'BucketType',
    'CorsRule',
    'DEFAULT_CORS_RULES',
    'UploadTicket',
    'ListFileNamesRequest',
    'B2Exception',
    'ErrorKind',
    'UnauthorizedError',
    'UsageCapExceededError',
    'DuplicateBucketNameError',
    'NotAuthorizedError',
    'error_kind',
    'setup_logging',
]
