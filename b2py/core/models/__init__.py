"""Request and result models for B2 operations."""
from .credentials import Credential
from .keys import Capability, CreateKeyRequest, ApplicationKey
from .buckets import BucketType, CorsRule, UPLOAD_FROM_BROWSER, DEFAULT_CORS_RULES
from .files import UploadTicket, ListFileNamesRequest

__all__ = [
    'Credential',
    'Capability',
    'CreateKeyRequest',
    'ApplicationKey',
    'BucketType',
    'CorsRule',
    'UPLOAD_FROM_BROWSER',
    'DEFAULT_CORS_RULES',
    'UploadTicket',
    'ListFileNamesRequest',
]
