"""Bucket models and the default CORS policy."""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


class BucketType(str, Enum):
    """Bucket visibility."""
    ALL_PRIVATE = 'allPrivate'
    ALL_PUBLIC = 'allPublic'

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CorsRule:
    """
    One CORS rule attached to a bucket.

    Example:
        >>> CorsRule('downloads', allowed_operations=('b2_download_file_by_name',)).to_dict()
    """
    cors_rule_name: str
    allowed_operations: Tuple[str, ...]
    allowed_origins: Tuple[str, ...] = ('*',)
    allowed_headers: Tuple[str, ...] = ('*',)
    expose_headers: Tuple[str, ...] = ()
    max_age_seconds: int = 3600

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire format."""
        return {
            'allowedHeaders': list(self.allowed_headers),
            'allowedOperations': list(self.allowed_operations),
            'allowedOrigins': list(self.allowed_origins),
            'corsRuleName': self.cors_rule_name,
            'exposeHeaders': list(self.expose_headers),
            'maxAgeSeconds': self.max_age_seconds,
        }


# Lets browsers upload and download directly against the bucket
UPLOAD_FROM_BROWSER = CorsRule(
    cors_rule_name='uploadFromBrowser',
    allowed_operations=(
        'b2_download_file_by_id',
        'b2_upload_file',
        'b2_download_file_by_name',
    ),
    allowed_origins=('*',),
    allowed_headers=('*',),
    expose_headers=('authorization', 'x-bz-file-name', 'x-bz-content-sha1'),
    max_age_seconds=3600,
)

DEFAULT_CORS_RULES: Tuple[CorsRule, ...] = (UPLOAD_FROM_BROWSER,)
