"""
Session data models.

Contains the immutable value objects produced by account authorization.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Allowed:
    """
    Capability grant attached to the authorized key.

    Attributes:
        capabilities: Capability names as returned by the service
        bucket_id: Bucket the key is restricted to, if any
        bucket_name: Name of that bucket, if any
        name_prefix: File name prefix restriction, if any
    """
    capabilities: Tuple[str, ...] = ()
    bucket_id: Optional[str] = None
    bucket_name: Optional[str] = None
    name_prefix: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'Allowed':
        """Create from the ``allowed`` object of an authorize response."""
        data = data or {}
        return cls(
            capabilities=tuple(data.get('capabilities') or ()),
            bucket_id=data.get('bucketId'),
            bucket_name=data.get('bucketName'),
            name_prefix=data.get('namePrefix'),
        )

    def has(self, capability: str) -> bool:
        """Check whether a capability was granted."""
        return str(capability) in self.capabilities


@dataclass(frozen=True)
class Session:
    """
    Authorization state returned by ``b2_authorize_account``.

    A new instance replaces the old one on every authorize() call;
    fields are never updated in place.

    Attributes:
        account_id: Account identifier
        authorization_token: Token sent with every authenticated call
        api_url: Host for API calls
        download_url: Host for downloads
        s3_api_url: S3-compatible endpoint
        recommended_part_size: Recommended large-file part size in bytes
        absolute_minimum_part_size: Smallest allowed part size in bytes
        allowed: Capability grant of the key used to authorize
    """
    account_id: str
    authorization_token: str
    api_url: str
    download_url: str
    s3_api_url: str
    recommended_part_size: int
    absolute_minimum_part_size: int
    allowed: Allowed

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> 'Session':
        """
        Create from an authorize response body.

        Raises:
            KeyError: If a required field is missing from the response
        """
        return cls(
            account_id=data['accountId'],
            authorization_token=data['authorizationToken'],
            api_url=data['apiUrl'],
            download_url=data['downloadUrl'],
            s3_api_url=data['s3ApiUrl'],
            recommended_part_size=data['recommendedPartSize'],
            absolute_minimum_part_size=data['absoluteMinimumPartSize'],
            allowed=Allowed.from_dict(data.get('allowed')),
        )

    def __repr__(self) -> str:
        return (
            f"Session(account_id={self.account_id!r}, api_url={self.api_url!r}, "
            f"capabilities={list(self.allowed.capabilities)!r})"
        )
