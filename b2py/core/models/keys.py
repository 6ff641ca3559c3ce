"""
Application key models.

Application keys are scoped credentials created under an account. The
optional restrictions are sent only when set, since their absence changes
what the service defaults to.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple, Union


class Capability(str, Enum):
    """Permissions that can be granted to an application key."""
    LIST_KEYS = 'listKeys'
    WRITE_KEYS = 'writeKeys'
    DELETE_KEYS = 'deleteKeys'
    LIST_BUCKETS = 'listBuckets'
    WRITE_BUCKETS = 'writeBuckets'
    DELETE_BUCKETS = 'deleteBuckets'
    LIST_FILES = 'listFiles'
    READ_FILES = 'readFiles'
    SHARE_FILES = 'shareFiles'
    WRITE_FILES = 'writeFiles'
    DELETE_FILES = 'deleteFiles'

    def __str__(self) -> str:
        return self.value


def _to_capabilities(values: Iterable[Union[str, Capability]]) -> Tuple[Capability, ...]:
    if isinstance(values, (str, Capability)):
        values = [values]
    try:
        return tuple(Capability(v) for v in values)
    except ValueError as e:
        raise ValueError(f"Unknown capability: {e}") from e


@dataclass(frozen=True)
class CreateKeyRequest:
    """
    Parameters for b2_create_key.

    Attributes:
        key_name: Name of the new key
        capabilities: Non-empty set of capabilities to grant
        bucket_id: Restrict the key to one bucket
        name_prefix: Restrict the key to file names with this prefix
        valid_duration_in_seconds: Key lifetime
    """
    key_name: str
    capabilities: Tuple[Capability, ...]
    bucket_id: Optional[str] = None
    name_prefix: Optional[str] = None
    valid_duration_in_seconds: Optional[int] = None

    def __post_init__(self):
        if not self.key_name:
            raise ValueError("key_name must be a non-empty string")
        capabilities = _to_capabilities(self.capabilities)
        if not capabilities:
            raise ValueError("at least one capability is required")
        object.__setattr__(self, 'capabilities', capabilities)

    def to_body(self, account_id: str) -> Dict[str, Any]:
        """Build the request body; unset optionals are left out entirely."""
        body: Dict[str, Any] = {
            'accountId': account_id,
            'keyName': self.key_name,
            'capabilities': [c.value for c in self.capabilities],
        }

        if self.bucket_id is not None:
            body['bucketId'] = self.bucket_id
        if self.valid_duration_in_seconds is not None:
            body['validDurationInSeconds'] = self.valid_duration_in_seconds
        if self.name_prefix is not None:
            body['namePrefix'] = self.name_prefix

        return body


@dataclass(frozen=True)
class ApplicationKey:
    """A newly created application key. The secret is only shown once."""
    key_id: str
    application_key: str = field(repr=False)

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> 'ApplicationKey':
        return cls(
            key_id=data['applicationKeyId'],
            application_key=data['applicationKey'],
        )
