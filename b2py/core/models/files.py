"""Upload ticket and file listing models."""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class UploadTicket:
    """
    Short-lived upload target returned by b2_get_upload_url.

    Upload by POSTing file bytes to ``upload_url`` with
    ``authorization_token`` as the Authorization header. Expiry is decided
    by the service and is not tracked here.
    """
    upload_url: str
    authorization_token: str = field(repr=False)
    bucket_id: Optional[str] = None

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> 'UploadTicket':
        return cls(
            upload_url=data['uploadUrl'],
            authorization_token=data['authorizationToken'],
            bucket_id=data.get('bucketId'),
        )


@dataclass(frozen=True)
class ListFileNamesRequest:
    """Parameters for b2_list_file_names. Only one page is ever fetched."""
    bucket_id: str
    prefix: str = ''
    delimiter: Optional[str] = '/'
    start_file_name: Optional[str] = None
    max_file_count: Optional[int] = None

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            'bucketId': self.bucket_id,
            'prefix': self.prefix,
            'delimiter': self.delimiter,
        }
        if self.start_file_name is not None:
            body['startFileName'] = self.start_file_name
        if self.max_file_count is not None:
            body['maxFileCount'] = self.max_file_count
        return body
