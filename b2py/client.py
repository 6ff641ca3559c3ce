"""
StorageClient - High-level async client for Backblaze B2.

Example:
    >>> async with StorageClient(key_id, application_key) as b2:
    ...     await b2.authorize()
    ...     bucket_id = await b2.create_bucket("my-bucket")
    ...     ticket = await b2.get_upload_url(bucket_id)
"""
from typing import Any, Dict, Iterable, List, NamedTuple, Optional, Union

import aiohttp

from .core.api import (
    AsyncAPIClient,
    AsyncAuthService,
    SessionBoundSender,
    APIConfig,
    DEFAULT_ERRORS,
    CREATE_BUCKET_ERRORS,
    translate_status,
)
from .core.exceptions import NotAuthorizedError
from .core.models import (
    Credential,
    CreateKeyRequest,
    ApplicationKey,
    BucketType,
    CorsRule,
    DEFAULT_CORS_RULES,
    UploadTicket,
    ListFileNamesRequest,
)
from .core.session import Session


class _Authorized(NamedTuple):
    session: Session
    sender: SessionBoundSender


class StorageClient:
    """
    High-level async client for the B2 native API.

    The client starts unauthorized. ``authorize()`` must succeed once
    before any other operation; calling it again replaces the session.

    Concurrent operations on one instance are fine, but ``authorize()``
    must not run while other calls are in flight on the same instance.

    With custom configuration:
        >>> config = APIConfig.with_proxy("http://proxy:8080")
        >>> client = StorageClient(key_id, application_key, config=config)
    """

    def __init__(
        self,
        key_id: str,
        application_key: str,
        *,
        config: Optional[APIConfig] = None,
        http_session: Optional[aiohttp.ClientSession] = None
    ):
        """
        Initialize B2 client. No network I/O happens here.

        Args:
            key_id: Application key id
            application_key: Application key secret
            config: Optional API configuration
            http_session: Optional externally owned aiohttp session
        """
        self._credential = Credential(key_id, application_key)
        self._config = config or APIConfig.default()
        self._api = AsyncAPIClient(self._config, session=http_session)
        self._auth = AsyncAuthService(self._api)
        self._authorized: Optional[_Authorized] = None

    @property
    def key_id(self) -> str:
        return self._credential.key_id

    @property
    def session(self) -> Optional[Session]:
        """Current session, or None before authorize()."""
        return self._authorized.session if self._authorized else None

    @property
    def is_authorized(self) -> bool:
        return self._authorized is not None

    @property
    def config(self) -> APIConfig:
        return self._config

    async def __aenter__(self) -> 'StorageClient':
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        """Release the HTTP session. The current session object is kept."""
        await self._api.close()

    def _require_authorized(self) -> _Authorized:
        authorized = self._authorized
        if authorized is None:
            raise NotAuthorizedError()
        return authorized

    async def authorize(self) -> None:
        """
        Exchange the credentials for a session.

        On failure the previous session (if any) stays in place.

        Raises:
            UnauthorizedError: Wrong key id/secret (401)
            UsageCapExceededError: Usage cap reached (403)
            aiohttp.ClientError: Any other failure, unchanged
        """
        session = await self._auth.authorize(self._credential)
        sender = self._api.bind(
            self._config.api_base_url(session.api_url),
            session.authorization_token
        )
        self._authorized = _Authorized(session, sender)

    async def create_key(
        self,
        request: Optional[CreateKeyRequest] = None,
        **fields: Any
    ) -> ApplicationKey:
        """
        Create an application key.

        Accepts a CreateKeyRequest or its fields as keyword arguments:

            >>> await b2.create_key(key_name="test", capabilities=["readFiles"])

        Raises:
            UnauthorizedError: Session token expired (401)
        """
        if request is None:
            request = CreateKeyRequest(**fields)
        elif fields:
            raise TypeError("pass either a CreateKeyRequest or keyword fields, not both")

        session, sender = self._require_authorized()

        with translate_status(DEFAULT_ERRORS):
            data = await sender.post('b2_create_key', request.to_body(session.account_id))

        return ApplicationKey.from_response(data)

    async def delete_key(self, key_id: str) -> None:
        """
        Delete an application key.

        Deleting a key that no longer exists fails with whatever the
        service returns for it.

        Raises:
            UnauthorizedError: Session token expired (401)
        """
        _, sender = self._require_authorized()

        with translate_status(DEFAULT_ERRORS):
            await sender.post('b2_delete_key', {'applicationKeyId': key_id})

    async def create_bucket(
        self,
        bucket_name: str,
        *,
        cors_rules: Iterable[Union[CorsRule, Dict[str, Any]]] = DEFAULT_CORS_RULES,
        bucket_type: Union[BucketType, str] = BucketType.ALL_PRIVATE
    ) -> str:
        """
        Create a bucket and return its id.

        By default the bucket is private and gets the ``uploadFromBrowser``
        CORS rule.

        Raises:
            DuplicateBucketNameError: Name already taken by any account (400)
            UnauthorizedError: Session token expired (401)
        """
        session, sender = self._require_authorized()

        body = {
            'bucketName': bucket_name,
            'corsRules': [
                rule.to_dict() if isinstance(rule, CorsRule) else dict(rule)
                for rule in cors_rules
            ],
            'bucketType': BucketType(bucket_type).value,
            'accountId': session.account_id,
        }

        with translate_status(CREATE_BUCKET_ERRORS):
            data = await sender.post('b2_create_bucket', body)

        return data['bucketId']

    async def get_upload_url(self, bucket_id: str) -> UploadTicket:
        """
        Get an upload URL and token for a bucket.

        The upload itself goes to ``ticket.upload_url`` with
        ``ticket.authorization_token``, not through this client.

        Raises:
            UnauthorizedError: Session token expired (401)
        """
        _, sender = self._require_authorized()

        with translate_status(DEFAULT_ERRORS):
            data = await sender.post('b2_get_upload_url', {'bucketId': bucket_id})

        return UploadTicket.from_response(data)

    async def list_file_names(
        self,
        bucket_id: Union[str, ListFileNamesRequest],
        prefix: str = '',
        delimiter: Optional[str] = '/',
        *,
        start_file_name: Optional[str] = None,
        max_file_count: Optional[int] = None
    ) -> List[Dict[str, Any]]:
        """
        List one page of file names in a bucket.

        Returns the ``files`` array unchanged. ``nextFileName`` is not
        followed; pass it back as ``start_file_name`` to get the next page.

        Raises:
            UnauthorizedError: Session token expired (401)
        """
        if isinstance(bucket_id, ListFileNamesRequest):
            request = bucket_id
        else:
            request = ListFileNamesRequest(
                bucket_id=bucket_id,
                prefix=prefix,
                delimiter=delimiter,
                start_file_name=start_file_name,
                max_file_count=max_file_count,
            )

        _, sender = self._require_authorized()

        with translate_status(DEFAULT_ERRORS):
            data = await sender.post('b2_list_file_names', request.to_body())

        return data['files']


# Alias
B2Client = StorageClient
