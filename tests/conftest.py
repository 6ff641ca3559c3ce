"""Pytest fixtures for b2py tests."""
import json
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import aiohttp
import pytest

from b2py import StorageClient


API_URL = 'https://api001.backblazeb2.com'


class FakeResponse:
    """Scripted aiohttp response usable as ``async with session.request(...)``."""

    def __init__(self, status: int = 200, body: Any = None):
        self.status = status
        self._body = {} if body is None else body
        self.url = None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None

    async def text(self) -> str:
        if isinstance(self._body, str):
            return self._body
        return json.dumps(self._body)

    async def json(self, content_type: Optional[str] = 'application/json') -> Any:
        if isinstance(self._body, str):
            return json.loads(self._body)
        return self._body

    def raise_for_status(self) -> None:
        if self.status >= 400:
            raise aiohttp.ClientResponseError(
                MagicMock(real_url=self.url),
                (),
                status=self.status,
                message=f'HTTP {self.status}',
            )


class FakeHTTPSession:
    """
    Stand-in for aiohttp.ClientSession.

    Responses are scripted per endpoint (last URL path segment). A queue
    is consumed in order and its last entry keeps answering once the rest
    are used up. An exception instance in the queue is raised instead.
    """

    def __init__(self):
        self.closed = False
        self.calls: List[Dict[str, Any]] = []
        self._routes: Dict[str, List[Any]] = {}

    def add(self, endpoint: str, body: Any = None, status: int = 200) -> 'FakeHTTPSession':
        self._routes.setdefault(endpoint, []).append(FakeResponse(status, body))
        return self

    def add_error(self, endpoint: str, error: BaseException) -> 'FakeHTTPSession':
        self._routes.setdefault(endpoint, []).append(error)
        return self

    def reset(self, endpoint: str) -> 'FakeHTTPSession':
        self._routes.pop(endpoint, None)
        return self

    def request(self, method, url, json=None, headers=None, proxy=None):
        self.calls.append({
            'method': method,
            'url': url,
            'json': json,
            'headers': headers or {},
        })
        endpoint = url.rsplit('/', 1)[-1]
        queue = self._routes.get(endpoint)
        if not queue:
            raise AssertionError(f"No scripted response for {endpoint}")
        item = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(item, BaseException):
            raise item
        item.url = url
        return item

    def calls_to(self, endpoint: str) -> List[Dict[str, Any]]:
        return [c for c in self.calls if c['url'].endswith('/' + endpoint)]

    def last_body(self, endpoint: str) -> Dict[str, Any]:
        return self.calls_to(endpoint)[-1]['json']

    async def close(self):
        self.closed = True


@pytest.fixture
def auth_response():
    """Returns a sample b2_authorize_account response."""
    return {
        'accountId': 'acc123',
        'authorizationToken': 'token_abc',
        'apiUrl': API_URL,
        'downloadUrl': 'https://f001.backblazeb2.com',
        's3ApiUrl': 'https://s3.us-west-001.backblazeb2.com',
        'recommendedPartSize': 100000000,
        'absoluteMinimumPartSize': 5000000,
        'allowed': {
            'capabilities': ['listKeys', 'writeKeys', 'deleteKeys', 'writeBuckets', 'listFiles'],
            'bucketId': None,
            'bucketName': None,
            'namePrefix': None,
        },
    }


@pytest.fixture
def http_session(auth_response):
    """Fake aiohttp session that already answers the authorize call."""
    return FakeHTTPSession().add('b2_authorize_account', auth_response)


@pytest.fixture
def client(http_session):
    """Unauthorized StorageClient wired to the fake session."""
    return StorageClient('keyId', 'secret', http_session=http_session)


@pytest.fixture
def make_http_session():
    """Factory for additional fake sessions."""
    return FakeHTTPSession
