"""
Async authorization service.

Exchanges application key credentials for a B2 session.
"""
from .async_client import AsyncAPIClient
from .errors import AUTHORIZE_ERRORS, translate_status
from ..logging import get_logger
from ..models import Credential
from ..session import Session


class AsyncAuthService:
    """
    Asynchronous authorization service.

    Performs b2_authorize_account and builds the resulting Session.
    """

    def __init__(self, client: AsyncAPIClient):
        """
        Initialize auth service.

        Args:
            client: Async API client
        """
        self._client = client
        self._logger = get_logger('b2py.auth')

    async def authorize(self, credential: Credential) -> Session:
        """
        Authorize an account.

        Args:
            credential: Application key id and secret

        Returns:
            New Session

        Raises:
            UnauthorizedError: Wrong key id/secret (401)
            UsageCapExceededError: Account usage cap reached (403)
        """
        with translate_status(AUTHORIZE_ERRORS):
            data = await self._client.get(
                self._client.config.auth_url,
                headers={'Authorization': credential.basic_authorization}
            )

        session = Session.from_response(data)
        self._logger.debug(f"Authorized account {session.account_id} on {session.api_url}")
        return session
