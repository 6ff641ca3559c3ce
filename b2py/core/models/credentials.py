"""Account credential model."""
import base64
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credential:
    """
    Application key credentials used for b2_authorize_account.

    Example:
        >>> Credential('keyId', 'secret').basic_authorization
        'Basic a2V5SWQ6c2VjcmV0'
    """
    key_id: str
    application_key: str = field(repr=False)

    def __post_init__(self):
        if not self.key_id:
            raise ValueError("key_id must be a non-empty string")
        if not self.application_key:
            raise ValueError("application_key must be a non-empty string")

    @property
    def basic_authorization(self) -> str:
        """Value for the Authorization header of the authorize call."""
        raw = f"{self.key_id}:{self.application_key}".encode('utf-8')
        return f"Basic {base64.b64encode(raw).decode('ascii')}"
