"""
Session module.

Holds the authorization state obtained from b2_authorize_account.
Sessions live in memory only; nothing is persisted between runs.
"""
from .models import Session, Allowed

__all__ = [
    'Session',
    'Allowed',
]
