"""
Fakes for the aiohttp session and the Solana RPC client.
"""

from types import SimpleNamespace
from typing import Any, Dict, List, Optional


class FakeResponse:
    def __init__(self, status: int = 200, payload: Any = None, error: Optional[Exception] = None):
        self.status = status
        self._payload = payload
        self._error = error

    async def json(self, content_type: Optional[str] = "application/json"):
        if self._error is not None:
            raise self._error
        return self._payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Stands in for aiohttp.ClientSession; records requested URLs."""

    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.requested: List[str] = []
        self.kwargs: Dict[str, Any] = {}

    def __call__(self, **kwargs):
        self.kwargs = kwargs
        return self

    def get(self, url: str):
        self.requested.append(url)
        if self.error is not None:
            raise self.error
        return self.response

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeRpcClient:
    """Returns canned account data keyed by address."""

    def __init__(self, accounts: Optional[Dict[Any, bytes]] = None, error: Optional[Exception] = None):
        self.accounts = accounts or {}
        self.error = error
        self.requested: List[Any] = []

    def get_account_info(self, pubkey):
        self.requested.append(pubkey)
        if self.error is not None:
            raise self.error
        data = self.accounts.get(pubkey)
        if data is None:
            return SimpleNamespace(value=None)
        return SimpleNamespace(value=SimpleNamespace(data=data))
