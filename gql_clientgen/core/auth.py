"""Authentication handlers for generated clients.

Every handler implements the Auth protocol. Handlers that can obtain new
credentials after the server rejects the current ones (HTTP 401) also
implement RefreshableAuth; the executor then retries the request once.
"""

import logging
import time
from typing import Callable, Dict, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Auth(Protocol):
    """Protocol for authentication handlers.

    Example:
        class TenantAuth:
            def __init__(self, token: str, tenant: str):
                self.token = token
                self.tenant = tenant

            def get_headers(self) -> dict[str, str]:
                return {"Authorization": f"Bearer {self.token}", "X-Tenant": self.tenant}
    """

    def get_headers(self) -> Dict[str, str]:
        """Return headers to include in requests."""
        ...


@runtime_checkable
class RefreshableAuth(Auth, Protocol):
    """An Auth handler able to replace rejected credentials."""

    def refresh(self) -> bool:
        """Obtain fresh credentials; return True if they differ from the current ones."""
        ...


class NoAuth:
    """No authentication (for public APIs or testing)."""

    def get_headers(self) -> Dict[str, str]:
        return {}


class ApiKeyAuth:
    """Static API key sent in a header (``x-api-key`` by default)."""

    def __init__(self, api_key: str, header_name: str = "x-api-key"):
        self.api_key = api_key
        self.header_name = header_name

    def get_headers(self) -> Dict[str, str]:
        return {self.header_name: self.api_key}


class BearerAuth:
    """Static bearer token."""

    def __init__(self, token: str):
        self.token = token

    def get_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


class KeyProviderAuth:
    """Key obtained from a provider callable and cached for ``max_age`` seconds.

    The cached key, and when it was fetched, belong to this instance; share
    the instance between clients to share the key.

    Args:
        fetch_key: Callable returning the current key (e.g. read from a key store)
        header_name: Header carrying the key (default: "Authorization")
        max_age: Seconds before the cached key is fetched again (default: 300)
        extra_headers: Additional static headers sent with every request
        clock: Monotonic time source, in seconds

    Example:
        auth = KeyProviderAuth(lambda: store.latest_key("billing"), extra_headers={"X-Caller": "billing"})
        client = BillingClient(url, auth=auth)
    """

    def __init__(
        self,
        fetch_key: Callable[[], str],
        *,
        header_name: str = "Authorization",
        max_age: float = 300.0,
        extra_headers: Dict[str, str] | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.fetch_key = fetch_key
        self.header_name = header_name
        self.max_age = max_age
        self.extra_headers = dict(extra_headers or {})
        self._clock = clock
        self._key: str | None = None
        self._fetched_at: float | None = None

    @property
    def key(self) -> str:
        """The cached key, fetched again once older than ``max_age``."""
        if self._key is None or self._clock() - self._fetched_at >= self.max_age:
            self._load()
        return self._key

    def _load(self):
        self._key = self.fetch_key()
        self._fetched_at = self._clock()

    def get_headers(self) -> Dict[str, str]:
        return {**self.extra_headers, self.header_name: self.key}

    def refresh(self) -> bool:
        previous = self._key
        self._load()
        changed = self._key != previous
        if not changed:
            logger.debug("Refreshed key is unchanged")
        return changed
