"""GraphQL executor used by generated clients.

Handles HTTP communication, error handling, and response parsing.
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel

from .auth import Auth, NoAuth, RefreshableAuth
from .errors import error_messages

logger = logging.getLogger(__name__)


class GraphQLError(Exception):
    """Exception raised for GraphQL errors."""

    def __init__(self, message: str, errors: list[dict[str, Any]], data: Any = None):
        self.message = message
        self.errors = errors
        self.data = data
        super().__init__(message)


class GraphQLExecutor:
    """Executes GraphQL documents against an endpoint.

    Examples:
        executor = GraphQLExecutor(url, auth=BearerAuth(token))
        data = await executor.execute("query { viewer { login } }")

    When the endpoint answers 401 and ``auth`` implements
    :class:`RefreshableAuth`, credentials are refreshed and the request is
    sent once more, provided the refresh produced new credentials.
    """

    def __init__(
        self,
        url: str,
        auth: Auth | None = None,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the executor.

        Args:
            url: GraphQL endpoint URL
            auth: Authentication handler (implements Auth protocol)
            timeout: Request timeout in seconds
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.url = url
        self.timeout = timeout
        self._auth = auth if auth is not None else NoAuth()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Execute a GraphQL document.

        Args:
            query: GraphQL document
            variables: Variable values; ``None`` values are left out

        Returns:
            The 'data' portion of the response

        Raises:
            GraphQLError: If the response contains errors
            httpx.HTTPStatusError: If the endpoint answers with an error status
        """
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = self._serialize_variables(variables)

        response = await self._post(payload)
        if response.status_code == 401 and isinstance(self._auth, RefreshableAuth):
            if self._auth.refresh():
                logger.info("Credentials rejected by %s; retrying with refreshed credentials", self.url)
                response = await self._post(payload)
        response.raise_for_status()

        result = response.json()

        if result.get("errors"):
            errors = result["errors"] if isinstance(result["errors"], list) else [result["errors"]]
            raise GraphQLError(f"GraphQL errors: {error_messages(errors)}", errors, result.get("data"))

        return result.get("data") or {}

    async def _post(self, payload: dict[str, Any]) -> httpx.Response:
        client = await self._get_client()
        return await client.post(self.url, json=payload, headers=self._auth.get_headers())

    @staticmethod
    def _serialize_variables(variables: dict[str, Any]) -> dict[str, Any]:
        """Serialize variables for the GraphQL request.

        Handles Pydantic models by converting them to dicts.
        """
        result = {}
        for key, value in variables.items():
            if value is None:
                continue
            if isinstance(value, BaseModel):
                result[key] = value.model_dump(by_alias=True, exclude_none=True)
            elif isinstance(value, list):
                result[key] = [
                    v.model_dump(by_alias=True, exclude_none=True) if isinstance(v, BaseModel) else v
                    for v in value
                ]
            else:
                result[key] = value
        return result
