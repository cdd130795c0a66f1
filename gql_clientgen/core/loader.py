"""Loading of introspection results.

A schema source is either an endpoint URL, which is introspected over
HTTP, or a local file:

- ``.json``: a saved introspection result
- ``.graphql`` / ``.graphqls`` / ``.gql``: SDL, introspected with graphql-core
- a directory: every SDL file below it, concatenated in sorted order
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

import httpx
from graphql import GraphQLError, build_schema, introspection_from_schema
from pydantic import ValidationError

from .errors import SchemaFetchError, error_messages
from .schema import SchemaDefinition

logger = logging.getLogger(__name__)

INTROSPECTION_QUERY = """
query IntrospectionQuery {
  __schema {
    queryType { name }
    mutationType { name }
    subscriptionType { name }
    types {
      ...FullType
    }
    directives {
      name
      locations
      args {
        ...InputValue
      }
    }
  }
}

fragment FullType on __Type {
  kind
  name
  fields(includeDeprecated: true) {
    name
    args {
      ...InputValue
    }
    type {
      ...TypeRef
    }
    isDeprecated
    deprecationReason
  }
  inputFields {
    ...InputValue
  }
  interfaces {
    ...TypeRef
  }
  enumValues(includeDeprecated: true) {
    name
    isDeprecated
    deprecationReason
  }
  possibleTypes {
    ...TypeRef
  }
}

fragment InputValue on __InputValue {
  name
  type { ...TypeRef }
  defaultValue
}

fragment TypeRef on __Type {
  kind
  name
  ofType {
    kind
    name
    ofType {
      kind
      name
      ofType {
        kind
        name
        ofType {
          kind
          name
          ofType {
            kind
            name
            ofType {
              kind
              name
              ofType {
                kind
                name
              }
            }
          }
        }
      }
    }
  }
}
"""

SDL_SUFFIXES = (".graphql", ".graphqls", ".gql")


def is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class IntrospectionLoader:
    """Fetches and validates the introspection result of a schema source.

    Example:
        loader = IntrospectionLoader(headers={"Authorization": "Bearer ..."})
        schema = await loader.load("https://api.example.com/graphql")
    """

    def __init__(
        self,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = timeout
        self.headers = headers or {}
        self.transport = transport

    async def load(self, source: str, headers: dict[str, str] | None = None) -> SchemaDefinition:
        """Load the schema behind ``source``.

        Args:
            source: Endpoint URL or path to an introspection/SDL file or directory
            headers: Extra request headers for this source (URL sources only)

        Raises:
            SchemaFetchError: If the introspection result cannot be obtained or parsed
        """
        if is_remote(source):
            payload = await self._fetch(source, {**self.headers, **(headers or {})})
        else:
            payload = self._read(Path(source))

        try:
            schema = SchemaDefinition.from_introspection(payload)
        except ValidationError as e:
            raise SchemaFetchError(source, f"invalid introspection result: {e}") from e

        logger.debug("Loaded %d types from %s", len(schema.types), source)
        return schema

    async def _fetch(self, url: str, headers: dict[str, str]) -> dict[str, Any]:
        logger.info("Introspecting %s", url)
        request_headers = {"Content-Type": "application/json", **headers}
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers=request_headers,
                transport=self.transport,
            ) as client:
                response = await client.post(url, json={"query": INTROSPECTION_QUERY})
                response.raise_for_status()
                result = response.json()
        except httpx.HTTPError as e:
            raise SchemaFetchError(url, str(e)) from e
        except ValueError as e:
            raise SchemaFetchError(url, f"response is not JSON: {e}") from e

        if not isinstance(result, dict):
            raise SchemaFetchError(url, "response is not a JSON object")
        if result.get("errors"):
            raise SchemaFetchError(url, f"GraphQL errors: {error_messages(result['errors'])}")
        if not result.get("data"):
            raise SchemaFetchError(url, "response has no data")
        return result

    def _read(self, path: Path) -> dict[str, Any]:
        logger.info("Reading schema from %s", path)
        try:
            if path.is_dir():
                return self._introspect_sdl(self._read_sdl_dir(path), path)
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SchemaFetchError(str(path), str(e)) from e

        if path.suffix in SDL_SUFFIXES:
            return self._introspect_sdl(text, path)

        try:
            payload = json.loads(text)
        except ValueError as e:
            raise SchemaFetchError(str(path), f"not valid JSON: {e}") from e
        if not isinstance(payload, dict):
            raise SchemaFetchError(str(path), "introspection result must be a JSON object")
        return payload

    @staticmethod
    def _read_sdl_dir(path: Path) -> str:
        files = []
        for root, _, filenames in os.walk(path):
            for filename in filenames:
                if filename.endswith(SDL_SUFFIXES):
                    files.append(os.path.join(root, filename))
        if not files:
            raise OSError(f"no schema files ({', '.join(SDL_SUFFIXES)}) found in {path}")
        return "\n".join(Path(f).read_text(encoding="utf-8") for f in sorted(files))

    @staticmethod
    def _introspect_sdl(sdl: str, path: Path) -> dict[str, Any]:
        try:
            return introspection_from_schema(build_schema(sdl))
        except (GraphQLError, TypeError) as e:
            raise SchemaFetchError(str(path), f"invalid SDL: {e}") from e
