"""Politics & War GraphQL API client."""

from typing import Any

import httpx
import logfire
from pydantic import ValidationError as PydanticValidationError

from alliance.domain.error import ExternalAuthError
from alliance.domain.service.nation_directory import NationDirectory
from alliance.domain.value import NationId, NationSnapshot

NATION_FIELDS = """
    id
    nation_name
    leader_name
    alliance_id
    alliance {
      name
    }
    score
    num_cities
    color
    continent
    war_policy
    domestic_policy
    last_active
"""

ME_QUERY = f"""
query {{
  me {{
    nation {{{NATION_FIELDS}}}
  }}
}}
"""

NATION_BY_ID_QUERY = f"""
query GetNation($id: [Int]) {{
  nations(id: $id, first: 1) {{
    data {{{NATION_FIELDS}}}
  }}
}}
"""


class PnWAPIError(ExternalAuthError):
    """Politics & War API error."""

    pass


def parse_nation(data: dict[str, Any]) -> NationSnapshot:
    """Convert a GraphQL nation object to a NationSnapshot.

    Raises:
        PnWAPIError: If required fields are missing or malformed
    """
    try:
        alliance = data.get("alliance") or {}
        alliance_id = data.get("alliance_id")
        return NationSnapshot(
            nation_id=NationId(int(data["id"])),
            nation_name=data["nation_name"],
            leader_name=data["leader_name"],
            # PnW reports alliance_id 0 for nations without an alliance
            alliance_id=int(alliance_id) if alliance_id and int(alliance_id) else None,
            alliance_name=alliance.get("name"),
            score=data.get("score"),
            cities=data.get("num_cities"),
            color=data.get("color"),
            continent=data.get("continent"),
            war_policy=data.get("war_policy"),
            domestic_policy=data.get("domestic_policy"),
            last_active=data.get("last_active"),
        )
    except (
        AttributeError,
        KeyError,
        TypeError,
        ValueError,
        PydanticValidationError,
    ) as e:
        raise PnWAPIError(f"Malformed nation data: {e}")


class PnWNationDirectory(NationDirectory):
    """Base class for nation directory clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealPnWNationDirectory(PnWNationDirectory):
    """Nation directory backed by the Politics & War GraphQL API."""

    def __init__(self, api_url: str, timeout: float = 15.0) -> None:
        """Initialize PnW client.

        Args:
            api_url: GraphQL endpoint URL
            timeout: Request timeout in seconds
        """
        self.api_url = api_url
        self.timeout = timeout

    async def fetch_by_api_key(self, api_key: str) -> NationSnapshot:
        data = await self._query(ME_QUERY, api_key)
        try:
            nation = (data.get("me") or {}).get("nation")
        except AttributeError:
            raise PnWAPIError("Malformed PnW API response")
        if not nation:
            raise PnWAPIError("Invalid PnW API key or API error")
        return parse_nation(nation)

    async def fetch_by_id(self, nation_id: NationId, api_key: str) -> NationSnapshot:
        data = await self._query(NATION_BY_ID_QUERY, api_key, {"id": [nation_id]})
        try:
            nations = (data.get("nations") or {}).get("data") or []
        except AttributeError:
            raise PnWAPIError("Malformed PnW API response")
        if not nations or not isinstance(nations, list):
            raise PnWAPIError(f"Nation not found: {nation_id}")
        return parse_nation(nations[0])

    async def _query(
        self, query: str, api_key: str, variables: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Run a GraphQL query and return its ``data`` object.

        Raises:
            PnWAPIError: On transport errors, non-200 responses or GraphQL errors
        """
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.api_url,
                    params={"api_key": api_key},
                    json=payload,
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("PnW API HTTP error", error=str(e))
            raise PnWAPIError("Failed to connect to PnW API")

        if response.status_code != 200:
            logfire.error("PnW API request failed", status_code=response.status_code)
            raise PnWAPIError("Invalid PnW API key or API error")

        try:
            body = response.json()
        except ValueError:
            logfire.error("PnW API returned a non-JSON body")
            raise PnWAPIError("Malformed PnW API response")
        if not isinstance(body, dict):
            logfire.error("PnW API returned a non-object body")
            raise PnWAPIError("Malformed PnW API response")

        errors = body.get("errors")
        if errors:
            first = errors[0] if isinstance(errors, list) else None
            message = (
                first.get("message") if isinstance(first, dict) else None
            ) or "Invalid PnW API key"
            logfire.warn("PnW API returned errors", error=message)
            raise PnWAPIError(message)

        data = body.get("data") or {}
        if not isinstance(data, dict):
            raise PnWAPIError("Malformed PnW API response")
        return data


class MockPnWNationDirectory(PnWNationDirectory):
    """Mock nation directory for testing.

    Keys map to nations; unknown keys are rejected like an invalid API key.
    Two default keys resolve to the same nation, to exercise the
    one-account-per-nation rule.
    """

    def __init__(self, nations: dict[str, NationSnapshot] | None = None):
        if nations is None:
            mockland = NationSnapshot(
                nation_id=NationId(1001),
                nation_name="Mockland",
                leader_name="Mock Leader",
                alliance_id=77,
                alliance_name="Mock Alliance",
                score=1234.5,
                cities=12,
                color="blue",
                continent="eu",
            )
            nations = {
                "mock-api-key-1": mockland,
                "mock-api-key-1-alt": mockland,
                "mock-api-key-2": NationSnapshot(
                    nation_id=NationId(1002),
                    nation_name="Testovia",
                    leader_name="Test Leader",
                ),
            }
        self.nations = nations

    async def fetch_by_api_key(self, api_key: str) -> NationSnapshot:
        nation = self.nations.get(api_key)
        if nation is None:
            raise PnWAPIError("Invalid PnW API key or API error")
        return nation

    async def fetch_by_id(self, nation_id: NationId, api_key: str) -> NationSnapshot:
        if api_key not in self.nations:
            raise PnWAPIError("Invalid PnW API key or API error")
        for nation in self.nations.values():
            if nation.nation_id == nation_id:
                return nation
        raise PnWAPIError(f"Nation not found: {nation_id}")
