"""External nation directory interface."""

from alliance.domain.value import NationId, NationSnapshot


class NationDirectory:
    """Read-only client for the Politics & War nation directory.

    Implementations raise ExternalAuthError when the key is rejected, the
    nation cannot be found, or the service cannot be reached.
    """

    async def fetch_by_api_key(self, api_key: str) -> NationSnapshot:
        """Resolve an API key to the nation that owns it.

        Args:
            api_key: Caller-supplied PnW API key

        Returns:
            Nation attributes

        Raises:
            ExternalAuthError: If the key is invalid or the request fails
        """
        raise NotImplementedError

    async def fetch_by_id(self, nation_id: NationId, api_key: str) -> NationSnapshot:
        """Fetch a nation by id.

        Args:
            nation_id: Nation to look up
            api_key: API key used to authorize the request

        Returns:
            Nation attributes

        Raises:
            ExternalAuthError: If the nation is not found or the request fails
        """
        raise NotImplementedError
