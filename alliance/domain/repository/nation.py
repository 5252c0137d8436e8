"""Nation cache repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from alliance.domain.model.nation import Nation
from alliance.domain.value import NationId


class NationRepository(ABC):
    """Repository for cached nation records."""

    @abstractmethod
    async def find_by_id(self, nation_id: NationId) -> Optional[Nation]:
        """Find a cached nation by its external id.

        Args:
            nation_id: Politics & War nation id

        Returns:
            The cached nation if present, None otherwise
        """
        pass

    @abstractmethod
    async def upsert(self, nation: Nation) -> Nation:
        """Insert the nation or replace the cached row with the same id.

        Args:
            nation: Nation to cache

        Returns:
            The cached nation
        """
        pass
