"""In-memory nation cache repository for testing."""

from typing import Optional

from alliance.domain.model.nation import Nation
from alliance.domain.repository.nation import NationRepository
from alliance.domain.value import NationId


class InMemoryNationRepository(NationRepository):
    """In-memory implementation of NationRepository for testing."""

    def __init__(self) -> None:
        self._nations: dict[NationId, Nation] = {}

    async def find_by_id(self, nation_id: NationId) -> Optional[Nation]:
        return self._nations.get(nation_id)

    async def upsert(self, nation: Nation) -> Nation:
        self._nations[nation.id] = nation
        return nation
