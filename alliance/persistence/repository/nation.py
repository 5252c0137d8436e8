"""PostgreSQL implementation of Nation cache repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from alliance.domain.model import Nation
from alliance.domain.repository import NationRepository
from alliance.domain.value import NationId
from alliance.persistence.mappers import nation_to_dict, row_to_nation
from alliance.persistence.tables import nations_table


class PostgresNationRepository(NationRepository):
    """PostgreSQL implementation of NationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, nation_id: NationId) -> Optional[Nation]:
        stmt = select(nations_table).where(nations_table.c.id == nation_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_nation(dict(row)) if row else None

    async def upsert(self, nation: Nation) -> Nation:
        """Insert the nation, replacing every column of an existing row."""
        values = nation_to_dict(nation)
        stmt = insert(nations_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[nations_table.c.id],
            set_={key: stmt.excluded[key] for key in values if key != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return nation
