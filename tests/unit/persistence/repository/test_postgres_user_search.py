"""Unit tests for the SQL built by PostgresUserRepository.search()."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql

from alliance.persistence.repository.user import PostgresUserRepository


def _session() -> AsyncMock:
    session = AsyncMock()
    result = MagicMock()
    result.mappings.return_value.all.return_value = []
    session.execute.return_value = result
    return session


def _compiled(session: AsyncMock):
    stmt = session.execute.call_args.args[0]
    return stmt.compile(dialect=postgresql.dialect())


@pytest.mark.asyncio
async def test_like_wildcards_are_escaped():
    # Arrange
    session = _session()

    # Act
    await PostgresUserRepository(session).search(
        nation_name="50%_off", leader_name="a\\b"
    )

    # Assert
    compiled = _compiled(session)
    assert "ESCAPE '/'" in str(compiled)
    assert "50/%/_off" in compiled.params.values()
    assert "a\\b" in compiled.params.values()


@pytest.mark.asyncio
async def test_no_filters_means_no_like():
    session = _session()

    await PostgresUserRepository(session).search(limit=5)

    assert "LIKE" not in str(_compiled(session))
