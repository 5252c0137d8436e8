"""SQLAlchemy table definitions for Alliance Manager.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    Float,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("email", String(255), nullable=True, unique=True),
    Column("username", String(255), nullable=True, unique=True),
    Column("password_hash", String(255), nullable=True),
    Column("discord_id", String(64), nullable=True, unique=True),
    Column("discord_username", String(255), nullable=True),
    Column("nation_id", BigInteger, nullable=True, unique=True),
    Column("nation_name", String(255), nullable=True),
    Column("leader_name", String(255), nullable=True),
    Column("api_key", Text, nullable=True),  # Fernet ciphertext
    Column("verified", Boolean, nullable=False, server_default="false"),
    Column(
        "last_active", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_last_active", users_table.c.last_active.desc())
Index("idx_users_verified", users_table.c.verified)

# ============================================================================
# NATIONS TABLE (cache of Politics & War nations)
# ============================================================================
nations_table = Table(
    "nations",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=False),
    Column("nation_name", String(255), nullable=False),
    Column("leader_name", String(255), nullable=False),
    Column("alliance_id", BigInteger, nullable=True),
    Column("alliance_name", String(255), nullable=True),
    Column("score", Float, nullable=True),
    Column("cities", Integer, nullable=True),
    Column("color", String(50), nullable=True),
    Column("continent", String(50), nullable=True),
    Column("war_policy", String(100), nullable=True),
    Column("domestic_policy", String(100), nullable=True),
    Column("last_active", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "fetched_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_nations_alliance_id", nations_table.c.alliance_id)
