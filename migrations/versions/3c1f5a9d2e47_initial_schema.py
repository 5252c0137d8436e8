"""initial_schema

Create the schema for Alliance Manager:
- Users (password and Discord login, linked Politics & War nation)
- Nations (cache of Politics & War nation data)

Revision ID: 3c1f5a9d2e47
Revises:
Create Date: 2026-10-17 10:12:44.518302

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f5a9d2e47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("username", sa.String(255), nullable=True),
        sa.Column("password_hash", sa.String(255), nullable=True),
        sa.Column("discord_id", sa.String(64), nullable=True),
        sa.Column("discord_username", sa.String(255), nullable=True),
        sa.Column("nation_id", sa.BigInteger(), nullable=True),
        sa.Column("nation_name", sa.String(255), nullable=True),
        sa.Column("leader_name", sa.String(255), nullable=True),
        sa.Column("api_key", sa.Text(), nullable=True),  # Fernet ciphertext
        sa.Column(
            "verified", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column(
            "last_active",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        # Names are matched by the repository to report which field conflicts
        sa.UniqueConstraint("email", name="users_email_key"),
        sa.UniqueConstraint("username", name="users_username_key"),
        sa.UniqueConstraint("discord_id", name="users_discord_id_key"),
        sa.UniqueConstraint("nation_id", name="users_nation_id_key"),
        sa.CheckConstraint(
            "NOT verified OR (nation_id IS NOT NULL"
            " AND nation_name IS NOT NULL AND leader_name IS NOT NULL)",
            name="ck_users_verified_has_nation",
        ),
    )
    op.create_index(
        "idx_users_last_active", "users", [sa.text("last_active DESC")]
    )
    op.create_index("idx_users_verified", "users", ["verified"])

    # ========================================================================
    # NATIONS table (cache)
    # ========================================================================
    op.create_table(
        "nations",
        sa.Column("id", sa.BigInteger(), autoincrement=False, nullable=False),
        sa.Column("nation_name", sa.String(255), nullable=False),
        sa.Column("leader_name", sa.String(255), nullable=False),
        sa.Column("alliance_id", sa.BigInteger(), nullable=True),
        sa.Column("alliance_name", sa.String(255), nullable=True),
        sa.Column("score", sa.Float(), nullable=True),
        sa.Column("cities", sa.Integer(), nullable=True),
        sa.Column("color", sa.String(50), nullable=True),
        sa.Column("continent", sa.String(50), nullable=True),
        sa.Column("war_policy", sa.String(100), nullable=True),
        sa.Column("domestic_policy", sa.String(100), nullable=True),
        sa.Column("last_active", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column(
            "fetched_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_nations_alliance_id", "nations", ["alliance_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_nations_alliance_id", table_name="nations")
    op.drop_table("nations")
    op.drop_index("idx_users_verified", table_name="users")
    op.drop_index("idx_users_last_active", table_name="users")
    op.drop_table("users")
