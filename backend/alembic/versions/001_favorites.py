"""Favorites table: one row per Ticketmaster event id (unique index enforces it)."""
from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "favorites",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("event_id", sa.String(128), nullable=False),
        sa.Column("name", sa.String(512), nullable=False, server_default=""),
        sa.Column("date", sa.String(32), nullable=False, server_default=""),
        sa.Column("time", sa.String(32), nullable=False, server_default=""),
        sa.Column("venue", sa.String(512), nullable=False, server_default=""),
        sa.Column("genre", sa.String(128), nullable=False, server_default=""),
        sa.Column("image", sa.String(2048), nullable=False, server_default=""),
        sa.Column("url", sa.String(2048), nullable=False, server_default=""),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_favorites_event_id", "favorites", ["event_id"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_favorites_event_id", table_name="favorites")
    op.drop_table("favorites")
