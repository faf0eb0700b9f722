"""init kid draughts schema

Revision ID: 0001_init_kid_draughts
Revises: 
Create Date: 2026-10-17

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

revision = "0001_init_kid_draughts"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    # events (append-only)
    op.create_table(
        "events",
        sa.Column("event_id", sa.Text, primary_key=True),
        sa.Column("user_id", sa.BigInteger, nullable=False),
        sa.Column("type", sa.Text, nullable=False),
        sa.Column("ts", sa.BigInteger, nullable=False),
        sa.Column("game_id", sa.Text, nullable=True),
        sa.Column("correlation_id", sa.Text, nullable=True),
        sa.Column("session_id", sa.Text, nullable=True),
        sa.Column("schema_version", sa.Integer, nullable=False, server_default="1"),
        sa.Column("data", JSONB, nullable=False),
        sa.Column("received_at", sa.BigInteger, nullable=False),
    )
    op.create_index("ix_events_user_ts", "events", ["user_id", sa.text("ts DESC")])
    op.create_index("ix_events_game_ts", "events", ["game_id", sa.text("ts DESC")])

    # players (rolling summary)
    op.create_table(
        "players",
        sa.Column("user_id", sa.BigInteger, primary_key=True, autoincrement=False),
        sa.Column("games", sa.Integer, nullable=False, server_default="0"),
        sa.Column("lesson_steps", sa.Integer, nullable=False, server_default="0"),
        sa.Column("last_seen_at", sa.BigInteger, nullable=True),
        sa.Column("last_event_type", sa.Text, nullable=True),
        sa.Column("last_event_at", sa.BigInteger, nullable=True),
        sa.Column("created_at", sa.BigInteger, nullable=False),
    )

    # games
    op.create_table(
        "games",
        sa.Column("game_id", sa.Text, primary_key=True),
        sa.Column("variant", sa.Text, nullable=True),
        sa.Column("mode", sa.Text, nullable=False, server_default="pvp"),
        sa.Column("rated", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("time_control", JSONB, nullable=True),
        sa.Column("white", JSONB, nullable=True),
        sa.Column("black", JSONB, nullable=True),
        sa.Column("white_user_id", sa.BigInteger, nullable=True),
        sa.Column("black_user_id", sa.BigInteger, nullable=True),
        sa.Column("correlation_id", sa.Text, nullable=True),
        sa.Column("start_fen", sa.Text, nullable=True),
        sa.Column("status", sa.Text, nullable=False, server_default="running"),
        sa.Column("result", sa.Text, nullable=True),
        sa.Column("end_reason", sa.Text, nullable=True),
        sa.Column("final_fen", sa.Text, nullable=True),
        sa.Column("moves", JSONB, nullable=True),
        sa.Column("stats", JSONB, nullable=True),
        sa.Column("ratings", JSONB, nullable=True),
        sa.Column("pdn", JSONB, nullable=True),
        sa.Column("end_at", sa.BigInteger, nullable=True),
        sa.Column("created_at", sa.BigInteger, nullable=False),
        sa.Column("updated_at", sa.BigInteger, nullable=True),
        sa.CheckConstraint("status in ('running','finished')", name="ck_game_status"),
    )
    op.create_index("ix_games_white_created", "games", ["white_user_id", sa.text("created_at DESC")])
    op.create_index("ix_games_black_created", "games", ["black_user_id", sa.text("created_at DESC")])

def downgrade():
    op.drop_index("ix_games_black_created", table_name="games")
    op.drop_index("ix_games_white_created", table_name="games")
    op.drop_table("games")
    op.drop_table("players")
    op.drop_index("ix_events_game_ts", table_name="events")
    op.drop_index("ix_events_user_ts", table_name="events")
    op.drop_table("events")
