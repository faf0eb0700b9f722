import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, JsonDoc


class Event(Base):
    __tablename__ = "events"

    event_id: Mapped[str] = mapped_column(sa.Text, primary_key=True)

    user_id: Mapped[int] = mapped_column(sa.BigInteger, nullable=False)
    type: Mapped[str] = mapped_column(sa.Text, nullable=False)
    ts: Mapped[int] = mapped_column(sa.BigInteger, nullable=False)  # unix seconds, client clock

    game_id: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    correlation_id: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    session_id: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    schema_version: Mapped[int] = mapped_column(sa.Integer, nullable=False, server_default="1")

    data: Mapped[dict] = mapped_column(JsonDoc, nullable=False)
    received_at: Mapped[int] = mapped_column(sa.BigInteger, nullable=False)  # unix ms, server clock

    __table_args__ = (
        sa.Index("ix_events_user_ts", "user_id", sa.text("ts DESC")),
        sa.Index("ix_events_game_ts", "game_id", sa.text("ts DESC")),
    )

    def to_document(self) -> dict:
        return {
            "eventId": self.event_id,
            "userId": self.user_id,
            "type": self.type,
            "ts": self.ts,
            "gameId": self.game_id,
            "correlationId": self.correlation_id,
            "sessionId": self.session_id,
            "schemaVersion": self.schema_version,
            "data": self.data,
            "receivedAt": self.received_at,
        }
