import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class Player(Base):
    __tablename__ = "players"

    user_id: Mapped[int] = mapped_column(sa.BigInteger, primary_key=True, autoincrement=False)

    games: Mapped[int] = mapped_column(sa.Integer, nullable=False, server_default="0")
    lesson_steps: Mapped[int] = mapped_column(sa.Integer, nullable=False, server_default="0")

    last_seen_at: Mapped[int | None] = mapped_column(sa.BigInteger, nullable=True)
    last_event_type: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    last_event_at: Mapped[int | None] = mapped_column(sa.BigInteger, nullable=True)

    created_at: Mapped[int] = mapped_column(sa.BigInteger, nullable=False)

    def to_document(self) -> dict:
        return {
            "userId": self.user_id,
            "totals": {"games": self.games, "lessonSteps": self.lesson_steps},
            "lastSeenAt": self.last_seen_at,
            "lastEventType": self.last_event_type,
            "lastEventAt": self.last_event_at,
            "createdAt": self.created_at,
        }
