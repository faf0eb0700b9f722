import sqlalchemy as sa
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, JsonDoc


class Game(Base):
    __tablename__ = "games"

    game_id: Mapped[str] = mapped_column(sa.Text, primary_key=True)

    # header
    variant: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    mode: Mapped[str] = mapped_column(sa.Text, nullable=False, server_default="pvp")
    rated: Mapped[bool] = mapped_column(sa.Boolean, nullable=False, server_default=sa.text("false"))
    time_control: Mapped[dict | None] = mapped_column(JsonDoc, nullable=True)
    white: Mapped[dict | None] = mapped_column(JsonDoc, nullable=True)
    black: Mapped[dict | None] = mapped_column(JsonDoc, nullable=True)
    white_user_id: Mapped[int | None] = mapped_column(sa.BigInteger, nullable=True)
    black_user_id: Mapped[int | None] = mapped_column(sa.BigInteger, nullable=True)
    correlation_id: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    start_fen: Mapped[str | None] = mapped_column(sa.Text, nullable=True)

    status: Mapped[str] = mapped_column(sa.Text, nullable=False, server_default="running")  # running/finished

    # finalize
    result: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    end_reason: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    final_fen: Mapped[str | None] = mapped_column(sa.Text, nullable=True)
    moves: Mapped[list | None] = mapped_column(JsonDoc, nullable=True)
    stats: Mapped[dict | None] = mapped_column(JsonDoc, nullable=True)
    ratings: Mapped[dict | None] = mapped_column(JsonDoc, nullable=True)
    pdn: Mapped[dict | None] = mapped_column(JsonDoc, nullable=True)  # cached {tags, text}
    end_at: Mapped[int | None] = mapped_column(sa.BigInteger, nullable=True)

    created_at: Mapped[int] = mapped_column(sa.BigInteger, nullable=False)
    updated_at: Mapped[int | None] = mapped_column(sa.BigInteger, nullable=True)

    __table_args__ = (
        sa.Index("ix_games_white_created", "white_user_id", sa.text("created_at DESC")),
        sa.Index("ix_games_black_created", "black_user_id", sa.text("created_at DESC")),
        sa.CheckConstraint("status in ('running','finished')", name="ck_game_status"),
    )

    def to_document(self) -> dict:
        doc = {
            "gameId": self.game_id,
            "variant": self.variant,
            "mode": self.mode,
            "rated": self.rated,
            "timeControl": self.time_control,
            "white": self.white,
            "black": self.black,
            "correlationId": self.correlation_id,
            "startFen": self.start_fen,
            "status": self.status,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        if self.status == "finished":
            doc.update({
                "result": self.result,
                "endReason": self.end_reason,
                "finalFen": self.final_fen,
                "moves": self.moves,
                "stats": self.stats,
                "ratings": self.ratings,
                "endAt": self.end_at,
                "pdn": self.pdn,
            })
        return doc
