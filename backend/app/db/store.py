from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import DuplicateKeyError, StoreError
from app.db.base import Base
from app.db.session import create_session_factory
from app.db.upsert import UpsertPlan
from app.models import Event, Game, Player

logger = logging.getLogger(__name__)

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class Store:
    """Store client built once at startup and handed to every operation.

    All SQLAlchemy failures leave this class as ``StoreError``; callers never
    see driver exceptions. ``find_event`` and ``count_events`` are read-back
    helpers for maintenance and tests; no route serves raw events.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._sessions = create_session_factory(engine)
        try:
            self._insert = _DIALECT_INSERTS[engine.dialect.name]
        except KeyError:
            raise StoreError(f"Unsupported database dialect: {engine.dialect.name}")

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self._sessions()
        try:
            yield db
            db.commit()
        except SQLAlchemyError as exc:
            db.rollback()
            raise StoreError(str(exc)) from exc
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def ensure_schema(self) -> None:
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

    def dispose(self) -> None:
        self.engine.dispose()

    # events

    def insert_event(self, values: dict) -> None:
        try:
            with self.session() as db:
                db.execute(sa.insert(Event).values(**values))
        except StoreError as exc:
            if isinstance(exc.__cause__, IntegrityError):
                raise DuplicateKeyError(f"eventId {values.get('event_id')!r} already recorded") from exc.__cause__
            raise

    def find_event(self, event_id: str) -> dict | None:
        with self.session() as db:
            row = db.get(Event, event_id)
            return row.to_document() if row else None

    def count_events(self, **filters) -> int:
        stmt = sa.select(sa.func.count()).select_from(Event).filter_by(**filters)
        with self.session() as db:
            return int(db.execute(stmt).scalar_one())

    # players / games

    def upsert(self, model, plan: UpsertPlan) -> None:
        stmt = plan.statement(self._insert, model.__table__)
        with self.session() as db:
            db.execute(stmt)

    def find_player(self, user_id: int) -> dict | None:
        with self.session() as db:
            row = db.get(Player, user_id)
            return row.to_document() if row else None

    def find_game(self, game_id: str) -> dict | None:
        with self.session() as db:
            row = db.get(Game, game_id)
            return row.to_document() if row else None

    def finished_games_without_pdn(self, limit: int = 500) -> list[dict]:
        stmt = (
            sa.select(Game)
            .where(Game.status == "finished", Game.pdn.is_(None))
            .order_by(Game.created_at)
            .limit(limit)
        )
        with self.session() as db:
            return [g.to_document() for g in db.scalars(stmt)]

    def set_game_pdn(self, game_id: str, pdn: dict) -> None:
        stmt = sa.update(Game).where(Game.game_id == game_id, Game.pdn.is_(None)).values(pdn=pdn)
        with self.session() as db:
            db.execute(stmt)
