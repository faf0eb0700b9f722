from __future__ import annotations

import logging

from app.core.errors import NotFoundError
from app.core.security import now_ms
from app.db.store import Store
from app.db.upsert import UpsertPlan
from app.models import Game
from app.schemas.common import parse_body
from app.schemas.game import GameFinalIn, GameHeaderIn, PlayerSideIn
from app.services.pdn import generate_pdn

logger = logging.getLogger(__name__)


def _side_doc(side: PlayerSideIn | None) -> dict | None:
    return side.as_document() if side is not None else None


def _side_user_id(side: PlayerSideIn | None) -> int | None:
    return side.user_id if side is not None else None


def header_plan(header: GameHeaderIn, now: int) -> UpsertPlan:
    return UpsertPlan(
        key={"game_id": header.game_id},
        on_insert={"created_at": now, "status": "running"},
        always={
            "updated_at": now,
            "mode": header.mode,
            "variant": header.variant,
            "rated": header.rated,
            "time_control": header.time_control,
            "white": _side_doc(header.white),
            "black": _side_doc(header.black),
            "white_user_id": _side_user_id(header.white),
            "black_user_id": _side_user_id(header.black),
            "correlation_id": header.correlation_id,
            "start_fen": header.start_fen,
        },
    )


def final_plan(final: GameFinalIn, pdn: dict, now: int) -> UpsertPlan:
    return UpsertPlan(
        key={"game_id": final.game_id},
        on_insert={"created_at": now},
        always={
            "updated_at": now,
            "end_at": now,
            "status": "finished",
            "mode": final.mode,
            "variant": final.variant,
            "rated": final.rated,
            "time_control": final.time_control,
            "white": _side_doc(final.white),
            "black": _side_doc(final.black),
            "white_user_id": _side_user_id(final.white),
            "black_user_id": _side_user_id(final.black),
            "correlation_id": final.correlation_id,
            "result": final.result,
            "end_reason": final.end_reason,
            "final_fen": final.final_fen,
            "moves": final.moves_document(),
            "stats": final.stats,
            "ratings": final.ratings,
            "pdn": pdn,
        },
    )


def upsert_game_header(store: Store, raw) -> dict:
    header = parse_body(GameHeaderIn, raw)
    store.upsert(Game, header_plan(header, now_ms()))
    return {"ok": True}


def finalize_game(store: Store, raw) -> dict:
    final = parse_body(GameFinalIn, raw)

    pdn = generate_pdn({
        "variant": final.variant,
        "white": _side_doc(final.white) or {"display": "White"},
        "black": _side_doc(final.black) or {"display": "Black"},
        "result": final.result,
        "moves": final.moves_document(),
    })

    store.upsert(Game, final_plan(final, pdn.as_document(), now_ms()))
    logger.info("game %s finalized (%s)", final.game_id, final.result)
    return {"ok": True}


def export_pdn(store: Store, game_id: str) -> str:
    game = store.find_game(game_id)
    if game is None:
        raise NotFoundError(f"game {game_id!r} not found")

    cached = game.get("pdn") or {}
    if cached.get("text"):
        return cached["text"]

    # Not persisted here; scripts/backfill_pdn.py fills the cache offline
    return generate_pdn(game).text


def backfill_missing_pdn(store: Store, batch_size: int = 500) -> int:
    filled = 0
    while True:
        games = store.finished_games_without_pdn(limit=batch_size)
        if not games:
            return filled
        for game in games:
            store.set_game_pdn(game["gameId"], generate_pdn(game).as_document())
            filled += 1
