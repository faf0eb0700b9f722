from __future__ import annotations

import logging

from app.core.errors import DuplicateKeyError, StoreError
from app.core.security import now_ms
from app.db.store import Store
from app.db.upsert import UpsertPlan
from app.models import Player
from app.schemas.common import parse_body
from app.schemas.event import EventIn

logger = logging.getLogger(__name__)

# event type -> Player counter column
COUNTER_FOR_TYPE = {
    "match_end": "games",
    "lesson_step_completed": "lesson_steps",
}


def player_plan(event: EventIn, received_at: int) -> UpsertPlan:
    increments = {}
    counter = COUNTER_FOR_TYPE.get(event.type)
    if counter:
        increments[counter] = 1

    return UpsertPlan(
        key={"user_id": event.user_id},
        on_insert={"created_at": received_at, "games": 0, "lesson_steps": 0},
        always={
            "last_seen_at": event.ts * 1000,
            "last_event_type": event.type,
            "last_event_at": received_at,
        },
        increments=increments,
    )


def record_event(store: Store, raw) -> dict:
    """Append an event and bump the player's rolling summary.

    A repeated ``eventId`` is a successful no-op reported as ``deduped``.
    Summary failures are logged only: the event itself is already stored.
    """
    event = parse_body(EventIn, raw)
    received_at = now_ms()

    try:
        store.insert_event({
            "event_id": event.event_id,
            "user_id": event.user_id,
            "type": event.type,
            "ts": event.ts,
            "game_id": event.game_id,
            "correlation_id": event.correlation_id,
            "session_id": event.session_id,
            "schema_version": event.schema_version,
            "data": event.data,
            "received_at": received_at,
        })
    except DuplicateKeyError:
        logger.debug("duplicate event %s ignored", event.event_id)
        return {"ok": True, "deduped": True}

    try:
        store.upsert(Player, player_plan(event, received_at))
    except StoreError:
        logger.exception("player summary update failed for user %s", event.user_id)

    return {"ok": True}
