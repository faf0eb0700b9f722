from fastapi import APIRouter, Body, Depends

from app.api.deps import get_store
from app.db.store import Store
from app.schemas.common import OkOut
from app.services.events import record_event
from app.services.games import finalize_game, upsert_game_header

router = APIRouter()

# Bodies are taken raw and validated by the services, so a missing field is a
# ValidationError (400 missing_fields) rather than FastAPI's 422.


@router.post("/events", response_model=OkOut, response_model_exclude_none=True)
def post_event(payload: dict | None = Body(None), store: Store = Depends(get_store)):
    return record_event(store, payload)


@router.post("/games/upsert", response_model=OkOut, response_model_exclude_none=True)
def post_game_header(payload: dict | None = Body(None), store: Store = Depends(get_store)):
    return upsert_game_header(store, payload)


@router.post("/games/finalize", response_model=OkOut, response_model_exclude_none=True)
def post_game_final(payload: dict | None = Body(None), store: Store = Depends(get_store)):
    return finalize_game(store, payload)
