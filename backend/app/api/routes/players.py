from fastapi import APIRouter, Depends

from app.api.deps import get_store
from app.db.store import Store
from app.schemas.player import PlayerSummaryOut
from app.services.players import get_player_summary

router = APIRouter()


@router.get("/{user_id}/summary", response_model=PlayerSummaryOut, response_model_exclude_none=True)
def get_summary(user_id: int, store: Store = Depends(get_store)):
    return get_player_summary(store, user_id)
