from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.api.deps import get_store
from app.db.store import Store
from app.services.games import export_pdn

router = APIRouter()


@router.get("/{game_id}/pdn", response_class=PlainTextResponse)
def get_game_pdn(game_id: str, store: Store = Depends(get_store)):
    return PlainTextResponse(export_pdn(store, game_id))
