from fastapi import APIRouter, Depends

from app.api.deps import require_api_key
from app.api.routes import games, players, roblox

router = APIRouter()
router.include_router(roblox.router, prefix="/roblox", tags=["roblox"], dependencies=[Depends(require_api_key)])
router.include_router(games.router, prefix="/games", tags=["games"])
router.include_router(players.router, prefix="/players", tags=["players"])
