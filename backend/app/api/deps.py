from fastapi import Header, Request

from app.core.config import settings
from app.core.errors import AuthError
from app.core.security import API_KEY_HEADER, api_key_matches
from app.db.store import Store


def get_store(request: Request) -> Store:
    return request.app.state.store


def require_api_key(x_api_key: str | None = Header(None, alias=API_KEY_HEADER)) -> None:
    if not api_key_matches(settings.API_KEY, x_api_key):
        raise AuthError("Missing or invalid API key")
