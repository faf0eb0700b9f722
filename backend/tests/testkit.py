from __future__ import annotations

import itertools
import json
from urllib import error, request

from app.core.security import API_KEY_HEADER


class ApiError(RuntimeError):
    def __init__(self, status_code: int, payload):
        super().__init__(f"HTTP {status_code}: {payload}")
        self.status_code = status_code
        self.payload = payload


def _decode(resp) -> dict | str | None:
    raw = resp.read().decode("utf-8")
    if not raw:
        return None
    if resp.headers.get_content_type() == "application/json":
        return json.loads(raw)
    return raw


class ApiClient:
    """Minimal client for a running server; the key header is sent on every call unless auth=False."""

    def __init__(self, base_url: str, api_key: str | None = None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key

    def call(self, method: str, path: str, *, body=None, auth: bool = True, timeout: int = 20):
        headers = {}
        if auth and self.api_key:
            headers[API_KEY_HEADER] = self.api_key
        data = None
        if body is not None:
            headers["Content-Type"] = "application/json"
            data = json.dumps(body).encode("utf-8")

        req = request.Request(f"{self.base_url}{path}", data=data, headers=headers, method=method)
        try:
            with request.urlopen(req, timeout=timeout) as resp:
                return _decode(resp)
        except error.HTTPError as exc:
            raise ApiError(exc.code, _decode(exc)) from exc


class RunIds:
    """Ids unique to one test run so repeated runs against a live database do not collide."""

    def __init__(self, run: str):
        self.run = run
        self._base = int(run, 16) % 1_000_000 * 10_000
        self._seq = itertools.count(1)

    def user_id(self) -> int:
        return self._base + next(self._seq)

    def key(self, prefix: str) -> str:
        return f"{prefix}_{self.run}_{next(self._seq)}"


def event_body(event_id: str, user_id: int, type: str = "match_end", ts: int = 1_700_000_000, **extra) -> dict:
    return {"eventId": event_id, "userId": user_id, "type": type, "ts": ts, **extra}


def side(user_id: int | None, display: str | None, **extra) -> dict:
    body = {"userId": user_id, "display": display}
    body.update(extra)
    return body


def header_body(game_id: str, *, variant: str = "International", white: dict | None = None,
                black: dict | None = None, start_fen: str = "W:W31-50:B1-20", **extra) -> dict:
    return {
        "gameId": game_id,
        "variant": variant,
        "startFen": start_fen,
        "white": white or side(1, "Ann"),
        "black": black or side(2, "Bo"),
        **extra,
    }


def final_body(game_id: str, *, result: str = "1-0", moves: list | None = None,
               final_fen: str = "W:W28:B", **extra) -> dict:
    return {
        "gameId": game_id,
        "result": result,
        "finalFen": final_fen,
        "moves": moves if moves is not None else [
            {"notation": "32-28"},
            {"notation": "19-23"},
            {"notation": "28x19"},
        ],
        **extra,
    }
