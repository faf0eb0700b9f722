from __future__ import annotations

import pytest

from tests.testkit import ApiError, event_body, final_body, header_body, side


def test_event_ingestion_and_summary(api, run_ids):
    user_id = run_ids.user_id()
    event_id = run_ids.key("evt")

    assert api.call("POST", "/roblox/events", body=event_body(event_id, user_id)) == {"ok": True}
    assert api.call("POST", "/roblox/events", body=event_body(event_id, user_id)) == {"ok": True, "deduped": True}

    summary = api.call("GET", f"/players/{user_id}/summary", auth=False)
    assert summary["userId"] == user_id
    assert summary["totals"]["games"] == 1


def test_game_lifecycle_and_export(api, run_ids):
    game_id = run_ids.key("game")
    white = side(run_ids.user_id(), "Ann")
    black = side(run_ids.user_id(), "Bo", isAI=True, aiLevel=2)

    api.call("POST", "/roblox/games/upsert", body=header_body(game_id, white=white, black=black))
    api.call("POST", "/roblox/games/finalize", body=final_body(game_id, white=white, black=black))

    text = api.call("GET", f"/games/{game_id}/pdn", auth=False)
    assert '[White "Ann"]' in text
    assert text.endswith("1. 32-28 19-23 2. 28x19 1-0")


def test_auth_and_validation_errors(api, run_ids):
    with pytest.raises(ApiError) as unauthorized:
        api.call("POST", "/roblox/events", body=event_body("x", 1), auth=False)
    assert unauthorized.value.status_code == 401

    with pytest.raises(ApiError) as missing:
        api.call("POST", "/roblox/games/finalize", body={"gameId": run_ids.key("game")})
    assert missing.value.status_code == 400
    assert missing.value.payload == {"ok": False, "error": "missing_fields"}

    with pytest.raises(ApiError) as not_found:
        api.call("GET", f"/games/{run_ids.key('none')}/pdn", auth=False)
    assert not_found.value.status_code == 404
