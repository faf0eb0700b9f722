from app.db.upsert import UpsertPlan


def _player_plan(**increments):
    return UpsertPlan(
        key={"user_id": 7},
        on_insert={"created_at": 100, "games": 0, "lesson_steps": 0},
        always={"last_event_type": "match_end", "last_event_at": 200},
        increments=increments,
    )


def test_insert_uses_on_insert_plus_increment():
    row = _player_plan(games=1).apply(None)
    assert row == {
        "user_id": 7,
        "created_at": 100,
        "games": 1,
        "lesson_steps": 0,
        "last_event_type": "match_end",
        "last_event_at": 200,
    }


def test_update_keeps_insert_only_fields_and_adds_increments():
    existing = {"user_id": 7, "created_at": 1, "games": 4, "lesson_steps": 2,
                "last_event_type": "lesson_step_completed", "last_event_at": 50}
    row = _player_plan(games=1).apply(existing)
    assert row["created_at"] == 1
    assert row["games"] == 5
    assert row["lesson_steps"] == 2
    assert row["last_event_type"] == "match_end"
    assert row["last_event_at"] == 200


def test_no_increment_leaves_counters():
    existing = {"user_id": 7, "created_at": 1, "games": 4, "lesson_steps": 2}
    row = _player_plan().apply(existing)
    assert row["games"] == 4
    assert row["lesson_steps"] == 2


def test_apply_does_not_mutate_existing():
    existing = {"user_id": 7, "created_at": 1, "games": 0}
    _player_plan(games=1).apply(existing)
    assert existing == {"user_id": 7, "created_at": 1, "games": 0}
