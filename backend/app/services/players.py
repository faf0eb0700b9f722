from app.db.store import Store


def empty_summary(user_id: int) -> dict:
    return {"userId": user_id, "totals": {"games": 0, "lessonSteps": 0}}


def get_player_summary(store: Store, user_id: int) -> dict:
    return store.find_player(user_id) or empty_summary(user_id)
