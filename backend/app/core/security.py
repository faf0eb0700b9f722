import hmac
from datetime import datetime, timezone

API_KEY_HEADER = "X-Api-Key"

def now_utc() -> datetime:
    return datetime.now(timezone.utc)

def now_ms() -> int:
    return int(now_utc().timestamp() * 1000)

def api_key_matches(expected: str | None, provided: str | None) -> bool:
    # An unset server key never authorizes anything
    if not expected:
        return False
    return hmac.compare_digest(expected.encode("utf-8"), (provided or "").encode("utf-8"))
