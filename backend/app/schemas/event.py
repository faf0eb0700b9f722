from typing import Any

from pydantic import Field, field_validator

from app.schemas.common import INT64_MAX, CamelModel, Int32, Int64, coerce_int, coerce_str


class EventIn(CamelModel):
    event_id: str = Field(..., min_length=1)
    user_id: Int64
    type: str = Field(..., min_length=1)
    ts: int = Field(..., ge=-(INT64_MAX // 1000), le=INT64_MAX // 1000)  # unix seconds, stored x1000 as lastSeenAt

    data: Any = Field(default_factory=dict)
    game_id: str | None = None
    correlation_id: str | None = None
    session_id: str | None = None
    schema_version: Int32 = 1

    @field_validator("user_id", "ts", mode="before")
    @classmethod
    def _lenient_int(cls, v):
        return coerce_int(v)

    @field_validator("event_id", "game_id", "correlation_id", "session_id", mode="before")
    @classmethod
    def _numeric_ids(cls, v):
        return coerce_str(v)

    @field_validator("schema_version", mode="before")
    @classmethod
    def _schema_version(cls, v):
        v = coerce_int(v)
        return 1 if v is None or not isinstance(v, int) else v

    @field_validator("data", mode="before")
    @classmethod
    def _data(cls, v):
        return {} if v is None else v
