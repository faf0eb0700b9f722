from typing import Any

from pydantic import ConfigDict, Field, field_validator

from app.schemas.common import CamelModel, Int64, coerce_int, coerce_str

DEFAULT_VARIANT = "International"
DEFAULT_MODE = "pvp"


class PlayerSideIn(CamelModel):
    # Unknown keys sent by the client are kept and stored as-is
    model_config = ConfigDict(extra="allow")

    user_id: Int64 | None = None
    display: str | None = None
    is_ai: bool | None = Field(None, alias="isAI")
    ai_level: int | str | None = None

    @field_validator("user_id", mode="before")
    @classmethod
    def _lenient_int(cls, v):
        return coerce_int(v)

    @field_validator("display", mode="before")
    @classmethod
    def _display(cls, v):
        return coerce_str(v)

    def as_document(self) -> dict:
        return self.model_dump(by_alias=True, exclude_unset=True)


class MoveIn(CamelModel):
    model_config = ConfigDict(extra="allow")

    notation: str | None = None

    @field_validator("notation", mode="before")
    @classmethod
    def _notation(cls, v):
        return coerce_str(v)

    def as_document(self) -> dict:
        return self.model_dump(by_alias=True, exclude_unset=True)


class _GameCommonIn(CamelModel):
    game_id: str = Field(..., min_length=1)
    mode: str = DEFAULT_MODE
    rated: bool = False
    time_control: Any = None
    correlation_id: str | None = None

    @field_validator("mode", mode="before")
    @classmethod
    def _mode(cls, v):
        return v or DEFAULT_MODE

    @field_validator("rated", mode="before")
    @classmethod
    def _rated(cls, v):
        return bool(v)

    @field_validator("game_id", "correlation_id", mode="before")
    @classmethod
    def _numeric_ids(cls, v):
        return coerce_str(v)

    @field_validator("time_control", "correlation_id", mode="before")
    @classmethod
    def _blank_is_none(cls, v):
        return None if v in (None, "") else v


class GameHeaderIn(_GameCommonIn):
    variant: str = Field(..., min_length=1)
    start_fen: str = Field(..., min_length=1)
    white: PlayerSideIn
    black: PlayerSideIn


class GameFinalIn(_GameCommonIn):
    result: str = Field(..., min_length=1)
    final_fen: str = Field(..., min_length=1)
    moves: list[MoveIn | None]

    variant: str = DEFAULT_VARIANT
    white: PlayerSideIn | None = None
    black: PlayerSideIn | None = None
    end_reason: str | None = None
    stats: Any = None
    ratings: Any = None

    @field_validator("variant", mode="before")
    @classmethod
    def _variant(cls, v):
        return v or DEFAULT_VARIANT

    @field_validator("end_reason", mode="before")
    @classmethod
    def _blank_reason(cls, v):
        return v or None

    def moves_document(self) -> list[dict | None]:
        return [m.as_document() if m is not None else None for m in self.moves]
