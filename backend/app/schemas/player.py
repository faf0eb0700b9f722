from pydantic import BaseModel, Field


class PlayerTotalsOut(BaseModel):
    games: int = 0
    lessonSteps: int = 0


class PlayerSummaryOut(BaseModel):
    userId: int
    totals: PlayerTotalsOut = Field(default_factory=PlayerTotalsOut)
    lastSeenAt: int | None = None
    lastEventType: str | None = None
    lastEventAt: int | None = None
    createdAt: int | None = None
