from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date

from app.core.security import now_utc

EVENT_NAME = "Kid Draughts"
SITE_NAME = "Roblox"
ROUND = "?"

DEFAULT_VARIANT = "International"

# PDN GameType codes per ruleset
GAME_TYPES = {
    "International": "20",
    "Brazilian": "26",
    "Turkish": "30",
}

TAG_ORDER = ("Event", "Site", "Date", "Round", "White", "Black", "Result", "GameType")


@dataclass
class PdnResult:
    tags: dict[str, str]
    text: str

    def as_document(self) -> dict:
        return {"tags": dict(self.tags), "text": self.text}


def game_type_for_variant(variant: str | None) -> str:
    return GAME_TYPES.get(variant or DEFAULT_VARIANT, GAME_TYPES[DEFAULT_VARIANT])


def _display(side, fallback: str) -> str:
    if isinstance(side, Mapping) and side.get("display"):
        return str(side["display"])
    return fallback


def _notation(ply) -> str | None:
    if isinstance(ply, Mapping) and ply.get("notation"):
        return str(ply["notation"])
    return None


def format_movetext(moves, result: str) -> str:
    parts: list[str] = []
    moves = list(moves or [])

    for move_no, i in enumerate(range(0, len(moves), 2), start=1):
        white = _notation(moves[i])
        if white is None:
            break
        black = _notation(moves[i + 1]) if i + 1 < len(moves) else None

        pair = f"{move_no}. {white}"
        if black is not None:
            pair += f" {black}"
        parts.append(pair + " ")

    return "".join(parts) + result


def generate_pdn(game: Mapping, today: date | None = None) -> PdnResult:
    """Render a match description as PDN.

    ``game`` uses the stored document keys: ``variant``, ``white``/``black``
    (objects with ``display``), ``result`` and ``moves`` (ply objects with
    ``notation``). The Date tag is today's UTC date unless ``today`` is given.
    """
    today = today or now_utc().date()

    tags = {
        "Event": EVENT_NAME,
        "Site": SITE_NAME,
        "Date": today.strftime("%Y.%m.%d"),
        "Round": ROUND,
        "White": _display(game.get("white"), "White"),
        "Black": _display(game.get("black"), "Black"),
        "Result": game.get("result") or "*",
        "GameType": game_type_for_variant(game.get("variant")),
    }

    tag_text = "\n".join(f'[{name} "{tags[name]}"]' for name in TAG_ORDER)
    movetext = format_movetext(game.get("moves"), tags["Result"])

    return PdnResult(tags=tags, text=f"{tag_text}\n\n{movetext}".strip())
