# Role: Typed contract for what a turn produces. The core only ever builds these tagged values;
# serialize_reply() turns them into the wire grammar (plain text or a sentinel string) at the edge.

from __future__ import annotations

from typing import List, Literal, Union
from urllib.parse import quote

from pydantic import BaseModel, field_validator

from campus_copilot.models.state import GameKind

LOCATION_REDIRECT = "LOCATION_REDIRECT"
GAME_REDIRECT = "GAME_REDIRECT"
INSIGHTS_GAME_REDIRECT = "INSIGHTS_GAME_REDIRECT"
MODULE_LIST = "MODULE_LIST"
SHOW_CANTEEN_TABLE = "SHOW_CANTEEN_TABLE"


class TextReply(BaseModel):
    kind: Literal["text"] = "text"
    body: str

    @field_validator("body")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("text reply must be non-empty")
        return value


class LocationRedirect(BaseModel):
    kind: Literal["location_redirect"] = "location_redirect"
    name: str


class GameRedirect(BaseModel):
    kind: Literal["game_redirect"] = "game_redirect"
    game: GameKind = "game"


class ModuleList(BaseModel):
    kind: Literal["module_list"] = "module_list"
    modules: List[str]

    @field_validator("modules")
    @classmethod
    def _no_separator(cls, value: List[str]) -> List[str]:
        # Key line: "|" is the list separator on the wire.
        if any("|" in m for m in value):
            raise ValueError("module names must not contain '|'")
        return value


class CanteenTable(BaseModel):
    kind: Literal["canteen_table"] = "canteen_table"


Reply = Union[TextReply, LocationRedirect, GameRedirect, ModuleList, CanteenTable]


def serialize_reply(reply: Reply) -> str:
    # 1) Text passes through untouched
    # 2) Every other kind becomes exactly one sentinel (never mixed with prose)
    if isinstance(reply, TextReply):
        return reply.body

    if isinstance(reply, LocationRedirect):
        return f"{LOCATION_REDIRECT}:{reply.name}:{quote(reply.name, safe='')}"

    if isinstance(reply, GameRedirect):
        if reply.game == "sentiment":
            return f"{INSIGHTS_GAME_REDIRECT}:sentiment"
        return f"{GAME_REDIRECT}:game"

    if isinstance(reply, ModuleList):
        return f"{MODULE_LIST}:{'|'.join(reply.modules)}"

    if isinstance(reply, CanteenTable):
        return SHOW_CANTEEN_TABLE

    raise TypeError(f"unsupported reply type: {type(reply).__name__}")
