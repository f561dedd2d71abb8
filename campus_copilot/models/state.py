# Role: Per-principal state container. Holds the conversation history plus the transient dialog memory:
# the canteen ordering step, the fallback counter, and a one-turn memory of a game offer.

from __future__ import annotations

from datetime import datetime, timezone
from enum import IntEnum
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from campus_copilot.models.intent import Intent
from campus_copilot.models.message import Message

GameKind = Literal["game", "sentiment"]


class CanteenStep(IntEnum):
    IDLE = 0
    AWAITING_CANTEEN = 1
    AWAITING_MEAL = 2


class ConversationState(BaseModel):
    step: CanteenStep = CanteenStep.IDLE
    canteen: Optional[str] = None
    meal: Optional[str] = None

    @model_validator(mode="after")
    def _check_step_fields(self):
        # Idle carries nothing; awaiting a meal requires the chosen canteen.
        if self.step == CanteenStep.IDLE and (self.canteen or self.meal):
            raise ValueError("idle canteen state must not carry canteen/meal")
        if self.step == CanteenStep.AWAITING_MEAL and not self.canteen:
            raise ValueError("canteen is required when awaiting a meal")
        return self

    @property
    def active(self) -> bool:
        return self.step != CanteenStep.IDLE


class FallbackCounter(BaseModel):
    count: int = Field(default=0, ge=0)


class State(BaseModel):
    principal_id: str
    conversation: List[Message] = Field(default_factory=list)

    canteen: ConversationState = Field(default_factory=ConversationState)
    fallback: FallbackCounter = Field(default_factory=FallbackCounter)

    # Key line: set when the last bot reply offered a game; consumed by the very next turn.
    pending_game: Optional[GameKind] = None

    last_intent: Optional[Intent] = None
    turn_count: int = 0

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
