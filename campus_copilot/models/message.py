# Role: Single chat message in a principal's conversation. Stored in State (append-only) and returned by
# the conversation endpoint. Bot messages always carry a neutral sentiment.

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field, model_validator


class Message(BaseModel):
    text: str
    is_user: bool
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    sentiment: float = Field(default=0.0, ge=-1.0, le=1.0)

    @model_validator(mode="after")
    def _bot_is_neutral(self):
        # Template output is not user sentiment.
        if not self.is_user and self.sentiment != 0.0:
            raise ValueError("bot messages must have sentiment 0.0")
        return self
