# Role: Recovery path when no rule matched. Prefer a clarifying question when the message brushes a known
# topic; otherwise count misses and, past the threshold, offer a fixed menu instead of repeating ourselves.

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from campus_copilot.models.state import FallbackCounter, State
from campus_copilot.nlp.fuzzy import normalize
from campus_copilot.nlp.lexicon import FALLBACK_TOPIC_ORDER, FALLBACK_TOPICS
from campus_copilot.prompts.responses import label, render


@dataclass(frozen=True)
class FallbackResult:
    message: str
    topic: Optional[str] = None
    escalated: bool = False


class FallbackHandler:
    def __init__(self, escalation_threshold: int = 2, rng: Optional[random.Random] = None) -> None:
        self.escalation_threshold = escalation_threshold
        self.rng = rng

    def detect_topic(self, text: str) -> Optional[str]:
        # Substring containment; the result only picks which question to ask back.
        norm = normalize(text)
        for topic in FALLBACK_TOPIC_ORDER:
            if any(word in norm for word in FALLBACK_TOPICS[topic]):
                return topic
        return None

    def recover(self, *, state: State, user_message: str, language: str) -> FallbackResult:
        # 1) Topic hint -> clarifying question (counter untouched)
        # 2) Otherwise count the miss
        # 3) Counter above threshold -> escalation menu + reset
        topic = self.detect_topic(user_message)
        if topic is not None:
            message = render(
                "fallback_clarify",
                language,
                self.rng,
                topic=label(f"topic_{topic}", language),
                example=label(f"example_{topic}", language),
            )
            return FallbackResult(message=message, topic=topic)

        state.fallback.count += 1
        if state.fallback.count > self.escalation_threshold:
            state.fallback = FallbackCounter()
            return FallbackResult(message=render("fallback_escalation", language, self.rng), escalated=True)

        return FallbackResult(message=render("fallback", language, self.rng))

    def reset(self, state: State) -> None:
        state.fallback = FallbackCounter()
