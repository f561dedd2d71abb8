# Role: Deterministic bag-of-words sentiment for stored user messages (analytics only, never routing).
# score = (#positive - #negative) / max(tokens / 10, 1), clamped to [-1, 1].

from __future__ import annotations

import re
from typing import Literal

POSITIVE_WORDS = frozenset({
    "good", "great", "excellent", "amazing", "wonderful", "perfect", "happy", "pleased",
    "satisfied", "helpful", "thanks", "thank", "awesome", "fantastic", "brilliant", "love",
    "like", "nice", "wow", "cool", "glad",
})

NEGATIVE_WORDS = frozenset({
    "bad", "terrible", "awful", "horrible", "poor", "wrong", "sad", "angry", "upset",
    "disappointed", "frustrated", "frustrating", "hate", "dislike", "problem", "issue", "error",
    "fail", "broken", "late", "worst", "missed", "slow", "annoying",
})

_EDGE_PUNCT_RE = re.compile(r"^\W+|\W+$")

SentimentLabel = Literal["positive", "negative", "neutral"]


def analyze_sentiment(text: str) -> float:
    tokens = (text or "").lower().split()
    if not tokens:
        return 0.0

    score = 0
    for token in tokens:
        # Key line: whole-word match only ("likely" is not "like").
        word = _EDGE_PUNCT_RE.sub("", token)
        if word in POSITIVE_WORDS:
            score += 1
        elif word in NEGATIVE_WORDS:
            score -= 1

    normalized = score / max(len(tokens) / 10, 1)
    return max(-1.0, min(1.0, normalized))


def sentiment_label(score: float) -> SentimentLabel:
    if score > 0:
        return "positive"
    if score < 0:
        return "negative"
    return "neutral"
