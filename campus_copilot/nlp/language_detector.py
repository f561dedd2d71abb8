# Role: Pick the reply language for a turn. An explicit hint from the caller always wins; otherwise the
# Unicode script decides (Sinhala block, then Tamil block, else English).

from __future__ import annotations

from typing import Literal, Optional

from campus_copilot.nlp.fuzzy import find_keyword, tokenize
from campus_copilot.nlp.lexicon import TRANSLITERATION_HINTS

Language = Literal["en", "si", "ta"]
SUPPORTED_LANGUAGES = ("en", "si", "ta")

SINHALA_RANGE = (0x0D80, 0x0DFF)
TAMIL_RANGE = (0x0B80, 0x0BFF)


def _has_char_in(text: str, block: tuple[int, int]) -> bool:
    lo, hi = block
    return any(lo <= ord(ch) <= hi for ch in text)


class LanguageDetector:
    def __init__(self, use_transliteration_hints: bool = False) -> None:
        # Key line: the transliteration heuristic is opt-in; script ranges are the authoritative rule.
        self.use_transliteration_hints = use_transliteration_hints

    def detect(self, text: str, hint: Optional[str] = None) -> Language:
        # 1) A supported hint wins outright
        # 2) Sinhala script, then Tamil script
        # 3) Optional Latin-script transliteration hints
        # 4) Default English
        if hint:
            code = hint.strip().lower()
            if code in SUPPORTED_LANGUAGES:
                return code  # type: ignore[return-value]

        text = text or ""
        if _has_char_in(text, SINHALA_RANGE):
            return "si"
        if _has_char_in(text, TAMIL_RANGE):
            return "ta"

        if self.use_transliteration_hints:
            tokens = tokenize(text)
            for code in ("si", "ta"):
                if find_keyword(text, TRANSLITERATION_HINTS[code], max_distance=0, tokens=tokens):
                    return code  # type: ignore[return-value]

        return "en"
