# Role: Typo-tolerant keyword matching on top of Levenshtein edit distance (rapidfuzz).
# Short keywords match exactly only; a one-letter slip on "bus" or "eat" would hit too many real words.

from __future__ import annotations

import re
import string
from typing import Iterable, List, Optional, Sequence

from rapidfuzz.distance import Levenshtein

from campus_copilot.nlp.lexicon import NEVER_FUZZY

KEYWORD_MAX_DISTANCE = 1
PHRASE_MAX_DISTANCE = 2
MIN_FUZZY_LENGTH = 5

_WS_RE = re.compile(r"\s+")
_STRIP_CHARS = string.punctuation + "“”‘’…"


def normalize(text: str) -> str:
    return _WS_RE.sub(" ", (text or "").strip().lower())


def tokenize(text: str) -> List[str]:
    # Whitespace split keeps Sinhala/Tamil vowel signs attached to their letters.
    tokens = [t.strip(_STRIP_CHARS) for t in normalize(text).split(" ")]
    return [t for t in tokens if t]


def is_similar(a: str, b: str, max_distance: int = KEYWORD_MAX_DISTANCE) -> bool:
    return Levenshtein.distance(a, b, score_cutoff=max_distance) <= max_distance


def _token_matches(token: str, keyword: str, max_distance: int) -> bool:
    if token == keyword:
        return True
    if min(len(token), len(keyword)) < MIN_FUZZY_LENGTH or abs(len(token) - len(keyword)) > max_distance:
        return False
    # Typos keep the first letter; real words one edit away ("launch" for "lunch") never stand in.
    if token[0] != keyword[0] or token in NEVER_FUZZY:
        return False
    return is_similar(token, keyword, max_distance)


def find_keyword(
    text: str,
    keywords: Iterable[str],
    max_distance: int = KEYWORD_MAX_DISTANCE,
    tokens: Optional[Sequence[str]] = None,
) -> Optional[str]:
    """
    Return the first keyword found in text, or None.

    Multi-word and non-Latin keywords match by substring (Sinhala and Tamil words inflect by suffix);
    single Latin words match per token, with edit distance <= max_distance for longer keywords.
    """
    norm = normalize(text)
    toks = list(tokens) if tokens is not None else tokenize(norm)

    for kw in keywords:
        if " " in kw or not kw.isascii():
            if kw in norm:
                return kw
            continue
        if any(_token_matches(tok, kw, max_distance) for tok in toks):
            return kw
    return None


def best_phrase_match(
    text: str,
    candidates: Iterable[str],
    max_distance: int = PHRASE_MAX_DISTANCE,
) -> Optional[str]:
    # Role: whole-message match ("libary" -> "Library"); returns the closest candidate within range.
    norm = normalize(text)
    if norm.startswith("the "):
        norm = norm[4:]
    norm = norm.strip(_STRIP_CHARS + " ")
    if not norm:
        return None

    best: Optional[str] = None
    best_dist = max_distance + 1
    for cand in candidates:
        d = Levenshtein.distance(norm, cand.lower(), score_cutoff=max_distance)
        if d < best_dist:
            best, best_dist = cand, d
    return best


def find_phrase_in_tokens(
    tokens: Sequence[str],
    candidates: Iterable[str],
    max_distance: int = KEYWORD_MAX_DISTANCE,
) -> Optional[str]:
    # Role: locate a (possibly multi-word) name inside a message by sliding a window of the same width.
    for cand in candidates:
        target = cand.lower()
        width = len(target.split())
        for i in range(0, len(tokens) - width + 1):
            window = " ".join(tokens[i : i + width])
            if window == target:
                return cand
            if len(target) >= MIN_FUZZY_LENGTH and is_similar(window, target, max_distance):
                return cand
    return None
