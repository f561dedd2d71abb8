# Role: Rule-based intent classification. An ordered list of (name, intent, matcher) rules is evaluated
# top to bottom and the first match wins; precedence is the list order and nothing else.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

import campus_copilot.config as config
from campus_copilot.models.intent import Intent
from campus_copilot.models.state import CanteenStep, State
from campus_copilot.nlp.fuzzy import (
    KEYWORD_MAX_DISTANCE,
    PHRASE_MAX_DISTANCE,
    best_phrase_match,
    find_keyword,
    find_phrase_in_tokens,
    normalize,
    tokenize,
)
from campus_copilot.nlp.lexicon import (
    ACKNOWLEDGMENT_KEYWORDS,
    AFFIRMATIVE_KEYWORDS,
    BUS_KEYWORDS,
    CAMPUS_LOCATIONS,
    EVENT_KEYWORDS,
    FOOD_KEYWORDS,
    GREETING_PHRASES,
    GREETING_WORDS,
    LOCATION_KEYWORDS,
    MODULE_KEYWORDS,
    MOOD_KEYWORDS,
    NEGATION_WORDS,
    SCHEDULE_KEYWORDS,
)

Entities = Dict[str, str]


@dataclass(frozen=True)
class TurnText:
    raw: str
    text: str
    tokens: List[str]
    state: State


@dataclass(frozen=True)
class Rule:
    name: str
    intent: Intent
    match: Callable[[TurnText], Optional[Entities]]


@dataclass(frozen=True)
class IntentResult:
    intent: Intent
    rule: str
    entities: Entities = field(default_factory=dict)
    compound: Optional[str] = None


# Topic tables used for compound detection (reported in the debug trace, not routed).
_COMPOUND_TOPICS = (
    ("food", FOOD_KEYWORDS),
    ("schedule", SCHEDULE_KEYWORDS),
    ("bus", BUS_KEYWORDS),
    ("event", EVENT_KEYWORDS),
    ("module", MODULE_KEYWORDS),
    ("location", LOCATION_KEYWORDS),
)


def _keyword_rule(keywords: Sequence[str], max_distance: int = KEYWORD_MAX_DISTANCE):
    def match(turn: TurnText) -> Optional[Entities]:
        hit = find_keyword(turn.text, keywords, max_distance, tokens=turn.tokens)
        return {"keyword": hit} if hit else None

    return match


def _canteen_step(step: CanteenStep):
    def match(turn: TurnText) -> Optional[Entities]:
        return {} if turn.state.canteen.step == step else None

    return match


def _greeting(turn: TurnText) -> Optional[Entities]:
    if turn.tokens and find_keyword(turn.tokens[0], GREETING_WORDS, tokens=turn.tokens[:1]):
        return {}
    if find_keyword(turn.text, GREETING_PHRASES, max_distance=0, tokens=turn.tokens):
        return {}
    return None


def _mood(mood: str):
    return _keyword_rule(MOOD_KEYWORDS[mood], max_distance=0)


def _game_confirmation(turn: TurnText) -> Optional[Entities]:
    # Key line: only a direct answer to the game offered in the previous bot reply counts.
    offered = turn.state.pending_game
    if offered is None:
        return None
    if find_keyword(turn.text, NEGATION_WORDS, max_distance=0, tokens=turn.tokens):
        return None
    if find_keyword(turn.text, AFFIRMATIVE_KEYWORDS, max_distance=0, tokens=turn.tokens):
        return {"game": offered}
    return None


class IntentClassifier:
    """
    Ordered rule cascade.

    Contract:
    - An open canteen flow swallows the message whatever it says.
    - Food words start the canteen flow before anything else is considered.
    - Then greeting, moods, game confirmation, location, schedule, bus, event, module, acknowledgment.
    - A bare location keyword ("where is room 9") only counts once nothing else matched.
    """

    def __init__(self, locations: Sequence[str] = CAMPUS_LOCATIONS) -> None:
        self.locations = tuple(locations)
        self.rules: List[Rule] = [
            Rule("canteen_awaiting_canteen", Intent.CONTINUE_CANTEEN_STEP1, _canteen_step(CanteenStep.AWAITING_CANTEEN)),
            Rule("canteen_awaiting_meal", Intent.CONTINUE_CANTEEN_STEP2, _canteen_step(CanteenStep.AWAITING_MEAL)),
            Rule("food", Intent.START_CANTEEN_FLOW, _keyword_rule(FOOD_KEYWORDS)),
            Rule("greeting", Intent.GREETING, _greeting),
            Rule("mood_tired", Intent.MOOD_TIRED, _mood("tired")),
            Rule("mood_hungry", Intent.MOOD_HUNGRY, _mood("hungry")),
            Rule("mood_bored", Intent.MOOD_BORED, _mood("bored")),
            Rule("mood_stressed", Intent.MOOD_STRESSED, _mood("stressed")),
            Rule("mood_sad", Intent.MOOD_SAD, _mood("sad")),
            Rule("mood_happy", Intent.MOOD_HAPPY, _mood("happy")),
            Rule("game_confirmation", Intent.GAME_CONFIRMATION, _game_confirmation),
            Rule("location_named", Intent.LOCATION_QUERY, self._named_location),
            Rule("exact_location_name", Intent.EXACT_LOCATION_NAME, self._exact_location),
            Rule("schedule", Intent.SCHEDULE_QUERY, _keyword_rule(SCHEDULE_KEYWORDS)),
            Rule("bus", Intent.BUS_QUERY, _keyword_rule(BUS_KEYWORDS)),
            Rule("event", Intent.EVENT_QUERY, _keyword_rule(EVENT_KEYWORDS)),
            Rule("module", Intent.MODULE_QUERY, _keyword_rule(MODULE_KEYWORDS)),
            Rule("acknowledgment", Intent.ACKNOWLEDGMENT, _keyword_rule(ACKNOWLEDGMENT_KEYWORDS, max_distance=0)),
            Rule("location_help", Intent.LOCATION_QUERY, _keyword_rule(LOCATION_KEYWORDS, max_distance=0)),
        ]

    def classify(self, message: str, state: State) -> IntentResult:
        # 1) Normalize + tokenize once
        # 2) Walk the rules in order, first match wins
        # 3) Attach compound topics for tracing
        text = normalize(message)
        turn = TurnText(raw=message, text=text, tokens=tokenize(text), state=state)
        compound = self.detect_compound(turn)

        for rule in self.rules:
            entities = rule.match(turn)
            if entities is not None:
                if config.DEBUG:
                    print(f"INTENT RULE HIT: {rule.name} -> {rule.intent.value} {entities}")
                return IntentResult(intent=rule.intent, rule=rule.name, entities=entities, compound=compound)

        return IntentResult(intent=Intent.FALLBACK, rule="fallback", compound=compound)

    def detect_compound(self, turn: TurnText) -> Optional[str]:
        # Role: "bus_schedule"-style tag when two topic tables hit the same message.
        hits = [
            name
            for name, keywords in _COMPOUND_TOPICS
            if find_keyword(turn.text, keywords, tokens=turn.tokens) is not None
        ]
        if len(hits) < 2:
            return None
        return f"{hits[0]}_{hits[1]}"

    def _named_location(self, turn: TurnText) -> Optional[Entities]:
        if not find_keyword(turn.text, LOCATION_KEYWORDS, max_distance=0, tokens=turn.tokens):
            return None
        name = find_phrase_in_tokens(turn.tokens, self.locations)
        return {"location": name} if name else None

    def _exact_location(self, turn: TurnText) -> Optional[Entities]:
        name = best_phrase_match(turn.text, self.locations, max_distance=PHRASE_MAX_DISTANCE)
        return {"location": name} if name else None
