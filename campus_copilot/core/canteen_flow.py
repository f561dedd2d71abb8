# Role: Three-state canteen dialogue (Idle -> AwaitingCanteen -> AwaitingMeal -> Idle) for one principal.
# Each handler returns the reply for the turn and leaves State.canteen in its next state.

from __future__ import annotations

import random
from typing import List, Optional

import campus_copilot.config as config
from campus_copilot.models.campus import MEALS
from campus_copilot.models.reply import CanteenTable, Reply, TextReply
from campus_copilot.models.state import CanteenStep, ConversationState, State
from campus_copilot.nlp.fuzzy import best_phrase_match, find_keyword, find_phrase_in_tokens, normalize, tokenize
from campus_copilot.nlp.lexicon import MEAL_WORDS
from campus_copilot.prompts.responses import render


def match_canteen(text: str, names: List[str]) -> Optional[str]:
    # 1) exact (case-insensitive)  2) name inside the message  3) whole message within edit distance
    norm = normalize(text)
    for name in names:
        if norm == name.lower():
            return name
    return find_phrase_in_tokens(tokenize(norm), names) or best_phrase_match(norm, names)


def match_meal(text: str) -> Optional[str]:
    for meal in MEALS:
        if find_keyword(text, MEAL_WORDS[meal]):
            return meal
    return None


class CanteenFlow:
    def __init__(self, data_source, rng: Optional[random.Random] = None) -> None:
        self.data = data_source
        self.rng = rng

    def start(self, state: State, language: str) -> Reply:
        # Idle --food--> AwaitingCanteen, unless there is nothing to pick from.
        try:
            names = self.data.get_all_canteen_names()
        except Exception as e:
            self._trace_error("start", e)
            return TextReply(body=render("error_fetching_canteen", language, self.rng))

        if not names:
            return TextReply(body=render("canteen_none", language, self.rng))

        state.canteen = ConversationState(step=CanteenStep.AWAITING_CANTEEN)
        return CanteenTable()

    def on_canteen(self, state: State, text: str, language: str) -> Reply:
        try:
            names = self.data.get_all_canteen_names()
        except Exception as e:
            self._trace_error("canteen", e)
            self.reset(state)
            return TextReply(body=render("error_fetching_canteen", language, self.rng))

        if not names:
            self.reset(state)
            return TextReply(body=render("canteen_none", language, self.rng))

        name = match_canteen(text, names)
        if name is None:
            # Self-loop: stay in AwaitingCanteen and re-list the valid choices.
            return TextReply(
                body=render("canteen_invalid", language, self.rng, name=text.strip(), choices=", ".join(names))
            )

        state.canteen = ConversationState(step=CanteenStep.AWAITING_MEAL, canteen=name)
        return TextReply(body=render("canteen_ask_meal", language, self.rng, canteen=name))

    def on_meal(self, state: State, text: str, language: str) -> Reply:
        canteen = state.canteen.canteen or ""
        meal = match_meal(text)
        if meal is None:
            return TextReply(body=render("meal_invalid", language, self.rng, name=text.strip()))

        try:
            meals = self.data.get_menu(canteen)
        except Exception as e:
            self._trace_error("meal", e)
            self.reset(state)
            return TextReply(body=render("error_fetching_canteen", language, self.rng))

        # Key line: every exit from AwaitingMeal with a valid meal ends the flow.
        self.reset(state)

        if meals is None:
            # Canteen vanished between steps: report and terminate, no retry.
            return TextReply(body=render("canteen_gone", language, self.rng, canteen=canteen))

        items = meals.for_meal(meal)
        if not items:
            return TextReply(body=render("menu_empty", language, self.rng, canteen=canteen, meal=meal))

        header = render("menu_header", language, self.rng, canteen=canteen, meal=meal.capitalize())
        return TextReply(body=header + "\n" + "\n".join(f"- {item}" for item in items))

    def reset(self, state: State) -> None:
        state.canteen = ConversationState()

    def _trace_error(self, step: str, error: Exception) -> None:
        if config.DEBUG:
            print(f"CANTEEN FLOW ERROR ({step}):", repr(error))
