# Role: Turns a classified intent into the reply for this turn. Fetches whatever campus records the intent
# needs, renders localized text, or builds a redirect/list reply. Collaborator failures never escape:
# each category maps to its own localized "couldn't fetch" message.

from __future__ import annotations

import random
from datetime import datetime, time
from typing import Callable, List, Optional, Sequence

import campus_copilot.config as config
from campus_copilot.core.canteen_flow import CanteenFlow
from campus_copilot.core.fallback_handler import FallbackHandler
from campus_copilot.core.validator import Validator
from campus_copilot.models.campus import BusRoute, Event, ScheduleEntry
from campus_copilot.models.intent import MOOD_INTENTS, Intent
from campus_copilot.models.principal import Principal
from campus_copilot.models.reply import GameRedirect, LocationRedirect, ModuleList, Reply, TextReply
from campus_copilot.models.state import GameKind, State
from campus_copilot.nlp.intent_classifier import IntentResult
from campus_copilot.nlp.lexicon import CAMPUS_LOCATIONS, FOOD_KEYWORDS
from campus_copilot.prompts.responses import label, render

# Mood replies that end with a game offer, and which game a "yes" opens.
GAME_OFFERS = {
    Intent.MOOD_TIRED: "game",
    Intent.MOOD_BORED: "game",
    Intent.MOOD_STRESSED: "sentiment",
    Intent.MOOD_SAD: "sentiment",
}

_TEMPLATE_INTENTS = {Intent.GREETING, Intent.ACKNOWLEDGMENT} | MOOD_INTENTS

_TIME_FORMATS = ("%H:%M", "%I:%M %p", "%I:%M%p", "%H.%M")


def parse_clock_time(value: str) -> Optional[time]:
    text = (value or "").strip().upper()
    for fmt in _TIME_FORMATS:
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue
    return None


class ResponseComposer:
    def __init__(
        self,
        data_source,
        validator: Optional[Validator] = None,
        canteen_flow: Optional[CanteenFlow] = None,
        fallback_handler: Optional[FallbackHandler] = None,
        locations: Sequence[str] = CAMPUS_LOCATIONS,
        clock: Optional[Callable[[], datetime]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        # Key line: dependencies are injectable for testing/mocking.
        self.data = data_source
        self.validator = validator or Validator()
        self.canteen_flow = canteen_flow or CanteenFlow(data_source, rng=rng)
        self.fallback_handler = fallback_handler or FallbackHandler(rng=rng)
        # Key line: places whose name is also a food word (Cafeteria) open the canteen picker, so help omits them.
        self.locations = tuple(loc for loc in locations if loc.lower() not in FOOD_KEYWORDS)
        self.clock = clock or datetime.now
        self.rng = rng

    def compose(
        self,
        *,
        result: IntentResult,
        principal: Principal,
        state: State,
        user_message: str,
        language: str,
    ) -> Reply:
        # 1) Canteen flow steps
        # 2) Access gating for student-only intents
        # 3) Intent-specific rendering
        intent = result.intent

        # Key line: any recognized intent breaks a run of misses.
        if intent != Intent.FALLBACK:
            self.fallback_handler.reset(state)

        if intent == Intent.START_CANTEEN_FLOW:
            return self.canteen_flow.start(state, language)
        if intent == Intent.CONTINUE_CANTEEN_STEP1:
            return self.canteen_flow.on_canteen(state, user_message, language)
        if intent == Intent.CONTINUE_CANTEEN_STEP2:
            return self.canteen_flow.on_meal(state, user_message, language)

        validation = self.validator.validate(intent, principal)
        if not validation.ok:
            return TextReply(body=render(validation.problem, language, self.rng))

        if intent in _TEMPLATE_INTENTS:
            offer: Optional[GameKind] = GAME_OFFERS.get(intent)  # type: ignore[assignment]
            state.pending_game = offer
            return TextReply(body=render(intent.value, language, self.rng))

        if intent == Intent.GAME_CONFIRMATION:
            return GameRedirect(game=result.entities.get("game", "game"))

        if intent in {Intent.LOCATION_QUERY, Intent.EXACT_LOCATION_NAME}:
            name = result.entities.get("location")
            if name:
                return LocationRedirect(name=name)
            return TextReply(body=render("location_help", language, self.rng, locations=", ".join(self.locations)))

        if intent == Intent.SCHEDULE_QUERY:
            return self._schedule(principal, language)
        if intent == Intent.BUS_QUERY:
            return self._bus(language)
        if intent == Intent.EVENT_QUERY:
            return self._events(language)
        if intent == Intent.MODULE_QUERY:
            return self._modules(principal, language)

        fallback = self.fallback_handler.recover(state=state, user_message=user_message, language=language)
        return TextReply(body=fallback.message)

    def _schedule(self, principal: Principal, language: str) -> Reply:
        degree = principal.degree.value  # gated by Validator
        now = self.clock()
        day = now.strftime("%A")

        try:
            entries = self.data.get_schedules_for_degree_today(degree)
        except Exception as e:
            self._trace_error("schedule", e)
            return TextReply(body=render("error_fetching_schedule", language, self.rng))

        if not entries:
            return TextReply(body=render("no_classes_today", language, self.rng, degree=degree, day=day))

        remaining = self._remaining_today(entries, now.time())
        if not remaining:
            return TextReply(body=render("no_more_classes", language, self.rng, degree=degree))

        with_word = label("with", language)
        lines = [
            f"{s.start_time}–{s.end_time}: {s.class_name} ({s.location}) {with_word} {s.instructor}"
            for s in remaining
        ]
        header = render("schedule_header", language, self.rng, degree=degree, day=day)
        return TextReply(body=header + "\n" + "\n".join(lines))

    def _remaining_today(self, entries: List[ScheduleEntry], now: time) -> List[ScheduleEntry]:
        # Key line: entries with an unreadable start time are kept and listed last.
        timed = [(parse_clock_time(s.start_time), s) for s in entries]
        remaining = [(t, s) for t, s in timed if t is None or t >= now]
        remaining.sort(key=lambda pair: (pair[0] is None, pair[0] or time.max))
        return [s for _, s in remaining]

    def _bus(self, language: str) -> Reply:
        try:
            routes = self.data.get_all_bus_routes()
        except Exception as e:
            self._trace_error("bus", e)
            return TextReply(body=render("error_fetching_bus", language, self.rng))

        if not routes:
            return TextReply(body=render("no_bus_routes", language, self.rng))

        blocks = [self._bus_block(r, language) for r in routes]
        return TextReply(body=render("bus_header", language, self.rng) + "\n\n" + "\n\n".join(blocks))

    def _bus_block(self, route: BusRoute, language: str) -> str:
        schedule = ", ".join(route.schedule) if route.schedule else "-"
        return (
            f"{route.route}\n"
            f"{label('duration', language)}: {route.duration or '-'}\n"
            f"{label('schedule', language)}: {schedule}"
        )

    def _events(self, language: str) -> Reply:
        try:
            events = self.data.get_all_events()
        except Exception as e:
            self._trace_error("events", e)
            return TextReply(body=render("error_fetching_events", language, self.rng))

        if not events:
            return TextReply(body=render("no_events", language, self.rng))

        blocks = [self._event_block(e, language) for e in sorted(events, key=lambda e: e.date)]
        return TextReply(body=render("events_header", language, self.rng) + "\n\n" + "\n\n".join(blocks))

    def _event_block(self, event: Event, language: str) -> str:
        return (
            f"{event.title}\n"
            f"{label('date', language)}: {event.date.isoformat()}\n"
            f"{label('time', language)}: {event.time or '-'}\n"
            f"{label('location', language)}: {event.location or '-'}"
        )

    def _modules(self, principal: Principal, language: str) -> Reply:
        degree = principal.degree.value  # gated by Validator
        try:
            names = self.data.get_distinct_modules(degree)
        except Exception as e:
            self._trace_error("modules", e)
            return TextReply(body=render("error_fetching_modules", language, self.rng))

        if not names:
            return TextReply(body=render("no_modules", language, self.rng, degree=degree))

        return ModuleList(modules=[n.replace("|", "/") for n in names])

    def _trace_error(self, category: str, error: Exception) -> None:
        if config.DEBUG:
            print(f"COMPOSER FETCH ERROR ({category}):", repr(error))
