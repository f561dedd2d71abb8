# Role: Central enum of supported intents. Keeps the system consistent across:
# classifier output, gating rules, response composition, and the debug trace.

from enum import Enum


class Intent(str, Enum):
    CONTINUE_CANTEEN_STEP1 = "continue_canteen_step1"
    CONTINUE_CANTEEN_STEP2 = "continue_canteen_step2"
    START_CANTEEN_FLOW = "start_canteen_flow"
    GREETING = "greeting"
    MOOD_TIRED = "mood_tired"
    MOOD_HUNGRY = "mood_hungry"
    MOOD_BORED = "mood_bored"
    MOOD_STRESSED = "mood_stressed"
    MOOD_SAD = "mood_sad"
    MOOD_HAPPY = "mood_happy"
    GAME_CONFIRMATION = "game_confirmation"
    LOCATION_QUERY = "location_query"
    EXACT_LOCATION_NAME = "exact_location_name"
    SCHEDULE_QUERY = "schedule_query"
    BUS_QUERY = "bus_query"
    EVENT_QUERY = "event_query"
    MODULE_QUERY = "module_query"
    ACKNOWLEDGMENT = "acknowledgment"
    FALLBACK = "fallback"


MOOD_INTENTS = {
    Intent.MOOD_TIRED,
    Intent.MOOD_HUNGRY,
    Intent.MOOD_BORED,
    Intent.MOOD_STRESSED,
    Intent.MOOD_SAD,
    Intent.MOOD_HAPPY,
}
