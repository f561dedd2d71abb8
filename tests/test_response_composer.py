import random

import pytest

from campus_copilot.core.response_composer import ResponseComposer, parse_clock_time
from campus_copilot.models.intent import Intent
from campus_copilot.models.principal import Degree, Principal, Role
from campus_copilot.models.reply import GameRedirect, LocationRedirect, ModuleList, TextReply
from campus_copilot.models.state import State
from campus_copilot.nlp.intent_classifier import IntentResult
from campus_copilot.prompts.responses import variants
from campus_copilot.tools.campus_data import JsonCampusData
from tests.conftest import MONDAY_EVENING, MONDAY_MORNING, MONDAY_NOON, RECORDS, SUNDAY_NOON, fixed_clock


def _composer(data, moment=MONDAY_MORNING):
    return ResponseComposer(data, clock=fixed_clock(moment), rng=random.Random(1))


def _compose(composer, intent, principal=None, state=None, message="", language="en", **entities):
    return composer.compose(
        result=IntentResult(intent=intent, rule="test", entities=entities),
        principal=principal or Principal(id="p1", degree=Degree.IT),
        state=state or State(principal_id="p1"),
        user_message=message,
        language=language,
    )


def _data_at(moment):
    return JsonCampusData(RECORDS, clock=fixed_clock(moment))


def test_parse_clock_time_formats():
    assert parse_clock_time("09:30").hour == 9
    assert parse_clock_time("1:15 PM").hour == 13
    assert parse_clock_time("later") is None


def test_schedule_lists_remaining_classes_in_order():
    reply = _compose(_composer(_data_at(MONDAY_MORNING)), Intent.SCHEDULE_QUERY)
    lines = reply.body.split("\n")
    assert lines[0] in {v.format(degree="IT", day="Monday") for v in variants("schedule_header", "en")}
    assert lines[1:] == [
        "09:00–11:00: Data Structures (Lab 2) with Dr. Perera",
        "13:00–15:00: Web Engineering (Hall A) with Ms. Silva",
    ]


def test_schedule_drops_classes_that_already_started():
    reply = _compose(_composer(_data_at(MONDAY_NOON), MONDAY_NOON), Intent.SCHEDULE_QUERY)
    assert "Data Structures" not in reply.body
    assert "Web Engineering" in reply.body


def test_schedule_after_last_class():
    reply = _compose(_composer(_data_at(MONDAY_EVENING), MONDAY_EVENING), Intent.SCHEDULE_QUERY)
    assert reply.body in {v.format(degree="IT") for v in variants("no_more_classes", "en")}


def test_schedule_on_a_day_without_classes():
    reply = _compose(_composer(_data_at(SUNDAY_NOON), SUNDAY_NOON), Intent.SCHEDULE_QUERY)
    assert reply.body in {v.format(degree="IT", day="Sunday") for v in variants("no_classes_today", "en")}


@pytest.mark.parametrize(
    "principal, problem",
    [
        (Principal(id="s1", role=Role.STAFF, degree=Degree.IT), "student_only"),
        (Principal(id="s2", role=Role.ADMIN), "student_only"),
        (Principal(id="s3", role=Role.STUDENT), "degree_not_set"),
    ],
)
def test_student_only_intents_are_gated(campus_data, principal, problem):
    for intent in (Intent.SCHEDULE_QUERY, Intent.MODULE_QUERY):
        reply = _compose(_composer(campus_data), intent, principal=principal)
        assert reply.body in variants(problem, "en")


def test_modules_are_a_module_list(campus_data):
    reply = _compose(_composer(campus_data), Intent.MODULE_QUERY)
    assert reply == ModuleList(modules=["Web Engineering", "Data Structures", "Operating Systems"])


def test_modules_for_degree_without_classes(campus_data):
    reply = _compose(_composer(campus_data), Intent.MODULE_QUERY, principal=Principal(id="d", degree=Degree.DESIGN))
    assert reply.body in {v.format(degree="Design") for v in variants("no_modules", "en")}


def test_bus_routes_are_rendered_as_blocks(campus_data):
    reply = _compose(_composer(campus_data), Intent.BUS_QUERY)
    body = reply.body
    assert body.index("Campus - Hostels") < body.index("Campus - Kandy City")
    assert "Duration: 35 min" in body
    assert "Schedule: 06:45, 16:30" in body


def test_events_are_rendered_in_date_order(campus_data):
    body = _compose(_composer(campus_data), Intent.EVENT_QUERY).body
    assert body.index("Freshers' Welcome") < body.index("Hackathon")
    assert "Date: 2026-10-23" in body
    assert "Location: IT Faculty" in body


def test_empty_collections_have_their_own_messages():
    composer = _composer(JsonCampusData({}))
    assert _compose(composer, Intent.BUS_QUERY).body in variants("no_bus_routes", "en")
    assert _compose(composer, Intent.EVENT_QUERY).body in variants("no_events", "en")


@pytest.mark.parametrize(
    "intent, key",
    [
        (Intent.SCHEDULE_QUERY, "error_fetching_schedule"),
        (Intent.BUS_QUERY, "error_fetching_bus"),
        (Intent.EVENT_QUERY, "error_fetching_events"),
        (Intent.MODULE_QUERY, "error_fetching_modules"),
    ],
)
def test_fetch_errors_become_localized_messages(raising_data, intent, key):
    reply = _compose(_composer(raising_data), intent, language="si")
    assert reply.body in variants(key, "si")


def test_location_redirect_and_help(campus_data):
    composer = _composer(campus_data)
    assert _compose(composer, Intent.LOCATION_QUERY, location="Library") == LocationRedirect(name="Library")
    assert _compose(composer, Intent.EXACT_LOCATION_NAME, location="IT Faculty") == LocationRedirect(name="IT Faculty")

    help_reply = _compose(composer, Intent.LOCATION_QUERY, keyword="where")
    assert isinstance(help_reply, TextReply)
    assert "Main Building" in help_reply.body
    assert "Cafeteria" not in help_reply.body


def test_mood_replies_offer_a_game(campus_data):
    composer = _composer(campus_data)
    state = State(principal_id="p1")

    reply = _compose(composer, Intent.MOOD_STRESSED, state=state)
    assert reply.body in variants("mood_stressed", "en")
    assert state.pending_game == "sentiment"

    _compose(composer, Intent.MOOD_HAPPY, state=state)
    assert state.pending_game is None


def test_game_confirmation_redirects(campus_data):
    reply = _compose(_composer(campus_data), Intent.GAME_CONFIRMATION, game="game")
    assert reply == GameRedirect(game="game")


def test_recognized_intent_resets_the_miss_counter(campus_data):
    state = State(principal_id="p1")
    state.fallback.count = 2
    _compose(_composer(campus_data), Intent.GREETING, state=state)
    assert state.fallback.count == 0
