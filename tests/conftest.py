from __future__ import annotations

import random
from datetime import datetime

import pytest

from campus_copilot.core.canteen_flow import CanteenFlow
from campus_copilot.core.fallback_handler import FallbackHandler
from campus_copilot.core.flow_controller import FlowController
from campus_copilot.core.response_composer import ResponseComposer
from campus_copilot.core.state_manager import StateManager
from campus_copilot.models.principal import Degree, Principal, Role
from campus_copilot.tools.campus_data import CampusDataError, JsonCampusData

# 2026-10-19 is a Monday.
MONDAY_MORNING = datetime(2026, 10, 19, 8, 0)
MONDAY_NOON = datetime(2026, 10, 19, 12, 0)
MONDAY_EVENING = datetime(2026, 10, 19, 18, 0)
SUNDAY_NOON = datetime(2026, 10, 18, 12, 0)

RECORDS = {
    "schedules": [
        {"className": "Web Engineering", "day": "Monday", "startTime": "13:00", "endTime": "15:00",
         "location": "Hall A", "instructor": "Ms. Silva", "degree": "IT"},
        {"className": "Data Structures", "day": "Monday", "startTime": "09:00", "endTime": "11:00",
         "location": "Lab 2", "instructor": "Dr. Perera", "degree": "IT"},
        {"className": "Operating Systems", "day": "Tuesday", "startTime": "10:00", "endTime": "12:00",
         "location": "Hall B", "instructor": "Dr. Fernando", "degree": "IT"},
        {"className": "Machine Learning", "day": "Monday", "startTime": "10:00", "endTime": "12:00",
         "location": "Room 204", "instructor": "Dr. Kumar", "degree": "AI"},
    ],
    "busRoutes": [
        {"route": "Campus - Kandy City", "schedule": ["07:00", "12:30"], "duration": "35 min"},
        {"route": "Campus - Hostels", "schedule": "06:45, 16:30", "duration": "10 min"},
    ],
    "events": [
        {"title": "Hackathon", "date": "2026-11-06", "time": "09:00", "location": "IT Faculty"},
        {"title": "Freshers' Welcome", "date": "2026-10-23T00:00:00.000Z", "time": "17:00",
         "location": "Main Building"},
    ],
    "canteenMenus": [
        {"canteenName": "Main Canteen", "meals": {"breakfast": [], "lunch": ["Rice", "Curry"], "dinner": ["Kottu"]}},
        {"canteenName": "Juice Bar", "meals": {"breakfast": ["Fresh juice"], "lunch": [], "dinner": []}},
    ],
}


def fixed_clock(moment: datetime):
    return lambda: moment


class RaisingCampusData:
    """Every query fails the way an unreachable campus API does."""

    def _fail(self, *args, **kwargs):
        raise CampusDataError("campus API unavailable")

    get_schedules_for_degree_today = _fail
    get_all_bus_routes = _fail
    get_all_events = _fail
    get_all_canteen_names = _fail
    get_menu = _fail
    get_distinct_modules = _fail


def build_flow(data_source, clock=None, escalation_threshold: int = 2) -> FlowController:
    rng = random.Random(7)
    composer = ResponseComposer(
        data_source,
        canteen_flow=CanteenFlow(data_source, rng=rng),
        fallback_handler=FallbackHandler(escalation_threshold=escalation_threshold, rng=rng),
        clock=clock or fixed_clock(MONDAY_MORNING),
        rng=rng,
    )
    return FlowController(state_manager=StateManager(), composer=composer)


@pytest.fixture
def campus_data():
    return JsonCampusData(RECORDS, clock=fixed_clock(MONDAY_MORNING))


@pytest.fixture
def raising_data():
    return RaisingCampusData()


@pytest.fixture
def flow(campus_data):
    return build_flow(campus_data)


@pytest.fixture
def student():
    return Principal(id="stu-1", role=Role.STUDENT, degree=Degree.IT)


@pytest.fixture
def staff():
    return Principal(id="staff-1", role=Role.STAFF)
