import json

import pytest
import requests

from campus_copilot.tools.campus_data import CampusDataError, HttpCampusData, JsonCampusData
from tests.conftest import MONDAY_MORNING, RECORDS, fixed_clock


def test_seed_file_loads(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(RECORDS), encoding="utf-8")
    data = JsonCampusData.from_file(path, clock=fixed_clock(MONDAY_MORNING))
    assert data.get_all_canteen_names() == ["Main Canteen", "Juice Bar"]


def test_missing_or_broken_seed_file(tmp_path):
    with pytest.raises(CampusDataError):
        JsonCampusData.from_file(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(CampusDataError):
        JsonCampusData.from_file(broken)


def test_bundled_seed_file_is_valid():
    from campus_copilot.config import CAMPUS_DATA_FILE

    data = JsonCampusData.from_file(CAMPUS_DATA_FILE)
    assert data.get_all_canteen_names()
    assert data.get_distinct_modules("IT")


def test_schedules_are_filtered_by_degree_and_weekday(campus_data):
    entries = campus_data.get_schedules_for_degree_today("it")
    assert {s.class_name for s in entries} == {"Data Structures", "Web Engineering"}


def test_records_are_normalized(campus_data):
    hostels = [r for r in campus_data.get_all_bus_routes() if r.route == "Campus - Hostels"][0]
    assert hostels.schedule == ["06:45", "16:30"]
    assert campus_data.get_all_events()[0].date.isoformat() == "2026-10-23"


def test_menu_lookup_is_case_insensitive(campus_data):
    assert campus_data.get_menu("main canteen").lunch == ["Rice", "Curry"]
    assert campus_data.get_menu("Nowhere") is None


class FakeResponse:
    def __init__(self, payload, status=200):
        self.payload = payload
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} error")

    def json(self):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeSession:
    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        response = self.responses[url.rsplit("/api", 1)[1]]
        if isinstance(response, Exception):
            raise response
        return response


def _ok(data):
    return FakeResponse({"status": "success", "data": data})


def test_http_client_reads_the_envelope():
    session = FakeSession({
        "/schedules": _ok({"schedules": RECORDS["schedules"]}),
        "/bus-routes": _ok({"routes": RECORDS["busRoutes"]}),
        "/events": _ok({"events": RECORDS["events"]}),
        "/canteen-menus": _ok({"menus": RECORDS["canteenMenus"]}),
    })
    client = HttpCampusData("http://campus.test/", timeout=3.0, session=session, clock=fixed_clock(MONDAY_MORNING))

    assert {s.class_name for s in client.get_schedules_for_degree_today("IT")} == {"Data Structures", "Web Engineering"}
    assert session.calls[0] == ("http://campus.test/api/schedules", {"degree": "IT", "day": "Monday"}, 3.0)
    assert [r.route for r in client.get_all_bus_routes()] == ["Campus - Hostels", "Campus - Kandy City"]
    assert client.get_all_events()[0].title == "Freshers' Welcome"
    assert client.get_menu("Juice Bar").breakfast == ["Fresh juice"]
    assert client.get_distinct_modules("AI") == ["Machine Learning"]


@pytest.mark.parametrize(
    "response",
    [
        requests.ConnectionError("down"),
        FakeResponse({}, status=503),
        FakeResponse(ValueError("no json")),
        FakeResponse({"status": "error", "message": "nope"}),
        FakeResponse({"status": "success", "data": {"routes": "oops"}}),
    ],
)
def test_http_failures_raise_campus_data_error(response):
    client = HttpCampusData("http://campus.test", session=FakeSession({"/bus-routes": response}))
    with pytest.raises(CampusDataError):
        client.get_all_bus_routes()
