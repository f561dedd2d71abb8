# Role: Outbound adapters for campus records (schedules, buses, events, canteen menus).
# JsonCampusData serves a seed file from memory; HttpCampusData reads the campus REST API with requests.
# Both expose the same read-only query methods the composer depends on.

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import requests

from campus_copilot.models.campus import BusRoute, CanteenMenu, Event, Meals, ScheduleEntry

Clock = Callable[[], datetime]


class CampusDataError(RuntimeError):
    pass


def _weekday(clock: Clock) -> str:
    return clock().strftime("%A")


def _distinct(names: List[str]) -> List[str]:
    seen: List[str] = []
    for name in names:
        if name not in seen:
            seen.append(name)
    return seen


class JsonCampusData:
    """
    File-backed campus data, held in memory.

    Seed layout (camelCase, as exported from the campus API):
    {"schedules": [...], "busRoutes": [...], "events": [...], "canteenMenus": [...]}
    """

    def __init__(self, records: Optional[Dict[str, Any]] = None, clock: Optional[Clock] = None) -> None:
        records = records or {}
        self._clock = clock or datetime.now
        self.schedules = [ScheduleEntry.model_validate(r) for r in records.get("schedules", [])]
        self.bus_routes = [BusRoute.model_validate(r) for r in records.get("busRoutes", [])]
        self.events = [Event.model_validate(r) for r in records.get("events", [])]
        self.canteen_menus = [CanteenMenu.model_validate(r) for r in records.get("canteenMenus", [])]

    @classmethod
    def from_file(cls, path: str | Path, clock: Optional[Clock] = None) -> "JsonCampusData":
        p = Path(path)
        try:
            with open(p, "r", encoding="utf-8") as f:
                records = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise CampusDataError(f"Could not load campus data from {p}: {e}") from e
        if not isinstance(records, dict):
            raise CampusDataError(f"Campus data file {p} must contain a JSON object")
        return cls(records, clock=clock)

    def get_schedules_for_degree_today(self, degree: str) -> List[ScheduleEntry]:
        today = _weekday(self._clock)
        return [
            s for s in self.schedules
            if s.degree.lower() == degree.lower() and s.day.lower() == today.lower()
        ]

    def get_all_bus_routes(self) -> List[BusRoute]:
        return sorted(self.bus_routes, key=lambda r: r.route)

    def get_all_events(self) -> List[Event]:
        return sorted(self.events, key=lambda e: e.date)

    def get_all_canteen_names(self) -> List[str]:
        return _distinct([m.canteen_name for m in self.canteen_menus])

    def get_menu(self, canteen_name: str) -> Optional[Meals]:
        for menu in self.canteen_menus:
            if menu.canteen_name.lower() == canteen_name.lower():
                return menu.meals
        return None

    def get_distinct_modules(self, degree: str) -> List[str]:
        return _distinct([s.class_name for s in self.schedules if s.degree.lower() == degree.lower()])


class HttpCampusData:
    """
    Campus REST API client.

    Every endpoint answers with the envelope {"status": "success", "data": {...}}; anything else is a
    CampusDataError so the composer can turn it into a localized "try again" message.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self._clock = clock or datetime.now

    def _get(self, path: str, key: str, params: Optional[Dict[str, str]] = None) -> List[Dict[str, Any]]:
        # 1) GET with timeout
        # 2) Validate HTTP status + envelope
        # 3) Return the list stored under data[key]
        url = f"{self.base_url}{path}"
        try:
            r = self.session.get(url, params=params, timeout=self.timeout)
            r.raise_for_status()
            payload = r.json()
        except requests.RequestException as e:
            raise CampusDataError(f"Campus API request failed: {e}") from e
        except ValueError as e:
            raise CampusDataError(f"Campus API returned invalid JSON for {path}") from e

        if not isinstance(payload, dict) or payload.get("status") != "success":
            raise CampusDataError(f"Campus API returned an error envelope for {path}")

        items = (payload.get("data") or {}).get(key) or []
        if not isinstance(items, list):
            raise CampusDataError(f"Campus API field data.{key} is not a list")
        return items

    def get_schedules_for_degree_today(self, degree: str) -> List[ScheduleEntry]:
        today = _weekday(self._clock)
        rows = self._get("/api/schedules", "schedules", {"degree": degree, "day": today})
        entries = [ScheduleEntry.model_validate(r) for r in rows]
        # Key line: older API builds ignore the query params, so filter again locally.
        return [s for s in entries if s.degree.lower() == degree.lower() and s.day.lower() == today.lower()]

    def get_all_bus_routes(self) -> List[BusRoute]:
        routes = [BusRoute.model_validate(r) for r in self._get("/api/bus-routes", "routes")]
        return sorted(routes, key=lambda r: r.route)

    def get_all_events(self) -> List[Event]:
        events = [Event.model_validate(r) for r in self._get("/api/events", "events")]
        return sorted(events, key=lambda e: e.date)

    def _canteen_menus(self) -> List[CanteenMenu]:
        return [CanteenMenu.model_validate(r) for r in self._get("/api/canteen-menus", "menus")]

    def get_all_canteen_names(self) -> List[str]:
        return _distinct([m.canteen_name for m in self._canteen_menus()])

    def get_menu(self, canteen_name: str) -> Optional[Meals]:
        for menu in self._canteen_menus():
            if menu.canteen_name.lower() == canteen_name.lower():
                return menu.meals
        return None

    def get_distinct_modules(self, degree: str) -> List[str]:
        rows = self._get("/api/schedules", "schedules", {"degree": degree})
        entries = [ScheduleEntry.model_validate(r) for r in rows]
        return _distinct([s.class_name for s in entries if s.degree.lower() == degree.lower()])
