from __future__ import annotations

from datetime import date
from typing import Any

import pytest
from fastapi.testclient import TestClient

from bikes import repository as bike_repository
from main import app
from stations import repository as station_repository


class InMemoryStore:
    """
    Stand-in for the `stanice`/`bicikli` tables behind the repository functions.
    """

    def __init__(self) -> None:
        self.stations: dict[int, dict[str, Any]] = {}
        self.bikes: dict[int, dict[str, Any]] = {}

    def add_station(self, station_id: int, **fields: Any) -> dict[str, Any]:
        row = {
            "id": station_id,
            "naziv": f"Stanica {station_id}",
            "adresa": f"Ulica {station_id}",
            "kapacitet": 10,
            "geo_lat": 45.8,
            "geo_lon": 15.97,
            "aktivna": True,
            "datum_posljednje_aktivnosti": date(2024, 5, 1),
        }
        row.update(fields)
        self.stations[station_id] = row
        return row

    def add_bike(self, bike_id: int, stanica_id: int, **fields: Any) -> dict[str, Any]:
        row = {
            "id": bike_id,
            "status": "dostupan",
            "tip": "gradski",
            "zadnje_koristenje": date(2024, 5, 2),
            "stanica_id": stanica_id,
        }
        row.update(fields)
        self.bikes[bike_id] = row
        return row

    def _station_rows(self, predicate=lambda row: True) -> list[dict[str, Any]]:
        return [dict(self.stations[k]) for k in sorted(self.stations) if predicate(self.stations[k])]

    def _bike_rows(self, predicate=lambda row: True) -> list[dict[str, Any]]:
        return [dict(self.bikes[k]) for k in sorted(self.bikes) if predicate(self.bikes[k])]

    # stations repository

    async def list_stations(self) -> list[dict]:
        return self._station_rows()

    async def get_station(self, station_id: int) -> dict | None:
        row = self.stations.get(station_id)
        return dict(row) if row is not None else None

    async def station_exists(self, station_id: int) -> bool:
        return station_id in self.stations

    async def list_stations_by_activity(self, *, is_active: bool) -> list[dict]:
        return self._station_rows(lambda row: row["aktivna"] is is_active)

    async def search_stations_by_location(self, location: str) -> list[dict]:
        needle = location.lower()
        return self._station_rows(
            lambda row: needle in row["adresa"].lower() or needle in row["naziv"].lower()
        )

    async def create_station(self, **fields: Any) -> dict:
        new_id = max(self.stations, default=0) + 1
        return dict(self.add_station(new_id, **fields))

    async def update_station(self, station_id: int, **fields: Any) -> dict | None:
        row = self.stations.get(station_id)
        if row is None:
            return None
        row.update({k: v for k, v in fields.items() if v is not None})
        return dict(row)

    async def delete_station(self, station_id: int) -> int | None:
        for bike_id in [b["id"] for b in self._bike_rows(lambda row: row["stanica_id"] == station_id)]:
            del self.bikes[bike_id]
        if self.stations.pop(station_id, None) is None:
            return None
        return station_id

    # bikes repository

    async def list_bikes(self) -> list[dict]:
        return self._bike_rows()

    async def get_bike(self, bike_id: int) -> dict | None:
        row = self.bikes.get(bike_id)
        return dict(row) if row is not None else None

    async def bike_exists(self, bike_id: int) -> bool:
        return bike_id in self.bikes

    async def list_bikes_for_station(self, station_id: int) -> list[dict]:
        return self._bike_rows(lambda row: row["stanica_id"] == station_id)

    async def list_bikes_for_stations(self, station_ids: list[int]) -> list[dict]:
        wanted = set(station_ids)
        rows = self._bike_rows(lambda row: row["stanica_id"] in wanted)
        return sorted(rows, key=lambda row: (row["stanica_id"], row["id"]))

    async def create_bike(self, **fields: Any) -> dict:
        new_id = max(self.bikes, default=bike_repository.BIKE_ID_BASE) + 1
        stanica_id = fields.pop("stanica_id")
        return dict(self.add_bike(new_id, stanica_id, **fields))

    async def update_bike(self, bike_id: int, **fields: Any) -> dict | None:
        row = self.bikes.get(bike_id)
        if row is None:
            return None
        row.update({k: v for k, v in fields.items() if v is not None})
        return dict(row)

    async def delete_bike(self, bike_id: int) -> int | None:
        if self.bikes.pop(bike_id, None) is None:
            return None
        return bike_id


STATION_REPOSITORY_FUNCTIONS = (
    "list_stations",
    "get_station",
    "station_exists",
    "list_stations_by_activity",
    "search_stations_by_location",
    "create_station",
    "update_station",
    "delete_station",
)

BIKE_REPOSITORY_FUNCTIONS = (
    "list_bikes",
    "get_bike",
    "bike_exists",
    "list_bikes_for_station",
    "list_bikes_for_stations",
    "create_bike",
    "update_bike",
    "delete_bike",
)


@pytest.fixture
def store(monkeypatch: pytest.MonkeyPatch) -> InMemoryStore:
    fake = InMemoryStore()
    for name in STATION_REPOSITORY_FUNCTIONS:
        monkeypatch.setattr(station_repository, name, getattr(fake, name))
    for name in BIKE_REPOSITORY_FUNCTIONS:
        monkeypatch.setattr(bike_repository, name, getattr(fake, name))
    return fake


@pytest.fixture
def client() -> TestClient:
    # Not entered as a context manager: the lifespan (DB pool) never runs.
    return TestClient(app)
