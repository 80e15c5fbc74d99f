from __future__ import annotations

from datetime import date


def test_list_stations_orders_by_id_and_formats_rows(client, store) -> None:
    store.add_station(2, aktivna="t")
    store.add_station(1, aktivna=False, datum_posljednje_aktivnosti=None)

    resp = client.get("/api/stanice")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "OK"
    assert body["message"] == "Successfully fetched all stations"
    assert [s["id"] for s in body["response"]] == [1, 2]
    assert body["response"][0]["aktivna"] is False
    assert body["response"][0]["datum_posljednje_aktivnosti"] is None
    assert body["response"][1]["aktivna"] is True
    assert body["response"][1]["datum_posljednje_aktivnosti"] == "2024-05-01"


def test_get_station_nests_its_bikes_in_id_order(client, store) -> None:
    store.add_station(1)
    store.add_station(2)
    store.add_bike(800003, 1)
    store.add_bike(800001, 1)
    store.add_bike(800002, 2)

    resp = client.get("/api/stanice/1")

    assert resp.status_code == 200
    station = resp.json()["response"]
    assert station["id"] == 1
    assert [b["id"] for b in station["bicikli"]] == [800001, 800003]
    assert all(b["stanica_id"] == 1 for b in station["bicikli"])
    assert station["bicikli"][0]["zadnje_koristenje"] == "2024-05-02"


def test_get_station_rejects_non_numeric_id(client, store) -> None:
    resp = client.get("/api/stanice/abc")

    assert resp.status_code == 400
    assert resp.json() == {"status": "Bad Request", "message": "Invalid station ID", "response": None}


def test_get_station_missing_returns_404(client, store) -> None:
    resp = client.get("/api/stanice/42")

    assert resp.status_code == 404
    assert resp.json() == {
        "status": "Not Found",
        "message": "Station with the provided ID does not exist",
        "response": None,
    }


def test_list_station_bikes(client, store) -> None:
    store.add_station(3)
    store.add_bike(800002, 3)
    store.add_bike(800001, 3)

    resp = client.get("/api/stanice/3/bicikli")

    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Successfully fetched bikes for station 3"
    assert [b["id"] for b in body["response"]] == [800001, 800002]


def test_list_station_bikes_for_missing_station(client, store) -> None:
    resp = client.get("/api/stanice/3/bicikli")

    assert resp.status_code == 404
    assert resp.json()["message"] == "Station not found"


def test_active_filter_partitions_stations(client, store) -> None:
    store.add_station(1, aktivna=True)
    store.add_station(2, aktivna=False)
    store.add_station(3, aktivna=True)

    active = client.get("/api/stanice/aktivne/true").json()
    active_numeric = client.get("/api/stanice/aktivne/1").json()
    inactive = client.get("/api/stanice/aktivne/no").json()

    assert active["message"] == "Successfully fetched active stations"
    assert [s["id"] for s in active["response"]] == [1, 3]
    assert active_numeric["response"] == active["response"]
    assert inactive["message"] == "Successfully fetched inactive stations"
    assert [s["id"] for s in inactive["response"]] == [2]


def test_search_by_location_matches_name_or_address(client, store) -> None:
    store.add_station(1, naziv="Trg bana Jelačića", adresa="Trg 1")
    store.add_station(2, naziv="Maksimir", adresa="Maksimirska 100")
    store.add_station(3, naziv="Savska", adresa="Savska cesta 5")

    resp = client.get("/api/stanice/lokacija/maksimir")

    body = resp.json()
    assert body["message"] == "Successfully searched stations by location: maksimir"
    assert [s["id"] for s in body["response"]] == [2]


def test_create_station_assigns_next_id_and_defaults(client, store) -> None:
    store.add_station(7)

    resp = client.post(
        "/api/stanice",
        json={"naziv": "Test", "adresa": "Ulica 1", "kapacitet": 10, "geo_lat": 45.8, "geo_lon": 16.0},
    )

    assert resp.status_code == 201
    body = resp.json()
    assert body["status"] == "Created"
    assert body["message"] == "Station successfully created"
    assert body["response"]["id"] == 8
    assert body["response"]["aktivna"] is True
    assert body["response"]["datum_posljednje_aktivnosti"] == date.today().isoformat()


def test_create_station_accepts_zero_coordinates_and_explicit_inactive(client, store) -> None:
    resp = client.post(
        "/api/stanice",
        json={
            "naziv": "Nula",
            "adresa": "Ekvator",
            "kapacitet": 5,
            "geo_lat": 0,
            "geo_lon": 0,
            "aktivna": False,
            "datum_posljednje_aktivnosti": "2023-12-31",
        },
    )

    assert resp.status_code == 201
    station = resp.json()["response"]
    assert station["id"] == 1
    assert station["geo_lat"] == 0
    assert station["aktivna"] is False
    assert station["datum_posljednje_aktivnosti"] == "2023-12-31"


def test_create_station_missing_fields(client, store) -> None:
    resp = client.post("/api/stanice", json={"naziv": "Test", "adresa": "Ulica 1", "kapacitet": 10, "geo_lat": 45.8})

    assert resp.status_code == 400
    assert resp.json() == {"status": "Bad Request", "message": "Missing required fields", "response": None}
    assert store.stations == {}


def test_create_station_with_wrong_types_is_bad_request(client, store) -> None:
    resp = client.post(
        "/api/stanice",
        json={"naziv": "Test", "adresa": "Ulica 1", "kapacitet": "mnogo", "geo_lat": 1, "geo_lon": 1},
    )

    assert resp.status_code == 400
    assert resp.json()["status"] == "Bad Request"


def test_update_station_keeps_omitted_fields(client, store) -> None:
    before = dict(store.add_station(1, naziv="Staro", kapacitet=12, aktivna=True))

    resp = client.put("/api/stanice/1", json={"naziv": "Novo"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Station successfully updated"
    updated = body["response"]
    assert updated["naziv"] == "Novo"
    for field in ("adresa", "kapacitet", "geo_lat", "geo_lon", "aktivna"):
        assert updated[field] == before[field]
    assert updated["datum_posljednje_aktivnosti"] == "2024-05-01"


def test_update_station_missing_returns_404(client, store) -> None:
    resp = client.put("/api/stanice/5", json={"naziv": "Novo"})

    assert resp.status_code == 404
    assert resp.json()["message"] == "Station with the provided ID does not exist"


def test_delete_station_removes_its_bikes(client, store) -> None:
    store.add_station(1)
    store.add_station(2)
    store.add_bike(800001, 1)
    store.add_bike(800002, 1)
    store.add_bike(800003, 2)

    resp = client.delete("/api/stanice/1")

    assert resp.status_code == 200
    assert resp.json() == {
        "status": "OK",
        "message": "Station successfully deleted",
        "response": {"deleted_id": 1},
    }
    assert client.get("/api/bicikli/800001").status_code == 404
    assert client.get("/api/bicikli/800002").status_code == 404
    assert client.get("/api/bicikli/800003").status_code == 200


def test_delete_station_missing_returns_404(client, store) -> None:
    resp = client.delete("/api/stanice/9")

    assert resp.status_code == 404


def test_get_station_rejects_underscored_id(client, store) -> None:
    store.add_station(10)

    resp = client.get("/api/stanice/1_0")

    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid station ID"


def test_create_station_with_out_of_range_capacity_is_bad_request(client, store) -> None:
    resp = client.post(
        "/api/stanice",
        json={"naziv": "Test", "adresa": "Ulica 1", "kapacitet": 2**31, "geo_lat": 45.8, "geo_lon": 16.0},
    )

    assert resp.status_code == 400
    assert resp.json()["status"] == "Bad Request"
    assert store.stations == {}


def test_update_station_with_out_of_range_capacity_is_bad_request(client, store) -> None:
    store.add_station(1, kapacitet=12)

    resp = client.put("/api/stanice/1", json={"kapacitet": -(2**31) - 1})

    assert resp.status_code == 400
    assert store.stations[1]["kapacitet"] == 12
