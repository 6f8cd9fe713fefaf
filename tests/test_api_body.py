"""API tests: body profile, measurement log and body fat calculator."""

API = "/api/v1/body"


async def test_profile_round_trip(client):
    assert (await client.get(f"{API}/profile")).status_code == 404

    r = await client.put(f"{API}/profile", json={"sex": "male", "height_feet": 5, "height_inches": 10})
    assert r.status_code == 200, r.text
    assert r.json()["height_in"] == 70

    r = await client.put(f"{API}/profile", json={"sex": "male", "height_in": 71.5})
    body = r.json()
    assert (body["height_feet"], body["height_inches"]) == (5, 11.5)

    r = await client.put(f"{API}/profile", json={"sex": "male"})
    assert r.status_code == 422


async def test_entry_without_profile_stores_raw_data(client):
    r = await client.post(f"{API}/entries", json={"weight": 180, "waist": 34, "neck": 15})
    assert r.status_code == 201, r.text
    entry = r.json()
    assert entry["weight"] == 180
    assert entry["body_fat_percent"] is None
    assert entry["bmi"] is None


async def test_entry_metrics_computed_on_write(client):
    await client.put(f"{API}/profile", json={"sex": "male", "height_in": 70})
    entry = (await client.post(f"{API}/entries", json={"weight": 180, "waist": 34, "neck": 15})).json()
    assert entry["body_fat_percent"] == 17.5
    assert entry["bmi"] == 25.8
    assert entry["lean_mass"] == 148.5

    # Weight only: BMI but no body fat
    r = await client.put(f"{API}/entries/{entry['id']}", json={"weight": 170})
    assert r.json()["body_fat_percent"] is None
    assert r.json()["bmi"] == 24.4


async def test_female_entry_without_hip_keeps_bmi(client):
    await client.put(f"{API}/profile", json={"sex": "female", "height_in": 65})
    entry = (await client.post(f"{API}/entries", json={"weight": 140, "waist": 30, "neck": 13})).json()
    assert entry["body_fat_percent"] is None
    assert entry["bmi"] == 23.3


async def test_history_latest_and_delete(client):
    for day, weight in (("2026-10-01T08:00:00", 182), ("2026-10-08T08:00:00", 180), ("2026-10-15T08:00:00", 178)):
        r = await client.post(f"{API}/entries", json={"weight": weight, "logged_at": day})
        assert r.status_code == 201, r.text

    assert [e["weight"] for e in (await client.get(f"{API}/entries")).json()] == [178, 180, 182]
    r = await client.get(f"{API}/entries", params={"start": "2026-10-05T00:00:00", "end": "2026-10-10T00:00:00"})
    assert [e["weight"] for e in r.json()] == [180]

    latest = (await client.get(f"{API}/entries/latest")).json()
    assert latest["weight"] == 178
    assert (await client.delete(f"{API}/entries/{latest['id']}")).status_code == 204
    assert (await client.get(f"{API}/entries/{latest['id']}")).status_code == 404
    assert (await client.get(f"{API}/entries/latest")).json()["weight"] == 180


async def test_calculator(client):
    r = await client.post(
        f"{API}/calculate",
        json={"sex": "male", "height": 70, "weight": 180, "waist": 34, "neck": 15},
    )
    assert r.status_code == 200
    assert r.json()["body_fat_category"] == "Fitness"
    assert r.json()["bmi_category"] == "Overweight"

    metric = await client.post(
        f"{API}/calculate",
        json={"sex": "male", "units": "metric", "height": 177.8, "weight": 81.6466, "waist": 86.36, "neck": 38.1},
    )
    assert metric.json()["body_fat_percent"] == r.json()["body_fat_percent"]

    r = await client.post(
        f"{API}/calculate",
        json={"sex": "male", "height": 70, "weight": 180, "waist": 14, "neck": 15},
    )
    assert r.status_code == 422
