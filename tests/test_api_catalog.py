"""API tests: health, exercises, barbells, plates and routines."""

import uuid

API = "/api/v1"


async def test_health(client):
    r = await client.get(f"{API}/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


async def test_exercise_crud(client, create_exercise):
    created = await create_exercise("Bench", max_weight=200.0, increment=2.5)
    assert created["barbell"]["weight"] == 45.0
    exercise_id = created["id"]

    r = await client.patch(f"{API}/exercises/{exercise_id}", json={"max_weight": 210.0})
    assert r.status_code == 200
    assert r.json()["max_weight"] == 210.0

    r = await client.get(f"{API}/exercises")
    assert [e["name"] for e in r.json()] == ["Bench"]

    r = await client.delete(f"{API}/exercises/{exercise_id}")
    assert r.status_code == 204
    r = await client.get(f"{API}/exercises/{exercise_id}")
    assert r.status_code == 404


async def test_exercise_with_unknown_barbell_is_404(client):
    r = await client.post(
        f"{API}/exercises",
        json={"name": "Row", "max_weight": 150, "barbell_id": str(uuid.uuid4())},
    )
    assert r.status_code == 404


async def test_exercise_rejects_non_positive_increment(client):
    r = await client.post(f"{API}/exercises", json={"name": "Row", "max_weight": 150, "weight_increment": 0})
    assert r.status_code == 422


async def test_warmup_ladder(client, create_exercise):
    exercise = await create_exercise("Deadlift", max_weight=100.0)
    r = await client.get(f"{API}/exercises/{exercise['id']}/warmup")
    assert r.status_code == 200
    assert r.json()["weights"] == [45.0, 60.0, 70.0, 80.0, 90.0, 100.0]


async def test_default_barbell_is_exclusive(client):
    first = (await client.post(f"{API}/barbells", json={"name": "Olympic", "weight": 45, "is_default": True})).json()
    second = (await client.post(f"{API}/barbells", json={"name": "Technique", "weight": 35})).json()

    r = await client.post(f"{API}/barbells/{second['id']}/default")
    assert r.status_code == 200
    bars = {b["name"]: b["is_default"] for b in (await client.get(f"{API}/barbells")).json()}
    assert bars == {"Olympic": False, "Technique": True}
    assert first["is_default"]


async def test_plate_inventory_and_calculator(client):
    r = await client.post(f"{API}/plates/seed")
    assert [p["weight"] for p in r.json()] == [45, 35, 25, 10, 5, 2.5]

    r = await client.put(f"{API}/plates", json={"weight": 45, "count": 4})
    assert r.json()["count"] == 4

    r = await client.post(f"{API}/plates/calculate", json={"target_weight": 225})
    body = r.json()
    assert body["bar_weight"] == 45
    assert body["plates_per_side"] == [45, 45]
    assert body["achieved_weight"] == 225
    assert body["is_exact"]
    assert body["description"] == "2x45 per side"


async def test_plate_calculator_reports_shortfall(client):
    r = await client.post(
        f"{API}/plates/calculate",
        json={"target_weight": 100, "bar_weight": 45, "inventory": [{"weight": 10, "count": 2}]},
    )
    body = r.json()
    assert body["plates_per_side"] == [10]
    assert body["achieved_weight"] == 65
    assert body["shortfall"] == 35
    assert not body["is_exact"]


async def test_plate_calculator_uses_default_barbell(client):
    await client.post(f"{API}/barbells", json={"name": "Women's", "weight": 35, "is_default": True})
    r = await client.post(
        f"{API}/plates/calculate",
        json={"target_weight": 85, "inventory": [{"weight": 25, "count": 2}]},
    )
    assert r.json()["bar_weight"] == 35
    assert r.json()["plates_per_side"] == [25]


async def test_routine_crud_and_preview(client, create_exercise, create_routine):
    squat = await create_exercise("Squat", max_weight=100.0)
    routine = await create_routine("Squat Day", squat["id"])
    assert [s["weight_value"] for s in routine["exercises"][0]["sets"]] == [60, 70, 80]

    await client.post(f"{API}/plates/seed")
    r = await client.get(f"{API}/routines/{routine['id']}/preview", params={"with_plates": True})
    assert r.status_code == 200
    sets = r.json()["exercises"][0]["sets"]
    assert [s["target_weight"] for s in sets] == [60, 70, 80]
    # 60 on a 45 bar is 7.5 per side
    assert sets[0]["plates_per_side"] == [5, 2.5]

    r = await client.post(f"{API}/routines/{routine['id']}/duplicate", json={"name": "Squat Day B"})
    assert r.status_code == 201
    copy = r.json()
    assert copy["id"] != routine["id"]
    assert len(copy["exercises"][0]["sets"]) == 3

    r = await client.patch(
        f"{API}/routines/{copy['id']}",
        json={
            "exercises": [
                {"exercise_id": squat["id"], "sets": [{"weight_type": "bar", "reps": 10}]},
            ]
        },
    )
    assert r.status_code == 200
    assert [s["weight_type"] for s in r.json()["exercises"][0]["sets"]] == ["bar"]

    r = await client.delete(f"{API}/routines/{copy['id']}")
    assert r.status_code == 204
    names = [rt["name"] for rt in (await client.get(f"{API}/routines")).json()]
    assert names == ["Squat Day"]


async def test_routine_with_unknown_exercise_is_404(client):
    r = await client.post(
        f"{API}/routines",
        json={
            "name": "Ghost",
            "exercises": [{"exercise_id": str(uuid.uuid4()), "sets": [{"weight_type": "bar", "reps": 5}]}],
        },
    )
    assert r.status_code == 404
