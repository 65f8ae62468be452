"""Integration tests for self-service and admin workout endpoints."""

import pytest

SQUAT = [{"name": "Squat", "sets": 3, "reps": 10}]


def create_workout(client, headers, title="Leg day", date="2025-03-10T07:00:00", exercises=None, **extra):
    payload = {"title": title, "date": date, "exercises": SQUAT if exercises is None else exercises}
    payload.update(extra)
    response = client.post("/api/workouts", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_exercise_list_round_trips_unchanged(client, member_headers):
    created = create_workout(client, member_headers)

    assert created["details"]["exercises"] == SQUAT

    fetched = client.get(f"/api/workouts/{created['id']}", headers=member_headers).json()
    assert fetched["details"]["exercises"] == SQUAT
    assert fetched["title"] == "Leg day"


def test_optional_exercise_fields_are_kept(client, member_headers):
    exercises = [{"name": "Row", "sets": 4, "reps": 8, "weight": 60.0, "notes": "slow"}]
    created = create_workout(client, member_headers, exercises=exercises, notes="Felt good")

    assert created["details"]["exercises"] == exercises
    assert created["details"]["notes"] == "Felt good"


def test_list_is_newest_date_first(client, member_headers):
    create_workout(client, member_headers, title="Old", date="2025-01-01T07:00:00")
    create_workout(client, member_headers, title="New", date="2025-02-01T07:00:00")

    titles = [w["title"] for w in client.get("/api/workouts", headers=member_headers).json()]

    assert titles == ["New", "Old"]


def test_list_only_contains_own_workouts(client, member_headers, other_headers):
    create_workout(client, member_headers, title="Mine")
    create_workout(client, other_headers, title="Theirs")

    titles = [w["title"] for w in client.get("/api/workouts", headers=member_headers).json()]

    assert titles == ["Mine"]


@pytest.mark.parametrize("missing", ["title", "date", "exercises"])
def test_create_requires_fields(client, member_headers, missing):
    payload = {"title": "Leg day", "date": "2025-03-10T07:00:00", "exercises": SQUAT}
    del payload[missing]

    response = client.post("/api/workouts", json=payload, headers=member_headers)

    assert response.status_code == 400
    assert missing in response.json()["error"]


def test_other_users_workout_is_not_found(client, member_headers, other_headers):
    theirs = create_workout(client, other_headers, title="Theirs")
    path = f"/api/workouts/{theirs['id']}"

    assert client.get(path, headers=member_headers).status_code == 404
    assert client.put(path, json={"title": "Hijacked"}, headers=member_headers).status_code == 404
    assert client.delete(path, headers=member_headers).status_code == 404

    untouched = client.get(path, headers=other_headers).json()
    assert untouched["title"] == "Theirs"


def test_partial_update_keeps_exercises(client, member_headers):
    created = create_workout(client, member_headers)

    response = client.put(
        f"/api/workouts/{created['id']}",
        json={"title": "Heavy leg day", "notes": "Added weight"},
        headers=member_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Heavy leg day"
    assert body["details"]["exercises"] == SQUAT
    assert body["details"]["notes"] == "Added weight"


def test_null_exercises_is_rejected(client, member_headers):
    created = create_workout(client, member_headers)
    path = f"/api/workouts/{created['id']}"

    response = client.put(path, json={"exercises": None}, headers=member_headers)

    assert response.status_code == 400
    assert "exercises" in response.json()["error"]
    assert client.get(path, headers=member_headers).json()["details"]["exercises"] == SQUAT


def test_empty_exercise_list_clears_plan(client, member_headers):
    created = create_workout(client, member_headers)

    response = client.put(f"/api/workouts/{created['id']}", json={"exercises": []}, headers=member_headers)

    assert response.status_code == 200
    assert response.json()["details"]["exercises"] == []


def test_delete_then_delete_again(client, member_headers):
    created = create_workout(client, member_headers)
    path = f"/api/workouts/{created['id']}"

    assert client.delete(path, headers=member_headers).status_code == 200
    assert client.delete(path, headers=member_headers).status_code == 404


def test_workouts_grouped_by_day(client, member_headers):
    create_workout(client, member_headers, title="Morning", date="2025-03-10T07:00:00")
    create_workout(client, member_headers, title="Evening", date="2025-03-10T19:00:00")
    create_workout(client, member_headers, title="Earlier", date="2025-03-08T07:00:00")

    days = client.get("/api/workouts/by-day", headers=member_headers).json()

    assert [d["day"] for d in days] == ["2025-03-10", "2025-03-08"]
    assert [w["title"] for w in days[0]["workouts"]] == ["Evening", "Morning"]


def test_offset_date_is_stored_in_utc(client, member_headers):
    created = create_workout(client, member_headers, title="Late session", date="2025-03-10T23:30:00-05:00")

    assert created["date"].startswith("2025-03-11T04:30:00")

    days = client.get("/api/workouts/by-day", headers=member_headers).json()
    assert [d["day"] for d in days] == ["2025-03-11"]

    moved = client.put(
        f"/api/workouts/{created['id']}",
        json={"date": "2025-03-12T01:00:00+02:00"},
        headers=member_headers,
    )
    assert moved.json()["date"].startswith("2025-03-11T23:00:00")


class TestAdminWorkouts:
    def test_admin_creates_for_member_and_lists_with_owner(self, client, admin_headers, member):
        response = client.post(
            "/api/admin/workouts",
            json={"userId": member.id, "title": "Coach plan", "date": "2025-03-11T08:00:00", "exercises": SQUAT},
            headers=admin_headers,
        )
        assert response.status_code == 201

        listed = client.get(f"/api/admin/workouts?userId={member.id}", headers=admin_headers).json()

        assert len(listed) == 1
        assert listed[0]["userId"] == member.id
        assert listed[0]["userName"] == member.name
        assert listed[0]["userEmail"] == member.email

    def test_admin_create_for_unknown_user(self, client, admin_headers):
        response = client.post(
            "/api/admin/workouts",
            json={"userId": "missing", "title": "Plan", "date": "2025-03-11T08:00:00", "exercises": []},
            headers=admin_headers,
        )

        assert response.status_code == 404

    def test_admin_update_checks_claimed_owner(self, client, admin_headers, member_headers, member, other_member):
        created = create_workout(client, member_headers)
        path = f"/api/admin/workouts/{created['id']}"

        wrong_owner = client.put(f"{path}?userId={other_member.id}", json={"title": "X"}, headers=admin_headers)
        assert wrong_owner.status_code == 404

        right_owner = client.put(f"{path}?userId={member.id}", json={"title": "Updated"}, headers=admin_headers)
        assert right_owner.status_code == 200
        assert right_owner.json()["title"] == "Updated"

    def test_empty_user_id_skips_owner_check(self, client, admin_headers, member_headers):
        created = create_workout(client, member_headers)
        path = f"/api/admin/workouts/{created['id']}?userId="

        assert len(client.get("/api/admin/workouts?userId=", headers=admin_headers).json()) == 1

        updated = client.put(path, json={"title": "Renamed"}, headers=admin_headers)
        assert updated.status_code == 200
        assert updated.json()["title"] == "Renamed"

        assert client.delete(path, headers=admin_headers).status_code == 200

    def test_admin_delete(self, client, admin_headers, member_headers, other_member):
        created = create_workout(client, member_headers)
        path = f"/api/admin/workouts/{created['id']}"

        assert client.delete(f"{path}?userId={other_member.id}", headers=admin_headers).status_code == 404
        assert client.delete(path, headers=admin_headers).status_code == 200
        assert client.get(f"/api/workouts/{created['id']}", headers=member_headers).status_code == 404
