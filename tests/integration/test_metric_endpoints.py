"""Integration tests for body metric endpoints."""

import pytest

METRICS_PATH = "/api/users/me/metrics"


def record(client, headers, key, value, recorded_at, unit=None):
    payload = {"key": key, "value": value, "recordedAt": recorded_at}
    if unit:
        payload["unit"] = unit
    response = client.post(METRICS_PATH, json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["metric"]


@pytest.fixture
def history(client, member_headers):
    return [
        record(client, member_headers, "WEIGHT", 82.5, "2025-01-01T08:00:00", unit="kg"),
        record(client, member_headers, "WAIST", 90, "2025-01-02T08:00:00", unit="cm"),
        record(client, member_headers, "WEIGHT", 80.0, "2025-02-01T08:00:00", unit="kg"),
    ]


def test_list_is_newest_first(client, member_headers, history):
    metrics = client.get(METRICS_PATH, headers=member_headers).json()["metrics"]

    assert [m["id"] for m in metrics] == [history[2]["id"], history[1]["id"], history[0]["id"]]


def test_key_filters_partition_the_full_list(client, member_headers, history):
    everything = client.get(METRICS_PATH, headers=member_headers).json()["metrics"]
    weight = client.get(f"{METRICS_PATH}?key=WEIGHT", headers=member_headers).json()["metrics"]
    waist = client.get(f"{METRICS_PATH}?key=WAIST", headers=member_headers).json()["metrics"]

    assert {m["key"] for m in weight} == {"WEIGHT"}
    assert {m["id"] for m in weight} | {m["id"] for m in waist} == {m["id"] for m in everything}


def test_date_range_filter(client, member_headers, history):
    response = client.get(
        f"{METRICS_PATH}?startDate=2025-01-15T00:00:00&endDate=2025-03-01T00:00:00",
        headers=member_headers,
    )

    assert [m["id"] for m in response.json()["metrics"]] == [history[2]["id"]]


def test_series_points_are_oldest_first(client, member_headers, history):
    series = client.get(f"{METRICS_PATH}/series?key=WEIGHT", headers=member_headers).json()["series"]

    assert len(series) == 1
    weight = series[0]
    assert weight["key"] == "WEIGHT"
    assert [p["value"] for p in weight["points"]] == [82.5, 80.0]
    assert weight["latest"]["value"] == 80.0
    assert weight["change"] == -2.5


def test_invalid_value_is_rejected(client, member_headers):
    response = client.post(METRICS_PATH, json={"key": "WEIGHT", "value": "heavy"}, headers=member_headers)

    assert response.status_code == 400
    assert "value" in response.json()["error"]


def test_nan_value_is_rejected(client, member_headers):
    response = client.post(
        METRICS_PATH,
        content='{"key": "WEIGHT", "value": NaN}',
        headers={**member_headers, "Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert "value" in response.json()["error"]
    assert client.get(METRICS_PATH, headers=member_headers).json() == {"metrics": []}


def test_offset_recorded_at_is_stored_in_utc(client, member_headers):
    metric = record(client, member_headers, "WEIGHT", 80, "2025-01-01T02:00:00+05:30")

    assert metric["recordedAt"].startswith("2024-12-31T20:30:00")

    response = client.get(f"{METRICS_PATH}?startDate=2025-01-01T00:00:00%2B05:00", headers=member_headers)
    assert [m["id"] for m in response.json()["metrics"]] == [metric["id"]]


def test_recorded_at_defaults_to_now(client, member_headers):
    response = client.post(METRICS_PATH, json={"key": "BODY_FAT", "value": 18.2}, headers=member_headers)

    assert response.status_code == 201
    assert response.json()["metric"]["recordedAt"]


def test_update_metric(client, member_headers, history):
    response = client.put(
        f"{METRICS_PATH}/{history[0]['id']}",
        json={"value": 82.0, "notes": "Morning weigh-in"},
        headers=member_headers,
    )

    assert response.status_code == 200
    metric = response.json()["metric"]
    assert metric["value"] == 82.0
    assert metric["notes"] == "Morning weigh-in"
    assert metric["unit"] == "kg"


def test_second_delete_is_not_found(client, member_headers, history):
    path = f"{METRICS_PATH}/{history[0]['id']}"

    first = client.delete(path, headers=member_headers)
    second = client.delete(path, headers=member_headers)

    assert first.status_code == 200
    assert first.json() == {"message": "Metric deleted successfully"}
    assert second.status_code == 404
    assert second.json() == {"error": "Metric not found"}


def test_other_users_metric_is_not_found(client, other_headers, history):
    path = f"{METRICS_PATH}/{history[0]['id']}"

    assert client.get(path, headers=other_headers).status_code == 404
    assert client.put(path, json={"value": 1}, headers=other_headers).status_code == 404
    assert client.delete(path, headers=other_headers).status_code == 404
    assert client.get(METRICS_PATH, headers=other_headers).json() == {"metrics": []}


class TestAdminMetrics:
    def test_admin_records_metric_for_member(self, client, admin_headers, member, member_headers):
        response = client.post(
            f"/api/admin/users/{member.id}/metrics",
            json={"key": "HEIGHT", "value": 178, "unit": "cm"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["metric"]["userId"] == member.id

        own = client.get(METRICS_PATH, headers=member_headers).json()["metrics"]
        assert [m["key"] for m in own] == ["HEIGHT"]

    def test_admin_records_metric_for_unknown_user(self, client, admin_headers):
        response = client.post(
            "/api/admin/users/missing/metrics",
            json={"key": "HEIGHT", "value": 178},
            headers=admin_headers,
        )

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}

    def test_admin_lists_member_metrics(self, client, admin_headers, member, history):
        response = client.get(f"/api/admin/users/{member.id}/metrics", headers=admin_headers)

        assert response.status_code == 200
        assert len(response.json()["metrics"]) == 3

    def test_admin_metric_listing_carries_owner(self, client, admin_headers, member, history):
        metrics = client.get(f"/api/admin/metrics?userId={member.id}&key=WEIGHT", headers=admin_headers).json()["metrics"]

        assert len(metrics) == 2
        assert metrics[0]["user"] == {"id": member.id, "name": member.name, "email": member.email}

    def test_admin_deletes_any_metric(self, client, admin_headers, member_headers, history):
        response = client.delete(f"/api/admin/metrics/{history[1]['id']}", headers=admin_headers)

        assert response.status_code == 200
        remaining = client.get(METRICS_PATH, headers=member_headers).json()["metrics"]
        assert history[1]["id"] not in {m["id"] for m in remaining}
