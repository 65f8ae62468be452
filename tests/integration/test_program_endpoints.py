"""Integration tests for membership program endpoints."""


def create_program(client, headers, **overrides):
    payload = {"name": "Monthly", "description": "One month of access", "duration": 30, "price": 49.99}
    payload.update(overrides)
    response = client.post("/api/admin/programs", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_create_program(client, admin_headers):
    program = create_program(client, admin_headers, imageUrl="https://cdn.example.com/monthly.png")

    assert program["name"] == "Monthly"
    assert program["price"] == 49.99
    assert program["duration"] == 30
    assert program["active"] is True
    assert program["imageUrl"] == "https://cdn.example.com/monthly.png"


def test_create_program_with_numeric_strings(client, admin_headers):
    program = create_program(client, admin_headers, duration="90", price="129.5")

    assert program["duration"] == 90
    assert program["price"] == 129.5


def test_create_program_rejects_negative_price(client, admin_headers):
    response = client.post(
        "/api/admin/programs",
        json={"name": "Broken", "description": "x", "duration": 30, "price": -1},
        headers=admin_headers,
    )

    assert response.status_code == 400
    assert "price" in response.json()["error"]


def test_members_only_see_active_programs(client, admin_headers, member_headers):
    create_program(client, admin_headers, name="Monthly")
    create_program(client, admin_headers, name="Retired", active=False)

    member_view = client.get("/api/programs", headers=member_headers).json()
    admin_view = client.get("/api/admin/programs", headers=admin_headers).json()

    assert [p["name"] for p in member_view] == ["Monthly"]
    assert {p["name"] for p in admin_view} == {"Monthly", "Retired"}


def test_members_cannot_manage_programs(client, member_headers):
    response = client.post(
        "/api/admin/programs",
        json={"name": "Free", "description": "x", "duration": 1, "price": 0},
        headers=member_headers,
    )

    assert response.status_code == 403


def test_update_program(client, admin_headers):
    program = create_program(client, admin_headers)

    response = client.put(
        f"/api/admin/programs/{program['id']}",
        json={"price": 59.99, "active": False},
        headers=admin_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["price"] == 59.99
    assert body["active"] is False
    assert body["name"] == "Monthly"


def test_delete_program(client, admin_headers):
    program = create_program(client, admin_headers)
    path = f"/api/admin/programs/{program['id']}"

    response = client.delete(path, headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Program deleted successfully"}
    assert client.get(path, headers=admin_headers).status_code == 404


def test_unknown_program(client, admin_headers):
    response = client.put("/api/admin/programs/missing", json={"name": "X"}, headers=admin_headers)

    assert response.status_code == 404
    assert response.json() == {"error": "Program not found"}
