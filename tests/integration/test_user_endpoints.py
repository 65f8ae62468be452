"""Integration tests for account management endpoints."""


def test_get_my_account(client, member, member_headers):
    response = client.get("/api/users/me", headers=member_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["email"] == member.email
    assert body["role"] == "MEMBER"
    assert "hashedPassword" not in body


def test_update_my_profile(client, member_headers):
    response = client.put(
        "/api/users/me/profile",
        json={"name": "Member Renamed", "email": "renamed@example.com", "phone": "+95 9 123 456"},
        headers=member_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Member Renamed"
    assert body["email"] == "renamed@example.com"
    assert body["phone"] == "+95 9 123 456"
    assert body["role"] == "MEMBER"


def test_profile_update_cannot_change_role(client, member_headers):
    response = client.put(
        "/api/users/me/profile",
        json={"name": "Member One", "email": "member@example.com", "role": "ADMIN"},
        headers=member_headers,
    )

    assert response.status_code == 200
    assert response.json()["role"] == "MEMBER"


def test_profile_email_conflict(client, member_headers, other_member):
    response = client.put(
        "/api/users/me/profile",
        json={"name": "Member One", "email": other_member.email},
        headers=member_headers,
    )

    assert response.status_code == 409
    assert response.json() == {"error": "Email is already in use"}


def test_profile_requires_valid_email(client, member_headers):
    response = client.put(
        "/api/users/me/profile",
        json={"name": "Member One", "email": "not-an-email"},
        headers=member_headers,
    )

    assert response.status_code == 400
    assert "email" in response.json()["error"]


def test_change_password(client, member, member_headers, password):
    response = client.put(
        "/api/users/me/password",
        json={"currentPassword": password, "newPassword": "new-secret"},
        headers=member_headers,
    )

    assert response.status_code == 200
    assert client.post("/api/auth/login", json={"email": member.email, "password": "new-secret"}).status_code == 200
    assert client.post("/api/auth/login", json={"email": member.email, "password": password}).status_code == 401


def test_change_password_with_wrong_current(client, member_headers):
    response = client.put(
        "/api/users/me/password",
        json={"currentPassword": "wrong", "newPassword": "new-secret"},
        headers=member_headers,
    )

    assert response.status_code == 401
    assert response.json() == {"error": "Current password is incorrect"}


class TestAdminUsers:
    def test_list_users_ordered_by_name(self, client, admin_headers, member, other_member):
        users = client.get("/api/admin/users", headers=admin_headers).json()["users"]

        assert [u["name"] for u in users] == ["Admin", "Member One", "Member Two"]

    def test_create_user(self, client, admin_headers):
        response = client.post(
            "/api/users",
            json={"name": "Trainer", "email": "trainer@example.com", "password": "secret1", "role": "ADMIN"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["role"] == "ADMIN"

        login = client.post("/api/auth/login", json={"email": "trainer@example.com", "password": "secret1"})
        assert login.status_code == 200

    def test_create_user_defaults_to_member(self, client, admin_headers):
        response = client.post(
            "/api/users",
            json={"name": "New", "email": "new@example.com", "password": "secret1"},
            headers=admin_headers,
        )

        assert response.json()["role"] == "MEMBER"

    def test_create_user_with_existing_email(self, client, admin_headers, member):
        response = client.post(
            "/api/users",
            json={"name": "Copy", "email": member.email, "password": "secret1"},
            headers=admin_headers,
        )

        assert response.status_code == 409

    def test_create_user_with_short_password(self, client, admin_headers):
        response = client.post(
            "/api/users",
            json={"name": "Short", "email": "short@example.com", "password": "123"},
            headers=admin_headers,
        )

        assert response.status_code == 400

    def test_member_cannot_create_users(self, client, member_headers):
        response = client.post(
            "/api/users",
            json={"name": "Sneaky", "email": "sneaky@example.com", "password": "secret1", "role": "ADMIN"},
            headers=member_headers,
        )

        assert response.status_code == 403

    def test_get_and_update_user(self, client, admin_headers, member):
        path = f"/api/users/{member.id}"

        assert client.get(path, headers=admin_headers).json()["email"] == member.email

        response = client.put(
            path,
            json={"name": "Promoted", "email": member.email, "role": "ADMIN"},
            headers=admin_headers,
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Promoted"
        assert response.json()["role"] == "ADMIN"

    def test_get_unknown_user(self, client, admin_headers):
        response = client.get("/api/users/missing", headers=admin_headers)

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}

    def test_reset_password(self, client, admin_headers, member):
        response = client.put(
            f"/api/users/{member.id}/password",
            json={"newPassword": "reset-123"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert client.post("/api/auth/login", json={"email": member.email, "password": "reset-123"}).status_code == 200

    def test_admin_cannot_delete_self(self, client, admin, admin_headers):
        response = client.delete(f"/api/users/{admin.id}", headers=admin_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "You cannot delete your own account"}

    def test_delete_user_removes_owned_records(self, client, admin_headers, member, member_headers):
        client.post(
            "/api/workouts",
            json={"title": "Leg day", "date": "2025-03-10T07:00:00", "exercises": []},
            headers=member_headers,
        )
        client.post("/api/users/me/metrics", json={"key": "WEIGHT", "value": 80}, headers=member_headers)
        client.post("/api/users/me/activity-logs", json={"data": {"weight": 80}}, headers=member_headers)
        client.post(
            "/api/admin/payments",
            json={"userId": member.id, "amount": 10, "method": "CASH", "transactionRef": "TX-DEL"},
            headers=admin_headers,
        )

        response = client.delete(f"/api/users/{member.id}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "User deleted successfully"}
        assert client.get(f"/api/users/{member.id}", headers=admin_headers).status_code == 404
        assert client.get("/api/admin/workouts", headers=admin_headers).json() == []
        assert client.get("/api/admin/payments", headers=admin_headers).json() == []
        assert client.get("/api/admin/metrics", headers=admin_headers).json() == {"metrics": []}
        assert client.get("/api/admin/activity-logs", headers=admin_headers).json() == {"logs": []}
