"""Integration tests for login, logout and access control."""


def test_login_sets_session_cookies(client, member, password):
    response = client.post("/api/auth/login", json={"email": member.email, "password": password})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Login successful"
    assert body["user"]["email"] == member.email
    assert body["user"]["role"] == "MEMBER"
    assert "hashedPassword" not in body["user"]
    assert "password" not in body["user"]

    assert response.cookies.get("auth")
    assert response.cookies.get("role") == "MEMBER"


def test_session_cookie_authenticates_requests(client, member, password):
    client.post("/api/auth/login", json={"email": member.email, "password": password})

    response = client.get("/api/users/me")

    assert response.status_code == 200
    assert response.json()["id"] == member.id


def test_login_with_wrong_password(client, member):
    response = client.post("/api/auth/login", json={"email": member.email, "password": "nope"})

    assert response.status_code == 401
    assert response.json() == {"error": "Invalid email or password"}


def test_login_with_missing_field_is_bad_request(client):
    response = client.post("/api/auth/login", json={"email": "member@example.com"})

    assert response.status_code == 400
    assert "password" in response.json()["error"]


def test_logout_always_succeeds(client):
    response = client.post("/api/auth/logout")

    assert response.status_code == 200
    assert response.json() == {"message": "Logout successful"}


def test_logout_clears_session(client, member, password):
    client.post("/api/auth/login", json={"email": member.email, "password": password})
    client.post("/api/auth/logout")

    response = client.get("/api/users/me")

    assert response.status_code == 401


def test_missing_token_is_unauthorized(client):
    response = client.get("/api/workouts")

    assert response.status_code == 401
    assert response.json() == {"error": "Unauthorized"}


def test_invalid_token_is_unauthorized(client):
    response = client.get("/api/workouts", headers={"Authorization": "Bearer not-a-token"})

    assert response.status_code == 401


def test_member_cannot_use_admin_endpoints(client, member_headers):
    for path in ("/api/admin/users", "/api/admin/payments", "/api/admin/workouts", "/api/admin/dashboard"):
        response = client.get(path, headers=member_headers)
        assert response.status_code == 403
        assert response.json() == {"error": "Forbidden: Admin access required"}


def test_role_cookie_is_not_trusted(client, member_headers):
    client.cookies.set("role", "ADMIN")

    response = client.get("/api/admin/users", headers=member_headers)

    assert response.status_code == 403
