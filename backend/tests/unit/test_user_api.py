from __future__ import annotations

import pytest

SIGNUP_URL = "/api/v1/user/signup"
LOGIN_URL = "/api/v1/user/login"


@pytest.fixture
def signup_payload():
    return {"username": "jdoe", "email": "john.doe@acme.com", "password": "hunter22"}


def test_signup_creates_user_with_hashed_password(client, database, signup_payload):
    response = client.post(SIGNUP_URL, json=signup_payload)

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "User created successfully."
    stored = database.users.items[data["user_id"]]
    assert stored["username"] == "jdoe"
    assert stored["email"] == "john.doe@acme.com"
    assert stored["password"] != "hunter22"
    assert stored["password"].startswith("$2b$")
    assert stored["created_at"] == stored["updated_at"]


@pytest.mark.parametrize(
    ("override", "message"),
    [
        ({"username": ""}, "Username is required"),
        ({"email": "not-an-email"}, "Valid email is required"),
        ({"password": "12345"}, "Password must be at least 6 characters"),
        ({"username": "", "password": "1"}, "Username is required"),
    ],
)
def test_signup_validation(client, database, signup_payload, override, message):
    response = client.post(SIGNUP_URL, json={**signup_payload, **override})

    assert response.status_code == 400
    assert response.json() == {"status": False, "message": message}
    assert database.users.items == {}


def test_signup_without_body(client):
    response = client.post(SIGNUP_URL)
    assert response.status_code == 400
    assert response.json()["message"] == "Username is required"


@pytest.mark.parametrize(
    "duplicate",
    [
        {"username": "other", "email": "john.doe@acme.com", "password": "hunter22"},
        {"username": "jdoe", "email": "other@acme.com", "password": "hunter22"},
    ],
)
def test_signup_rejects_duplicate_email_or_username(client, database, signup_payload, duplicate):
    assert client.post(SIGNUP_URL, json=signup_payload).status_code == 201

    response = client.post(SIGNUP_URL, json=duplicate)

    assert response.status_code == 400
    assert response.json()["message"] == "User already exists with this email or username"
    assert len(database.users.items) == 1


def test_login_success(client, signup_payload):
    client.post(SIGNUP_URL, json=signup_payload)

    response = client.post(LOGIN_URL, json={"email": "john.doe@acme.com", "password": "hunter22"})

    assert response.status_code == 200
    assert response.json() == {"message": "Login successful.", "jwt_token": "Optional implementation"}


def test_login_matches_username_through_email_field(client):
    client.post(SIGNUP_URL, json={"username": "ops@acme.com", "email": "real@acme.com", "password": "hunter22"})

    response = client.post(LOGIN_URL, json={"email": "ops@acme.com", "password": "hunter22"})

    assert response.status_code == 200


def test_login_failures_are_indistinguishable(client, signup_payload):
    client.post(SIGNUP_URL, json=signup_payload)

    wrong_password = client.post(LOGIN_URL, json={"email": "john.doe@acme.com", "password": "wrong-pass"})
    unknown_user = client.post(LOGIN_URL, json={"email": "nobody@acme.com", "password": "hunter22"})

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json() == {
        "status": False,
        "message": "Invalid Username and password",
    }


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"password": "hunter22"}, "Valid email is required"),
        ({"email": "jdoe", "password": "hunter22"}, "Valid email is required"),
        ({"email": "john.doe@acme.com"}, "Password is required"),
        ({"email": "john.doe@acme.com", "password": ""}, "Password is required"),
    ],
)
def test_login_validation(client, payload, message):
    response = client.post(LOGIN_URL, json=payload)
    assert response.status_code == 400
    assert response.json()["message"] == message
