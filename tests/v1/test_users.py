# mypy: ignore-errors
"""Tests for user lookup endpoints."""

from fastapi import status


def test_search_users(client, alice, make_user, auth_headers) -> None:
    make_user("anna_teacher", avatar="/avatars/anna.png")
    make_user("hannah")
    make_user("zoe")

    response = client.get("/api/v1/users/search", params={"username": "ann"}, headers=auth_headers(alice))

    assert response.status_code == status.HTTP_200_OK
    users = response.json()["users"]
    assert [user["username"] for user in users] == ["anna_teacher", "hannah"]
    assert users[0]["avatar"] == "/avatars/anna.png"
    assert set(users[0]) == {"id", "username", "avatar"}


def test_search_users_without_fragment(client, alice, auth_headers) -> None:
    response = client.get("/api/v1/users/search", headers=auth_headers(alice))

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"users": []}


def test_search_users_respects_limit(client, alice, make_user, auth_headers, test_settings) -> None:
    for index in range(test_settings.user_search_limit + 3):
        make_user(f"pupil{index:02d}")

    response = client.get("/api/v1/users/search", params={"username": "pupil"}, headers=auth_headers(alice))

    assert len(response.json()["users"]) == test_settings.user_search_limit
