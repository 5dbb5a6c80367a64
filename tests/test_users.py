import pytest


@pytest.fixture
async def user(client):
    response = await client.post("/api/users", json={
        "name": "Amanda Silva",
        "email": "amanda.silva@exemplo.com",
        "password": "segredo123",
        "phone": "+5511976543210",
        "user_type_id": 3,
    })
    assert response.status_code == 201
    return response.json()["data"]


async def test_create_user_hides_password(user) -> None:
    assert user["email"] == "amanda.silva@exemplo.com"
    assert user["user_type_id"] == 3
    assert user["deleted"] is False
    assert "password" not in user
    assert "password_hash" not in user


async def test_duplicate_email_conflicts(client, user) -> None:
    response = await client.post("/api/users", json={
        "name": "Outra Amanda",
        "email": user["email"],
        "password": "segredo123",
        "user_type_id": 4,
    })

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "CONFLICT"


async def test_unknown_user_type_is_not_found(client) -> None:
    response = await client.post("/api/users", json={
        "name": "Marcos Santos",
        "email": "marcos@exemplo.com",
        "password": "segredo123",
        "user_type_id": 42,
    })

    assert response.status_code == 404


async def test_list_filters(client, user) -> None:
    by_name = await client.get("/api/users", params={"name": "amanda"})
    by_type = await client.get("/api/users", params={"user_type_id": 1})

    assert [u["id"] for u in by_name.json()["data"]] == [user["id"]]
    assert by_type.json()["data"] == []


async def test_update_user(client, user) -> None:
    response = await client.put(f"/api/users/{user['id']}", json={"name": "Amanda S. Costa", "user_type_id": 2})

    assert response.status_code == 200
    assert response.json()["data"]["name"] == "Amanda S. Costa"
    assert response.json()["data"]["user_type_id"] == 2


async def test_change_password(client, user) -> None:
    url = f"/api/users/{user['id']}/password"

    wrong = await client.put(url, json={
        "current_password": "errada",
        "new_password": "novasenha",
        "confirm_password": "novasenha",
    })
    mismatch = await client.put(url, json={
        "current_password": "segredo123",
        "new_password": "novasenha",
        "confirm_password": "outra",
    })
    ok = await client.put(url, json={
        "current_password": "segredo123",
        "new_password": "novasenha",
        "confirm_password": "novasenha",
    })
    again = await client.put(url, json={
        "current_password": "segredo123",
        "new_password": "terceira",
        "confirm_password": "terceira",
    })

    assert wrong.status_code == 400
    assert wrong.json()["error"]["code"] == "BAD_REQUEST"
    assert mismatch.status_code == 400
    assert mismatch.json()["error"]["code"] == "VALIDATION_ERROR"
    assert ok.status_code == 200
    assert ok.json()["message"] == "Password changed successfully"
    assert again.status_code == 400


async def test_soft_delete_is_terminal(client, user) -> None:
    deleted = await client.delete(f"/api/users/{user['id']}")
    hidden = await client.get(f"/api/users/{user['id']}")
    visible = await client.get(f"/api/users/{user['id']}", params={"include_deleted": "true"})
    update = await client.put(f"/api/users/{user['id']}", json={"name": "Fantasma"})
    delete_again = await client.delete(f"/api/users/{user['id']}")
    listed = await client.get("/api/users")
    listed_all = await client.get("/api/users", params={"include_deleted": "true"})

    assert deleted.status_code == 200
    assert hidden.status_code == 404
    assert visible.json()["data"]["deleted"] is True
    assert visible.json()["data"]["deleted_at"] is not None
    assert update.status_code == 404
    assert delete_again.status_code == 404
    assert listed.json()["data"] == []
    assert len(listed_all.json()["data"]) == 1


async def test_deleted_user_email_stays_reserved(client, user) -> None:
    await client.delete(f"/api/users/{user['id']}")

    response = await client.post("/api/users", json={
        "name": "Amanda Nova",
        "email": user["email"],
        "password": "segredo123",
        "user_type_id": 4,
    })

    assert response.status_code == 409
