async def test_health_does_not_require_api_key(anonymous_client) -> None:
    response = await anonymous_client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert "timestamp" in body


async def test_missing_api_key_is_rejected(anonymous_client) -> None:
    response = await anonymous_client.get("/api/teams")

    assert response.status_code == 401
    assert response.json() == {
        "success": False,
        "error": {"code": "UNAUTHORIZED", "message": "API key is required"},
    }


async def test_invalid_api_key_is_rejected(anonymous_client) -> None:
    response = await anonymous_client.get("/api/teams", headers={"X-API-KEY": "wrong"})

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Invalid API key"


async def test_validation_errors_use_envelope(client) -> None:
    response = await client.post("/api/teams", json={"name": "X", "team_type": "Unknown"})

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["message"] == "Validation failed"
    fields = {detail["field"] for detail in body["error"]["details"]}
    assert {"name", "team_type"} <= fields


async def test_unknown_route_returns_not_found_envelope(client) -> None:
    response = await client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": {"code": "NOT_FOUND", "message": "Not Found"}}


async def test_wrong_method_returns_bad_request_envelope(client) -> None:
    response = await client.delete("/api/teams")

    assert response.status_code == 405
    assert response.json() == {"success": False, "error": {"code": "BAD_REQUEST", "message": "Method Not Allowed"}}


async def test_success_envelope(client) -> None:
    response = await client.get("/api/user-types")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "User types retrieved successfully"
    assert [t["name"] for t in body["data"]] == ["Admin", "Manager", "Broker", "User"]


async def test_get_user_type(client) -> None:
    found = await client.get("/api/user-types/3")
    missing = await client.get("/api/user-types/99")

    assert found.json()["data"] == {"id": 3, "name": "Broker"}
    assert missing.status_code == 404
    assert missing.json()["error"]["code"] == "NOT_FOUND"
