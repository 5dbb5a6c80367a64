async def _create(client, name: str, city: str = "Springfield") -> dict:
    response = await client.post("/api/neighborhoods", json={"name": name, "city": city})
    assert response.status_code == 201
    return response.json()["data"]


async def test_create_and_get(client) -> None:
    created = await _create(client, "Elm St")

    response = await client.get(f"/api/neighborhoods/{created['id']}")

    assert response.json()["data"]["name"] == "Elm St"
    assert response.json()["data"]["city"] == "Springfield"


async def test_same_name_in_other_city_is_allowed(client) -> None:
    await _create(client, "Centro", "São Paulo")
    await _create(client, "Centro", "Campinas")

    duplicate = await client.post("/api/neighborhoods", json={"name": "Centro", "city": "Campinas"})

    assert duplicate.status_code == 409


async def test_list_filters(client) -> None:
    await _create(client, "Vila Mariana", "São Paulo")
    await _create(client, "Moema", "São Paulo")
    await _create(client, "Cambuí", "Campinas")

    by_name = await client.get("/api/neighborhoods", params={"name": "VILA"})
    by_city = await client.get("/api/neighborhoods", params={"city": "São Paulo"})

    assert [n["name"] for n in by_name.json()["data"]] == ["Vila Mariana"]
    assert {n["name"] for n in by_city.json()["data"]} == {"Vila Mariana", "Moema"}


async def test_batch_create(client) -> None:
    response = await client.post("/api/neighborhoods/batch", json={
        "city": "São Paulo",
        "neighborhoods": ["Pinheiros", "Perdizes", "Lapa"],
    })

    assert response.status_code == 201
    assert len(response.json()["data"]) == 3


async def test_batch_create_is_all_or_nothing(client) -> None:
    await _create(client, "Pinheiros", "São Paulo")

    response = await client.post("/api/neighborhoods/batch", json={
        "city": "São Paulo",
        "neighborhoods": ["Perdizes", "Pinheiros"],
    })
    listed = await client.get("/api/neighborhoods", params={"city": "São Paulo"})

    assert response.status_code == 409
    assert "Pinheiros" in response.json()["error"]["message"]
    assert [n["name"] for n in listed.json()["data"]] == ["Pinheiros"]


async def test_update_rechecks_name_city_pair(client) -> None:
    await _create(client, "Moema", "São Paulo")
    other = await _create(client, "Moema", "Santos")

    conflict = await client.put(f"/api/neighborhoods/{other['id']}", json={"city": "São Paulo"})
    renamed = await client.put(f"/api/neighborhoods/{other['id']}", json={"name": "Gonzaga"})

    assert conflict.status_code == 409
    assert renamed.status_code == 200
    assert renamed.json()["data"]["name"] == "Gonzaga"


async def test_usage_blocks_delete(client) -> None:
    neighborhood = await _create(client, "Elm St")
    region = (await client.post("/api/regions", json={
        "name": "North",
        "neighborhood_ids": [neighborhood["id"]],
    })).json()["data"]

    usage = await client.get(f"/api/neighborhoods/{neighborhood['id']}/usage")
    blocked = await client.delete(f"/api/neighborhoods/{neighborhood['id']}")

    assert usage.json()["data"] == {"isUsed": True, "usedIn": ["regions"]}
    assert blocked.status_code == 403
    assert blocked.json()["error"]["code"] == "FORBIDDEN"

    await client.delete(f"/api/regions/{region['id']}/neighborhoods/{neighborhood['id']}")
    usage = await client.get(f"/api/neighborhoods/{neighborhood['id']}/usage")
    deleted = await client.delete(f"/api/neighborhoods/{neighborhood['id']}")

    assert usage.json()["data"] == {"isUsed": False, "usedIn": []}
    assert deleted.status_code == 200


async def test_missing_neighborhood(client) -> None:
    response = await client.get("/api/neighborhoods/nope")

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Neighborhood with ID nope not found"


async def test_batch_rejects_blank_name(client) -> None:
    response = await client.post("/api/neighborhoods/batch", json={
        "city": "Springfield",
        "neighborhoods": ["Elm St", "   "],
    })
    listed = await client.get("/api/neighborhoods", params={"city": "Springfield"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
    assert listed.json()["data"] == []


async def test_names_are_trimmed_in_single_and_batch_create(client) -> None:
    single = await _create(client, "Moema ", " São Paulo")

    batch = await client.post("/api/neighborhoods/batch", json={
        "city": "São Paulo",
        "neighborhoods": ["Moema"],
    })

    assert single["name"] == "Moema"
    assert single["city"] == "São Paulo"
    assert batch.status_code == 409
