import pytest

from realty_api.api import broker_profiles


@pytest.fixture
async def locations(client):
    neighborhoods = (await client.post("/api/neighborhoods/batch", json={
        "city": "São Paulo",
        "neighborhoods": ["Moema", "Pinheiros"],
    })).json()["data"]
    south = (await client.post("/api/regions", json={"name": "Zona Sul"})).json()["data"]
    west = (await client.post("/api/regions", json={"name": "Zona Oeste"})).json()["data"]
    return {
        "regions": {"Zona Sul": south["id"], "Zona Oeste": west["id"]},
        "neighborhoods": {n["name"]: n["id"] for n in neighborhoods},
    }


@pytest.fixture
async def profile(client, locations):
    response = await client.post("/api/broker-profiles", json={
        "type": "Sale",
        "creci_number": "123456-F",
        "creci_type": "Permanent",
        "classification": 4,
        "region_ids": [locations["regions"]["Zona Sul"]],
        "neighborhood_ids": [locations["neighborhoods"]["Moema"]],
    })
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def test_create_with_associations(profile) -> None:
    assert profile["type"] == "Sale"
    assert profile["classification"] == 4
    assert profile["deleted"] is False
    assert [r["name"] for r in profile["regions"]] == ["Zona Sul"]
    assert [n["name"] for n in profile["neighborhoods"]] == ["Moema"]


async def test_create_with_unknown_region(client) -> None:
    response = await client.post("/api/broker-profiles", json={
        "type": "Rental",
        "creci_number": "1",
        "creci_type": "Intern",
        "region_ids": ["ghost"],
    })
    listed = await client.get("/api/broker-profiles")

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Region with ID ghost not found"
    assert listed.json()["data"] == []


async def test_invalid_enum_is_validation_error(client) -> None:
    response = await client.post("/api/broker-profiles", json={
        "type": "Lease",
        "creci_number": "1",
        "creci_type": "Permanent",
    })

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_list_filters_and_pagination(client, profile, locations) -> None:
    for number in range(3):
        await client.post("/api/broker-profiles", json={
            "type": "Rental",
            "creci_number": f"9000{number}",
            "creci_type": "Intern",
        })

    rentals = await client.get("/api/broker-profiles", params={"type": "Rental"})
    page = await client.get("/api/broker-profiles", params={"page": 2, "limit": 3})
    in_south = await client.get("/api/broker-profiles", params={
        "region_id": locations["regions"]["Zona Sul"],
        "include_regions": "true",
    })
    in_pinheiros = await client.get("/api/broker-profiles", params={
        "neighborhood_id": locations["neighborhoods"]["Pinheiros"],
    })

    assert len(rentals.json()["data"]) == 3
    assert len(page.json()["data"]) == 1
    assert [p["id"] for p in in_south.json()["data"]] == [profile["id"]]
    assert in_south.json()["data"][0]["regions"][0]["name"] == "Zona Sul"
    assert in_pinheiros.json()["data"] == []


async def test_oversized_limit_is_clamped(client, profile, monkeypatch) -> None:
    second = await client.post("/api/broker-profiles", json={
        "type": "Rental",
        "creci_number": "90010",
        "creci_type": "Intern",
    })
    assert second.status_code == 201
    monkeypatch.setattr(broker_profiles, "MAX_PAGE_SIZE", 1)

    response = await client.get("/api/broker-profiles", params={"limit": 500})

    assert response.status_code == 200
    assert len(response.json()["data"]) == 1


async def test_update(client, profile) -> None:
    response = await client.put(f"/api/broker-profiles/{profile['id']}", json={
        "type": "Hybrid",
        "classification": 5,
    })

    assert response.json()["data"]["type"] == "Hybrid"
    assert response.json()["data"]["classification"] == 5
    assert response.json()["data"]["creci_number"] == "123456-F"


async def test_soft_delete_and_restore(client, profile) -> None:
    url = f"/api/broker-profiles/{profile['id']}"

    deleted = await client.delete(url)
    hidden = await client.get(url)
    visible = await client.get(url, params={"include_deleted": "true"})
    update = await client.put(url, json={"classification": 1})
    add_region = await client.post(f"{url}/regions", json={"region_ids": []})
    delete_again = await client.delete(url)
    listed = await client.get("/api/broker-profiles")
    listed_all = await client.get("/api/broker-profiles", params={"include_deleted": "true"})

    assert deleted.status_code == 200
    assert hidden.status_code == 404
    assert visible.json()["data"]["deleted"] is True
    assert visible.json()["data"]["deleted_at"] is not None
    assert update.status_code == 400
    assert update.json()["error"]["message"] == "Cannot update a deleted profile"
    assert add_region.status_code == 400
    assert delete_again.status_code == 400
    assert listed.json()["data"] == []
    assert len(listed_all.json()["data"]) == 1

    restored = await client.post(f"{url}/restore")
    restore_again = await client.post(f"{url}/restore")

    assert restored.status_code == 200
    assert restored.json()["data"]["deleted"] is False
    assert restored.json()["data"]["deleted_at"] is None
    assert restore_again.status_code == 400
    assert (await client.get(url)).status_code == 200


async def test_region_associations(client, profile, locations) -> None:
    url = f"/api/broker-profiles/{profile['id']}/regions"
    south, west = locations["regions"]["Zona Sul"], locations["regions"]["Zona Oeste"]

    added = await client.post(url, json={"region_ids": [south, west]})
    assert [r["name"] for r in added.json()["data"]] == ["Zona Oeste", "Zona Sul"]

    replaced = await client.put(url, json={"region_ids": [west]})
    assert [r["name"] for r in replaced.json()["data"]] == ["Zona Oeste"]

    failed = await client.put(url, json={"region_ids": [south, "ghost"]})
    assert failed.status_code == 404
    assert [r["name"] for r in (await client.get(url)).json()["data"]] == ["Zona Oeste"]

    removed = await client.delete(f"{url}/{west}")
    missing = await client.delete(f"{url}/{west}")
    assert removed.status_code == 200
    assert missing.status_code == 404
    assert (await client.get(url)).json()["data"] == []


async def test_neighborhood_associations(client, profile, locations) -> None:
    url = f"/api/broker-profiles/{profile['id']}/neighborhoods"
    moema, pinheiros = locations["neighborhoods"]["Moema"], locations["neighborhoods"]["Pinheiros"]

    added = await client.post(url, json={"neighborhood_ids": [pinheiros, moema]})
    assert {n["name"] for n in added.json()["data"]} == {"Moema", "Pinheiros"}

    usage = await client.get(f"/api/neighborhoods/{pinheiros}/usage")
    assert usage.json()["data"] == {"isUsed": True, "usedIn": ["broker_profiles"]}

    cleared = await client.put(url, json={"neighborhood_ids": []})
    assert cleared.json()["data"] == []

    removed = await client.delete(f"{url}/{moema}")
    assert removed.status_code == 404
