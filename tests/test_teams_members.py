from conftest import member_payload


async def _member(client, team_id: str, name: str, is_leader: bool = False) -> dict:
    response = await client.post("/api/members", json=member_payload(team_id, name, is_leader))
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def _active_leaders(client, team_id: str) -> list:
    response = await client.get("/api/members", params={"team_id": team_id, "is_leader": "true", "active": "true"})
    return response.json()["data"]


# =====================================================
# EQUIPES
# =====================================================

async def test_team_crud(client, team) -> None:
    duplicate = await client.post("/api/teams", json={"name": team["name"], "team_type": "Legal"})
    updated = await client.put(f"/api/teams/{team['id']}", json={"team_type": "Support"})
    by_type = await client.get("/api/teams", params={"team_type": "Support"})

    assert team["team_type"] == "Brokers"
    assert duplicate.status_code == 409
    assert updated.json()["data"]["team_type"] == "Support"
    assert [t["id"] for t in by_type.json()["data"]] == [team["id"]]


async def test_team_with_members(client, team) -> None:
    leader = await _member(client, team["id"], "Ricardo Oliveira", is_leader=True)

    detail = await client.get(f"/api/teams/{team['id']}", params={"include_members": "true"})
    plain = await client.get(f"/api/teams/{team['id']}")

    assert [m["id"] for m in detail.json()["data"]["members"]] == [leader["id"]]
    assert "members" not in plain.json()["data"]


async def test_delete_team_cascades_members(client, team) -> None:
    member = await _member(client, team["id"], "Amanda Silva")

    deleted = await client.delete(f"/api/teams/{team['id']}")
    gone = await client.get(f"/api/members/{member['id']}")

    assert deleted.status_code == 200
    assert gone.status_code == 404


async def test_team_members_filter(client, team) -> None:
    await _member(client, team["id"], "Ricardo Oliveira", is_leader=True)
    amanda = await _member(client, team["id"], "Amanda Silva")
    await client.patch(f"/api/members/{amanda['id']}/status", json={"active": False})

    active = await client.get(f"/api/teams/{team['id']}/members", params={"active": "true"})
    everyone = await client.get(f"/api/teams/{team['id']}/members")
    missing = await client.get("/api/teams/nope/members")

    assert [m["name"] for m in active.json()["data"]] == ["Ricardo Oliveira"]
    assert len(everyone.json()["data"]) == 2
    assert missing.status_code == 404


# =====================================================
# LIDERANÇA
# =====================================================

async def test_second_leader_is_rejected(client, team) -> None:
    await _member(client, team["id"], "Member A", is_leader=True)

    response = await client.post("/api/members", json=member_payload(team["id"], "Member B", is_leader=True))
    listed = await client.get("/api/members", params={"team_id": team["id"]})

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "error": {"code": "BAD_REQUEST", "message": "Team already has a leader"},
    }
    assert [m["name"] for m in listed.json()["data"]] == ["Member A"]


async def test_member_with_unknown_team(client) -> None:
    response = await client.post("/api/members", json=member_payload("nope", "Amanda Silva"))

    assert response.status_code == 404
    assert response.json()["error"]["message"] == "Team not found"


async def test_duplicate_member_email(client, team) -> None:
    await _member(client, team["id"], "Amanda Silva")

    response = await client.post("/api/members", json=member_payload(team["id"], "Amanda Silva"))

    assert response.status_code == 409
    assert response.json()["error"]["message"] == "Email already in use"


async def test_promote_when_leader_exists(client, team) -> None:
    await _member(client, team["id"], "Ricardo Oliveira", is_leader=True)
    amanda = await _member(client, team["id"], "Amanda Silva")

    response = await client.put(f"/api/members/{amanda['id']}", json={"is_leader": True})

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Team already has a leader"
    assert len(await _active_leaders(client, team["id"])) == 1


async def test_demote_only_leader(client, team) -> None:
    leader = await _member(client, team["id"], "Ricardo Oliveira", is_leader=True)

    response = await client.put(f"/api/members/{leader['id']}", json={"is_leader": False})

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Team must have at least one leader"


async def test_move_leader_to_team_with_leader(client, team) -> None:
    other = (await client.post("/api/teams", json={"name": "Equipe Jurídica", "team_type": "Legal"})).json()["data"]
    await _member(client, other["id"], "Fernando Lima", is_leader=True)
    leader = await _member(client, team["id"], "Ricardo Oliveira", is_leader=True)

    blocked = await client.put(f"/api/members/{leader['id']}", json={"team_id": other["id"]})
    missing = await client.put(f"/api/members/{leader['id']}", json={"team_id": "nope"})

    assert blocked.status_code == 400
    assert blocked.json()["error"]["message"] == "Team already has a leader"
    assert missing.status_code == 404


async def test_move_leader_leaves_old_team_unchecked(client, team) -> None:
    other = (await client.post("/api/teams", json={"name": "Equipe Jurídica", "team_type": "Legal"})).json()["data"]
    leader = await _member(client, team["id"], "Ricardo Oliveira", is_leader=True)

    moved = await client.put(f"/api/members/{leader['id']}", json={"team_id": other["id"]})

    assert moved.status_code == 200
    assert moved.json()["data"]["team_id"] == other["id"]
    assert await _active_leaders(client, team["id"]) == []


async def test_deactivate_last_active_leader(client, team) -> None:
    leader = await _member(client, team["id"], "Ricardo Oliveira", is_leader=True)

    response = await client.patch(f"/api/members/{leader['id']}/status", json={"active": False})

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Team must have at least one active leader"


async def test_reactivate_leader_when_another_leads(client, team) -> None:
    ricardo = await _member(client, team["id"], "Ricardo Oliveira", is_leader=True)
    amanda = await _member(client, team["id"], "Amanda Silva")

    inactive = await client.patch(f"/api/members/{amanda['id']}/status", json={"active": False})
    assert inactive.status_code == 200

    # Líder inativo não conta
    promoted = await client.put(f"/api/members/{amanda['id']}", json={"is_leader": True})
    assert promoted.status_code == 200

    reactivate = await client.patch(f"/api/members/{amanda['id']}/status", json={"active": True})
    assert reactivate.status_code == 400
    assert reactivate.json()["error"]["message"] == "Team already has a leader"
    assert [m["id"] for m in await _active_leaders(client, team["id"])] == [ricardo["id"]]


async def test_delete_only_leader(client, team) -> None:
    leader = await _member(client, team["id"], "Ricardo Oliveira", is_leader=True)
    amanda = await _member(client, team["id"], "Amanda Silva")

    blocked = await client.delete(f"/api/members/{leader['id']}")
    deleted = await client.delete(f"/api/members/{amanda['id']}")

    assert blocked.status_code == 400
    assert blocked.json()["error"]["message"] == "Team must have at least one leader"
    assert deleted.status_code == 200


async def test_set_leader(client, team) -> None:
    amanda = await _member(client, team["id"], "Amanda Silva")

    response = await client.post(f"/api/teams/{team['id']}/leader", json={"member_id": amanda["id"]})
    again = await client.post(f"/api/teams/{team['id']}/leader", json={"member_id": amanda["id"]})

    assert response.status_code == 200
    assert response.json()["data"]["is_leader"] is True
    assert again.status_code == 200
    assert [m["id"] for m in await _active_leaders(client, team["id"])] == [amanda["id"]]


async def test_set_leader_errors(client, team) -> None:
    other = (await client.post("/api/teams", json={"name": "Equipe Jurídica", "team_type": "Legal"})).json()["data"]
    outsider = await _member(client, other["id"], "Fernando Lima")
    await _member(client, team["id"], "Ricardo Oliveira", is_leader=True)
    amanda = await _member(client, team["id"], "Amanda Silva")

    no_team = await client.post("/api/teams/nope/leader", json={"member_id": amanda["id"]})
    no_member = await client.post(f"/api/teams/{team['id']}/leader", json={"member_id": "nope"})
    not_in_team = await client.post(f"/api/teams/{team['id']}/leader", json={"member_id": outsider["id"]})
    taken = await client.post(f"/api/teams/{team['id']}/leader", json={"member_id": amanda["id"]})

    assert no_team.status_code == 404
    assert no_member.status_code == 404
    assert no_member.json()["error"]["message"] == "Member not found"
    assert not_in_team.status_code == 400
    assert not_in_team.json()["error"]["message"] == "Member does not belong to this team"
    assert taken.status_code == 400
    assert taken.json()["error"]["message"] == "Team already has a leader"


async def test_member_include_team(client, team) -> None:
    member = await _member(client, team["id"], "Amanda Silva")

    response = await client.get(f"/api/members/{member['id']}", params={"include_team": "true"})

    assert response.json()["data"]["team"]["name"] == "Equipe de Vendas"
