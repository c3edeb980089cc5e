from sqlalchemy import event
from sqlalchemy.exc import OperationalError

from coaching_app.models import team_member_assignments
from coaching_app.services import team_service


def test_create_team(client):
    response = client.post("/teams", json={"name": "Falcons", "logourl": "http://example.com/logo.png"})

    assert response.status_code == 201
    data = response.json()
    assert data["ID"] > 0
    assert data["Name"] == "Falcons"
    assert data["LogoURL"] == "http://example.com/logo.png"
    assert data["Members"] == []

def test_create_team_duplicate_name_conflicts(client, create_team):
    create_team(name="Falcons")

    response = client.post("/teams", json={"name": "Falcons"})

    assert response.status_code == 500
    assert "Falcons" in response.json()["error"]

def test_create_team_requires_name(client):
    response = client.post("/teams", json={"logourl": "x.png"})
    assert response.status_code == 400

def test_list_teams_embeds_members(client, create_team, create_member):
    falcons = create_team(name="Falcons")
    create_team(name="Hawks")
    alice = create_member(name="Alice", email="alice@example.com")
    bob = create_member(name="Bob", email="bob@example.com")
    client.post(f"/teams/{falcons['ID']}/assign/{alice['ID']}")
    client.post(f"/teams/{falcons['ID']}/assign/{bob['ID']}")

    response = client.get("/teams")

    assert response.status_code == 200
    teams = response.json()
    assert [t["Name"] for t in teams] == ["Falcons", "Hawks"]
    assert [m["Name"] for m in teams[0]["Members"]] == ["Alice", "Bob"]
    assert teams[1]["Members"] == []

def test_get_team(client, create_team, create_member):
    team = create_team()
    member = create_member()
    client.post(f"/teams/{team['ID']}/assign/{member['ID']}")

    response = client.get(f"/teams/{team['ID']}")

    assert response.status_code == 200
    assert response.json()["Members"] == [member]

def test_unknown_team_is_not_found(client):
    assert client.get("/teams/4242").json() == {"error": "Team not found"}
    assert client.get("/teams/4242").status_code == 404
    assert client.put("/teams/4242", json={"name": "Ghosts"}).status_code == 404
    assert client.delete("/teams/4242").status_code == 404

def test_update_team_keeps_unsent_fields(client, create_team):
    team = create_team(name="Falcons", logourl="falcon.png")

    response = client.put(f"/teams/{team['ID']}", json={"name": "Eagles"})

    assert response.status_code == 200
    assert response.json()["Name"] == "Eagles"
    assert response.json()["LogoURL"] == "falcon.png"

def test_update_team_can_clear_logo(client, create_team):
    team = create_team(logourl="falcon.png")

    response = client.put(f"/teams/{team['ID']}", json={"LogoURL": None})

    assert response.status_code == 200
    assert response.json()["LogoURL"] is None

def test_assign_member_to_team(client, create_team, create_member):
    team = create_team()
    member = create_member()

    response = client.post(f"/teams/{team['ID']}/assign/{member['ID']}")

    assert response.status_code == 200
    assert response.json() == {"message": "Member assigned to team successfully"}
    members = client.get(f"/teams/{team['ID']}").json()["Members"]
    assert [m["ID"] for m in members] == [member["ID"]]

def test_assign_member_twice_keeps_single_association(client, create_team, create_member, db_session):
    team = create_team()
    member = create_member()

    client.post(f"/teams/{team['ID']}/assign/{member['ID']}")
    second = client.post(f"/teams/{team['ID']}/members/{member['ID']}")

    assert second.status_code == 200
    members = client.get(f"/teams/{team['ID']}").json()["Members"]
    assert [m["ID"] for m in members] == [member["ID"]]
    rows = db_session.execute(team_member_assignments.select()).all()
    assert len(rows) == 1

def test_assign_checks_team_before_member(client, create_team, create_member):
    team = create_team()
    member = create_member()

    missing_both = client.post("/teams/999/assign/999")
    assert missing_both.status_code == 404
    assert missing_both.json() == {"error": "Team not found"}

    missing_member = client.post(f"/teams/{team['ID']}/assign/999")
    assert missing_member.status_code == 404
    assert missing_member.json() == {"error": "Team member not found"}

    missing_team = client.post(f"/teams/999/assign/{member['ID']}")
    assert missing_team.json() == {"error": "Team not found"}

def test_remove_member_from_team(client, create_team, create_member):
    team = create_team()
    member = create_member()
    client.post(f"/teams/{team['ID']}/assign/{member['ID']}")

    response = client.delete(f"/teams/{team['ID']}/remove/{member['ID']}")

    assert response.status_code == 200
    assert response.json() == {"message": "Member removed from team successfully"}
    assert client.get(f"/teams/{team['ID']}").json()["Members"] == []
    # The member itself is untouched
    assert client.get(f"/members/{member['ID']}").status_code == 200

def test_remove_unassigned_member_succeeds(client, create_team, create_member):
    team = create_team()
    member = create_member()

    response = client.delete(f"/teams/{team['ID']}/remove/{member['ID']}")

    assert response.status_code == 200

def test_remove_member_not_found(client, create_team):
    team = create_team()

    assert client.delete("/teams/999/remove/1").json() == {"error": "Team not found"}
    response = client.delete(f"/teams/{team['ID']}/remove/999")
    assert response.status_code == 404
    assert response.json() == {"error": "Team member not found"}

def test_read_team_members(client, create_team, create_member):
    team = create_team()
    member = create_member()
    client.post(f"/teams/{team['ID']}/assign/{member['ID']}")

    response = client.get(f"/teams/{team['ID']}/members")

    assert response.status_code == 200
    assert response.json() == [member]
    assert client.get("/teams/999/members").status_code == 404

def test_delete_team_clears_associations(client, create_team, create_member, db_session):
    team = create_team()
    member = create_member()
    client.post(f"/teams/{team['ID']}/assign/{member['ID']}")

    response = client.delete(f"/teams/{team['ID']}")

    assert response.status_code == 204
    assert client.get(f"/teams/{team['ID']}").status_code == 404
    assert client.get(f"/members/{member['ID']}").status_code == 200
    assert db_session.execute(team_member_assignments.select()).all() == []

def test_delete_team_keeps_team_when_clearing_fails(client, create_team, create_member, monkeypatch):
    team = create_team()
    member = create_member()
    client.post(f"/teams/{team['ID']}/assign/{member['ID']}")

    def failing_clear(db, db_team):
        raise OperationalError("DELETE FROM team_member_assignments", {}, Exception("database is locked"))

    monkeypatch.setattr(team_service, "clear_team_members", failing_clear)

    response = client.delete(f"/teams/{team['ID']}")

    assert response.status_code == 500
    assert response.json()["error"].startswith("Failed to clear team members association")
    remaining = client.get(f"/teams/{team['ID']}")
    assert remaining.status_code == 200
    assert [m["ID"] for m in remaining.json()["Members"]] == [member["ID"]]

def test_delete_member_removes_it_from_teams(client, create_team, create_member):
    team = create_team()
    member = create_member()
    client.post(f"/teams/{team['ID']}/assign/{member['ID']}")

    assert client.delete(f"/members/{member['ID']}").status_code == 204

    assert client.get(f"/teams/{team['ID']}").json()["Members"] == []

def test_team_response_uses_original_field_names(client, create_team, create_member):
    team = create_team(logourl="falcon.png")
    member = create_member()
    client.post(f"/teams/{team['ID']}/assign/{member['ID']}")

    fetched = client.get(f"/teams/{team['ID']}").json()

    assert sorted(team.keys()) == ["ID", "LogoURL", "Members", "Name"]
    assert sorted(fetched["Members"][0].keys()) == ["Email", "ID", "Name", "PictureURL"]

def test_list_teams_loads_members_in_one_batch(client, engine, create_team, create_member):
    for i in range(5):
        team = create_team(name=f"Team {i}")
        member = create_member(name=f"Member {i}", email=f"member{i}@example.com")
        client.post(f"/teams/{team['ID']}/assign/{member['ID']}")

    statements = []

    def record_statement(conn, cursor, statement, parameters, context, executemany):
        statements.append(statement)

    event.listen(engine, "before_cursor_execute", record_statement)
    try:
        response = client.get("/teams")
    finally:
        event.remove(engine, "before_cursor_execute", record_statement)

    assert response.status_code == 200
    assert [len(t["Members"]) for t in response.json()] == [1] * 5
    # One query for the teams and one for every team's members
    assert len(statements) <= 2

def test_out_of_range_team_ids_are_a_bad_request(client, create_team, create_member):
    team = create_team()
    member = create_member()
    huge = 2 ** 63

    assert client.get(f"/teams/{huge}").status_code == 400
    assert client.delete(f"/teams/{huge}").status_code == 400
    assert client.post(f"/teams/{team['ID']}/assign/{huge}").status_code == 400
    response = client.delete(f"/teams/{huge}/remove/{member['ID']}")
    assert response.status_code == 400
    assert "error" in response.json()
