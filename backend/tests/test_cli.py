from lostfound.models.item import Item
from lostfound.models.match import Match


def test_seed_inserts_sample_items(app):
    result = app.test_cli_runner().invoke(args=["seed", "--owner", "5"])
    assert result.exit_code == 0
    assert "Seeded 2 items" in result.output
    items = Item.query.order_by(Item.id).all()
    assert [(i.type, i.category) for i in items] == [("lost", "electronics"), ("found", "bags")]
    assert all(i.owner_user_id == 5 for i in items)
    assert items[1].tags == ["blue", "backpack", "navy", "blue", "jansport", "backpack", "with", "laptop", "compartment"]


def test_match_command_reruns_matching(app, client):
    client.post("/api/v1/items", json={
        "type": "found", "category": "bags", "title": "Blue Backpack",
        "description": "Navy blue Jansport backpack with laptop compartment",
        "location": "Student Center Cafeteria",
    }, headers={"X-User-Id": "2"})
    lost = client.post("/api/v1/items", json={
        "type": "lost", "category": "bags", "title": "Blue Backpack",
        "description": "navy jansport backpack",
        "location": "Student Center",
    }, headers={"X-User-Id": "1"}).get_json()
    assert len(lost["matches"]) == 1

    result = app.test_cli_runner().invoke(args=["match", str(lost["id"])])
    assert result.exit_code == 0
    assert "1 match(es) created" in result.output
    assert Match.query.count() == 2
