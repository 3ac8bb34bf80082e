import pytest

from lostfound import create_app
from lostfound.extensions import db
from lostfound.matching import ItemRecord


@pytest.fixture()
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def make_item():
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        fields = {
            "id": f"item-{counter['n']}",
            "type": "lost",
            "category": "electronics",
            "title": "iPhone 13 black",
            "description": "cracked screen",
            "location": "library",
            "owner_id": 100 + counter["n"],
        }
        fields.update(overrides)
        return ItemRecord(**fields)

    return _make
