from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import MagicMock

from mongo_init.db.seeder import seed_all, seed_categories, seed_users

NOW = datetime(2025, 10, 2, 12, 0, tzinfo=timezone.utc)


def make_fake_db(inserted):
    db = MagicMock()
    collections = {}

    def collection(name):
        if name not in collections:
            coll = MagicMock()

            def insert_many(docs):
                inserted.append((name, docs))
                return SimpleNamespace(inserted_ids=list(range(len(docs))))

            coll.insert_many.side_effect = insert_many
            collections[name] = coll
        return collections[name]

    db.__getitem__.side_effect = collection
    return db


def test_seed_all_inserts_each_collection_once_in_order():
    inserted = []

    counts = seed_all(make_fake_db(inserted), NOW)

    assert [name for name, _ in inserted] == ["users", "products", "categories", "orders"]
    assert counts == {"users": 3, "products": 3, "categories": 4, "orders": 2}


def test_seed_all_stores_documents_not_models():
    inserted = []
    seed_all(make_fake_db(inserted), NOW)

    users = dict(inserted)["users"]
    assert users[0]["username"] == "john_doe"
    assert users[0]["createdAt"] == NOW


def test_single_collection_seeders():
    inserted = []
    db = make_fake_db(inserted)

    assert seed_users(db, NOW) == 3
    assert seed_categories(db, NOW) == 4
    assert [name for name, _ in inserted] == ["users", "categories"]
