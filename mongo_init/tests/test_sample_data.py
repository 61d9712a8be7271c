from datetime import datetime, timezone

import pytest
from bson import ObjectId

from mongo_init.db.indexes import INDEXES, unique_fields
from mongo_init.db.models import OrderItem
from mongo_init.db.sample_data import (
    SAMPLE_COLLECTIONS,
    sample_categories,
    sample_orders,
    sample_products,
    sample_users,
)

NOW = datetime(2025, 10, 2, 12, 0, tzinfo=timezone.utc)


def test_collection_counts():
    counts = {name: len(build(NOW)) for name, build in SAMPLE_COLLECTIONS.items()}
    assert counts == {"users": 3, "products": 3, "categories": 4, "orders": 2}


def test_insertion_order():
    assert list(SAMPLE_COLLECTIONS) == ["users", "products", "categories", "orders"]


@pytest.mark.parametrize(
    "collection,field",
    [
        ("users", "username"),
        ("users", "email"),
        ("orders", "orderNumber"),
        ("categories", "name"),
    ],
)
def test_unique_fields_are_distinct_in_sample_data(collection, field):
    docs = [r.to_document() for r in SAMPLE_COLLECTIONS[collection](NOW)]
    values = [d[field] for d in docs]
    assert len(values) == len(set(values))
    assert field in unique_fields(collection)


def test_unique_indexes():
    unique = {(c, f) for c, f, u in INDEXES if u}
    assert unique == {
        ("users", "username"),
        ("users", "email"),
        ("orders", "orderNumber"),
        ("categories", "name"),
    }


def test_order_totals_match_items():
    for order in sample_orders(NOW):
        for item in order.items:
            assert item.total_price == pytest.approx(item.quantity * item.unit_price)
            assert item.total_price == item.expected_total
        assert order.total_amount == pytest.approx(sum(i.total_price for i in order.items))
        assert order.total_amount == order.items_total


def test_ord_002_total():
    order = {o.order_number: o for o in sample_orders(NOW)}["ORD-002"]
    assert [i.total_price for i in order.items] == [59.98, 19.99]
    assert order.total_amount == 79.97


def test_user_documents_use_stored_field_names():
    john, _, admin = [u.to_document() for u in sample_users(NOW)]

    assert john["firstName"] == "John"
    assert john["lastName"] == "Doe"
    assert john["isActive"] is True
    assert john["createdAt"] == NOW
    assert john["preferences"] == {"theme": "dark", "notifications": {"email": True, "push": False}}
    assert "role" not in john
    assert "first_name" not in john

    assert admin["role"] == "administrator"
    assert admin["profile"]["social"] == {}


def test_category_parent_is_stored_as_null():
    docs = {c["name"]: c for c in (r.to_document() for r in sample_categories(NOW))}
    assert docs["Electronics"]["parentCategory"] is None
    assert docs["Technical Books"]["parentCategory"] == "Books"


def test_product_documents():
    docs = {p["name"]: p for p in (r.to_document() for r in sample_products(NOW))}
    assert docs["Laptop Computer"]["reviews"][0]["userId"] == "john_doe"
    assert docs["MongoDB Guide Book"]["specifications"]["pages"] == 450
    assert docs["Docker T-Shirt"]["reviews"] == []


def test_order_documents():
    ord1, ord2 = [o.to_document() for o in sample_orders(NOW)]
    assert isinstance(ord1["items"][0]["productId"], ObjectId)
    assert ord1["shippingAddress"]["zipCode"] == "10001"
    assert ord1["deliveredDate"] == NOW
    assert "deliveredDate" not in ord2
    assert ord2["shippedDate"] == NOW


def test_items_get_distinct_product_ids():
    a = OrderItem(product_name="x", quantity=1, unit_price=1.0, total_price=1.0)
    b = OrderItem(product_name="x", quantity=1, unit_price=1.0, total_price=1.0)
    assert a.product_id != b.product_id


def test_builders_default_to_current_time():
    before = datetime.now(timezone.utc)
    user = sample_users()[0]
    assert user.created_at >= before
