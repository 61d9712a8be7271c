from datetime import datetime, timezone
from typing import List, Optional

from mongo_init.db.models import (
    Category,
    Notifications,
    Order,
    OrderItem,
    Preferences,
    Product,
    Profile,
    Review,
    ShippingAddress,
    User,
)


def _now(now: Optional[datetime]) -> datetime:
    return now or datetime.now(timezone.utc)


def sample_users(now: datetime = None) -> List[User]:
    now = _now(now)
    return [
        User(
            username="john_doe",
            email="john@example.com",
            first_name="John",
            last_name="Doe",
            age=30,
            created_at=now,
            profile=Profile(
                bio="Software developer with 5 years of experience",
                skills=["JavaScript", "Python", "MongoDB", "Docker"],
                social={"twitter": "@johndoe", "linkedin": "linkedin.com/in/johndoe"},
            ),
            preferences=Preferences(
                theme="dark", notifications=Notifications(email=True, push=False)
            ),
        ),
        User(
            username="jane_smith",
            email="jane@example.com",
            first_name="Jane",
            last_name="Smith",
            age=28,
            created_at=now,
            profile=Profile(
                bio="Data scientist and machine learning enthusiast",
                skills=["Python", "R", "TensorFlow", "MongoDB", "SQL"],
                social={"twitter": "@janesmith", "github": "github.com/janesmith"},
            ),
            preferences=Preferences(
                theme="light", notifications=Notifications(email=True, push=True)
            ),
        ),
        User(
            username="admin_user",
            email="admin@example.com",
            first_name="Admin",
            last_name="User",
            age=35,
            created_at=now,
            role="administrator",
            profile=Profile(
                bio="System administrator",
                skills=["DevOps", "Docker", "Kubernetes", "MongoDB"],
                social={},
            ),
            preferences=Preferences(
                theme="dark", notifications=Notifications(email=True, push=True)
            ),
        ),
    ]


def sample_products(now: datetime = None) -> List[Product]:
    now = _now(now)
    return [
        Product(
            name="Laptop Computer",
            description="High-performance laptop for development",
            price=999.99,
            category="Electronics",
            stock=50,
            specifications={
                "cpu": "Intel i7",
                "ram": "16GB",
                "storage": "512GB SSD",
                "screen": "15.6 inch",
                "weight": "2.1kg",
            },
            tags=["laptop", "computer", "development", "portable"],
            created_at=now,
            reviews=[
                Review(
                    user_id="john_doe",
                    rating=5,
                    comment="Excellent laptop for development work",
                    created_at=now,
                ),
                Review(
                    user_id="jane_smith",
                    rating=4,
                    comment="Great performance, slightly heavy",
                    created_at=now,
                ),
            ],
        ),
        Product(
            name="MongoDB Guide Book",
            description="Complete guide to MongoDB development",
            price=29.99,
            category="Books",
            stock=100,
            specifications={
                "pages": 450,
                "language": "English",
                "format": "Paperback",
                "isbn": "978-1234567890",
            },
            tags=["book", "mongodb", "database", "nosql", "development"],
            created_at=now,
            reviews=[
                Review(
                    user_id="admin_user",
                    rating=5,
                    comment="Comprehensive guide for MongoDB",
                    created_at=now,
                ),
            ],
        ),
        Product(
            name="Docker T-Shirt",
            description="Comfortable cotton t-shirt with Docker logo",
            price=19.99,
            category="Clothing",
            stock=200,
            specifications={
                "material": "100% Cotton",
                "sizes": ["S", "M", "L", "XL"],
                "color": "Blue",
                "care": "Machine washable",
            },
            tags=["clothing", "docker", "developer", "cotton"],
            created_at=now,
            reviews=[],
        ),
    ]


def sample_categories(now: datetime = None) -> List[Category]:
    now = _now(now)
    return [
        Category(name="Electronics", description="Electronic devices and gadgets", created_at=now),
        Category(name="Books", description="Books and publications", created_at=now),
        Category(name="Clothing", description="Clothing and accessories", created_at=now),
        Category(
            name="Technical Books",
            description="Programming and technical books",
            parent_category="Books",
            created_at=now,
        ),
    ]


def sample_orders(now: datetime = None) -> List[Order]:
    now = _now(now)
    return [
        Order(
            user_id="john_doe",
            order_number="ORD-001",
            items=[
                OrderItem(
                    product_name="Laptop Computer",
                    quantity=1,
                    unit_price=999.99,
                    total_price=999.99,
                ),
            ],
            total_amount=999.99,
            status="completed",
            shipping_address=ShippingAddress(
                street="123 Main St",
                city="New York",
                state="NY",
                zip_code="10001",
                country="USA",
            ),
            payment_method="credit_card",
            order_date=now,
            shipped_date=now,
            delivered_date=now,
        ),
        Order(
            user_id="jane_smith",
            order_number="ORD-002",
            items=[
                OrderItem(
                    product_name="MongoDB Guide Book",
                    quantity=2,
                    unit_price=29.99,
                    total_price=59.98,
                ),
                OrderItem(
                    product_name="Docker T-Shirt",
                    quantity=1,
                    unit_price=19.99,
                    total_price=19.99,
                ),
            ],
            total_amount=79.97,
            status="shipped",
            shipping_address=ShippingAddress(
                street="456 Oak Ave",
                city="San Francisco",
                state="CA",
                zip_code="94102",
                country="USA",
            ),
            payment_method="paypal",
            order_date=now,
            shipped_date=now,
        ),
    ]


# collection name -> builder, in insertion order
SAMPLE_COLLECTIONS = {
    "users": sample_users,
    "products": sample_products,
    "categories": sample_categories,
    "orders": sample_orders,
}
