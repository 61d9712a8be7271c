"""
Document models for the seeded collections.

Each model maps to one MongoDB collection (or to an embedded sub-document).
Attributes are snake_case; stored documents use the camelCase aliases.
Cross references (order.userId, review.userId, product.category,
category.parentCategory) are plain values, never enforced.
"""
from datetime import datetime
from typing import Any, ClassVar, Dict, List, Optional

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True, arbitrary_types_allowed=True)

    # fields stored as explicit null instead of being left out
    keep_null: ClassVar[tuple] = ()

    def to_document(self) -> Dict[str, Any]:
        data = self.model_dump(by_alias=True, exclude_none=True)
        for name in self.keep_null:
            field = type(self).model_fields[name]
            data.setdefault(field.alias or name, None)
        return data


# ---------- users ----------
class Notifications(Document):
    email: bool = True
    push: bool = False


class Preferences(Document):
    theme: str = "light"
    notifications: Notifications = Field(default_factory=Notifications)


class Profile(Document):
    bio: str = ""
    skills: List[str] = []
    social: Dict[str, str] = {}


class User(Document):
    username: str
    email: str
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    age: Optional[int] = None
    is_active: bool = Field(True, alias="isActive")
    created_at: datetime = Field(..., alias="createdAt")
    role: Optional[str] = None
    profile: Profile = Field(default_factory=Profile)
    preferences: Preferences = Field(default_factory=Preferences)


# ---------- products ----------
class Review(Document):
    user_id: str = Field(..., alias="userId")
    rating: int = Field(..., ge=1, le=5)
    comment: str = ""
    created_at: datetime = Field(..., alias="createdAt")


class Product(Document):
    name: str
    description: str = ""
    price: float = Field(..., ge=0)
    category: str
    stock: int = 0
    specifications: Dict[str, Any] = {}
    tags: List[str] = []
    is_active: bool = Field(True, alias="isActive")
    created_at: datetime = Field(..., alias="createdAt")
    reviews: List[Review] = []


# ---------- categories ----------
class Category(Document):
    keep_null: ClassVar[tuple] = ("parent_category",)

    name: str
    description: str = ""
    parent_category: Optional[str] = Field(None, alias="parentCategory")
    is_active: bool = Field(True, alias="isActive")
    created_at: datetime = Field(..., alias="createdAt")


# ---------- orders ----------
class OrderItem(Document):
    product_id: ObjectId = Field(default_factory=ObjectId, alias="productId")
    product_name: str = Field(..., alias="productName")
    quantity: int = Field(..., ge=1)
    unit_price: float = Field(..., alias="unitPrice")
    total_price: float = Field(..., alias="totalPrice")

    @property
    def expected_total(self) -> float:
        return round(self.quantity * self.unit_price, 2)


class ShippingAddress(Document):
    street: str
    city: str
    state: str
    zip_code: str = Field(..., alias="zipCode")
    country: str


class Order(Document):
    user_id: str = Field(..., alias="userId")
    order_number: str = Field(..., alias="orderNumber")
    items: List[OrderItem]
    total_amount: float = Field(..., alias="totalAmount")
    status: str = "pending"
    shipping_address: ShippingAddress = Field(..., alias="shippingAddress")
    payment_method: str = Field(..., alias="paymentMethod")
    order_date: datetime = Field(..., alias="orderDate")
    shipped_date: Optional[datetime] = Field(None, alias="shippedDate")
    delivered_date: Optional[datetime] = Field(None, alias="deliveredDate")

    @property
    def items_total(self) -> float:
        return round(sum(item.total_price for item in self.items), 2)
