"""
The orderSummaries view.

A read-only view over `orders`: each order joined to the user whose
`username` equals the order's `userId`, projected down to a summary row.
Nothing is stored; MongoDB reruns the pipeline on every read.
"""
from typing import Iterable, List, Optional

ORDER_SUMMARIES_VIEW = "orderSummaries"
ORDER_SUMMARIES_SOURCE = "orders"

ORDER_SUMMARIES_PIPELINE = [
    {
        "$lookup": {
            "from": "users",
            "localField": "userId",
            "foreignField": "username",
            "as": "userInfo",
        }
    },
    {
        "$project": {
            "orderNumber": 1,
            "totalAmount": 1,
            "status": 1,
            "orderDate": 1,
            "itemCount": {"$size": "$items"},
            # $concat yields null when the lookup matched nobody
            "customerName": {
                "$concat": [
                    {"$arrayElemAt": ["$userInfo.firstName", 0]},
                    " ",
                    {"$arrayElemAt": ["$userInfo.lastName", 0]},
                ]
            },
            "customerEmail": {"$arrayElemAt": ["$userInfo.email", 0]},
        }
    },
]


def create_order_summaries_view(db):
    return db.create_collection(
        ORDER_SUMMARIES_VIEW,
        viewOn=ORDER_SUMMARIES_SOURCE,
        pipeline=ORDER_SUMMARIES_PIPELINE,
    )


def find_order_summaries(db, order_number: Optional[str] = None) -> List[dict]:
    query = {"orderNumber": order_number} if order_number is not None else {}
    return list(db[ORDER_SUMMARIES_VIEW].find(query))


def _first_match(users: Iterable[dict], username) -> Optional[dict]:
    for user in users:
        if user.get("username") == username:
            return user
    return None


def summarize_order(order: dict, users: Iterable[dict]) -> dict:
    """Build one orderSummaries row in process, same rules as the pipeline."""
    user = _first_match(users, order.get("userId"))

    customer_name = None
    customer_email = None
    if user is not None:
        first, last = user.get("firstName"), user.get("lastName")
        if first is not None and last is not None:
            customer_name = f"{first} {last}"
        customer_email = user.get("email")

    return {
        "_id": order.get("_id"),
        "orderNumber": order.get("orderNumber"),
        "totalAmount": order.get("totalAmount"),
        "status": order.get("status"),
        "orderDate": order.get("orderDate"),
        "itemCount": len(order.get("items", [])),
        "customerName": customer_name,
        "customerEmail": customer_email,
    }


def summarize_orders(orders: Iterable[dict], users: Iterable[dict]) -> List[dict]:
    users = list(users)
    return [summarize_order(order, users) for order in orders]
