from pymongo import ASCENDING

# (collection, field, unique)
INDEXES = [
    # Users indexes
    ("users", "username", True),
    ("users", "email", True),
    ("users", "profile.skills", False),
    ("users", "isActive", False),
    # Products indexes
    ("products", "name", False),
    ("products", "category", False),
    ("products", "tags", False),
    ("products", "price", False),
    ("products", "isActive", False),
    # Orders indexes
    ("orders", "userId", False),
    ("orders", "orderNumber", True),
    ("orders", "status", False),
    ("orders", "orderDate", False),
    # Categories indexes
    ("categories", "name", True),
    ("categories", "parentCategory", False),
]


def unique_fields(collection: str):
    return [field for coll, field, unique in INDEXES if coll == collection and unique]


def create_indexes(db):
    """Create every index in INDEXES and return the created index names."""
    names = []
    for collection, field, unique in INDEXES:
        if unique:
            name = db[collection].create_index([(field, ASCENDING)], unique=True)
        else:
            name = db[collection].create_index([(field, ASCENDING)])
        names.append(name)
    return names
