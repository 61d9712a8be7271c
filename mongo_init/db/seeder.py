from datetime import datetime, timezone

from pymongo import errors as mongo_errors

from mongo_init.db.errors import translate_error
from mongo_init.db.sample_data import (
    SAMPLE_COLLECTIONS,
    sample_categories,
    sample_orders,
    sample_products,
    sample_users,
)
from mongo_init.db.utils import insert_documents
from mongo_init.services.logger import get_logger

logger = get_logger("seeder")


def _seed(db, collection, records):
    try:
        count = insert_documents(db, collection, records)
    except mongo_errors.PyMongoError as e:
        err = translate_error(e, step="seed", collection=collection)
        if err is None:
            raise
        raise err from e
    logger.info("collection_seeded", extra={"extra": {"collection": collection, "count": count}})
    return count


def seed_users(db, now=None):
    return _seed(db, "users", sample_users(now))


def seed_products(db, now=None):
    return _seed(db, "products", sample_products(now))


def seed_categories(db, now=None):
    return _seed(db, "categories", sample_categories(now))


def seed_orders(db, now=None):
    return _seed(db, "orders", sample_orders(now))


def seed_all(db, now=None):
    """Insert every sample collection, in SAMPLE_COLLECTIONS order. Returns counts."""
    now = now or datetime.now(timezone.utc)
    return {name: _seed(db, name, build(now)) for name, build in SAMPLE_COLLECTIONS.items()}
