import os
import sys
from datetime import datetime, timezone

from dotenv import load_dotenv
from pymongo import errors as mongo_errors

from mongo_init.db.errors import InitializationError, translate_error
from mongo_init.db.indexes import create_indexes
from mongo_init.db.seeder import seed_all
from mongo_init.db.utils import create_app_user
from mongo_init.db.views import ORDER_SUMMARIES_VIEW, create_order_summaries_view
from mongo_init.services.db import DEFAULT_MONGO_DB, get_db
from mongo_init.services.logger import get_logger

load_dotenv()

MONGO_DB = os.getenv("MONGO_DB", DEFAULT_MONGO_DB)
APP_DB_USER = os.getenv("APP_DB_USER", "appuser")
APP_DB_PASSWORD = os.getenv("APP_DB_PASSWORD", "apppassword")
SKIP_SEED = os.getenv("SKIP_SEED", "false").lower() == "true"

logger = get_logger("init-db")


def completion_lines(app_user=APP_DB_USER):
    return [
        "Created collections: users, products, categories, orders",
        "Created indexes for performance optimization",
        f"Created view: {ORDER_SUMMARIES_VIEW}",
        "Inserted sample data for testing",
        f"Created application user: {app_user}",
        "Database is ready for use!",
    ]


def build_steps(app_user=APP_DB_USER, app_password=APP_DB_PASSWORD, now=None):
    now = now or datetime.now(timezone.utc)
    return [
        ("create_user", lambda db: create_app_user(db, app_user, app_password)),
        ("seed", lambda db: seed_all(db, now)),
        ("create_indexes", create_indexes),
        ("create_view", create_order_summaries_view),
    ]


def _run_step(db, name, step):
    logger.info("step_started", extra={"extra": {"step": name}})
    try:
        result = step(db)
    except InitializationError:
        logger.exception("step_failed", extra={"extra": {"step": name}})
        raise
    except mongo_errors.PyMongoError as e:
        logger.exception("step_failed", extra={"extra": {"step": name}})
        err = translate_error(e, step=name)
        if err is None:
            raise
        raise err from e
    logger.info("step_finished", extra={"extra": {"step": name}})
    return result


def run_initialization(db=None, app_user=APP_DB_USER, app_password=APP_DB_PASSWORD, now=None):
    """
    Run every initialization step against `db` (default: MONGO_DB) in order.
    The first failure aborts the rest; earlier steps are not undone.
    """
    if db is None:
        db = get_db(MONGO_DB)

    results = {}
    for name, step in build_steps(app_user, app_password, now):
        results[name] = _run_step(db, name, step)

    for line in completion_lines(app_user):
        print(line)
    logger.info(
        "initialization_completed",
        extra={"extra": {"database": db.name, "seeded": results.get("seed")}},
    )
    return results


def main():
    if SKIP_SEED:
        print("SKIP_SEED is set. Exiting without initializing the database.")
        return 0
    try:
        run_initialization()
    except InitializationError as e:
        print(f"Database initialization failed at step '{e.step}': {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
