"""
Errors raised while initializing the database.

Every error is fatal: the runner stops at the first one and nothing is retried
or rolled back. translate_error maps pymongo errors onto this taxonomy; the
original pymongo error stays reachable through __cause__.
"""
from pymongo import errors as mongo_errors

USER_ALREADY_EXISTS = 51003
DUPLICATE_KEY = 11000
NAMESPACE_EXISTS = 48
INDEX_OPTIONS_CONFLICT = 85
INDEX_KEY_SPECS_CONFLICT = 86


class InitializationError(Exception):
    def __init__(self, message, step=None):
        super().__init__(message)
        self.step = step


class ConnectionFailure(InitializationError):
    pass


class UniquenessViolation(InitializationError):
    pass


class UserAlreadyExists(UniquenessViolation):
    pass


class DuplicateKeyOnInsert(UniquenessViolation):
    def __init__(self, message, step=None, collection=None):
        super().__init__(message, step=step)
        self.collection = collection


class IndexConflict(InitializationError):
    pass


class ViewAlreadyExists(InitializationError):
    pass


def _error_codes(exc):
    codes = set()
    code = getattr(exc, "code", None)
    if code is not None:
        codes.add(code)
    if isinstance(exc, mongo_errors.BulkWriteError):
        for err in exc.details.get("writeErrors", []):
            codes.add(err.get("code"))
    return codes


def translate_error(exc, step, collection=None):
    """
    Return the InitializationError matching a pymongo error raised during
    `step`, or None when the error is not one this module knows about.
    """
    if isinstance(exc, InitializationError):
        return exc
    if isinstance(exc, mongo_errors.ConnectionFailure):
        return ConnectionFailure(f"Cannot reach MongoDB: {exc}", step=step)

    codes = _error_codes(exc)

    if step == "create_user" and USER_ALREADY_EXISTS in codes:
        return UserAlreadyExists(f"Application user already exists: {exc}", step=step)
    if step == "create_view" and (
        isinstance(exc, mongo_errors.CollectionInvalid) or NAMESPACE_EXISTS in codes
    ):
        return ViewAlreadyExists(f"View already exists: {exc}", step=step)
    if step == "create_indexes" and codes & {
        INDEX_OPTIONS_CONFLICT,
        INDEX_KEY_SPECS_CONFLICT,
        DUPLICATE_KEY,
    }:
        return IndexConflict(f"Index conflict: {exc}", step=step)
    if DUPLICATE_KEY in codes:
        return DuplicateKeyOnInsert(
            f"Duplicate key inserting into '{collection}': {exc}",
            step=step,
            collection=collection,
        )
    return None
