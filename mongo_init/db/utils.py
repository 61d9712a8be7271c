from typing import Iterable, List


def app_user_roles(db_name: str) -> List[dict]:
    return [{"role": "readWrite", "db": db_name}]


def create_app_user(db, username: str, password: str):
    return db.command(
        "createUser", username, pwd=password, roles=app_user_roles(db.name)
    )


def has_app_user(db, username: str) -> bool:
    info = db.command("usersInfo", username)
    return len(info.get("users", [])) > 0


def insert_documents(db, collection: str, records: Iterable) -> int:
    docs = [r.to_document() if hasattr(r, "to_document") else r for r in records]
    result = db[collection].insert_many(docs)
    return len(result.inserted_ids)
