from pymongo.mongo_client import MongoClient
from dotenv import load_dotenv
import os

DEFAULT_MONGO_URI = "mongodb://localhost:27017"
DEFAULT_MONGO_DB = "mydatabase"


def get_client(uri=None):
    load_dotenv()

    MONGO_URI = uri or os.getenv("MONGO_URI", DEFAULT_MONGO_URI)

    return MongoClient(MONGO_URI)


def get_db(name=None, client=None):
    load_dotenv()

    MONGO_DB = name or os.getenv("MONGO_DB", DEFAULT_MONGO_DB)

    client = client or get_client()
    return client[MONGO_DB]
