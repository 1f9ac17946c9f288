import json
import logging
from pathlib import Path
from typing import Optional

from .security import hash_password
from .store import Collection, Collections, DuplicateKeyError

logger = logging.getLogger(__name__)


def load_documents(path):
    """Load documents from a JSON file and return a list of dicts.

    Args:
        path (str or Path): Path to the JSON file.

    Returns:
        list: list of documents, empty if the file does not exist.
    """
    p = Path(path)
    if not p.exists():
        return []
    with p.open("r", encoding="utf-8") as f:
        return json.load(f)


def prepare_user(doc: dict, rounds: Optional[int] = None) -> dict:
    # Fixture files carry plaintext passwords; only hashes are ever stored
    user = dict(doc)
    if user.get("password") and not user["password"].startswith("$2"):
        user["password"] = hash_password(user["password"], rounds=rounds)
    return user


def insert_missing(collection: Collection, documents) -> int:
    added = 0
    for doc in documents:
        try:
            collection.insert_one(doc)
        except DuplicateKeyError:
            continue
        added += 1
    return added


def seed_collections(collections: Collections, data_dir, rounds: Optional[int] = None) -> dict:
    """Fill empty-or-partial collections from ``recipes.json``, ``books.json``
    and ``users.json`` in ``data_dir``.  Documents whose key already exists
    are skipped."""
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        logger.warning("Seed directory %s does not exist, nothing seeded", data_dir)
    counts = {
        "recipes": insert_missing(collections.recipes, load_documents(data_dir / "recipes.json")),
        "books": insert_missing(collections.books, load_documents(data_dir / "books.json")),
        "users": insert_missing(
            collections.users,
            [prepare_user(u, rounds) for u in load_documents(data_dir / "users.json")],
        ),
    }
    logger.info("Seeded %s from %s", counts, data_dir)
    return counts
