import json
from typing import Any, List, Mapping, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from . import models
from .store import (
    Collections,
    DeleteResult,
    Document,
    DuplicateKeyError,
    InsertOneResult,
    StoreError,
    UpdateResult,
    matches,
)


def _encode_key(value: Any) -> str:
    return json.dumps(value)


def get_document(db: Session, collection: str, key: Any):
    return (
        db.query(models.Document)
        .filter(models.Document.collection == collection)
        .filter(models.Document.key == _encode_key(key))
        .first()
    )


def get_documents(db: Session, collection: str):
    return (
        db.query(models.Document)
        .filter(models.Document.collection == collection)
        .order_by(models.Document.id)
        .all()
    )


class SqlCollection:
    """Collection persisted in the ``documents`` table.

    Each call runs in its own session and commits before returning.
    """

    def __init__(self, session_factory: sessionmaker, name: str, key: str):
        self._session_factory = session_factory
        self.name = name
        self.key = key

    def find(self, query: Optional[Mapping[str, Any]] = None) -> List[Document]:
        with self._session_factory() as db:
            return [body for _, body in self._matching(db, query)]

    def find_one(self, query: Mapping[str, Any]) -> Optional[Document]:
        with self._session_factory() as db:
            for _, body in self._matching(db, query):
                return body
        return None

    def insert_one(self, doc: Mapping[str, Any]) -> InsertOneResult:
        if self.key not in doc:
            raise StoreError(f"Document is missing key field {self.key!r}")
        key = doc[self.key]
        with self._session_factory() as db:
            if get_document(db, self.name, key) is not None:
                raise DuplicateKeyError(self.key, key)
            db.add(
                models.Document(
                    collection=self.name, key=_encode_key(key), body=json.dumps(dict(doc))
                )
            )
            try:
                db.commit()
            except IntegrityError as exc:
                db.rollback()
                raise DuplicateKeyError(self.key, key) from exc
        return InsertOneResult(inserted_id=key)

    def update_one(self, query: Mapping[str, Any], changes: Mapping[str, Any]) -> UpdateResult:
        if self.key in changes:
            raise StoreError(f"Key field {self.key!r} cannot be updated")
        with self._session_factory() as db:
            for row, body in self._matching(db, query):
                modified = any(body.get(k) != v for k, v in changes.items())
                body.update(changes)
                row.body = json.dumps(body)
                db.commit()
                return UpdateResult(matched_count=1, modified_count=int(modified))
        return UpdateResult(matched_count=0, modified_count=0)

    def delete_one(self, query: Mapping[str, Any]) -> DeleteResult:
        with self._session_factory() as db:
            for row, _ in self._matching(db, query):
                db.delete(row)
                db.commit()
                return DeleteResult(deleted_count=1)
        return DeleteResult(deleted_count=0)

    def _matching(self, db: Session, query: Optional[Mapping[str, Any]]):
        if query and self.key in query:
            row = get_document(db, self.name, query[self.key])
            rows = [row] if row is not None else []
        else:
            rows = get_documents(db, self.name)
        for row in rows:
            body = json.loads(row.body)
            if matches(body, query):
                yield row, body


def sql_collections(session_factory: sessionmaker) -> Collections:
    return Collections(
        recipes=SqlCollection(session_factory, "recipes", key="id"),
        books=SqlCollection(session_factory, "books", key="id"),
        users=SqlCollection(session_factory, "users", key="email"),
    )
