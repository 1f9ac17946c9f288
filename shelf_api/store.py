"""
Collection interface and the in-memory store.

A collection holds plain ``dict`` documents identified by one key field
(``id`` for recipes and books, ``email`` for users).  The interface mirrors
a small subset of a document database: ``find``, ``find_one``,
``insert_one``, ``update_one`` and ``delete_one``.  Update and delete report
how many documents they touched; a zero count is how a caller learns that
nothing matched.
"""

import copy
import threading
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Protocol

Document = Dict[str, Any]


class StoreError(Exception):
    pass


class DuplicateKeyError(StoreError):
    def __init__(self, key: str, value: Any):
        self.key = key
        self.value = value
        super().__init__(f"Duplicate {key}: {value!r}")


@dataclass(frozen=True)
class InsertOneResult:
    inserted_id: Any


@dataclass(frozen=True)
class UpdateResult:
    matched_count: int
    modified_count: int


@dataclass(frozen=True)
class DeleteResult:
    deleted_count: int


class Collection(Protocol):
    key: str

    def find(self, query: Optional[Mapping[str, Any]] = None) -> List[Document]: ...

    def find_one(self, query: Mapping[str, Any]) -> Optional[Document]: ...

    def insert_one(self, doc: Mapping[str, Any]) -> InsertOneResult: ...

    def update_one(
        self, query: Mapping[str, Any], changes: Mapping[str, Any]
    ) -> UpdateResult: ...

    def delete_one(self, query: Mapping[str, Any]) -> DeleteResult: ...


def matches(doc: Mapping[str, Any], query: Optional[Mapping[str, Any]]) -> bool:
    """Return True if every field in ``query`` equals the same field in ``doc``."""
    if not query:
        return True
    return all(k in doc and doc[k] == v for k, v in query.items())


class MemoryCollection:
    """Array-backed collection kept in process memory.

    Each call holds a lock for its whole duration, so no caller ever sees a
    half-applied write.  Documents are deep-copied on the way in and out.
    """

    def __init__(self, name: str, key: str, documents: Iterable[Mapping[str, Any]] = ()):
        self.name = name
        self.key = key
        self._docs: List[Document] = []
        self._lock = threading.Lock()
        for doc in documents:
            self.insert_one(doc)

    def find(self, query: Optional[Mapping[str, Any]] = None) -> List[Document]:
        with self._lock:
            return [copy.deepcopy(d) for d in self._docs if matches(d, query)]

    def find_one(self, query: Mapping[str, Any]) -> Optional[Document]:
        with self._lock:
            doc = self._first(query)
            return copy.deepcopy(doc) if doc is not None else None

    def insert_one(self, doc: Mapping[str, Any]) -> InsertOneResult:
        if self.key not in doc:
            raise StoreError(f"Document is missing key field {self.key!r}")
        with self._lock:
            if self._first({self.key: doc[self.key]}) is not None:
                raise DuplicateKeyError(self.key, doc[self.key])
            self._docs.append(copy.deepcopy(dict(doc)))
        return InsertOneResult(inserted_id=doc[self.key])

    def update_one(self, query: Mapping[str, Any], changes: Mapping[str, Any]) -> UpdateResult:
        if self.key in changes:
            raise StoreError(f"Key field {self.key!r} cannot be updated")
        with self._lock:
            doc = self._first(query)
            if doc is None:
                return UpdateResult(matched_count=0, modified_count=0)
            modified = any(doc.get(k) != v for k, v in changes.items())
            doc.update(copy.deepcopy(dict(changes)))
            return UpdateResult(matched_count=1, modified_count=int(modified))

    def delete_one(self, query: Mapping[str, Any]) -> DeleteResult:
        with self._lock:
            for i, doc in enumerate(self._docs):
                if matches(doc, query):
                    del self._docs[i]
                    return DeleteResult(deleted_count=1)
            return DeleteResult(deleted_count=0)

    def _first(self, query: Optional[Mapping[str, Any]]) -> Optional[Document]:
        return next((d for d in self._docs if matches(d, query)), None)


@dataclass
class Collections:
    """The collections one app instance works against."""

    recipes: Collection
    books: Collection
    users: Collection


def memory_collections() -> Collections:
    return Collections(
        recipes=MemoryCollection("recipes", key="id"),
        books=MemoryCollection("books", key="id"),
        users=MemoryCollection("users", key="email"),
    )
