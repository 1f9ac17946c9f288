"""Book endpoints mounted under ``/api/books``."""

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Response, status

from . import schemas
from .dependencies import get_books, parse_id
from .errors import Conflict, NotFound
from .store import Collection, DuplicateKeyError
from .validation import require_document

logger = logging.getLogger(__name__)

router = APIRouter()

ID_MESSAGE = "ID must be a number"


@router.get("", response_model=List[schemas.Book])
def list_books(books: Collection = Depends(get_books)):
    return books.find()


@router.get("/{book_id}", response_model=schemas.Book)
def get_book(book_id: str, books: Collection = Depends(get_books)):
    bid = parse_id(book_id, ID_MESSAGE)
    book = books.find_one({"id": bid})
    if book is None:
        raise NotFound("Book not found")
    return book


@router.post("", status_code=status.HTTP_201_CREATED, response_model=schemas.CreatedId)
def create_book(payload: Any = Body(None), books: Collection = Depends(get_books)):
    book = require_document(payload, schemas.Book)
    try:
        result = books.insert_one(book)
    except DuplicateKeyError:
        raise Conflict()
    logger.info("Created book %s", result.inserted_id)
    return {"id": result.inserted_id}


@router.put("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_book(book_id: str, payload: Any = Body(None), books: Collection = Depends(get_books)):
    bid = parse_id(book_id, ID_MESSAGE)
    changes = require_document(payload, schemas.BookChanges)
    result = books.update_one({"id": bid}, changes)
    if result.matched_count == 0:
        raise NotFound("Book not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(book_id: str, books: Collection = Depends(get_books)):
    bid = parse_id(book_id, ID_MESSAGE)
    result = books.delete_one({"id": bid})
    if result.deleted_count == 0:
        raise NotFound("Book not found")
    logger.info("Deleted book %s", bid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
