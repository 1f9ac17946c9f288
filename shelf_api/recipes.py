"""Recipe endpoints mounted under ``/api/recipes``."""

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Response, status

from . import schemas
from .dependencies import get_recipes, parse_id
from .errors import Conflict, NotFound
from .store import Collection, DuplicateKeyError
from .validation import require_document

logger = logging.getLogger(__name__)

router = APIRouter()

ID_MESSAGE = "Input must be a number"


@router.get("", response_model=List[schemas.Recipe])
def list_recipes(recipes: Collection = Depends(get_recipes)):
    return recipes.find()


@router.get("/{recipe_id}", response_model=schemas.Recipe)
def get_recipe(recipe_id: str, recipes: Collection = Depends(get_recipes)):
    rid = parse_id(recipe_id, ID_MESSAGE)
    recipe = recipes.find_one({"id": rid})
    if recipe is None:
        raise NotFound("Recipe not found")
    return recipe


@router.post("", status_code=status.HTTP_201_CREATED, response_model=schemas.CreatedId)
def create_recipe(payload: Any = Body(None), recipes: Collection = Depends(get_recipes)):
    recipe = require_document(payload, schemas.Recipe)
    try:
        result = recipes.insert_one(recipe)
    except DuplicateKeyError:
        raise Conflict()
    logger.info("Created recipe %s", result.inserted_id)
    return {"id": result.inserted_id}


@router.put("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_recipe(
    recipe_id: str, payload: Any = Body(None), recipes: Collection = Depends(get_recipes)
):
    rid = parse_id(recipe_id, ID_MESSAGE)
    changes = require_document(payload, schemas.RecipeChanges)
    result = recipes.update_one({"id": rid}, changes)
    if result.matched_count == 0:
        raise NotFound("Recipe not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_recipe(recipe_id: str, recipes: Collection = Depends(get_recipes)):
    rid = parse_id(recipe_id, ID_MESSAGE)
    result = recipes.delete_one({"id": rid})
    if result.deleted_count == 0:
        raise NotFound("Recipe not found")
    logger.info("Deleted recipe %s", rid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
