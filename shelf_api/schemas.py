from typing import List

from pydantic import BaseModel, ConfigDict, Field


class RecipeChanges(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    name: str = Field(..., json_schema_extra={"example": "Pancakes"})
    ingredients: List[str] = Field(
        ..., json_schema_extra={"example": ["flour", "milk", "eggs"]}
    )


class Recipe(RecipeChanges):
    id: int = Field(..., json_schema_extra={"example": 1})


class BookChanges(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    title: str = Field(..., json_schema_extra={"example": "The Fellowship of the Ring"})
    author: str = Field(..., json_schema_extra={"example": "J.R.R. Tolkien"})


class Book(BookChanges):
    id: int = Field(..., json_schema_extra={"example": 1})


class CreatedId(BaseModel):
    id: int


class Message(BaseModel):
    message: str


class RegisteredUser(BaseModel):
    email: str


class Registration(Message):
    user: RegisteredUser
