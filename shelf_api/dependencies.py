import re

from fastapi import Request

from .config import Settings
from .errors import InvalidInput
from .store import Collection, Collections

# ASCII digits only, \d would also accept other scripts' digits
_INTEGER = re.compile(r"^[+-]?[0-9]+$")


def get_collections(request: Request) -> Collections:
    return request.app.state.collections


def get_recipes(request: Request) -> Collection:
    return get_collections(request).recipes


def get_books(request: Request) -> Collection:
    return get_collections(request).books


def get_users(request: Request) -> Collection:
    return get_collections(request).users


def parse_id(raw: str, message: str) -> int:
    """Coerce a path segment to an int, raising InvalidInput(message) if it is not one."""
    value = raw.strip()
    if not _INTEGER.match(value):
        raise InvalidInput(message)
    try:
        return int(value)
    except ValueError:
        # past the interpreter's int string conversion limit
        raise InvalidInput(message)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
