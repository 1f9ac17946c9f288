"""
Application factory.

``create_app`` wires settings, logging, the collections and the routers
into a FastAPI app.  Collections can be passed in; otherwise they are built
from ``settings.store_backend`` and, when ``settings.seed_data`` is set,
filled from the JSON files in ``settings.data_dir``.

    uvicorn shelf_api.app:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__, books, recipes, users
from .config import Settings, settings as default_settings
from .errors import register_error_handlers
from .logging_config import setup_logging
from .seed import seed_collections
from .store import Collections, memory_collections

logger = logging.getLogger(__name__)


def build_collections(settings: Settings) -> Collections:
    if settings.store_backend == "memory":
        return memory_collections()
    if settings.store_backend == "sql":
        from sqlalchemy.orm import sessionmaker

        from .crud import sql_collections
        from .db import init_db, make_engine

        engine = make_engine(settings.database_url)
        init_db(bind=engine)
        return sql_collections(sessionmaker(autoflush=False, bind=engine))
    raise ValueError(f"Unknown store backend: {settings.store_backend!r}")


def create_app(
    settings: Optional[Settings] = None, collections: Optional[Collections] = None
) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings.log_level)

    if collections is None:
        collections = build_collections(settings)
        if settings.seed_data:
            seed_collections(collections, settings.data_dir, rounds=settings.bcrypt_rounds)

    app = FastAPI(title="Shelf API", version=__version__)
    app.state.settings = settings
    app.state.collections = collections

    # Allow CORS for API clients (adjust origins for production)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app, settings)

    app.include_router(recipes.router, prefix="/api/recipes", tags=["recipes"])
    app.include_router(books.router, prefix="/api/books", tags=["books"])
    app.include_router(users.router, prefix="/api", tags=["users"])

    logger.info(
        "Shelf API ready (store=%s, environment=%s)",
        settings.store_backend,
        settings.environment,
    )
    return app


app = create_app()
