"""
main.py
-------
Entry point for the user-registration server.

Responsibilities:
    - Open the SQLite connection and create the schema before serving.
    - Build the FastAPI application with the user routes and static form.
    - Run it under uvicorn.
"""

import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from config import DATABASE_PATH, HOST, PORT, PUBLIC_DIR
from db.connection import close_store, init_store
from db.errors import ConstraintError, StoreError
from db.init_db import create_tables
from handlers import user_handler
from repositories.user_repo import UserRepository
from services.user_service import UserService
from utils.logger import get_logger

logger = get_logger(__name__)


def create_app(database_path: str = DATABASE_PATH, public_dir: str = PUBLIC_DIR) -> FastAPI:
    """Build the application. The store is opened on startup and closed on shutdown."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # ── 1. Database setup ─────────────────────────────
        logger.info("Initializing database...")
        store = await init_store(database_path)
        try:
            await create_tables(store)
            app.state.user_service = UserService(UserRepository(store))
            yield
        finally:
            # ── 2. Cleanup on shutdown (or failed startup) ─
            await close_store()

    app = FastAPI(title="User Registration", version="1.0.0", lifespan=lifespan)

    app.include_router(user_handler.router)
    app.add_exception_handler(ConstraintError, user_handler.constraint_error_handler)
    app.add_exception_handler(StoreError, user_handler.store_error_handler)

    # Registered last so API routes take precedence over static files
    if os.path.isdir(public_dir):
        app.mount("/", StaticFiles(directory=public_dir, html=True), name="public")
    else:
        logger.warning(f"Static directory {public_dir} not found; form page disabled.")

    return app


def main() -> None:
    """Run the server."""
    logger.info(f"🚀 Server running at http://localhost:{PORT}")
    # log_config=None keeps uvicorn on the handler set up by utils.logger
    uvicorn.run(create_app(), host=HOST, port=PORT, log_config=None)


if __name__ == "__main__":
    main()
