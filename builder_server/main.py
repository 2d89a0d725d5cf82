# builder_server/main.py

import logging
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from builder_server import __version__
from builder_server.api import auth, builds
from builder_server.core.config import Settings, get_settings
from builder_server.core.errors import register_error_handlers
from builder_server.core.logging_config import setup_logging
from builder_server.core.security import build_password_context
from builder_server.database import create_db_engine, create_session_factory, init_db


logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    engine = create_db_engine(settings.database_url)
    init_db(engine)

    app = FastAPI(title="Brick Builder API", version=__version__)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.pwd_context = build_password_context(settings.bcrypt_rounds)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app, expose_internal=settings.expose_internal_errors)

    app.include_router(auth.router)
    app.include_router(builds.router)
    return app


def run():
    settings = get_settings()
    app = create_app(settings)
    logger.info("Brick Builder server running at http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
