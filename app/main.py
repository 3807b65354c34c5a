import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text

from app.core.config import Settings, get_settings
from app.core.database import build_engine, build_session_factory, init_db
from app.core.errors import register_error_handlers
from app.core.logging import setup_logging
from app.api.routes.auth import router as auth_router
from app.api.routes.users import router as users_router
from app.api.routes.properties import router as properties_router
from app.api.routes.tenants import router as tenants_router
from app.api.routes.payments import router as payments_router
from app.api.routes.maintenance import router as maintenance_router
from app.api.routes.contracts import router as contracts_router
from app.api.routes.reports import router as reports_router
from app.api.routes.upload import router as upload_router
from app.api.routes.operation_logs import router as operation_logs_router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API around its own store handle.

    Tests pass their own ``Settings`` (e.g. an in-memory database URL); the
    module-level ``app`` below uses the environment.
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    engine = build_engine(settings.DATABASE_URL)
    session_factory = build_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
        init_db(engine, session_factory, settings)
        logger.info("Rental API ready (env=%s)", settings.ENV)
        yield
        engine.dispose()

    # 1) Create the app FIRST
    app = FastAPI(title="Rental Management API", lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = session_factory

    # 2) Add CORS Middleware BEFORE routes
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # 3) Include routers AFTER app is created
    api = APIRouter(prefix="/api")
    api.include_router(auth_router)
    api.include_router(users_router)
    api.include_router(properties_router)
    api.include_router(tenants_router)
    api.include_router(payments_router)
    api.include_router(maintenance_router)
    api.include_router(contracts_router)
    api.include_router(reports_router)
    api.include_router(upload_router)
    api.include_router(operation_logs_router)
    app.include_router(api)

    app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_DIR, check_dir=False), name="uploads")

    # 4) Health check endpoints
    @app.get("/health")
    def health():
        return {"ok": True, "service": "backend"}

    @app.get("/db-health")
    def db_health(request: Request):
        db = request.app.state.session_factory()
        try:
            db.execute(text("select 1"))
            return {"ok": True, "db": "connected"}
        finally:
            db.close()

    return app


app = create_app()
