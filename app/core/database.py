"""
Store handle construction.

The engine and session factory are built by the application factory and kept
on ``app.state``; nothing here holds a process-wide connection.
"""
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_engine(database_url: str) -> Engine:
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, pool_pre_ping=True)

    kwargs = {"connect_args": {"check_same_thread": False}}
    # In-memory databases live as long as their connection, so share one.
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


def init_db(engine: Engine, session_factory: sessionmaker, settings) -> None:
    """Create the schema if missing and seed the administrator account."""
    # Importing the models registers every table on Base.metadata
    import app.models.property  # noqa: F401
    import app.models.tenant  # noqa: F401
    import app.models.payment  # noqa: F401
    import app.models.maintenance  # noqa: F401
    import app.models.contract  # noqa: F401
    import app.models.operation_log  # noqa: F401
    from app.core.security import hash_password
    from app.models.user import User

    Base.metadata.create_all(bind=engine)
    logger.info("Schema ready on %s", engine.url.render_as_string(hide_password=True))

    db = session_factory()
    try:
        exists = db.query(User).filter(User.username == settings.ADMIN_USERNAME).first()
        if exists is None:
            db.add(
                User(
                    username=settings.ADMIN_USERNAME,
                    password=hash_password(settings.ADMIN_PASSWORD, settings.BCRYPT_ROUNDS),
                    role="admin",
                    status="active",
                )
            )
            db.commit()
            logger.info("Seeded administrator account %r", settings.ADMIN_USERNAME)
    finally:
        db.close()
