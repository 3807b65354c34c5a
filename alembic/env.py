import logging
from logging.config import fileConfig

from alembic import context

from app.core.config import get_settings
from app.core.database import Base, build_engine
import app.models.user  # noqa: F401
import app.models.property  # noqa: F401
import app.models.tenant  # noqa: F401
import app.models.payment  # noqa: F401
import app.models.maintenance  # noqa: F401
import app.models.contract  # noqa: F401
import app.models.operation_log  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)
logger = logging.getLogger("alembic.env")


def get_engine():
    return build_engine(get_settings().DATABASE_URL)


def get_engine_url():
    # configparser treats % as interpolation
    return get_engine().url.render_as_string(hide_password=False).replace("%", "%%")


config.set_main_option("sqlalchemy.url", get_engine_url())


def get_metadata():
    return Base.metadata


def run_migrations_offline():
    """Emit SQL to the script output using only the URL, without an Engine."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url, target_metadata=get_metadata(), literal_binds=True, render_as_batch=True
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    """Run against a live connection."""

    # Skip writing an empty revision when autogenerate finds no schema change
    def process_revision_directives(context, revision, directives):
        if getattr(config.cmd_opts, "autogenerate", False):
            script = directives[0]
            if script.upgrade_ops.is_empty():
                directives[:] = []
                logger.info("No changes in schema detected.")

    connectable = get_engine()

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=get_metadata(),
            process_revision_directives=process_revision_directives,
            render_as_batch=True,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
