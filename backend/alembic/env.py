from alembic import context

from app.core.config import settings
from app.db.base import Base
from app.db.session import create_db_engine, resolve_database_url
import app.models  # noqa: F401

target_metadata = Base.metadata


def run_migrations_offline():
    context.configure(url=resolve_database_url(settings.DATABASE_URL, settings.DB_NAME), target_metadata=target_metadata, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    engine = create_db_engine(settings)
    with engine.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
