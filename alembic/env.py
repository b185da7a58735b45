from logging.config import fileConfig

from sqlalchemy import pool
from alembic import context

from card_ledger.config import settings
from card_ledger.database import Base, build_engine
from card_ledger import models  # noqa: F401  (registers tables on Base.metadata)

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata

# The application's DATABASE_URL wins over alembic.ini
db_url = settings.DATABASE_URL or config.get_main_option("sqlalchemy.url")


def run_migrations_offline():
    context.configure(url=db_url, target_metadata=target_metadata, literal_binds=True, render_as_batch=True)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connectable = build_engine(db_url)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            render_as_batch=True,
        )
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
