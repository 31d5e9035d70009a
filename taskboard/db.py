import argparse
import asyncio

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from taskboard import models  # noqa: F401
from taskboard.config import settings
from taskboard.models.base import Base
from taskboard.utils.logger import setup_logger

logger = setup_logger("db")

if not settings.database_url:
    raise ValueError("TASKBOARD_DATABASE_URL environment variable not set")

if not settings.database_url.startswith("postgresql+asyncpg://"):
    if settings.database_url.startswith("postgresql://"):
        settings.database_url = settings.database_url.replace(
            "postgresql://", "postgresql+asyncpg://", 1
        )
    else:
        raise ValueError(f"Unsupported TASKBOARD_DATABASE_URL prefix: {settings.database_url}")

app_engine = create_async_engine(
    settings.database_url,
    pool_pre_ping=True,
    pool_size=10,
    max_overflow=20,
    pool_timeout=60,
    pool_recycle=300,
    echo=False,
    connect_args={"timeout": 30},
)

AppAsyncSessionLocal = async_sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=app_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_db():
    """Create the schema and any missing tables."""
    if not Base.metadata.tables:
        logger.warning("Base.metadata.tables is EMPTY! No tables will be created.")
    else:
        logger.debug(f"Tables registered in Base.metadata: {list(Base.metadata.tables)}")

    async with app_engine.begin() as conn:
        await conn.execute(text(f"CREATE SCHEMA IF NOT EXISTS {settings.schema_name}"))
        await conn.run_sync(Base.metadata.create_all)

    logger.info(f"Database schema '{settings.schema_name}' initialized.")


async def close_db():
    """Closes database connections."""
    logger.info("Closing database connections.")
    await app_engine.dispose()
    logger.info("Database connections closed.")


async def list_tables_in_schema(schema_name: str) -> list[str]:
    """Lists all tables in the specified schema."""
    async with app_engine.connect() as conn:
        result = await conn.execute(
            text(
                "SELECT table_name FROM information_schema.tables WHERE table_schema = :schema_name ORDER BY table_name"
            ),
            {"schema_name": schema_name},
        )
        table_names = [row[0] for row in result.fetchall()]

    if table_names:
        logger.info(f"Tables in schema '{schema_name}': {table_names}")
    else:
        logger.info(f"No tables found in schema '{schema_name}' or schema does not exist.")
    return table_names


async def reset_db():
    """Drop the application schema with all its data, then recreate the tables."""
    logger.warning(
        f"Resetting database schema '{settings.schema_name}'. THIS IS A DESTRUCTIVE OPERATION."
    )
    async with app_engine.begin() as conn:
        await conn.execute(text(f"DROP SCHEMA IF EXISTS {settings.schema_name} CASCADE"))
        logger.info(f"Schema '{settings.schema_name}' dropped.")

    await init_db()


async def check_db_connection(engine_to_check=None) -> bool:
    """Performs a simple query to check actual DB connectivity."""
    if engine_to_check is None:
        engine_to_check = app_engine

    try:
        async with engine_to_check.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            if result.scalar_one() != 1:
                raise RuntimeError("Test query returned an unexpected result.")
    except Exception as e:
        logger.error(f"Failed to execute test query: {e}", exc_info=True)
        raise RuntimeError("Database connectivity check failed.") from e

    logger.info("Successfully connected to the database and executed a test query.")
    return True


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(
        description=f"Taskboard database utility (schema: {settings.schema_name})"
    )
    parser.add_argument(
        "action",
        choices=["init", "reset", "list-tables"],
        help=f"'init' to create missing tables in schema '{settings.schema_name}', "
        f"'reset' to drop schema '{settings.schema_name}' and recreate its tables, "
        f"'list-tables' to show the tables in a schema.",
    )
    parser.add_argument(
        "--schema",
        type=str,
        default=settings.schema_name,
        help=f"Schema name for list-tables. Defaults to '{settings.schema_name}'.",
    )
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Skip the confirmation prompt for 'reset'.",
    )
    args = parser.parse_args(argv)

    if args.action == "init":
        asyncio.run(init_db())
    elif args.action == "reset":
        confirm = "yes" if args.yes else input(
            f"WARNING: This will delete all data in schema '{settings.schema_name}'. Are you sure? (yes/no): "
        )
        if confirm.lower() == "yes":
            asyncio.run(reset_db())
        else:
            logger.info("Database reset cancelled by user.")
    elif args.action == "list-tables":
        asyncio.run(list_tables_in_schema(args.schema))
    logger.info("Database utility finished.")


if __name__ == "__main__":
    main()
