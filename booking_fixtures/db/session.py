from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from booking_fixtures.core.config import Settings, settings


def create_engine_with_settings(config: Settings) -> Engine:
    """Build the engine for DATABASE_URL, applying pool settings per backend."""
    backend = make_url(config.DATABASE_URL).get_backend_name()

    if backend == "sqlite":
        # One shared connection so in-memory databases survive across sessions
        return create_engine(
            config.DATABASE_URL,
            echo=config.SQL_ECHO,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    connect_args = {}
    if backend.startswith("postgresql"):
        connect_args["options"] = "-c timezone=utc"

    return create_engine(
        config.DATABASE_URL,
        echo=config.SQL_ECHO,
        pool_pre_ping=True,
        pool_size=config.DB_POOL_SIZE,
        max_overflow=config.DB_MAX_OVERFLOW,
        pool_timeout=config.DB_POOL_TIMEOUT,
        pool_recycle=config.DB_POOL_RECYCLE,
        connect_args=connect_args,
    )


engine = create_engine_with_settings(settings)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
