import json

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.orm import sessionmaker
from app.config import settings

# Base class for all models
Base = declarative_base()


def json_serializer(value) -> str:
    # Keep non-ASCII text readable so searches over the JSON text match it
    return json.dumps(value, ensure_ascii=False)


# Database engine
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    pool_size=10,
    max_overflow=20,
    echo=settings.SQL_ECHO,
    json_serializer=json_serializer,
)

# Session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def get_db():
    """Request-scoped session; closed once the response is sent."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
