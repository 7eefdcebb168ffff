# carbon_tracker/db/session.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from carbon_tracker.settings import settings

DATABASE_URL = settings.database_url

# Determine connect args (sqlite requires special handling)
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(
    DATABASE_URL,
    connect_args=connect_args,
    pool_pre_ping=True
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    """Create tables if they don't exist."""
    from .models import Base
    Base.metadata.create_all(bind=bind or engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
