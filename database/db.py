from sqlalchemy import create_engine               # engine factory
from sqlalchemy.orm import declarative_base, sessionmaker

from config.settings import settings

# SQLite sessions are handed across FastAPI's threadpool
_connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, echo=settings.DB_ECHO, connect_args=_connect_args)

# session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# declarative base for every model
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    # register models on Base.metadata before create_all
    from models import subjects, users  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
