# storefront/data/database.py
from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker

from storefront.utils.settings import DATABASE_URL, DB_POOL_SIZE, DB_MAX_OVERFLOW


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        # sqlite nie ma puli z limitem, wiele watkow na jednym pliku
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": DB_POOL_SIZE,
        "max_overflow": DB_MAX_OVERFLOW,
        "pool_pre_ping": True,
    }


engine = create_engine(DATABASE_URL, **_engine_kwargs(DATABASE_URL))

if engine.dialect.name == "sqlite":
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

Base = declarative_base()


def get_db():
    """Sesja na request, zwracana do puli po zakonczeniu obslugi."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
