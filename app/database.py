# app/database.py

from sqlalchemy import create_engine, event, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from dotenv import load_dotenv
from app.core.config import get_settings

# .env before settings are read
load_dotenv()

settings = get_settings()
DATABASE_URL = settings.database_url

if DATABASE_URL.startswith("sqlite"):
    engine_kwargs = {"connect_args": {"check_same_thread": False}}
    if DATABASE_URL in ("sqlite://", "sqlite:///:memory:"):
        # in-memory SQLite must share one connection across sessions
        engine_kwargs["poolclass"] = StaticPool
    engine = create_engine(DATABASE_URL, echo=settings.debug, **engine_kwargs)

    # pysqlite defers BEGIN, which breaks SAVEPOINT; take over transaction control
    @event.listens_for(engine, "connect")
    def _on_sqlite_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_sqlite_begin(conn):
        conn.exec_driver_sql("BEGIN")

else:
    engine = create_engine(
        DATABASE_URL,
        echo=settings.debug,
        pool_pre_ping=True,  # drop dead connections
        pool_recycle=300  # recycle every 5 minutes
    )

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def insert_or_ignore(db: Session, row) -> bool:
    """Insert a row inside a savepoint; a unique conflict is a no-op.

    Returns True when the row was written.
    """
    try:
        with db.begin_nested():
            db.add(row)
        return True
    except IntegrityError:
        return False


def json_array_elements(column):
    """Table-valued function yielding one text ``value`` per element of a JSON array column"""
    if engine.dialect.name == "postgresql":
        return func.json_array_elements_text(column).table_valued("value").render_derived()
    return func.json_each(column).table_valued("value")
