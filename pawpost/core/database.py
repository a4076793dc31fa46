# pawpost/core/database.py

import logging

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger("pawpost.database")

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, sslmode: str = None):
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    elif sslmode:
        connect_args["sslmode"] = sslmode

    engine = create_engine(database_url, connect_args=connect_args, pool_pre_ping=True)

    # SQLite ignores foreign keys unless asked per connection
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def build_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine):
    # Models must be imported so their tables are registered on Base.metadata
    from pawpost.models import dogFact, post, user  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready on %s", engine.url.render_as_string(hide_password=True))


# DB session generator
def get_db(request: Request):
    db = request.app.state.session_local()
    try:
        yield db
    finally:
        db.close()
