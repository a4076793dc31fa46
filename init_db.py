"""Create the database tables and optionally load dog facts.

    python init_db.py
    python init_db.py --facts facts.txt   # one fact per line
"""
import argparse
import logging
import sys
from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

from pawpost.core.config import ConfigError, configure_logging, load_settings
from pawpost.core.database import build_engine, build_session_factory, init_db
from pawpost.models.dogFact import DogFact

logger = logging.getLogger("pawpost.init_db")


def load_facts(session_local, path: Path) -> int:
    facts = [line.strip() for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]
    db = session_local()
    try:
        db.add_all([DogFact(fact=fact) for fact in facts])
        db.commit()
    finally:
        db.close()
    return len(facts)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Initialize the PawPost database")
    parser.add_argument("--facts", type=Path, help="text file with one dog fact per line")
    args = parser.parse_args(argv)

    configure_logging()
    try:
        settings = load_settings()
    except ConfigError as exc:
        logger.error("Error: %s", exc)
        return 1

    engine = build_engine(settings.database_url, settings.pg_sslmode)
    try:
        init_db(engine)
        if args.facts:
            count = load_facts(build_session_factory(engine), args.facts)
            logger.info("Loaded %d dog facts from %s", count, args.facts)
    except SQLAlchemyError:
        logger.exception("Error while initializing the database")
        return 1
    finally:
        engine.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
