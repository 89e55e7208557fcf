import logging
from typing import Any, Dict, Type

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, Session, create_engine, delete

from .config import settings
from .exceptions import PersistenceError


logger = logging.getLogger(__name__)


# SQLite needs cross-thread access when sessions are opened from tests or the CLI
if settings.database_url.startswith("sqlite"):
    engine = create_engine(
        settings.database_url,
        echo=settings.debug,
        connect_args={"check_same_thread": False},
    )
else:
    engine = create_engine(settings.database_url, echo=settings.debug)


def init_db() -> None:
    # Register every table on the metadata before creating it
    from . import models  # noqa: F401

    SQLModel.metadata.create_all(engine)


class PersistenceGateway:
    """Per-table delete and insert operations on top of a SQLModel session.

    Every call commits on its own; nothing wraps a sequence of calls in a
    single database transaction. Failures are rolled back for the current
    unit only and re-raised as :class:`PersistenceError`.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def delete_all(self, model: Type[SQLModel]) -> int:
        table = model.__tablename__
        try:
            result = self.session.exec(delete(model))
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceError(f"Could not clear table {table}: {exc}") from exc
        logger.debug("Deleted %s rows from %s", result.rowcount, table)
        return result.rowcount

    def insert(self, model: Type[SQLModel], record: Dict[str, Any]) -> Any:
        """Insert *record* into ``model``'s table and return its primary key."""
        table = model.__tablename__
        try:
            instance = model.model_validate(record)
        except ValidationError as exc:
            raise PersistenceError(f"Invalid record for table {table}: {exc}") from exc
        try:
            self.session.add(instance)
            self.session.commit()
            self.session.refresh(instance)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise PersistenceError(f"Could not insert into {table}: {exc}") from exc
        return instance.id
