"""Shared session handling for the service layer"""

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError

from errors import ConcurrencyConflict, Conflict, NotFound

logger = logging.getLogger(__name__)


def utcnow():
    return datetime.now(timezone.utc)


class BaseService:
    """Services receive their session explicitly; nothing is pulled from globals."""

    entity_label = "Record"

    def __init__(self, db):
        self.db = db

    def _commit(self):
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def _save_changes(self, entity_id, exists):
        """Commit an update, translating optimistic-lock clashes.

        ``exists`` is a callable ``(db, id) -> bool`` used to tell a vanished
        row (NotFound) from a genuine concurrent modification.
        """
        try:
            self.db.commit()
        except StaleDataError as exc:
            self.db.rollback()
            if not exists(self.db, entity_id):
                logger.warning(f"{self.entity_label} with ID {entity_id} not found during update")
                raise NotFound(f"{self.entity_label} with ID {entity_id} not found") from exc
            logger.error(f"Concurrency error updating {self.entity_label.lower()} with ID {entity_id}")
            raise ConcurrencyConflict(
                f"{self.entity_label} with ID {entity_id} was modified by another request; please retry"
            ) from exc
        except IntegrityError:
            self.db.rollback()
            raise
        except Exception:
            self.db.rollback()
            logger.error(f"Error saving {self.entity_label.lower()} with ID {entity_id}")
            raise

    def _delete(self, entity, entity_id, exists):
        """Hard delete; rows still referenced elsewhere surface as Conflict."""
        self.db.delete(entity)
        try:
            self._save_changes(entity_id, exists)
        except IntegrityError as exc:
            logger.warning(f"{self.entity_label} with ID {entity_id} is still referenced: {exc.orig}")
            raise Conflict(
                f"{self.entity_label} with ID {entity_id} is referenced by existing bookings and cannot be deleted"
            ) from exc
