# backend/core/status_updater.py

"""
Status updates shared by reservations and orders.

By default a status change is a single UPDATE that overwrites whatever is
stored, matching how the dashboard has always behaved: any string is
accepted and any transition is allowed. Setting ENFORCE_STATUS_TRANSITIONS
switches to a closed status set with an explicit transitions table.
"""

import logging
from typing import Any, Dict, FrozenSet, Mapping, Optional, Type

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .exceptions import (
    InvalidInputError,
    NotFoundError,
    PersistenceError,
    StatusTransitionError,
)

logger = logging.getLogger(__name__)

# Width of the status columns the updater writes to
STATUS_MAX_LENGTH = 50


class StatusUpdater:
    """Overwrites the `status` column of one model by primary key"""

    def __init__(
        self,
        db: Session,
        model: Type[Any],
        label: str,
        transitions: Mapping[str, FrozenSet[str]],
        enforce_transitions: bool = False,
    ):
        self.db = db
        self.model = model
        self.label = label
        self.transitions = transitions
        self.enforce_transitions = enforce_transitions

    def update(
        self,
        record_id: int,
        new_status: str,
        extra_values: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Set the status of record `record_id`.

        Raises:
            NotFoundError: no record with that id, nothing written
            InvalidInputError: empty or over-long status, or unknown status in strict mode
            StatusTransitionError: illegal transition in strict mode
            PersistenceError: the UPDATE failed
        """
        if new_status is None or not str(new_status).strip():
            raise InvalidInputError("Status is required")
        if len(str(new_status)) > STATUS_MAX_LENGTH:
            raise InvalidInputError(f"Status must be at most {STATUS_MAX_LENGTH} characters")

        if self.enforce_transitions:
            self._check_transition(record_id, new_status)

        values = {"status": new_status}
        if extra_values:
            values.update({k: v for k, v in extra_values.items() if v is not None})

        try:
            updated = (
                self.db.query(self.model)
                .filter(self.model.id == record_id)
                .update(values, synchronize_session=False)
            )
            if not updated:
                self.db.rollback()
                raise NotFoundError(f"{self.label} not found", error_code=f"{self.label.upper()}_NOT_FOUND")
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Failed to update {self.label.lower()} {record_id} status")
            raise PersistenceError()

        logger.info(f"{self.label} {record_id} status set to {new_status}")

    def _check_transition(self, record_id: int, new_status: str) -> None:
        if new_status not in self.transitions:
            allowed = ", ".join(self.transitions)
            raise InvalidInputError(f"Unknown status '{new_status}'. Expected one of: {allowed}")

        try:
            record = self.db.get(self.model, record_id)
        except SQLAlchemyError:
            logger.exception(f"Failed to load {self.label.lower()} {record_id}")
            raise PersistenceError()

        if record is None:
            raise NotFoundError(f"{self.label} not found", error_code=f"{self.label.upper()}_NOT_FOUND")

        current = record.status
        # Re-applying the current status is always allowed
        if current == new_status:
            return
        if new_status not in self.transitions.get(current, frozenset()):
            raise StatusTransitionError(current, new_status)
