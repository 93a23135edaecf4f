"""
Run-scoped fixture context shared between ordered steps
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Optional

from restful_crud.exceptions import MissingFixtureStateError

logger = logging.getLogger(__name__)


@dataclass
class FixtureContext:
    """
    State carried from one step of an ordered run to the next

    The create step is the only writer of `created_object_id`; later steps
    read it through `require_object_id()`, which fails loudly when unset.
    One instance belongs to exactly one run and is reset when the run ends.
    """
    run_id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])
    created_object_id: Optional[str] = None

    def record_created(self, object_id: str) -> None:
        if not object_id:
            raise MissingFixtureStateError("created object id", required_by="record_created")
        self.created_object_id = str(object_id)
        logger.info(f"[run {self.run_id}] Recorded created object id {self.created_object_id}")

    def require_object_id(self, required_by: Optional[str] = None) -> str:
        """Created object id, or MissingFixtureStateError if no create step has populated it"""
        if not self.created_object_id:
            raise MissingFixtureStateError("created object id", required_by=required_by)
        return self.created_object_id

    def invalidate(self) -> None:
        """Mark the created object as gone after a successful delete"""
        if self.created_object_id:
            logger.info(f"[run {self.run_id}] Invalidated object id {self.created_object_id}")
        self.created_object_id = None

    def reset(self) -> None:
        self.created_object_id = None
        self.run_id = uuid.uuid4().hex[:8]
