"""Domain model for stored error records and their retry lifecycle."""

from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional

from pydantic import ConfigDict, Field

from digit_services.domain.exceptions import InvalidStatusTransitionError
from digit_services.domain.models.base import AuditDetails, CamelModel


class ErrorStatus(str, Enum):
    """Retry status of an error record. SUCCESS and FAILED are terminal."""

    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


_STATUS_TRANSITIONS: Dict[ErrorStatus, FrozenSet[ErrorStatus]] = {
    ErrorStatus.PENDING: frozenset({ErrorStatus.PENDING, ErrorStatus.SUCCESS, ErrorStatus.FAILED}),
    ErrorStatus.SUCCESS: frozenset(),
    ErrorStatus.FAILED: frozenset(),
}


class ApiDetails(CamelModel):
    """The original failed call: where it went and what it carried."""

    id: Optional[str] = None
    url: Optional[str] = None
    content_type: Optional[str] = None
    method: Optional[str] = None
    request_body: Optional[str] = None
    request_headers: Optional[Any] = None


class ErrorEntity(CamelModel):
    exception: Optional[str] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    additional_details: Optional[Any] = None


class ErrorRecord(CamelModel):
    """
    A stored error entry describing one failed external call and its retry history.
    Unknown fields from the index are kept so a republished record loses nothing.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    tenant_id: Optional[str] = None
    api_details: Optional[ApiDetails] = None
    errors: Optional[List[ErrorEntity]] = None
    retry_count: int = Field(0, ge=0)
    status: ErrorStatus = ErrorStatus.PENDING
    audit_details: Optional[AuditDetails] = None

    @property
    def is_terminal(self) -> bool:
        return not _STATUS_TRANSITIONS[self.status]

    def increment_retry_count(self) -> None:
        self.retry_count += 1

    def transition_to(self, new_status: ErrorStatus) -> None:
        """Move to new_status. Raises InvalidStatusTransitionError when leaving a terminal status."""
        allowed = _STATUS_TRANSITIONS.get(self.status, frozenset())
        if new_status not in allowed:
            raise InvalidStatusTransitionError(
                f"Invalid status transition from {self.status.value} to {new_status.value}"
            )
        self.status = new_status
