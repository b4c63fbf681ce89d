"""Protocols for the external collaborators of the error retry workflow."""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Union

from digit_services.domain.models.error_record import ApiDetails, ErrorStatus


class IndexStore(Protocol):
    """Search index reached over HTTP. Responses look like {"data": [<record>, ...]}."""

    async def fetch(self, uri: str, query_body: Dict[str, Any]) -> Dict[str, Any]:
        """POST query_body to uri and return the decoded JSON document."""
        ...


class QueuePublisher(Protocol):
    """Outbound publish/subscribe channel. Fire-and-forget."""

    async def push(self, topic: str, records: List[Dict[str, Any]]) -> None:
        ...


class ReplayClient(Protocol):
    """Re-issues a previously failed request against its original target."""

    async def replay(self, api_details: Optional[ApiDetails]) -> None:
        """Return on a 2xx answer; raise ReplayError on any other outcome."""
        ...


@dataclass(frozen=True)
class Replayed:
    """The original request went through; the record resolves to status."""

    status: ErrorStatus = ErrorStatus.SUCCESS


@dataclass(frozen=True)
class ReplayFailed:
    """The replay failed; status is what the retry count allows next."""

    status: ErrorStatus
    reason: str


ReplayResult = Union[Replayed, ReplayFailed]
