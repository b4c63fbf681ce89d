"""Error retry application service. Looks up a failed call, replays it, records the outcome."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from pydantic import ValidationError

from digit_services.application.exceptions import (
    ErrorRecordNotFoundError,
    IndexStoreError,
    MessagingFailureError,
    ReplayError,
)
from digit_services.application.gateways import (
    IndexStore,
    QueuePublisher,
    ReplayClient,
    Replayed,
    ReplayFailed,
    ReplayResult,
)
from digit_services.domain import error_codes
from digit_services.domain.models.error_record import ErrorRecord
from digit_services.domain.schemas.common import ResponseInfo
from digit_services.domain.schemas.error_retry import (
    ErrorDetailSearchRequest,
    ErrorRetryRequest,
    ErrorRetryResponse,
    IndexSearchResult,
)
from digit_services.domain.validators.retry_validator import (
    status_after_failed_replay,
    validate_retry_attempt,
)
from digit_services.infrastructure.search.query_builder import ErrorIndexQueryBuilder


@dataclass(frozen=True)
class RetryConfig:
    """Retry policy fixed for the lifetime of the process."""

    max_retries_allowed: int
    error_topic: str


@dataclass(frozen=True)
class RetryOutcome:
    """accepted=False means the record was not eligible and nothing was changed."""

    accepted: bool
    response: ErrorRetryResponse


def _parse_index_response(response: Any) -> List[ErrorRecord]:
    try:
        return IndexSearchResult.model_validate(response).data
    except ValidationError as e:
        raise IndexStoreError(f"Malformed error record in index response: {e}") from e


class ErrorRetryService:
    """
    Orchestrates one retry attempt: fetch -> eligibility -> increment -> replay -> publish.
    Replay failures are recorded on the record, not raised. Concurrent attempts on the same id
    are not serialized; the last publish wins.
    """

    def __init__(
        self,
        index_store: IndexStore,
        query_builder: ErrorIndexQueryBuilder,
        replay_client: ReplayClient,
        publisher: QueuePublisher,
        config: RetryConfig,
        logger: logging.Logger,
    ) -> None:
        self._index_store = index_store
        self._query_builder = query_builder
        self._replay_client = replay_client
        self._publisher = publisher
        self._config = config
        self._logger = logger

    async def attempt_retry(self, request: ErrorRetryRequest) -> RetryOutcome:
        record = await self._fetch_record(request.id)

        violations = validate_retry_attempt(record, self._config.max_retries_allowed)
        if violations:
            self._logger.warning(
                "error_retry_rejected",
                extra={"error_id": record.id, "violations": sorted(violations)},
            )
            return RetryOutcome(
                accepted=False,
                response=self._prepare_response(
                    request, error_codes.ERROR_RETRY_ATTEMPT_FAILURE_MSG, dict(violations), success=False
                ),
            )

        # Incremented before the replay, whatever its outcome.
        record.increment_retry_count()

        result = await self._replay(record)
        record.transition_to(result.status)
        log_extra: Dict[str, Any] = {
            "error_id": record.id,
            "retry_count": record.retry_count,
            "status": record.status.value,
            "replayed": isinstance(result, Replayed),
        }
        if isinstance(result, ReplayFailed):
            log_extra["reason"] = result.reason
        self._logger.info("error_retry_processed", extra=log_extra)

        await self._publish(record)

        response_map: Dict[str, Any] = {
            error_codes.ERROR_RETRY_ATTEMPT_SUCCESSFUL_CODE: error_codes.ERROR_RETRY_ATTEMPT_SUCCESSFUL_MSG
        }
        return RetryOutcome(
            accepted=True,
            response=self._prepare_response(
                request, error_codes.ERROR_RETRY_ATTEMPT_SUCCESSFUL_MSG, response_map
            ),
        )

    async def search(self, request: ErrorDetailSearchRequest) -> List[ErrorRecord]:
        """Search error records. Criteria without id or errorDetailUuid yields [] without a query."""
        criteria = request.error_detail_search_criteria
        if criteria.is_empty:
            return []

        query = self._query_builder.prepare_request_for_search(criteria)
        response = await self._index_store.fetch(self._query_builder.search_uri, query)
        return _parse_index_response(response)

    async def _fetch_record(self, error_id: str) -> ErrorRecord:
        query = self._query_builder.prepare_request_for_id(error_id)
        response = await self._index_store.fetch(self._query_builder.search_uri, query)
        records = _parse_index_response(response)
        if not records:
            raise ErrorRecordNotFoundError(f"No error record found for id {error_id}")
        if len(records) > 1:
            self._logger.warning(
                "error_record_multiple_matches",
                extra={"error_id": error_id, "matches": len(records)},
            )
        return records[0]

    async def _replay(self, record: ErrorRecord) -> ReplayResult:
        try:
            await self._replay_client.replay(record.api_details)
        except ReplayError as e:
            return ReplayFailed(
                status=status_after_failed_replay(
                    record.retry_count, self._config.max_retries_allowed
                ),
                reason=e.message,
            )
        return Replayed()

    async def _publish(self, record: ErrorRecord) -> None:
        try:
            await self._publisher.push(self._config.error_topic, [record.to_wire()])
        except Exception as e:
            self._logger.error(
                "error_record_publish_failed",
                extra={"error_id": record.id, "error": str(e)},
            )
            raise MessagingFailureError(f"Publish failed: {e}") from e

    def _prepare_response(
        self,
        request: ErrorRetryRequest,
        message: str,
        response_map: Dict[str, Any],
        success: bool = True,
    ) -> ErrorRetryResponse:
        return ErrorRetryResponse(
            response_info=ResponseInfo.from_request_info(request.request_info, success=success),
            id=request.id,
            message=message,
            response_map=response_map,
        )
