"""Retry eligibility rules for error records. Pure functions, no infrastructure."""

from typing import Dict

from digit_services.domain import error_codes
from digit_services.domain.models.error_record import ErrorRecord, ErrorStatus


def validate_retry_attempt(record: ErrorRecord, max_retries_allowed: int) -> Dict[str, str]:
    """
    Return {code: message} for every rule the record violates. An empty mapping means
    the record may be retried.
    """
    violations: Dict[str, str] = {}
    if record.status == ErrorStatus.SUCCESS:
        violations[error_codes.ERROR_ALREADY_RESOLVED_CODE] = error_codes.ERROR_ALREADY_RESOLVED_MSG
    if record.status == ErrorStatus.FAILED:
        violations[error_codes.ERROR_RETRIES_EXHAUSTED_CODE] = error_codes.ERROR_RETRIES_EXHAUSTED_MSG
    if record.retry_count >= max_retries_allowed:
        violations[error_codes.MAX_RETRY_COUNT_REACHED_CODE] = error_codes.MAX_RETRY_COUNT_REACHED_MSG
    return violations


def status_after_failed_replay(retry_count: int, max_retries_allowed: int) -> ErrorStatus:
    """FAILED only when the incremented count lands exactly on the limit, else PENDING."""
    if retry_count == max_retries_allowed:
        return ErrorStatus.FAILED
    return ErrorStatus.PENDING
