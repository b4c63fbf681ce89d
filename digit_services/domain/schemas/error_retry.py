"""Schemas for the error retry API."""

from typing import Any, Dict, List, Optional

from pydantic import Field

from digit_services.domain.models.base import CamelModel
from digit_services.domain.models.error_record import ErrorRecord
from digit_services.domain.schemas.common import RequestInfo, ResponseInfo


class ErrorRetryRequest(CamelModel):
    request_info: Optional[RequestInfo] = Field(None, alias="RequestInfo")
    id: str = Field(..., min_length=1)


class ErrorRetryResponse(CamelModel):
    response_info: Optional[ResponseInfo] = Field(None, alias="ResponseInfo")
    id: str
    message: str
    response_map: Dict[str, Any] = Field(default_factory=dict)


class ErrorDetailSearchCriteria(CamelModel):
    id: Optional[List[str]] = None
    error_detail_uuid: Optional[List[str]] = None
    tenant_id: Optional[str] = None
    offset: Optional[int] = Field(None, ge=0)
    limit: Optional[int] = Field(None, ge=1)

    @property
    def is_empty(self) -> bool:
        return not self.id and not self.error_detail_uuid


class ErrorDetailSearchRequest(CamelModel):
    request_info: Optional[RequestInfo] = Field(None, alias="RequestInfo")
    error_detail_search_criteria: ErrorDetailSearchCriteria = Field(
        default_factory=ErrorDetailSearchCriteria, alias="ErrorDetailSearchCriteria"
    )


class ErrorDetailSearchResponse(CamelModel):
    response_info: Optional[ResponseInfo] = Field(None, alias="ResponseInfo")
    error_details: List[ErrorRecord] = Field(default_factory=list, alias="ErrorDetails")


class IndexSearchResult(CamelModel):
    """Typed view over the index response: records live under the top-level data array."""

    data: List[ErrorRecord] = Field(default_factory=list)
