"""Request/response envelopes shared by every API on the platform."""

import uuid
from enum import Enum
from typing import Optional

from pydantic import Field

from digit_services.domain.models.base import CamelModel, current_time_millis


class UserInfo(CamelModel):
    uuid: Optional[str] = None
    id: Optional[int] = None
    user_name: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    tenant_id: Optional[str] = None


class RequestInfo(CamelModel):
    api_id: Optional[str] = None
    ver: Optional[str] = None
    ts: Optional[int] = None
    action: Optional[str] = None
    did: Optional[str] = None
    key: Optional[str] = None
    msg_id: Optional[str] = None
    auth_token: Optional[str] = None
    user_info: Optional[UserInfo] = None

    @property
    def actor_uuid(self) -> Optional[str]:
        return self.user_info.uuid if self.user_info else None


class ResponseStatus(str, Enum):
    SUCCESSFUL = "successful"
    FAILED = "failed"


class ResponseInfo(CamelModel):
    api_id: Optional[str] = None
    ver: Optional[str] = None
    ts: Optional[int] = None
    res_msg_id: Optional[str] = None
    msg_id: Optional[str] = None
    status: ResponseStatus = ResponseStatus.SUCCESSFUL

    @classmethod
    def from_request_info(
        cls, request_info: Optional[RequestInfo], success: bool = True
    ) -> "ResponseInfo":
        """Echo api/version/msg ids from the incoming RequestInfo, stamping a fresh response id."""
        request_info = request_info or RequestInfo()
        return cls(
            api_id=request_info.api_id,
            ver=request_info.ver,
            ts=current_time_millis(),
            res_msg_id=str(uuid.uuid4()),
            msg_id=request_info.msg_id,
            status=ResponseStatus.SUCCESSFUL if success else ResponseStatus.FAILED,
        )


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class Pagination(CamelModel):
    limit: Optional[int] = Field(None, ge=1)
    offset: Optional[int] = Field(None, ge=0)
    total_count: Optional[int] = None
    sort_by: Optional[str] = None
    order: Optional[SortOrder] = None


class ErrorDetailBody(CamelModel):
    code: str
    message: str


class ErrorResponse(CamelModel):
    """Body returned for validation and application failures."""

    response_info: Optional[ResponseInfo] = Field(None, alias="ResponseInfo")
    errors: list[ErrorDetailBody] = Field(default_factory=list, alias="Errors")
