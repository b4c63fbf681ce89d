"""Shared base for wire-compatible domain models. JSON uses camelCase, Python uses snake_case."""

import time
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict:
        """Serialize to the JSON shape other platform services expect."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class AuditDetails(CamelModel):
    """Who created/last modified an entity and when (epoch millis)."""

    created_by: Optional[str] = None
    last_modified_by: Optional[str] = None
    created_time: Optional[int] = None
    last_modified_time: Optional[int] = None

    @classmethod
    def snapshot(cls, actor: Optional[str]) -> "AuditDetails":
        """One audit stamp: same actor for both *By fields, one clock read for both *Time fields."""
        now = current_time_millis()
        return cls(
            created_by=actor,
            last_modified_by=actor,
            created_time=now,
            last_modified_time=now,
        )


def current_time_millis() -> int:
    return int(time.time() * 1000)
