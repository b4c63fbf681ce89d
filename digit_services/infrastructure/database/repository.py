# digit_services/infrastructure/database/repository.py

from typing import Any, Dict, Optional

from sqlalchemy import Select

from digit_services.domain.models.base import AuditDetails
from digit_services.domain.schemas.common import Pagination, SortOrder


def paginate(
    stmt: Select,
    sortable: Dict[str, Any],
    default_sort: Any,
    pagination: Optional[Pagination],
    default_limit: int,
    max_limit: int,
) -> Select:
    """Apply ordering, offset and a capped limit. Unknown sortBy values fall back to default_sort."""
    pagination = pagination or Pagination()

    column = sortable.get(pagination.sort_by, default_sort) if pagination.sort_by else default_sort
    if pagination.order == SortOrder.ASC:
        stmt = stmt.order_by(column.asc())
    else:
        stmt = stmt.order_by(column.desc())

    limit = min(pagination.limit or default_limit, max_limit)
    return stmt.offset(pagination.offset or 0).limit(limit)


def audit_details_from_row(row) -> AuditDetails:
    return AuditDetails(
        created_by=row.created_by,
        last_modified_by=row.last_modified_by,
        created_time=row.created_time,
        last_modified_time=row.last_modified_time,
    )
