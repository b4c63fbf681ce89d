"""DB-backed service reads (eg_service + eg_service_attribute_value)."""

from collections import defaultdict
from typing import Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from digit_services.config.settings import settings
from digit_services.domain.models.service import AttributeValue, Service
from digit_services.domain.schemas.service import ServiceSearchRequest
from digit_services.infrastructure.database.models import AttributeValueRow, ServiceRow
from digit_services.infrastructure.database.repository import audit_details_from_row, paginate

_SORTABLE = {
    "createdTime": ServiceRow.created_time,
    "lastModifiedTime": ServiceRow.last_modified_time,
}


class DbServiceRepository:
    """Implements ServiceRepository over PostgreSQL."""

    def __init__(
        self,
        session: AsyncSession,
        default_limit: int = settings.search_default_limit,
        max_limit: int = settings.search_max_limit,
    ) -> None:
        self._session = session
        self._default_limit = default_limit
        self._max_limit = max_limit

    async def get_services(self, search_request: ServiceSearchRequest) -> List[Service]:
        criteria = search_request.service_criteria
        stmt = select(ServiceRow).where(ServiceRow.tenant_id == criteria.tenant_id)
        if criteria.ids:
            stmt = stmt.where(ServiceRow.id.in_(criteria.ids))
        if criteria.service_def_ids:
            stmt = stmt.where(ServiceRow.service_def_id.in_(criteria.service_def_ids))
        if criteria.reference_ids:
            stmt = stmt.where(ServiceRow.reference_id.in_(criteria.reference_ids))
        stmt = paginate(
            stmt,
            _SORTABLE,
            ServiceRow.created_time,
            search_request.pagination,
            self._default_limit,
            self._max_limit,
        )

        result = await self._session.execute(stmt)
        rows = result.scalars().all()
        if not rows:
            return []

        values_by_service = await self._values_for([row.id for row in rows])
        return [
            Service(
                id=row.id,
                tenant_id=row.tenant_id,
                service_def_id=row.service_def_id,
                reference_id=row.reference_id,
                account_id=row.account_id,
                client_id=row.client_id,
                attributes=values_by_service.get(row.id, []),
                audit_details=audit_details_from_row(row),
                additional_details=row.additional_details,
            )
            for row in rows
        ]

    async def _values_for(self, service_ids: List[str]) -> Dict[str, List[AttributeValue]]:
        """Values share one createdTime per service, so they come back sorted by attribute code."""
        stmt = (
            select(AttributeValueRow)
            .where(AttributeValueRow.reference_id.in_(service_ids))
            .order_by(AttributeValueRow.attribute_code.asc(), AttributeValueRow.id.asc())
        )
        result = await self._session.execute(stmt)
        grouped: Dict[str, List[AttributeValue]] = defaultdict(list)
        for row in result.scalars().all():
            grouped[row.reference_id].append(
                AttributeValue(
                    id=row.id,
                    reference_id=row.reference_id,
                    attribute_code=row.attribute_code,
                    value=row.value,
                    audit_details=audit_details_from_row(row),
                    additional_details=row.additional_details,
                )
            )
        return grouped
