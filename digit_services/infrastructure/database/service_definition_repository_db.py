"""DB-backed service definition reads (eg_service_definition + eg_service_attribute_definition)."""

from collections import defaultdict
from typing import Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from digit_services.config.settings import settings
from digit_services.domain.models.service_definition import (
    AttributeDataType,
    AttributeDefinition,
    ServiceDefinition,
)
from digit_services.domain.schemas.service_definition import ServiceDefinitionSearchRequest
from digit_services.infrastructure.database.models import (
    AttributeDefinitionRow,
    ServiceDefinitionRow,
)
from digit_services.infrastructure.database.repository import audit_details_from_row, paginate

_SORTABLE = {
    "createdTime": ServiceDefinitionRow.created_time,
    "lastModifiedTime": ServiceDefinitionRow.last_modified_time,
    "code": ServiceDefinitionRow.code,
}


def _to_attribute(row: AttributeDefinitionRow) -> AttributeDefinition:
    return AttributeDefinition(
        id=row.id,
        reference_id=row.reference_id,
        tenant_id=row.tenant_id,
        code=row.code,
        data_type=AttributeDataType(row.data_type),
        values=row.values,
        is_active=row.is_active if row.is_active is not None else True,
        required=bool(row.required),
        regex=row.regex,
        order=row.order,
        audit_details=audit_details_from_row(row),
        additional_details=row.additional_details,
    )


def _to_definition(row: ServiceDefinitionRow, attributes: List[AttributeDefinition]) -> ServiceDefinition:
    return ServiceDefinition(
        id=row.id,
        tenant_id=row.tenant_id,
        code=row.code,
        is_active=row.is_active if row.is_active is not None else True,
        attributes=attributes,
        audit_details=audit_details_from_row(row),
        additional_details=row.additional_details,
        client_id=row.client_id,
    )


class DbServiceDefinitionRepository:
    """Implements ServiceDefinitionRepository over PostgreSQL."""

    def __init__(
        self,
        session: AsyncSession,
        default_limit: int = settings.search_default_limit,
        max_limit: int = settings.search_max_limit,
    ) -> None:
        self._session = session
        self._default_limit = default_limit
        self._max_limit = max_limit

    async def get_service_definitions(
        self, search_request: ServiceDefinitionSearchRequest
    ) -> List[ServiceDefinition]:
        criteria = search_request.service_definition_criteria
        stmt = select(ServiceDefinitionRow).where(
            ServiceDefinitionRow.tenant_id == criteria.tenant_id
        )
        if criteria.ids:
            stmt = stmt.where(ServiceDefinitionRow.id.in_(criteria.ids))
        if criteria.code:
            stmt = stmt.where(ServiceDefinitionRow.code.in_(criteria.code))
        if criteria.client_id:
            stmt = stmt.where(ServiceDefinitionRow.client_id == criteria.client_id)
        stmt = paginate(
            stmt,
            _SORTABLE,
            ServiceDefinitionRow.created_time,
            search_request.pagination,
            self._default_limit,
            self._max_limit,
        )

        result = await self._session.execute(stmt)
        rows = result.scalars().all()
        if not rows:
            return []

        attributes_by_definition = await self._attributes_for([row.id for row in rows])
        return [_to_definition(row, attributes_by_definition.get(row.id, [])) for row in rows]

    async def _attributes_for(self, definition_ids: List[str]) -> Dict[str, List[AttributeDefinition]]:
        stmt = (
            select(AttributeDefinitionRow)
            .where(AttributeDefinitionRow.reference_id.in_(definition_ids))
            .order_by(AttributeDefinitionRow.order.asc().nulls_last(), AttributeDefinitionRow.id.asc())
        )
        result = await self._session.execute(stmt)
        grouped: Dict[str, List[AttributeDefinition]] = defaultdict(list)
        for row in result.scalars().all():
            grouped[row.reference_id].append(_to_attribute(row))
        return grouped
