"""Tests for the SQLAlchemy read repositories with a mocked AsyncSession."""

from unittest.mock import AsyncMock, MagicMock

from sqlalchemy.dialects import postgresql

from digit_services.domain.models.service_definition import AttributeDataType
from digit_services.domain.schemas.common import Pagination, SortOrder
from digit_services.domain.schemas.service import ServiceCriteria, ServiceSearchRequest
from digit_services.domain.schemas.service_definition import (
    ServiceDefinitionCriteria,
    ServiceDefinitionSearchRequest,
)
from digit_services.infrastructure.database.models import (
    AttributeDefinitionRow,
    AttributeValueRow,
    ServiceDefinitionRow,
    ServiceRow,
)
from digit_services.infrastructure.database.service_definition_repository_db import (
    DbServiceDefinitionRepository,
)
from digit_services.infrastructure.database.service_repository_db import DbServiceRepository


def _result(rows):
    result = MagicMock()
    result.scalars.return_value.all.return_value = rows
    return result


def _session(*results):
    session = AsyncMock()
    session.execute = AsyncMock(side_effect=[_result(rows) for rows in results])
    return session


def _sql(stmt) -> str:
    return str(
        stmt.compile(dialect=postgresql.dialect(), compile_kwargs={"literal_binds": True})
    )


def _definition_row(**overrides) -> ServiceDefinitionRow:
    values = dict(
        id="SD1",
        tenant_id="pb",
        code="FEEDBACK",
        is_active=True,
        created_by="u1",
        last_modified_by="u1",
        created_time=100,
        last_modified_time=100,
    )
    values.update(overrides)
    return ServiceDefinitionRow(**values)


async def test_definitions_are_loaded_with_their_attributes():
    attribute = AttributeDefinitionRow(
        id="A1",
        reference_id="SD1",
        tenant_id="pb",
        code="rating",
        data_type="Number",
        required=True,
        is_active=True,
        created_time=100,
    )
    session = _session([_definition_row()], [attribute])
    repository = DbServiceDefinitionRepository(session, default_limit=10, max_limit=100)

    definitions = await repository.get_service_definitions(
        ServiceDefinitionSearchRequest(
            service_definition_criteria=ServiceDefinitionCriteria(tenant_id="pb", code=["FEEDBACK"])
        )
    )

    assert len(definitions) == 1
    definition = definitions[0]
    assert definition.id == "SD1"
    assert definition.audit_details.created_by == "u1"
    assert [a.code for a in definition.attributes] == ["rating"]
    assert definition.attributes[0].data_type == AttributeDataType.NUMBER
    assert definition.attributes[0].required is True
    attribute_sql = _sql(session.execute.await_args_list[1].args[0])
    assert (
        'ORDER BY eg_service_attribute_definition."order" ASC NULLS LAST, '
        "eg_service_attribute_definition.id ASC"
    ) in attribute_sql


async def test_definition_query_filters_and_paginates():
    session = _session([])
    repository = DbServiceDefinitionRepository(session, default_limit=10, max_limit=100)

    result = await repository.get_service_definitions(
        ServiceDefinitionSearchRequest(
            service_definition_criteria=ServiceDefinitionCriteria(
                tenant_id="pb", ids=["SD1"], code=["FEEDBACK"], client_id="c1"
            ),
            pagination=Pagination(offset=5, limit=500, order=SortOrder.ASC),
        )
    )

    assert result == []
    session.execute.assert_awaited_once()
    sql = _sql(session.execute.await_args.args[0])
    assert "eg_service_definition.tenantid = 'pb'" in sql
    assert "eg_service_definition.id IN ('SD1')" in sql
    assert "eg_service_definition.code IN ('FEEDBACK')" in sql
    assert "eg_service_definition.clientid = 'c1'" in sql
    assert "ORDER BY eg_service_definition.createdtime ASC" in sql
    assert "LIMIT 100" in sql
    assert "OFFSET 5" in sql


async def test_definition_query_defaults_to_newest_first():
    session = _session([])
    repository = DbServiceDefinitionRepository(session, default_limit=10, max_limit=100)

    await repository.get_service_definitions(
        ServiceDefinitionSearchRequest(
            service_definition_criteria=ServiceDefinitionCriteria(tenant_id="pb")
        )
    )

    sql = _sql(session.execute.await_args.args[0])
    assert "ORDER BY eg_service_definition.createdtime DESC" in sql
    assert "LIMIT 10" in sql


async def test_services_are_loaded_with_their_values():
    service_row = ServiceRow(
        id="S1", tenant_id="pb", service_def_id="SD1", account_id="acc-1", created_time=200
    )
    value_row = AttributeValueRow(
        id="V1", reference_id="S1", attribute_code="rating", value=5, created_time=200
    )
    session = _session([service_row], [value_row])
    repository = DbServiceRepository(session, default_limit=10, max_limit=100)

    services = await repository.get_services(
        ServiceSearchRequest(
            service_criteria=ServiceCriteria(tenant_id="pb", service_def_ids=["SD1"])
        )
    )

    assert [s.id for s in services] == ["S1"]
    assert services[0].account_id == "acc-1"
    assert services[0].attributes[0].attribute_code == "rating"
    assert services[0].attributes[0].value == 5
    sql = _sql(session.execute.await_args_list[0].args[0])
    assert "eg_service.servicedefid IN ('SD1')" in sql
    value_sql = _sql(session.execute.await_args_list[1].args[0])
    assert (
        "ORDER BY eg_service_attribute_value.attributecode ASC, "
        "eg_service_attribute_value.id ASC"
    ) in value_sql
