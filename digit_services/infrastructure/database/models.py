# digit_services/infrastructure/database/models.py
# Tables are written by the platform persister; this service only reads them.

from sqlalchemy import BigInteger, Boolean, Column, String
from sqlalchemy.dialects.postgresql import JSONB

from digit_services.infrastructure.database.session import Base


class AuditColumns(Base):
    __abstract__ = True

    created_by = Column("createdby", String(64))
    last_modified_by = Column("lastmodifiedby", String(64))
    created_time = Column("createdtime", BigInteger)
    last_modified_time = Column("lastmodifiedtime", BigInteger)


class ServiceDefinitionRow(AuditColumns):
    __tablename__ = "eg_service_definition"

    id = Column(String(64), primary_key=True)
    tenant_id = Column("tenantid", String(64), nullable=False, index=True)
    code = Column(String(64), nullable=False)
    is_active = Column("isactive", Boolean, default=True)
    additional_details = Column("additionaldetails", JSONB, nullable=True)
    client_id = Column("clientid", String(64), nullable=True)


class AttributeDefinitionRow(AuditColumns):
    __tablename__ = "eg_service_attribute_definition"

    id = Column(String(64), primary_key=True)
    reference_id = Column("referenceid", String(64), nullable=False, index=True)
    tenant_id = Column("tenantid", String(64), nullable=False)
    code = Column(String(64), nullable=False)
    data_type = Column("datatype", String(64), nullable=False)
    values = Column("values", JSONB, nullable=True)
    is_active = Column("isactive", Boolean, default=True)
    required = Column(Boolean, default=False)
    regex = Column(String(64), nullable=True)
    order = Column("order", String(64), nullable=True)
    additional_details = Column("additionaldetails", JSONB, nullable=True)


class ServiceRow(AuditColumns):
    __tablename__ = "eg_service"

    id = Column(String(64), primary_key=True)
    tenant_id = Column("tenantid", String(64), nullable=False, index=True)
    service_def_id = Column("servicedefid", String(64), nullable=False)
    reference_id = Column("referenceid", String(64), nullable=True)
    account_id = Column("accountid", String(64), nullable=True)
    client_id = Column("clientid", String(64), nullable=True)
    additional_details = Column("additionaldetails", JSONB, nullable=True)


class AttributeValueRow(AuditColumns):
    __tablename__ = "eg_service_attribute_value"

    id = Column(String(64), primary_key=True)
    reference_id = Column("referenceid", String(64), nullable=False, index=True)
    attribute_code = Column("attributecode", String(64), nullable=False)
    value = Column(JSONB, nullable=True)
    additional_details = Column("additionaldetails", JSONB, nullable=True)
