"""FastAPI dependency injection: HTTP clients, publisher, repositories, application services."""

import logging
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from digit_services.application.error_retry_service import ErrorRetryService, RetryConfig
from digit_services.application.service_definition_service import ServiceDefinitionService
from digit_services.application.service_request_service import ServiceRequestService
from digit_services.config.settings import AppSettings, get_settings
from digit_services.infrastructure.database.service_definition_repository_db import (
    DbServiceDefinitionRepository,
)
from digit_services.infrastructure.database.service_repository_db import DbServiceRepository
from digit_services.infrastructure.database.session import get_db
from digit_services.infrastructure.http.replay_client import HttpReplayClient
from digit_services.infrastructure.messaging.rabbitmq_publisher import RabbitMQPublisher
from digit_services.infrastructure.search.index_client import IndexStoreClient
from digit_services.infrastructure.search.query_builder import ErrorIndexQueryBuilder

_index_store: IndexStoreClient | None = None
_replay_client: HttpReplayClient | None = None
_publisher: RabbitMQPublisher | None = None


def get_index_store() -> IndexStoreClient:
    """Return singleton index store client."""
    global _index_store
    if _index_store is None:
        _index_store = IndexStoreClient()
    return _index_store


def get_replay_client() -> HttpReplayClient:
    """Return singleton replay client."""
    global _replay_client
    if _replay_client is None:
        _replay_client = HttpReplayClient()
    return _replay_client


def get_publisher() -> RabbitMQPublisher:
    """Return singleton RabbitMQ publisher."""
    global _publisher
    if _publisher is None:
        _publisher = RabbitMQPublisher()
    return _publisher


async def shutdown_clients() -> None:
    """Close whatever singletons were created during the process lifetime."""
    global _index_store, _replay_client, _publisher
    if _index_store is not None:
        await _index_store.close()
        _index_store = None
    if _replay_client is not None:
        await _replay_client.close()
        _replay_client = None
    if _publisher is not None:
        await _publisher.close()
        _publisher = None


def get_service_definition_repository(
    session: Annotated[AsyncSession, Depends(get_db)],
) -> DbServiceDefinitionRepository:
    return DbServiceDefinitionRepository(session)


def get_service_repository(
    session: Annotated[AsyncSession, Depends(get_db)],
) -> DbServiceRepository:
    return DbServiceRepository(session)


async def get_error_retry_service(
    index_store: Annotated[IndexStoreClient, Depends(get_index_store)],
    replay_client: Annotated[HttpReplayClient, Depends(get_replay_client)],
    publisher: Annotated[RabbitMQPublisher, Depends(get_publisher)],
    settings: Annotated[AppSettings, Depends(get_settings)],
) -> ErrorRetryService:
    """Build ErrorRetryService with injected index store, replay client, publisher, config, logger."""
    return ErrorRetryService(
        index_store=index_store,
        query_builder=ErrorIndexQueryBuilder(
            settings.error_index_search_uri,
            default_limit=settings.search_default_limit,
            max_limit=settings.search_max_limit,
        ),
        replay_client=replay_client,
        publisher=publisher,
        config=RetryConfig(
            max_retries_allowed=settings.max_retries_allowed,
            error_topic=settings.error_topic,
        ),
        logger=logging.getLogger("digit_services.error_retry"),
    )


async def get_service_definition_service(
    repository: Annotated[DbServiceDefinitionRepository, Depends(get_service_definition_repository)],
    publisher: Annotated[RabbitMQPublisher, Depends(get_publisher)],
    settings: Annotated[AppSettings, Depends(get_settings)],
) -> ServiceDefinitionService:
    return ServiceDefinitionService(
        repository=repository,
        publisher=publisher,
        save_topic=settings.save_service_definition_topic,
        logger=logging.getLogger("digit_services.service_definition"),
    )


async def get_service_request_service(
    repository: Annotated[DbServiceRepository, Depends(get_service_repository)],
    definition_repository: Annotated[
        DbServiceDefinitionRepository, Depends(get_service_definition_repository)
    ],
    publisher: Annotated[RabbitMQPublisher, Depends(get_publisher)],
    settings: Annotated[AppSettings, Depends(get_settings)],
) -> ServiceRequestService:
    return ServiceRequestService(
        repository=repository,
        definition_repository=definition_repository,
        publisher=publisher,
        save_topic=settings.save_service_topic,
        logger=logging.getLogger("digit_services.service_request"),
    )
