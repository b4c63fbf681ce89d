# Application layer: services that orchestrate domain and infrastructure.

from digit_services.application.error_retry_service import (
    ErrorRetryService,
    RetryConfig,
    RetryOutcome,
)
from digit_services.application.exceptions import (
    ApplicationError,
    ErrorRecordNotFoundError,
    IndexStoreError,
    MessagingFailureError,
    ReplayError,
)
from digit_services.application.gateways import (
    IndexStore,
    QueuePublisher,
    ReplayClient,
    Replayed,
    ReplayFailed,
)
from digit_services.application.service_definition_service import ServiceDefinitionService
from digit_services.application.service_repository import (
    ServiceDefinitionRepository,
    ServiceRepository,
)
from digit_services.application.service_request_service import ServiceRequestService

__all__ = [
    "ApplicationError",
    "ErrorRecordNotFoundError",
    "ErrorRetryService",
    "IndexStore",
    "IndexStoreError",
    "MessagingFailureError",
    "QueuePublisher",
    "ReplayClient",
    "ReplayError",
    "Replayed",
    "ReplayFailed",
    "RetryConfig",
    "RetryOutcome",
    "ServiceDefinitionRepository",
    "ServiceDefinitionService",
    "ServiceRepository",
    "ServiceRequestService",
]
