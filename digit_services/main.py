# digit_services/main.py

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from digit_services.api.dependencies import shutdown_clients
from digit_services.api.middleware import (
    AuditTriggerMiddleware,
    CorrelationIdMiddleware,
    TenantContextMiddleware,
)
from digit_services.api.routers import error_retry, health, service, service_definition
from digit_services.application.exceptions import (
    ApplicationError,
    ErrorRecordNotFoundError,
    IndexStoreError,
    MessagingFailureError,
)
from digit_services.config.logging import configure_logging
from digit_services.config.settings import get_settings
from digit_services.domain.exceptions import DomainError
from digit_services.domain.schemas.common import ErrorDetailBody, ErrorResponse
from digit_services.infrastructure.database.session import dispose_engine

settings = get_settings()
configure_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await shutdown_clients()
    await dispose_engine()


app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    debug=settings.debug,
    lifespan=lifespan,
)

# Middleware order: last added runs first (outermost). Request flow: CorrelationId -> TenantContext -> AuditTrigger.
app.add_middleware(AuditTriggerMiddleware)
app.add_middleware(TenantContextMiddleware)
app.add_middleware(CorrelationIdMiddleware)


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponse(errors=[ErrorDetailBody(code=code, message=message)])
    return JSONResponse(status_code=status_code, content=body.to_wire())


@app.exception_handler(DomainError)
async def domain_error_handler(request, exc: DomainError):
    return _error_response(400, exc.code, exc.message)


@app.exception_handler(ErrorRecordNotFoundError)
async def error_record_not_found_handler(request, exc: ErrorRecordNotFoundError):
    return _error_response(404, "ERROR_RECORD_NOT_FOUND", exc.message)


@app.exception_handler(IndexStoreError)
async def index_store_error_handler(request, exc: IndexStoreError):
    return _error_response(502, "INDEX_STORE_ERROR", exc.message)


@app.exception_handler(MessagingFailureError)
async def messaging_failure_error_handler(request, exc: MessagingFailureError):
    return _error_response(503, "MESSAGING_FAILURE", exc.message)


@app.exception_handler(ApplicationError)
async def application_error_handler(request, exc: ApplicationError):
    return _error_response(500, "APPLICATION_ERROR", exc.message)


@app.exception_handler(Exception)
async def unexpected_error_handler(request, exc: Exception):
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# Routers: /health, /error/v1, /service/definition/v1, /service/v1
app.include_router(health.router)
app.include_router(error_retry.router, prefix="/error/v1")
app.include_router(service_definition.router, prefix="/service/definition/v1")
app.include_router(service.router, prefix="/service/v1")
