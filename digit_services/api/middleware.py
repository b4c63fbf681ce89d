"""API middleware: correlation ID, tenant context, request audit log."""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from digit_services.core.context import correlation_id_ctx, tenant_id_ctx

logger = logging.getLogger(__name__)

TENANT_HEADER = "X-Tenant-ID"
CORRELATION_HEADER = "X-Correlation-ID"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Preserve the caller's X-Correlation-ID or mint one; echo it on the response."""

    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or str(uuid.uuid4())
        request.state.correlation_id = correlation_id
        token = correlation_id_ctx.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_ctx.reset(token)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


class TenantContextMiddleware(BaseHTTPMiddleware):
    """Copy an optional X-Tenant-ID into request.state and the logging context. Bodies carry the real tenant."""

    async def dispatch(self, request: Request, call_next) -> Response:
        tenant_id = (request.headers.get(TENANT_HEADER) or "").strip() or None
        request.state.tenant_id = tenant_id
        token = tenant_id_ctx.set(tenant_id)
        try:
            return await call_next(request)
        finally:
            tenant_id_ctx.reset(token)


class AuditTriggerMiddleware(BaseHTTPMiddleware):
    """One structured log line per request: path, method, status and latency."""

    async def dispatch(self, request: Request, call_next) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "request_audit",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 2),
            },
        )
        return response
