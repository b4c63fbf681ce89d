"""Request-scoped values picked up by every log line emitted while serving a request."""

import contextvars
from typing import Dict, Optional

correlation_id_ctx = contextvars.ContextVar("correlation_id", default=None)
tenant_id_ctx = contextvars.ContextVar("tenant_id", default=None)


def current_context() -> Dict[str, Optional[str]]:
    return {
        "correlation_id": correlation_id_ctx.get(),
        "tenant_id": tenant_id_ctx.get(),
    }
