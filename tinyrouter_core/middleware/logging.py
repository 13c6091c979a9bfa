"""Logging Middleware - Request/response logging.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from tinyrouter_core.http.request import Request, Response
from tinyrouter_core.middleware.base import Handler, Middleware

logger = logging.getLogger(__name__)


@dataclass
class LoggingConfig:
    """Logging middleware configuration."""

    log_headers: bool = False
    log_query: bool = True
    skip_paths: List[str] = field(default_factory=list)


class LoggingMiddleware(Middleware):
    """Logs each request on the way in and its response on the way out."""

    def __init__(self, config: Optional[LoggingConfig] = None):
        self.config = config or LoggingConfig()

    def handle(self, request: Request, call_next: Handler) -> Response:
        if request.path in self.config.skip_paths:
            return call_next(request)

        request_id = str(uuid.uuid4())[:8]
        start_time = time.time()

        log_parts = [f"[{request_id}] --> {request.method.value} {request.path}"]
        if self.config.log_query and request.query:
            log_parts.append(f"query={dict(request.query)}")
        if self.config.log_headers:
            log_parts.append(f"headers={dict(request.headers)}")
        logger.info(" ".join(log_parts))

        response = call_next(request)

        duration_ms = (time.time() - start_time) * 1000
        logger.info(f"[{request_id}] <-- {response.status} ({duration_ms:.2f}ms)")
        return response


__all__ = [
    "LoggingMiddleware",
    "LoggingConfig",
]
