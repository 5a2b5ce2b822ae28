import time
import logging
import structlog
from fastapi import FastAPI, Request

from .infrastructure.metrics import (
    metrics_endpoint,
    http_requests_total,
    http_request_duration_seconds
)
from .infrastructure.store import InMemoryStore
from .interfaces.http.errors import register_exception_handlers
from .interfaces.http.routers import enrollments as enrollments_router
from .config import settings

# Structured logging
log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.make_filtering_bound_logger(log_level),
    context_class=dict,
    logger_factory=structlog.PrintLoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


def create_app(store: InMemoryStore | None = None) -> FastAPI:
    app = FastAPI(title="Enrollment Service", version="0.1.0")
    app.state.store = store if store is not None else InMemoryStore()

    @app.middleware("http")
    async def observe_request(request: Request, call_next):
        start_time = time.time()
        method = request.method
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
            if response.headers.get("content-type", "").startswith("application/json"):
                response.headers["content-type"] = "application/json; charset=utf-8"
            return response
        finally:
            # Label by route template so raw paths cannot grow the series set.
            route = request.scope.get("route")
            endpoint = getattr(route, "path", "unmatched")
            duration = time.time() - start_time
            http_requests_total.labels(method=method, endpoint=endpoint, status=status_code).inc()
            http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)

            logger.info(
                "http_request",
                method=method,
                path=request.url.path,
                endpoint=endpoint,
                status_code=status_code,
                duration_ms=round(duration * 1000, 2)
            )

    @app.on_event("startup")
    def on_startup():
        logger.info("Starting enrollment service", version="0.1.0",
                    users=len(app.state.store.users),
                    enrollments=len(app.state.store.enrollments))

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/metrics")
    def metrics():
        """Prometheus metrics endpoint"""
        return metrics_endpoint()

    register_exception_handlers(app)
    app.include_router(enrollments_router.router)
    return app


app = create_app()
