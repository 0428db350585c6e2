import logging
import time
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import PlainTextResponse, Response

from .metrics import http_errors, http_in_progress, http_latency, http_requests
from .routers import search
from .schemas import RootResponse, HealthResponse
from .store.records import RecordStore

logger = logging.getLogger(__name__)


async def parse_error_handler(request: Request, exc: RequestValidationError):
    fields = ", ".join(".".join(str(part) for part in err["loc"]) for err in exc.errors())
    logger.info("Error when parsing %s on %s", fields, request.url.path)
    return PlainTextResponse(f"Error when parsing {fields}", status_code=500)


async def metrics_middleware(request: Request, call_next):
    method = request.method
    endpoint = request.url.path

    http_in_progress.inc()
    start_time = time.time()

    try:
        response = await call_next(request)
        status_code = response.status_code
        duration = time.time() - start_time

        http_requests.labels(method=method, endpoint=endpoint, status_code=status_code).inc()

        if status_code >= 400:
            http_errors.labels(method=method, endpoint=endpoint, status_code=status_code).inc()

        http_latency.labels(method=method, endpoint=endpoint).observe(duration)

        return response
    finally:
        http_in_progress.dec()


def create_app(store: Optional[RecordStore] = None) -> FastAPI:
    """Build the search service around a fully loaded record store."""
    app = FastAPI(title="User Search Service")
    app.state.store = store if store is not None else RecordStore()
    logger.info("Serving %d user records", len(app.state.store))

    app.add_exception_handler(RequestValidationError, parse_error_handler)
    app.middleware("http")(metrics_middleware)
    app.include_router(search.router)

    @app.get("/metrics")
    def metrics():
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.get(
        "/",
        response_model=RootResponse,
        summary="Service info",
        responses={
            200: {
                "description": "OK",
                "content": {"application/json": {"example": {"msg": "User Search Service running!"}}},
            }
        },
    )
    def root():
        return {"msg": "User Search Service running!"}

    @app.get(
        "/health",
        response_model=HealthResponse,
        summary="Health check",
        responses={
            200: {"description": "OK", "content": {"application/json": {"example": {"status": "ok"}}}}
        },
    )
    def health():
        return {"status": "ok"}

    return app


app = create_app()
