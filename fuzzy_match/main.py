"""FastAPI application entry point."""
import time
import uuid

from fastapi import FastAPI, Request

from fuzzy_match import __version__, errors
from fuzzy_match.logging import setup_logging

logger = setup_logging()

app = FastAPI(
    title="Fuzzy Match Service",
    description="Scores the similarity of two strings with edit-distance heuristics",
    version=__version__,
)

app.add_exception_handler(errors.MatchError, errors.match_error_handler)
app.add_exception_handler(Exception, errors.generic_exception_handler)


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    """Add request ID and timing header."""
    request.state.request_id = request.headers.get("x-request-id") or str(uuid.uuid4())

    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time

    response.headers["X-Request-ID"] = request.state.request_id
    response.headers["X-Process-Time"] = str(process_time)

    return response


@app.on_event("startup")
async def startup_event():
    """Application startup."""
    logger.info("Fuzzy Match Service starting", extra={"version": __version__})


@app.on_event("shutdown")
async def shutdown_event():
    """Application shutdown."""
    logger.info("Fuzzy Match Service shutting down")


# Import routers after app creation to avoid circular imports
from fuzzy_match.routers import compare, meta  # noqa: E402

app.include_router(meta.router)
app.include_router(compare.router, prefix="/v1")
