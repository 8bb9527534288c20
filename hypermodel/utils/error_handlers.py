import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hypermodel.errors import HypermediaError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Map hypermodel errors onto JSON error responses."""

    @app.exception_handler(HypermediaError)
    async def hypermedia_error_handler(request: Request, exc: HypermediaError):
        logger.error(
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )
