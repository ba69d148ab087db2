import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fittrack.core.exceptions import AIServiceError, InvalidArgument

logger = logging.getLogger(__name__)


async def invalid_argument_handler(request: Request, exc: InvalidArgument) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


async def ai_service_error_handler(request: Request, exc: AIServiceError) -> JSONResponse:
    logger.error(f"Ошибка AI сервиса на {request.url.path}: {exc}")
    return JSONResponse(status_code=502, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidArgument, invalid_argument_handler)
    app.add_exception_handler(AIServiceError, ai_service_error_handler)
