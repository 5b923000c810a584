from fastapi import Request
from fastapi.responses import JSONResponse
from app.core.exceptions import BaseAPIException
from app.core.log_config import logger

async def custom_exception_handler(request: Request, exc: BaseAPIException) -> JSONResponse:
    """
    Render a directory error as a JSON body carrying its message and status code.
    """
    if exc.status_code >= 500:
        logger.error(f"{exc.__class__.__name__}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=exc.headers,
    )
