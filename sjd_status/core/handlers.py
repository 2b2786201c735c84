from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from sjd_status.db.session import DatabaseError

logger = logging.getLogger(__name__)

SERVER_ERROR_BODY = "Server Error"


async def database_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    logger.error("Health check failed path=%s error=%s", request.url.path, exc)
    return PlainTextResponse(SERVER_ERROR_BODY, status_code=500)


def add_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DatabaseError, database_error_handler)
