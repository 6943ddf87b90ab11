"""Map Schedule Timeline exceptions to JSON error responses"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from schedule_timeline.domain.exceptions import (DocumentValidationException,
                                                 TimelineException,
                                                 ValidationException)
from schedule_timeline.infrastructure.exceptions import DocumentLoadError

logger = logging.getLogger(__name__)

STATUS_CODES: dict[type[TimelineException], int] = {
    DocumentValidationException: 422,
    ValidationException: 422,
    DocumentLoadError: 500,
}


def status_code_for(exc: TimelineException) -> int:
    for exc_type, code in STATUS_CODES.items():
        if isinstance(exc, exc_type):
            return code
    return 400


async def timeline_exception_handler(request: Request, exc: TimelineException) -> JSONResponse:
    """Render a TimelineException with its error code, message and details"""
    code = status_code_for(exc)
    if code >= 500:
        logger.error("%s on %s: %s", exc.error_code, request.url.path, exc.message)
    else:
        logger.info("%s on %s", exc.error_code, request.url.path)
    return JSONResponse(status_code=code, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TimelineException, timeline_exception_handler)
