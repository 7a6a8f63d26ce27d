"""
Router error handling utilities.

Provides a decorator that turns store and validation failures into
uniform HTTP responses, and an app-level handler that reports request
validation problems as 400 instead of FastAPI's default 422.
"""

import functools
import json
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from portal_messaging.core.exceptions import PersistenceError, ValidationError
from portal_messaging.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

INVALID_DATA_MESSAGE = "Invalid message data"


def _bad_request(errors: list[dict]) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={"message": INVALID_DATA_MESSAGE, "errors": errors},
    )


def handle_store_errors(failure_message: str) -> Callable[[F], F]:
    """
    Decorator factory mapping handler exceptions to HTTP responses.

    - HTTPException: passed through untouched
    - pydantic / store ValidationError: 400 with per-field errors
    - PersistenceError and anything else: logged, 500 with failure_message

    Args:
        failure_message: Client-facing detail for 500 responses
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except HTTPException:
                raise

            except PydanticValidationError as e:
                logger.warning("Request body failed validation", extra={"handler": func.__name__})
                raise _bad_request(json.loads(e.json(include_url=False)))

            except ValidationError as e:
                logger.warning(
                    "Store rejected request",
                    extra={"handler": func.__name__, "field": e.field},
                )
                raise _bad_request([{"loc": [e.field], "msg": e.message}])

            except PersistenceError as e:
                log_exception_with_context(logger, failure_message, e, handler=func.__name__)
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=failure_message,
                )

            except Exception as e:
                log_exception_with_context(
                    logger, "Unexpected failure in route handler", e, handler=func.__name__
                )
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=failure_message,
                )

        return wrapper  # type: ignore

    return decorator


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Report malformed request bodies and parameters as 400."""
    logger.warning(
        "Request validation failed",
        extra={"path": request.url.path, "errors": len(exc.errors())},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": {"message": "Invalid request", "errors": jsonable_encoder(exc.errors())}},
    )
