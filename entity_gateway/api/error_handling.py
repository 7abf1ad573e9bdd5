"""
Gateway error handling utilities.

Provides a decorator for consistent error handling across entity
endpoints: every gateway error is converted to an HTTP status at the
request boundary.

- EntityNotFoundError / MalformedIdentifierError -> 404
- StoreFaultError -> 500
- anything else -> 500, logged with traceback

The JSON body carries an "error" code so the two 404 causes stay
distinguishable upstream.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import status
from fastapi.responses import JSONResponse

from entity_gateway.core.exceptions import (
    EntityNotFoundError,
    GatewayError,
    StoreFaultError,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def error_response(status_code: int, error: GatewayError | None = None) -> JSONResponse:
    """Build the JSON error body for a gateway error."""
    if error is None:
        content = {"detail": "Internal server error", "error": "internal_error"}
    else:
        content = {"detail": error.message, "error": error.error_code}
    return JSONResponse(status_code=status_code, content=content)


def handle_gateway_errors(func: F) -> F:
    """
    Decorator to handle gateway errors and transform them into HTTP responses.

    This centralizes:
    - Logging of errors with context (entity, entity_id, operation)
    - Mapping specific exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except EntityNotFoundError as e:
            logger.warning(
                "Entity not found",
                extra={"error_code": e.error_code, **e.details},
            )
            return error_response(status.HTTP_404_NOT_FOUND, e)

        except StoreFaultError as e:
            logger.error(
                "Store fault",
                extra={"error_code": e.error_code, **e.details},
            )
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, e)

        except Exception as e:
            logger.exception(
                "Unexpected failure in entity operation",
                extra={"error": str(e)},
            )
            return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR)

    return wrapper  # type: ignore
