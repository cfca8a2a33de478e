"""Error handling decorators for API routes."""

import functools
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import structlog
from fastapi import HTTPException, status
from returns.result import Failure, Success

from domain.exceptions import StoreError
from interfaces.api.routes.helpers import _map_app_error_to_http_exception

logger = structlog.get_logger()

T_co = TypeVar("T_co")


def handle_service_errors(
    func: Callable[..., Awaitable[T_co]],
) -> Callable[..., Awaitable[T_co]]:
    """Turn a service ``Result`` into a response body or an HTTP error.

    - Unwraps Success results
    - Maps Failure results to HTTP exceptions by error category
    - Maps StoreError to 500 "Service temporarily unavailable"
    - Logs and maps anything else to 500 "Internal server error"

    Args:
        func: An async endpoint function that returns a service result

    Returns:
        Wrapped function with centralized error handling

    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T_co:  # noqa: ANN401
        try:
            result = await func(*args, **kwargs)
        except HTTPException:
            raise
        except StoreError as exc:
            logger.exception(
                "store_error",
                error=str(exc),
                function=func.__name__,
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Service temporarily unavailable",
            ) from exc
        except Exception as exc:
            logger.exception(
                "unexpected_error",
                error=str(exc),
                error_type=type(exc).__name__,
                function=func.__name__,
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Internal server error",
            ) from exc

        if isinstance(result, Success):
            return result.unwrap()

        if isinstance(result, Failure):
            raise _map_app_error_to_http_exception(result.failure()) from None

        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Unexpected result type",
        )

    return wrapper
