"""
Timeline error handling utilities.

Provides a decorator that maps timeline domain exceptions to HTTP errors
consistently across timeline and template endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from studio.core.exceptions import (
    InvalidTemplateError,
    InvalidTemplateMatchError,
    SessionNotFoundError,
    StorageUnavailableError,
    TemplateMissingError,
    TimelineConflictError,
    TimelineEntryNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_timeline_errors(func: F) -> F:
    """
    Decorator to handle timeline errors and transform them into HTTPExceptions.

    Mapping:
    - SessionNotFoundError, TimelineEntryNotFoundError -> 404
    - TemplateMissingError -> 409 with error code "template_missing"
    - InvalidTemplateError -> 409 with error code "template_invalid"
    - TimelineConflictError -> 409 with error code "timeline_conflict"
    - ValidationError -> 400
    - StorageUnavailableError -> 503 (safe to retry)
    - InvalidTemplateMatchError and anything unexpected -> 500
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except (SessionNotFoundError, TimelineEntryNotFoundError) as e:
            logger.warning("Timeline resource not found", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=e.message,
            )

        except TemplateMissingError as e:
            logger.warning(
                "Timeline template not configured",
                extra={"session_type": e.session_type},
            )
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail={
                    "error": "template_missing",
                    "session_type": e.session_type,
                    "message": e.message,
                },
            )

        except InvalidTemplateError as e:
            logger.error(
                "Timeline template cannot be materialized",
                extra={"session_type": e.session_type, "error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail={
                    "error": "template_invalid",
                    "session_type": e.session_type,
                    "message": e.message,
                },
            )

        except TimelineConflictError as e:
            logger.error("Timeline write conflicted", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail={"error": "timeline_conflict", "message": e.message},
            )

        except ValidationError as e:
            logger.warning("Invalid timeline request", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=e.message,
            )

        except StorageUnavailableError as e:
            logger.error(
                "Timeline storage unavailable",
                extra={"operation": e.operation, "error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Timeline storage temporarily unavailable",
            )

        except InvalidTemplateMatchError as e:
            logger.error("Template applied to wrong session type", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=e.message,
            )

        except Exception as e:
            logger.exception(
                "Unexpected failure in timeline operation",
                extra={"error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred during timeline operation",
            )

    return wrapper  # type: ignore
