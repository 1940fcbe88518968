"""
Service error handling for API routes.

A decorator mapping application exceptions to HTTPExceptions with a
uniform {"error": ..., "message": ...} detail body.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from agency_rag.core.exceptions import (
    AgencyRAGException,
    AnswerGenerationError,
    ConcurrentProcessingError,
    DocumentNotFoundError,
    DocumentNotReadyError,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _error_detail(error: Exception) -> dict[str, str]:
    return {"error": type(error).__name__, "message": str(error)}


def handle_service_errors(func: F) -> F:
    """
    Decorator transforming service errors into HTTPExceptions.

    - DocumentNotFoundError: 404
    - ConcurrentProcessingError, DocumentNotReadyError: 409
    - ValueError: 400
    - AnswerGenerationError: 502
    - any other AgencyRAGException (pipeline stage failures): 500
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except DocumentNotFoundError as e:
            logger.warning("Document not found", extra={"document_id": e.document_id})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=_error_detail(e))

        except (ConcurrentProcessingError, DocumentNotReadyError) as e:
            logger.warning("Document state conflict", extra=e.details)
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=_error_detail(e))

        except AnswerGenerationError as e:
            logger.error(f"Chat model failure: {e}")
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=_error_detail(e))

        except AgencyRAGException as e:
            logger.error(f"{type(e).__name__}: {e}", extra=e.details)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=_error_detail(e),
            )

        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=_error_detail(e))

    return wrapper  # type: ignore[return-value]
