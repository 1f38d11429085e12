"""Last-resort error handling for the contracts API."""
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An internal error occurred while processing your request. Please try again later."


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        cause = exc.__cause__ or exc.__context__
        logger.error(
            "Unhandled exception in request pipeline: %s (cause: %r) context=%s",
            exc,
            cause,
            context or {},
            exc_info=exc,
        )
        return {"error": GENERIC_ERROR_MESSAGE}
