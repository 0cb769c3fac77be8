"""
Handler decorators for error handling, logging, and response formatting.
"""
import functools
import uuid
from typing import Callable, Any, Dict
from logger_config import get_logger
from utils.exceptions import SupportAPIError

logger = get_logger(__name__)


def _error_response(error: Dict[str, Any], correlation_id: str, handler: str) -> Dict[str, Any]:
    error["correlation_id"] = correlation_id
    return {
        "error": error,
        "metadata": {
            "correlation_id": correlation_id,
            "handler": handler
        }
    }


def lambda_handler(
    func: Callable[[Any, Any], Any]
) -> Callable[[Any, Any], Dict[str, Any]]:
    """
    Decorator for Lambda handler functions.

    Provides:
    - Request correlation IDs for logging
    - Structured error payloads for validation and Support API failures
    - Response metadata

    Args:
        func: The handler function to decorate

    Returns:
        Decorated handler function
    """
    @functools.wraps(func)
    def wrapper(event: Any, context: Any) -> Dict[str, Any]:
        correlation_id = str(uuid.uuid4())
        request_id = getattr(context, "aws_request_id", None) if context else None

        logger.info(
            f"Handler {func.__name__} invoked",
            extra={"correlation_id": correlation_id, "request_id": request_id}
        )

        try:
            result = func(event, context)
        except ValueError as e:
            logger.warning(
                f"Handler {func.__name__} validation error: {str(e)}",
                extra={"correlation_id": correlation_id}
            )
            return _error_response(
                {"type": "ValidationError", "message": str(e)},
                correlation_id,
                func.__name__
            )
        except SupportAPIError as e:
            logger.error(
                f"Handler {func.__name__} Support API error: {e.message}",
                extra={"correlation_id": correlation_id, "request_id": e.request_id}
            )
            return _error_response(
                {
                    "type": "SupportAPIError",
                    "message": e.message,
                    "operation": e.operation,
                    "status_code": e.status_code,
                    "error_type": e.error_type,
                    "request_id": e.request_id
                },
                correlation_id,
                func.__name__
            )
        except Exception as e:
            logger.error(
                f"Handler {func.__name__} failed: {str(e)}",
                extra={"correlation_id": correlation_id},
                exc_info=True
            )
            return _error_response(
                {"type": type(e).__name__, "message": str(e)},
                correlation_id,
                func.__name__
            )

        if not isinstance(result, dict):
            result = {"data": result}

        result.setdefault("metadata", {})["correlation_id"] = correlation_id

        logger.info(
            f"Handler {func.__name__} completed successfully",
            extra={"correlation_id": correlation_id}
        )
        return result

    return wrapper
