"""
Custom exception classes for the Support client and Lambda handlers.
"""
from typing import Optional, Dict, Any


class SupportAPIError(Exception):
    """
    Exception raised for every failed Support API call.

    Covers network failures, request signing problems, service-side
    rejections and undecodable responses alike.
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        status_code: Optional[int] = None,
        error_type: Optional[str] = None,
        request_id: Optional[str] = None,
        response_data: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize Support API error.

        Args:
            message: Error message
            operation: Operation name (e.g. 'CreateCase') if available
            status_code: HTTP status code if available
            error_type: Service error code without namespace (e.g. 'CaseIdNotFound')
            request_id: Value of the x-amzn-RequestId header if available
            response_data: Decoded error body if available
        """
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.status_code = status_code
        self.error_type = error_type
        self.request_id = request_id
        self.response_data = response_data
