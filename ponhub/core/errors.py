"""Gateway error taxonomy and its HTTP mapping."""

from fastapi import HTTPException, status


class GatewayError(Exception):
    """Base gateway error."""

    def __init__(self, message: str, code: str = "gateway_error"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(GatewayError):
    """A required request field is missing or empty."""

    def __init__(self, message: str):
        super().__init__(message, "validation_error")


class UpstreamError(GatewayError):
    """The upstream comment service call failed.

    The message describes the failure for the server logs only; it is never
    sent to the client.
    """

    def __init__(self, message: str = "Upstream request failed"):
        super().__init__(message, "upstream_error")


STATUS_MAP = {
    "validation_error": status.HTTP_400_BAD_REQUEST,
    "upstream_error": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def handle_gateway_error(error: GatewayError, failure_message: str) -> HTTPException:
    """Convert a gateway error to an HTTP exception.

    Client errors keep their own message. Server errors are reported with
    ``failure_message`` so upstream details never reach the client.
    """
    status_code = STATUS_MAP.get(error.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    detail = (
        error.message
        if status_code < status.HTTP_500_INTERNAL_SERVER_ERROR
        else failure_message
    )
    return HTTPException(status_code=status_code, detail=detail)
