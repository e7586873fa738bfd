"""Bot API response envelope and transport interface."""

from .errors import ApiError, InvalidJson, MigrateToChatId, RequestError, RetryAfter
from .requester import Requester, method_url
from .response import ApiResponse, ResponseParameters, parse_response

__all__ = [
    "ApiError",
    "ApiResponse",
    "InvalidJson",
    "MigrateToChatId",
    "RequestError",
    "Requester",
    "ResponseParameters",
    "RetryAfter",
    "method_url",
    "parse_response",
]
