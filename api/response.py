"""The JSON envelope around every Bot API response."""

from typing import Any

from pydantic import ValidationError

from tgtypes.base import WireModel
from tgtypes.serde import DurationSecs

from .errors import ApiError, InvalidJson, MigrateToChatId, RequestError, RetryAfter


class ResponseParameters(WireModel):
    """Why a request failed and how it can be repeated."""

    migrate_to_chat_id: int | None = None
    retry_after: DurationSecs | None = None


class ApiResponse(WireModel):
    ok: bool
    result: Any = None
    description: str | None = None
    error_code: int | None = None
    parameters: ResponseParameters | None = None

    def into_result(self) -> Any:
        """Return ``result``, or raise the ``RequestError`` the envelope describes.

        ``parameters`` take precedence over the generic error: a flood-control
        reply raises ``RetryAfter`` and a migrated group ``MigrateToChatId``.
        """
        if self.ok:
            return self.result
        if self.parameters is not None:
            if self.parameters.retry_after is not None:
                raise RetryAfter(self.parameters.retry_after)
            if self.parameters.migrate_to_chat_id is not None:
                raise MigrateToChatId(self.parameters.migrate_to_chat_id)
        raise ApiError(self.error_code, self.description or "unknown error")


def parse_response(raw: bytes | str) -> ApiResponse:
    """Decode a response body, raising ``InvalidJson`` on anything malformed."""
    try:
        return ApiResponse.model_validate_json(raw)
    except ValidationError as e:
        raise InvalidJson(raw, str(e.errors(include_url=False)[0]["msg"])) from e
