"""Transport-independent request execution.

Transports implement ``Requester.execute``; ``Requester.request`` turns a
payload into a typed result.
"""

from abc import ABC, abstractmethod
from typing import Any

from loguru import logger

from config.settings import Settings
from payloads.base import Payload
from tgtypes.input_file import InputFile

from .response import parse_response


def method_url(settings: Settings, method: str) -> str:
    """Endpoint of ``method`` for the configured bot."""
    if not settings.bot_token:
        raise ValueError("bot_token is not configured")
    return f"{settings.api_url}/bot{settings.bot_token}/{method}"


class Requester(ABC):
    """Sends payloads to the Bot API."""

    @abstractmethod
    async def execute(
        self, method: str, body: dict[str, Any], files: list[InputFile]
    ) -> bytes:
        """Send one request and return the raw response body.

        Args:
            method: API method name, e.g. ``sendSticker``
            body: JSON-ready parameters; ``None`` values are already omitted
            files: Uploads to attach; empty unless the payload is multipart
        """

    async def request(self, payload: Payload) -> Any:
        """Execute ``payload`` and decode its result into ``payload.OUTPUT``.

        Raises:
            RequestError: the server rejected the request or the body was not
                a valid response envelope.
            DecodeError: the result did not match the expected type.
        """
        method = payload.METHOD
        with logger.contextualize(method=method):
            files = payload.files()
            logger.debug("Executing {} ({} uploads)", method, len(files))
            raw = await self.execute(method, payload.to_wire(), files)
            result = parse_response(raw).into_result()
            return payload.parse_output(result)
