"""Errors reported by the Bot API or while reading its responses."""

from datetime import timedelta


class RequestError(Exception):
    """Base class for failed requests."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ApiError(RequestError):
    """The server answered with ``ok: false``."""

    def __init__(self, error_code: int | None, description: str):
        super().__init__(f"[{error_code}] {description}" if error_code else description)
        self.error_code = error_code
        self.description = description


class RetryAfter(RequestError):
    """Flood control: the request may be repeated after ``seconds``."""

    def __init__(self, seconds: timedelta):
        super().__init__(f"retry after {int(seconds.total_seconds())}s")
        self.seconds = seconds


class MigrateToChatId(RequestError):
    """The group was upgraded to a supergroup with a new id."""

    def __init__(self, chat_id: int):
        super().__init__(f"group migrated to supergroup {chat_id}")
        self.chat_id = chat_id


class InvalidJson(RequestError):
    """The response body could not be decoded."""

    def __init__(self, raw: bytes | str, reason: str):
        super().__init__(f"invalid JSON response: {reason}")
        self.raw = raw
        self.reason = reason
