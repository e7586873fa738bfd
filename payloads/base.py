"""Base class for Bot API method payloads."""

from collections.abc import Iterator
from functools import lru_cache
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from tgtypes.base import WireModel
from tgtypes.errors import decode_error_from
from tgtypes.input_file import InputFile


@lru_cache(maxsize=None)
def _output_adapter(output: Any) -> TypeAdapter:
    return TypeAdapter(output)


def _iter_uploads(value: Any) -> Iterator[InputFile]:
    if isinstance(value, InputFile):
        if value.is_upload:
            yield value
    elif isinstance(value, BaseModel):
        for name in type(value).model_fields:
            yield from _iter_uploads(getattr(value, name))
    elif isinstance(value, list | tuple):
        for item in value:
            yield from _iter_uploads(item)


class Payload(WireModel):
    """Parameters of one Bot API method.

    Subclasses set ``METHOD`` (the API method name) and ``OUTPUT`` (the type
    of the ``result`` field of a successful response). Required parameters
    are required fields; optional ones default to ``None`` and are left out
    of ``to_wire()``.
    """

    METHOD: ClassVar[str]
    OUTPUT: ClassVar[Any]

    model_config = ConfigDict(extra="forbid")

    def files(self) -> list[InputFile]:
        """Uploads referenced anywhere in this payload, in field order."""
        return list(_iter_uploads(self))

    def is_multipart(self) -> bool:
        """Whether the request must be sent as ``multipart/form-data``."""
        return bool(self.files())

    @classmethod
    def parse_output(cls, result: Any) -> Any:
        """Decode the ``result`` of a successful response into ``OUTPUT``."""
        try:
            return _output_adapter(cls.OUTPUT).validate_python(result)
        except ValidationError as e:
            raise decode_error_from(e) from e
