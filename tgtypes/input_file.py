"""Files sent to the Bot API.

A file is referenced by ``file_id``, by URL, or uploaded. Uploads are
serialized as ``attach://<attach_id>`` and sent as a multipart part named
``attach_id``.
"""

from pathlib import Path
from typing import Annotated, Any, Self
from uuid import uuid4

from pydantic import BeforeValidator, Field, model_serializer, model_validator

from .base import WireModel


def _as_path(value: Any) -> Any:
    return Path(value) if isinstance(value, str) else value


class InputFile(WireModel):
    file_id: str | None = None
    url: str | None = None
    path: Annotated[Path, BeforeValidator(_as_path)] | None = None
    data: bytes | None = None
    filename: str | None = None
    attach_id: str = Field(default_factory=lambda: uuid4().hex)

    @model_validator(mode="before")
    @classmethod
    def from_string(cls, data: Any) -> Any:
        """Plain strings are URLs when they look like one, file ids otherwise."""
        if isinstance(data, str):
            if data.startswith(("http://", "https://")):
                return {"url": data}
            return {"file_id": data}
        return data

    @model_validator(mode="after")
    def check_source(self) -> Self:
        sources = [self.file_id, self.url, self.path, self.data]
        if sum(source is not None for source in sources) != 1:
            raise ValueError("exactly one of file_id, url, path or data must be set")
        return self

    @classmethod
    def from_file_id(cls, file_id: str) -> Self:
        return cls(file_id=file_id)

    @classmethod
    def from_url(cls, url: str) -> Self:
        return cls(url=url)

    @classmethod
    def from_path(cls, path: str | Path) -> Self:
        path = Path(path)
        return cls(path=path, filename=path.name)

    @classmethod
    def from_bytes(cls, data: bytes, filename: str) -> Self:
        return cls(data=data, filename=filename)

    @property
    def is_upload(self) -> bool:
        return self.path is not None or self.data is not None

    def read(self) -> bytes:
        """Contents of an upload."""
        if self.data is not None:
            return self.data
        if self.path is not None:
            return self.path.read_bytes()
        raise ValueError("only uploads have contents")

    @model_serializer(mode="plain")
    def serialize_wire(self) -> str:
        if self.file_id is not None:
            return self.file_id
        if self.url is not None:
            return self.url
        return f"attach://{self.attach_id}"
