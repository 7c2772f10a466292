"""Media value objects and upload-file rules."""

from __future__ import annotations

import hashlib
import random
import time
from enum import Enum

from pydantic import BaseModel, ConfigDict

from catalog_core.domain.value_object import ValueObject
from catalog_core.primitives.exceptions import DomainError


class InvalidMediaFileError(DomainError):
    """Raised when an uploaded file breaks its media rules."""


class InvalidMediaFileSizeError(InvalidMediaFileError):
    def __init__(self, actual_size: int, max_size: int) -> None:
        super().__init__(f"Invalid media file size: {actual_size} > {max_size}")


class InvalidMediaFileMimeTypeError(InvalidMediaFileError):
    def __init__(self, actual_mime_type: str, valid_mime_types: tuple[str, ...]) -> None:
        super().__init__(
            f"Invalid media file mime type: {actual_mime_type} "
            f"not in {', '.join(valid_mime_types)}"
        )


class UploadedFile(BaseModel):
    """A file received by an upload use case."""

    model_config = ConfigDict(frozen=True)

    raw_name: str
    data: bytes
    mime_type: str
    size: int


class MediaFileValidator:
    """Checks size and mime type, then derives a random stored file name."""

    def __init__(self, max_size: int, valid_mime_types: tuple[str, ...]) -> None:
        self.max_size = max_size
        self.valid_mime_types = valid_mime_types

    def validate(self, *, raw_name: str, mime_type: str, size: int) -> str:
        """Return the generated file name; raise ``InvalidMediaFileError``."""
        if size > self.max_size:
            raise InvalidMediaFileSizeError(size, self.max_size)
        if mime_type not in self.valid_mime_types:
            raise InvalidMediaFileMimeTypeError(mime_type, self.valid_mime_types)
        return self._random_name(raw_name)

    @staticmethod
    def _random_name(raw_name: str) -> str:
        extension = raw_name.rsplit(".", 1)[-1]
        seed = f"{raw_name}{random.random()}{time.time_ns()}"  # noqa: S311
        return f"{hashlib.sha256(seed.encode()).hexdigest()}.{extension}"


class ImageMedia(ValueObject):
    name: str
    location: str

    @property
    def url(self) -> str:
        return f"{self.location}/{self.name}"


class AudioVideoMediaStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class AudioVideoMedia(ValueObject):
    """Uploaded audio/video file plus its encoding state.

    Transitions return new instances: ``process()``, ``complete(location)``
    and ``fail()``.
    """

    name: str
    raw_location: str
    encoded_location: str | None = None
    status: AudioVideoMediaStatus = AudioVideoMediaStatus.PENDING

    @property
    def raw_url(self) -> str:
        return f"{self.raw_location}/{self.name}"

    def process(self) -> AudioVideoMedia:
        return self.model_copy(update={"status": AudioVideoMediaStatus.PROCESSING})

    def complete(self, encoded_location: str) -> AudioVideoMedia:
        return self.model_copy(
            update={
                "encoded_location": encoded_location,
                "status": AudioVideoMediaStatus.COMPLETED,
            }
        )

    def fail(self) -> AudioVideoMedia:
        return self.model_copy(update={"status": AudioVideoMediaStatus.FAILED})
