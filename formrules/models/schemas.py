from typing import Protocol

from pydantic import BaseModel, ConfigDict


class FileDescriptor(Protocol):
    """Anything that looks like a picked file: only ``name`` is read."""

    name: str


class UploadedFile(BaseModel):
    """Concrete file descriptor built from an upload or supplied by a caller.

    Only the filename is carried. Contents, size and MIME type are never
    inspected by the rules in this package.
    """

    model_config = ConfigDict(frozen=True)

    name: str  # e.g., "label_front.jpg"
