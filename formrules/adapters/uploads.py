"""Bridge between FastAPI uploads and the image rule.

Needs the "uploads" extra (fastapi).

UploadFile exposes ``filename`` (possibly None) instead of ``name``, so
uploads are converted to UploadedFile descriptors before validation.
"""

from collections.abc import Sequence

from fastapi import UploadFile

from formrules.models.schemas import UploadedFile
from formrules.rules.image_rules import validate_image_files


def descriptor_from_upload(upload: UploadFile) -> UploadedFile:
    # A missing client filename becomes "" and fails the extension check.
    return UploadedFile(name=upload.filename or "")


def validate_uploads(uploads: Sequence[UploadFile]) -> bool:
    """True if every uploaded file has an image extension; no uploads passes."""
    return validate_image_files([descriptor_from_upload(u) for u in uploads])
