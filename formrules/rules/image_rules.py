"""Image extension rule for file inputs.

Accepts a single file descriptor or an ordered sequence of them and
answers whether every filename ends in a recognized image extension
(jpg, svg, jpeg, png, bmp, gif; any case). Only the ``name`` attribute
is read. File contents, MIME types and sizes are out of scope.
"""

import logging
from collections.abc import Sequence
from typing import overload

from formrules.models.schemas import FileDescriptor
from formrules.utils.file_validation import descriptor_name, has_image_extension

logger = logging.getLogger(__name__)


def validate_image_file(file: FileDescriptor) -> bool:
    """True if this one file's name ends in an allowed image extension."""
    name = descriptor_name(file)
    if has_image_extension(name):
        return True
    logger.debug("Rejected non-image filename %r", name)
    return False


def validate_image_files(files: Sequence[FileDescriptor]) -> bool:
    """True if every file passes; an empty sequence passes."""
    return all(validate_image_file(file) for file in files)


@overload
def image_validator(files: FileDescriptor) -> bool: ...


@overload
def image_validator(files: Sequence[FileDescriptor]) -> bool: ...


def image_validator(files: FileDescriptor | Sequence[FileDescriptor]) -> bool:
    """Validate one file or a list of files picked in a form field.

    Anything with a ``name`` attribute is one descriptor, namedtuples
    included. Other non-string sequences go to validate_image_files,
    and whatever is left is checked as a single descriptor.

    Raises:
        InvalidFileDescriptorError: a descriptor is None or has no str ``name``.
    """
    if hasattr(files, "name"):
        return validate_image_file(files)
    if isinstance(files, Sequence) and not isinstance(files, (str, bytes)):
        return validate_image_files(files)
    return validate_image_file(files)


validate = image_validator
