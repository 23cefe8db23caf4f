from formrules.config import IMAGE_EXTENSION_PATTERN


class InvalidFileDescriptorError(TypeError):
    """Raised when a value passed as a file descriptor has no usable name."""

    def __init__(self, descriptor):
        self.descriptor = descriptor
        super().__init__(
            f"Invalid file descriptor {descriptor!r}: expected an object with a str 'name' attribute"
        )


def has_image_extension(filename: str) -> bool:
    """Check that a filename ends in an allowed image extension.

    Args:
        filename: Filename including extension (e.g., "label_front.JPG").

    Returns:
        True if the final extension is in IMAGE_EXTENSIONS (any case), False otherwise.
        Names with no dot, or with anything after the extension, never match.
    """
    return IMAGE_EXTENSION_PATTERN.search(filename) is not None


def descriptor_name(descriptor) -> str:
    """Return the descriptor's filename or raise InvalidFileDescriptorError.

    A bare string is refused as well: callers must wrap filenames in a
    descriptor so a str is never mistaken for a sequence of files.
    """
    if descriptor is None or isinstance(descriptor, (str, bytes)):
        raise InvalidFileDescriptorError(descriptor)

    name = getattr(descriptor, "name", None)
    if not isinstance(name, str):
        raise InvalidFileDescriptorError(descriptor)
    return name
