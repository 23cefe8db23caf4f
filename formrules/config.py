import re

# Rule ID used by form layers to look up the image extension rule.
IMAGE_RULE_ID = "IMAGE_EXTENSION"

# Recognized image filename suffixes, without the leading dot.
# Order matters only for the pattern below; matching is case-insensitive.
IMAGE_EXTENSIONS = ("jpg", "svg", "jpeg", "png", "bmp", "gif")

# Compiled once at import and shared read-only by every call.
# \Z anchors to the very end of the name, so "cat.png\n" is rejected too.
# Case folding is ASCII-only: "icon.ſvg" (long s) is not "svg".
IMAGE_EXTENSION_PATTERN = re.compile(
    r"\.(" + "|".join(IMAGE_EXTENSIONS) + r")\Z",
    re.IGNORECASE | re.ASCII,
)
