"""
Base64 codec for user-selected images.

Browsers hand images around as ``data:image/png;base64,...`` URLs. The model
API wants the bare payload, so the framing is stripped before submission and
re-attached only when a result is exported.
"""

import base64
import binascii
import re

from nanoedit.entities.errors import EmptyImageError
from nanoedit.entities.image import EncodedImage

_FRAMING_PATTERN = re.compile(r"^(?:data:image/(?:png|jpeg|jpg|webp);base64,)+")


def encode(raw: bytes, media_type: str) -> EncodedImage:
    """Encode raw image bytes, keeping the caller's media type as is."""
    if not raw:
        raise EmptyImageError()

    return EncodedImage(
        data=base64.b64encode(raw).decode("ascii"),
        media_type=media_type,
    )


def strip_framing(text: str) -> str:
    return _FRAMING_PATTERN.sub("", text, count=1)


def attach_framing(image: EncodedImage) -> str:
    return f"data:{image.media_type};base64,{image.data}"


def decode(image: EncodedImage) -> bytes:
    try:
        return base64.b64decode(strip_framing(image.data), validate=True)
    except binascii.Error as exc:
        raise ValueError(f"Invalid base64 image data: {exc}") from exc
