import base64

import pytest

from nanoedit.entities.errors import EmptyImageError
from nanoedit.entities.image import EncodedImage
from nanoedit.services.ImageCodec.image_codec import (
    attach_framing,
    decode,
    encode,
    strip_framing,
)


def test_encode_produces_base64_and_keeps_media_type(png_bytes: bytes) -> None:
    image = encode(png_bytes, "image/png")

    assert image.media_type == "image/png"
    assert base64.b64decode(image.data) == png_bytes
    assert not image.data.startswith("data:")


def test_encode_does_not_sniff_media_type(png_bytes: bytes) -> None:
    image = encode(png_bytes, "image/jpeg")

    assert image.media_type == "image/jpeg"


def test_encode_rejects_empty_input() -> None:
    with pytest.raises(EmptyImageError):
        encode(b"", "image/png")


@pytest.mark.parametrize("scheme", ["png", "jpeg", "jpg", "webp"])
def test_strip_framing_removes_accepted_prefixes(scheme: str) -> None:
    assert strip_framing(f"data:image/{scheme};base64,QUJD") == "QUJD"


def test_strip_framing_leaves_bare_payload_untouched() -> None:
    assert strip_framing("QUJD") == "QUJD"


def test_strip_framing_ignores_unsupported_media_types() -> None:
    framed = "data:image/gif;base64,QUJD"

    assert strip_framing(framed) == framed


def test_strip_framing_only_removes_leading_prefix() -> None:
    text = "QUJDdata:image/png;base64,"

    assert strip_framing(text) == text


@pytest.mark.parametrize(
    "text",
    [
        "",
        "QUJD",
        "data:image/png;base64,QUJD",
        "data:image/png;base64,data:image/png;base64,QUJD",
        "data:image/gif;base64,QUJD",
    ],
)
def test_strip_framing_is_idempotent(text: str) -> None:
    once = strip_framing(text)

    assert strip_framing(once) == once


def test_attach_framing_builds_data_url() -> None:
    image = EncodedImage(data="QUJD", media_type="image/png")

    assert attach_framing(image) == "data:image/png;base64,QUJD"


def test_decode_accepts_framed_and_bare_data(png_bytes: bytes) -> None:
    image = encode(png_bytes, "image/png")
    framed = EncodedImage(data=attach_framing(image), media_type="image/png")

    assert decode(image) == png_bytes
    assert decode(framed) == png_bytes


def test_decode_rejects_invalid_base64() -> None:
    with pytest.raises(ValueError):
        decode(EncodedImage(data="not base64!!", media_type="image/png"))


def test_strip_framing_removes_repeated_prefixes() -> None:
    text = "data:image/png;base64,data:image/jpeg;base64,QUJD"

    assert strip_framing(text) == "QUJD"
