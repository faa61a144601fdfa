import pytest

from nanoedit.entities.errors import EmptyInstructionError, MissingImageError
from nanoedit.entities.image import EncodedImage
from nanoedit.services.EditRequestBuilder.edit_request_builder import build


@pytest.fixture
def image() -> EncodedImage:
    return EncodedImage(data="QUJD", media_type="image/png")


def test_build_trims_instruction(image: EncodedImage) -> None:
    request = build(image, "  make it blue \n")

    assert request.instruction == "make it blue"
    assert request.image == image


def test_build_strips_framing_from_image_data() -> None:
    framed = EncodedImage(data="data:image/jpeg;base64,QUJD", media_type="image/jpeg")

    request = build(framed, "sharpen")

    assert request.image.data == "QUJD"
    assert request.image.media_type == "image/jpeg"
    assert framed.data == "data:image/jpeg;base64,QUJD"


@pytest.mark.parametrize("instruction", ["", "   ", "\n\t"])
def test_build_rejects_blank_instruction(
    image: EncodedImage, instruction: str
) -> None:
    with pytest.raises(EmptyInstructionError):
        build(image, instruction)


def test_build_rejects_missing_image() -> None:
    with pytest.raises(MissingImageError):
        build(None, "sharpen")


def test_build_reports_instruction_before_image() -> None:
    with pytest.raises(EmptyInstructionError):
        build(None, "  ")


def test_build_strips_repeated_framing() -> None:
    framed = EncodedImage(
        data="data:image/png;base64,data:image/png;base64,QUJD",
        media_type="image/png",
    )

    request = build(framed, "x")

    assert request.image.data == "QUJD"
    assert not request.image.data.startswith("data:")
