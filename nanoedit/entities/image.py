from dataclasses import dataclass


@dataclass(frozen=True)
class EncodedImage:
    """Base64 image payload without any ``data:`` framing prefix."""

    data: str
    media_type: str


@dataclass(frozen=True)
class EditRequest:
    """Image plus trimmed instruction, ready to be sent to the model."""

    image: EncodedImage
    instruction: str


@dataclass(frozen=True)
class EditResult:
    """
    Outcome of one model call.

    When both fields are set the image is the primary artifact and the text
    is commentary that accompanies it.
    """

    image: EncodedImage | None = None
    text: str | None = None

    def __post_init__(self) -> None:
        if self.image is None and self.text is None:
            raise ValueError("EditResult requires an image or a text")
