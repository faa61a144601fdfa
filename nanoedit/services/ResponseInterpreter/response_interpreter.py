import logging

from google.genai import types

from nanoedit.entities.errors import EmptyResponseError
from nanoedit.entities.image import EditResult, EncodedImage
from nanoedit.services.ImageCodec.image_codec import encode

DEFAULT_OUTPUT_MEDIA_TYPE = "image/png"

_logger = logging.getLogger(__name__)


def interpret(raw: types.GenerateContentResponse) -> EditResult:
    """
    Extract the edited image and/or commentary from a model response.

    Only the first candidate is read. Within it, a later image part replaces
    an earlier one and a later text part replaces an earlier one.

    Raises:
        EmptyResponseError: If the first candidate holds neither an image nor text
    """
    image: EncodedImage | None = None
    text: str | None = None

    candidates = raw.candidates or []
    content = candidates[0].content if candidates else None
    parts = (content.parts if content else None) or []

    if len(candidates) > 1:
        _logger.debug("Ignoring %d extra candidate(s)", len(candidates) - 1)

    for part in parts:
        inline_data = part.inline_data
        if inline_data is not None and inline_data.data:
            image = encode(
                inline_data.data, inline_data.mime_type or DEFAULT_OUTPUT_MEDIA_TYPE
            )
        elif part.text:
            text = part.text

    if image is None and text is None:
        raise EmptyResponseError("No image or text was returned from the model.")

    return EditResult(image=image, text=text)
