from dataclasses import replace

from nanoedit.entities.errors import EmptyInstructionError, MissingImageError
from nanoedit.entities.image import EditRequest, EncodedImage
from nanoedit.services.ImageCodec.image_codec import strip_framing


def build(image: EncodedImage | None, instruction_raw: str) -> EditRequest:
    """
    Assemble the request sent to the model.

    Args:
        image: The selected image; its data may still carry a ``data:`` prefix
        instruction_raw: Instruction as typed by the user

    Returns:
        An EditRequest with a trimmed instruction and framing-free image data

    Raises:
        EmptyInstructionError: If the instruction is blank after trimming
        MissingImageError: If no image was selected
    """
    instruction = (instruction_raw or "").strip()
    if not instruction:
        raise EmptyInstructionError()

    if image is None:
        raise MissingImageError()

    clean_image = replace(image, data=strip_framing(image.data))
    return EditRequest(image=clean_image, instruction=instruction)
