class ImageEditError(Exception):
    """Base error for every fault raised while producing an edit."""


class RequestConstructionError(ImageEditError):
    """Raised before any network call when the request cannot be built."""


class EmptyImageError(RequestConstructionError):
    def __init__(self) -> None:
        super().__init__("The selected image is empty.")


class EmptyInstructionError(RequestConstructionError):
    def __init__(self) -> None:
        super().__init__("Describe the edit you want before generating.")


class MissingImageError(RequestConstructionError):
    def __init__(self) -> None:
        super().__init__("Select an image before generating.")


class ModelCallError(ImageEditError):
    """Base error for faults raised by the remote model call."""


class TransportError(ModelCallError):
    """Raised when the request never got a reply from the remote service."""


class ServiceError(ModelCallError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class EmptyResponseError(ImageEditError):
    """Raised when the model replied without any image or text part."""
