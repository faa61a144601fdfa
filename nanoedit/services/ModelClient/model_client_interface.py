from abc import ABC, abstractmethod

from google.genai import types

from nanoedit.entities.image import EditRequest


class ModelClientInterface(ABC):
    @abstractmethod
    async def generate(self, request: EditRequest) -> types.GenerateContentResponse:
        """
        Send the image part followed by the instruction part to the model.

        Raises:
            TransportError: If the request never got a reply
            ServiceError: If the remote endpoint answered with a failure status
        """
