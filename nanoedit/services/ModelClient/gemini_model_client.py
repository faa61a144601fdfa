"""
ModelClient backed by the Google Gen AI SDK.

This is the only module in the pipeline that talks to the network. It sends a
single user turn made of two ordered parts (image first, instruction second)
and hands the SDK response back untouched for interpretation.
"""

from __future__ import annotations

import logging

import aiohttp
import httpx
from google import genai
from google.genai import errors, types
from langfuse import observe

from nanoedit.entities.errors import ServiceError, TransportError
from nanoedit.entities.image import EditRequest
from nanoedit.services.ImageCodec.image_codec import decode
from nanoedit.services.ModelClient.model_client_interface import ModelClientInterface

DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"


class GeminiModelClient(ModelClientInterface):
    def __init__(
        self,
        client: genai.Client,
        logger: logging.Logger,
        model_name: str = DEFAULT_IMAGE_MODEL,
    ) -> None:
        self.client = client
        self.logger = logger
        self.model_name = model_name

        self.logger.info("GeminiModelClient initialized. Model: %s", self.model_name)

    def _build_contents(self, request: EditRequest) -> types.Content:
        image_part = types.Part.from_bytes(
            data=decode(request.image), mime_type=request.image.media_type
        )
        text_part = types.Part.from_text(text=request.instruction)
        return types.Content(role="user", parts=[image_part, text_part])

    @observe()
    async def generate(self, request: EditRequest) -> types.GenerateContentResponse:
        """
        Run one generate_content call against the image model.

        No response schema or response mime type is set: image models reject
        constrained output.
        """
        contents = self._build_contents(request)

        self.logger.info(
            "Sending edit request (%s, %s chars of instruction) to %s",
            request.image.media_type,
            len(request.instruction),
            self.model_name,
        )

        try:
            response = await self.client.aio.models.generate_content(
                model=self.model_name,
                contents=contents,
            )
        except errors.APIError as e:
            self.logger.error(
                "Model service returned status %s: %s", e.code, e, exc_info=True
            )
            raise ServiceError(str(e), status_code=e.code) from e
        except (
            aiohttp.ClientError,
            httpx.TransportError,
            ConnectionError,
            TimeoutError,
        ) as e:
            self.logger.error("Transport failure calling model: %s", e, exc_info=True)
            raise TransportError(str(e)) from e

        self.logger.info(
            "Model replied with %s candidate(s)", len(response.candidates or [])
        )
        return response
