"""
Lifecycle of a single image edit: Idle -> Processing -> Success | Error.

The session owns the selected image and the pending instruction, and it is the
only place where SessionState changes. At most one model call is in flight at a
time; generate() while Processing is ignored.

selectImage/clear may arrive while a call is still pending. They bump the
session epoch and their target state is applied once the pending call resolves.
The resolved outcome is then dropped because it belongs to an older epoch.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from nanoedit.entities.errors import EmptyImageError, ImageEditError
from nanoedit.entities.image import EncodedImage
from nanoedit.entities.session_state import (
    Error,
    Idle,
    Processing,
    SessionState,
    Success,
)
from nanoedit.services.EditRequestBuilder.edit_request_builder import build
from nanoedit.services.EditSession.edit_session_interface import (
    EditSessionInterface,
    StateListener,
)
from nanoedit.services.ImageCodec.image_codec import encode
from nanoedit.services.ModelClient.model_client_interface import ModelClientInterface
from nanoedit.services.ResponseInterpreter.response_interpreter import interpret

FALLBACK_ERROR_MESSAGE = "Something went wrong while generating the image."


class EditSession(EditSessionInterface):
    def __init__(
        self,
        model_client: ModelClientInterface,
        logger: logging.Logger,
    ) -> None:
        self.model_client = model_client
        self.logger = logger
        self._state: SessionState = Idle()
        self._image: EncodedImage | None = None
        self._instruction: str = ""
        self._epoch: int = 0
        self._deferred_state: SessionState | None = None
        self._listeners: list[StateListener] = []

    def current_state(self) -> SessionState:
        return self._state

    @property
    def image(self) -> EncodedImage | None:
        return self._image

    @property
    def instruction(self) -> str:
        return self._instruction

    def _is_processing(self) -> bool:
        return isinstance(self._state, Processing)

    def can_generate(self) -> bool:
        return (
            not self._is_processing()
            and self._image is not None
            and bool(self._instruction.strip())
        )

    def select_image(self, raw: bytes, media_type: str) -> None:
        next_state: SessionState
        try:
            self._image = encode(raw, media_type)
            next_state = Idle()
            self.logger.info(
                "Selected %s image (%s bytes)", media_type, len(raw or b"")
            )
        except EmptyImageError as e:
            self._image = None
            next_state = Error(self._message_for(e))
            self.logger.warning("Rejected empty image selection")

        self._supersede(next_state)

    def clear(self) -> None:
        self._image = None
        self._instruction = ""
        self.logger.info("Session cleared")
        self._supersede(Idle())

    def set_instruction(self, text: str) -> None:
        if self._is_processing():
            self.logger.debug("Ignoring instruction change while processing")
            return
        self._instruction = text or ""

    async def generate(self) -> SessionState:
        if self._is_processing():
            self.logger.debug("Generation already in flight; ignoring request")
            return self._state

        if not self.can_generate():
            self.logger.debug("Generate requested without image or instruction")
            return self._state

        epoch = self._epoch
        self._set_state(Processing())

        outcome: SessionState
        try:
            request = build(self._image, self._instruction)
            raw_response = await self.model_client.generate(request)
            outcome = Success(interpret(raw_response))
        except asyncio.CancelledError:
            self._resolve(epoch, Idle())
            raise
        except ImageEditError as e:
            self.logger.warning("Generation failed: %s", e)
            outcome = Error(self._message_for(e))
        except Exception as e:
            self.logger.error("Unexpected error during generation: %s", e, exc_info=True)
            outcome = Error(self._message_for(e))

        return self._resolve(epoch, outcome)

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _supersede(self, next_state: SessionState) -> None:
        self._epoch += 1
        if self._is_processing():
            # Applied when the pending call resolves.
            self._deferred_state = next_state
            return
        self._set_state(next_state)

    def _resolve(self, epoch: int, outcome: SessionState) -> SessionState:
        if epoch != self._epoch:
            self.logger.info(
                "Discarding %s outcome from superseded generation",
                outcome.status.value,
            )
            outcome = self._deferred_state or Idle()
        self._deferred_state = None
        self._set_state(outcome)
        return outcome

    def _set_state(self, state: SessionState) -> None:
        self._state = state
        self.logger.debug("Session state -> %s", state.status.value)

        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as e:
                self.logger.error("State listener failed: %s", e, exc_info=True)

    @staticmethod
    def _message_for(error: BaseException) -> str:
        message = str(error).strip()
        return message or FALLBACK_ERROR_MESSAGE
