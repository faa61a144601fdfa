from abc import ABC, abstractmethod
from collections.abc import Callable

from nanoedit.entities.image import EncodedImage
from nanoedit.entities.session_state import SessionState

StateListener = Callable[[SessionState], None]


class EditSessionInterface(ABC):
    """Mutation surface used by the presentation layer."""

    @abstractmethod
    def current_state(self) -> SessionState:
        pass

    @property
    @abstractmethod
    def image(self) -> EncodedImage | None:
        pass

    @property
    @abstractmethod
    def instruction(self) -> str:
        pass

    @abstractmethod
    def can_generate(self) -> bool:
        """True when generate() would start a model call right now."""

    @abstractmethod
    def select_image(self, raw: bytes, media_type: str) -> None:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def set_instruction(self, text: str) -> None:
        pass

    @abstractmethod
    async def generate(self) -> SessionState:
        """Run one edit and return the state the session ends up in."""

    @abstractmethod
    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        Register a callable invoked with every new state.

        Returns:
            A function that removes the listener again
        """
