from google import genai

from nanoedit.bootstrap.components import Components
from nanoedit.components.configuration.configuration_interface import (
    ConfigurationInterface,
)
from nanoedit.components.logger.logger_interface import LoggerInterface
from nanoedit.services.EditSession.edit_session import EditSession
from nanoedit.services.EditSession.edit_session_interface import EditSessionInterface
from nanoedit.services.ModelClient.gemini_model_client import (
    DEFAULT_IMAGE_MODEL,
    GeminiModelClient,
)
from nanoedit.services.ModelClient.model_client_interface import ModelClientInterface


def get_model_client(components: Components) -> ModelClientInterface:
    configuration = components.get_component(ConfigurationInterface)
    model_name = configuration.get_configuration(
        "MODEL_NAME", str, default=DEFAULT_IMAGE_MODEL
    )

    return GeminiModelClient(
        client=components.get_component(genai.Client),
        logger=components.get_component(LoggerInterface).get_logger("ModelClient"),
        model_name=model_name,
    )


def get_edit_session(components: Components) -> EditSessionInterface:
    """Create a fresh session; sessions share the model client but no state."""
    return EditSession(
        model_client=get_model_client(components),
        logger=components.get_component(LoggerInterface).get_logger("EditSession"),
    )
